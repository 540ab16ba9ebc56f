"""Shared test fixtures."""

import pytest

from strs.types import URL

TWITCH_GOGCOM = "https://twitch.tv/gogcom"
YOUTUBE_MARKIPLIERGAME_USER = "https://youtube.com/user/markiplierGAME"
YOUTUBE_MARKIPLIERGAME_DIRECT = "https://youtube.com/markiplierGAME"
OTHER_VALID = "https://rust-lang.org/about"
WRONG_URL_STR = "wrong://fake.tv/thisdefinitelydoesntexist"


class StubProber:
    """Prober returning fixed exit codes and recording every call."""

    def __init__(self, exit_codes: dict[URL, int] | None = None, default: int = 0) -> None:
        self.exit_codes = exit_codes or {}
        self.default = default
        self.calls: list[URL] = []

    def probe(self, url: URL) -> int:
        self.calls.append(url)
        return self.exit_codes.get(url, self.default)


@pytest.fixture
def online_prober() -> StubProber:
    return StubProber(default=0)


@pytest.fixture
def offline_prober() -> StubProber:
    return StubProber(default=1)
