"""Type definitions and URL classification for strs."""

import enum
from urllib.parse import SplitResult, urlsplit

from .errors import MalformedUrlError

# Common type aliases (Python 3.12+ syntax)
type URL = str
type Url = SplitResult

# Schemes that always carry a host
HIERARCHICAL_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})

YOUTUBE_HOST = "youtube.com"
TWITCH_HOST = "twitch.tv"


class UrlKind(enum.Enum):
    """Streaming provider a URL belongs to."""

    YOUTUBE = "youtube"
    TWITCH = "twitch"
    OTHER = "other"


class StreamStatus(enum.Enum):
    """Result of a single status probe."""

    ONLINE = "online"
    OFFLINE = "offline"

    def __str__(self) -> str:
        return self.value


def classify(url: Url) -> UrlKind:
    """
    Map a parsed URL to its provider.

    Only the host is inspected, and it must match a known provider host
    exactly: ``www.twitch.tv`` is OTHER.

    Args:
        url: The parsed URL.

    Returns:
        The provider kind, OTHER for unknown or missing hosts.
    """
    host = url.hostname
    if host == YOUTUBE_HOST:
        return UrlKind.YOUTUBE
    if host == TWITCH_HOST:
        return UrlKind.TWITCH
    return UrlKind.OTHER


def _normalize_authority(rest: str) -> str:
    """
    Read backslashes as slashes and drop extra or missing slashes before
    the host, as browsers do for web URLs.
    """
    end = min((i for i in (rest.find("?"), rest.find("#")) if i != -1), default=len(rest))
    head = rest[:end].replace("\\", "/").lstrip("/")
    return head + rest[end:]


def parse_url(raw: URL) -> Url:
    """
    Parse a string as an absolute URL.

    Args:
        raw: The string to parse.

    Returns:
        The parsed URL.

    Raises:
        MalformedUrlError: If the string is not an absolute URL.
    """
    candidate = raw.strip()
    scheme, sep, rest = candidate.partition(":")
    if sep and scheme.lower() in HIERARCHICAL_SCHEMES:
        candidate = f"{scheme}://{_normalize_authority(rest)}"

    try:
        url = urlsplit(candidate)
        # Accessing the port validates it
        _ = url.port
    except ValueError as exc:
        raise MalformedUrlError(raw, str(exc)) from exc

    if not url.scheme:
        raise MalformedUrlError(raw, "missing scheme")
    if any(ch.isspace() for ch in url.netloc):
        raise MalformedUrlError(raw, "invalid host")
    if url.scheme in HIERARCHICAL_SCHEMES and not url.hostname:
        raise MalformedUrlError(raw, "missing host")

    return url
