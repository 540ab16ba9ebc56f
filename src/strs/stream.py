"""A single monitored stream."""

from dataclasses import dataclass, field

from .errors import NonStreamError
from .probe import ExternalProber, Prober
from .types import URL, StreamStatus, Url, UrlKind, classify, parse_url


@dataclass(frozen=True)
class Stream:
    """
    A stream of a specific ``kind`` on a specific ``url``.

    Only Youtube and Twitch streams can exist, and ``kind`` must be the
    provider of ``url``. Anything else raises NonStreamError.

    Attributes:
        url: The parsed stream URL.
        kind: The provider the URL belongs to.
        source: The string the stream was built from, if any.
    """

    url: Url
    kind: UrlKind
    source: URL | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        kind = classify(self.url)
        if kind is UrlKind.OTHER:
            raise NonStreamError(self.url.geturl())
        if kind is not self.kind:
            raise NonStreamError(self.url.geturl(), f"not a {self.kind.value} URL")

    @classmethod
    def from_url(cls, url: Url) -> "Stream":
        """
        Build a stream from a parsed URL.

        Raises:
            NonStreamError: If the URL's host is not a supported provider.
        """
        return cls(url=url, kind=classify(url))

    @classmethod
    def from_string(cls, raw: URL) -> "Stream":
        """
        Build a stream from a URL string.

        Raises:
            MalformedUrlError: If ``raw`` is not an absolute URL.
            NonStreamError: If the host is not a supported provider.
        """
        url = parse_url(raw)
        return cls(url=url, kind=classify(url), source=raw.strip())

    def name(self) -> str | None:
        """
        Return the name (aka ID) of the stream.

        ``https://twitch.tv/gogcom`` is ``gogcom``, and both
        ``https://youtube.com/user/markiplierGAME`` and
        ``https://youtube.com/markiplierGAME`` are ``markiplierGAME``.
        """
        parts = self.url.path.split("/")[1:]
        first = parts[0] if parts else None

        if self.kind is UrlKind.YOUTUBE and first == "user":
            second = parts[1] if len(parts) > 1 else None
            return second or None
        return first or None

    def display_name(self) -> str:
        """Return the stream name, or the full URL if it has none."""
        return self.name() or str(self)

    def status(self, prober: Prober | None = None) -> StreamStatus:
        """
        Check if the stream is online.

        A probe that ran and failed means the stream is offline.

        Args:
            prober: Probe to use (default: ExternalProber()).

        Returns:
            ONLINE if the probe exited with zero, OFFLINE otherwise.

        Raises:
            ProbeError: If the probe could not be launched.
        """
        if prober is None:
            prober = ExternalProber()
        exit_code = prober.probe(str(self))
        return StreamStatus.ONLINE if exit_code == 0 else StreamStatus.OFFLINE

    def __str__(self) -> str:
        if self.source is not None:
            return self.source
        return self.url.geturl()
