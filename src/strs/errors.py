"""Exceptions raised by strs."""


class StrsError(Exception):
    """Base class for all strs errors."""


class UrlError(StrsError, ValueError):
    """
    A string or URL could not be turned into a Stream.

    Attributes:
        url: The offending input.
        reason: Short description of what was wrong.
    """

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"{url!r}: {reason}")


class MalformedUrlError(UrlError):
    """The input could not be parsed as an absolute URL."""


class NonStreamError(UrlError):
    """The URL parsed fine but its host is not a supported provider."""

    def __init__(self, url: str, reason: str = "not a supported stream host") -> None:
        super().__init__(url, reason)


class ProbeError(StrsError):
    """The external probe could not be launched for a URL."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"could not probe {url}: {reason}")
