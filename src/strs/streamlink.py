"""Ordered collection of streams with batch status reporting."""

import logging
from collections.abc import Iterable, Iterator

from .config import Config
from .errors import ProbeError
from .probe import ExternalProber, Prober
from .stream import Stream
from .types import URL, StreamStatus, Url

logger = logging.getLogger(__name__)


class Streamlink:
    """
    A fixed, ordered set of streams.

    Streams keep the order they were given in. Building fails on the first
    invalid entry, so a Streamlink never holds a partial list.

    Attributes:
        prober: Probe used by status().
    """

    def __init__(self, streams: Iterable[Stream], prober: Prober | None = None) -> None:
        """
        Initialize from already built streams.

        Args:
            streams: Streams in reporting order.
            prober: Probe to use for status checks (default: ExternalProber()).
        """
        self._streams = tuple(streams)
        if prober is None:
            prober = ExternalProber()
        self.prober: Prober = prober
        logger.debug("Streamlink initialized with %d streams", len(self._streams))

    @classmethod
    def new(cls, config: Config, prober: Prober | None = None) -> "Streamlink":
        """Build from the stream URLs of a config."""
        if prober is None:
            prober = config.prober()
        return cls.from_strings(config.stream_urls, prober=prober)

    @classmethod
    def from_strings(cls, strings: Iterable[URL], prober: Prober | None = None) -> "Streamlink":
        """
        Build from URL strings.

        Raises:
            MalformedUrlError: If a string is not an absolute URL.
            NonStreamError: If a URL is not on a supported provider.
        """
        return cls((Stream.from_string(s) for s in strings), prober=prober)

    @classmethod
    def from_urls(cls, urls: Iterable[Url], prober: Prober | None = None) -> "Streamlink":
        """
        Build from parsed URLs.

        Raises:
            NonStreamError: If a URL is not on a supported provider.
        """
        return cls((Stream.from_url(u) for u in urls), prober=prober)

    @property
    def stream_urls(self) -> tuple[Stream, ...]:
        return self._streams

    def status(self) -> Iterator[tuple[Stream, StreamStatus]]:
        """
        Probe every stream, one at a time, in order.

        Probes run lazily as the iterator advances. A probe that can't be
        launched reports the stream as offline.

        Yields:
            (stream, status) pairs.
        """
        for stream in self._streams:
            try:
                status = stream.status(self.prober)
            except ProbeError as e:
                logger.warning("%s, reporting it offline", e)
                status = StreamStatus.OFFLINE
            yield stream, status

    def __len__(self) -> int:
        return len(self._streams)

    def __iter__(self) -> Iterator[Stream]:
        return iter(self._streams)

    def __repr__(self) -> str:
        return f"Streamlink({[str(s) for s in self._streams]!r})"
