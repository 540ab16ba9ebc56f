"""
strs - Check whether your Twitch and YouTube streams are live.

This package classifies stream URLs by provider, derives display names,
and probes each stream through an external media inspection tool.
"""

__version__ = "0.1.0"

from .config import Config, load_config
from .errors import MalformedUrlError, NonStreamError, ProbeError, StrsError, UrlError
from .probe import ExternalProber, Prober
from .stream import Stream
from .streamlink import Streamlink
from .types import StreamStatus, UrlKind, classify, parse_url

__all__ = [
    "Config",
    "ExternalProber",
    "MalformedUrlError",
    "NonStreamError",
    "ProbeError",
    "Prober",
    "Stream",
    "StreamStatus",
    "Streamlink",
    "StrsError",
    "UrlError",
    "UrlKind",
    "classify",
    "load_config",
    "parse_url",
]
