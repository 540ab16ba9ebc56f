"""Configuration loading for strs."""

import logging
import pathlib
import tomllib
from dataclasses import dataclass, field
from typing import Any

import yaml

from .probe import DEFAULT_PROBE_COMMAND, ExternalProber
from .types import URL

LEGACY_CONFIG_PATH = pathlib.Path(".config") / "streamlink-rs" / "config.toml"
CONFIG_PATH = pathlib.Path(".config") / "strs" / "config.yaml"

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Settings read from a config file.

    Attributes:
        stream_urls: Stream URLs, in the order they should be reported.
        probe_command: Inspection tool used to probe streams.
        probe_timeout: Seconds to wait for each probe, or None.
    """

    stream_urls: list[URL] = field(default_factory=list)
    probe_command: str = DEFAULT_PROBE_COMMAND
    probe_timeout: float | None = None

    def prober(self) -> ExternalProber:
        """Build the prober described by this config."""
        return ExternalProber(self.probe_command, timeout=self.probe_timeout)


def default_config_path() -> pathlib.Path:
    """
    Return the per-user config path.

    The TOML file used by earlier releases wins when it exists.
    """
    home = pathlib.Path.home()
    legacy = home / LEGACY_CONFIG_PATH
    if legacy.exists():
        return legacy
    return home / CONFIG_PATH


def _read_document(path: pathlib.Path) -> Any:
    if path.suffix == ".toml":
        with path.open("rb") as f:
            try:
                return tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                msg = f"Invalid TOML in {path}: {e}"
                raise ValueError(msg) from e

    with path.open() as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            msg = f"Invalid YAML in {path}: {e}"
            raise ValueError(msg) from e


def load_config(path: pathlib.Path | None = None) -> Config:
    """
    Load the configuration from a YAML or TOML file.

    Args:
        path: Path to the config file. If None, uses default_config_path().

    Returns:
        The parsed configuration.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file can't be parsed or lacks 'stream_urls'.
        TypeError: If a key has the wrong type.
    """
    if path is None:
        path = default_config_path()

    if not path.exists():
        msg = f"Config file not found at {path}"
        raise FileNotFoundError(msg)

    logger.debug("Loading config from %s", path)
    data = _read_document(path)

    if not isinstance(data, dict) or "stream_urls" not in data:
        msg = "Config file must contain a 'stream_urls' key with a list of URLs"
        raise ValueError(msg)

    stream_urls = data["stream_urls"]
    if not isinstance(stream_urls, list) or not all(isinstance(u, str) for u in stream_urls):
        msg = "'stream_urls' must be a list of URL strings"
        raise TypeError(msg)

    probe_command = data.get("probe_command", DEFAULT_PROBE_COMMAND)
    if not isinstance(probe_command, str) or not probe_command:
        msg = "'probe_command' must be a non-empty string"
        raise TypeError(msg)

    probe_timeout = data.get("probe_timeout")
    if probe_timeout is not None and (
        isinstance(probe_timeout, bool) or not isinstance(probe_timeout, int | float)
    ):
        msg = "'probe_timeout' must be a number of seconds"
        raise TypeError(msg)

    return Config(
        stream_urls=stream_urls,
        probe_command=probe_command,
        probe_timeout=float(probe_timeout) if probe_timeout is not None else None,
    )
