"""Command-line interface for strs."""

import argparse
import logging
import pathlib
import sys
from typing import TextIO

from colorama import just_fix_windows_console
from termcolor import colored

from . import __version__
from .config import load_config
from .errors import UrlError
from .streamlink import Streamlink
from .types import StreamStatus

logger = logging.getLogger(__name__)

STATUS_COLORS = {
    StreamStatus.ONLINE: "green",
    StreamStatus.OFFLINE: "red",
}


def setup_logging(debug: bool = False, log_file: pathlib.Path | None = None) -> None:
    """
    Configure logging for the application.

    Args:
        debug: Enable debug level logging if True.
        log_file: Also write log records to this file if given.
    """
    level = logging.DEBUG if debug else logging.WARNING
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def format_status_line(name: str, status: StreamStatus, color: bool = True) -> str:
    """
    Format one report line.

    Args:
        name: Display name of the stream.
        status: Its current status.
        color: Colorize the status if True.

    Returns:
        A line like "gogcom is online".
    """
    text = str(status)
    if color:
        text = colored(text, STATUS_COLORS[status], force_color=True)
    return f"{name} is {text}"


class ProgressLine:
    """Transient "Checking i/N" line on stderr, cleared when finished."""

    def __init__(self, total: int, stream: TextIO | None = None) -> None:
        self.total = total
        self.done = 0
        self.stream = stream or sys.stderr
        self._width = 0

    def _write(self, text: str) -> None:
        padding = " " * max(0, self._width - len(text))
        self.stream.write(f"\r{text}{padding}")
        self.stream.flush()
        self._width = len(text)

    def start(self) -> None:
        if self.total:
            self._write(f"Checking 0/{self.total}")

    def inc(self) -> None:
        self.done += 1
        self._write(f"Checking {self.done}/{self.total}")

    def finish_and_clear(self) -> None:
        if self._width:
            self.stream.write("\r" + " " * self._width + "\r")
            self.stream.flush()
            self._width = 0


def list_streams(streamlink: Streamlink, color: bool = True, progress: bool = True) -> list[str]:
    """
    Probe every stream and build the report lines.

    Lines are printed only after all probes finish, so the progress line
    never interleaves with them.

    Returns:
        One "<name> is <status>" line per stream, in config order.
    """
    bar = ProgressLine(len(streamlink)) if progress else None
    if bar:
        bar.start()

    lines = []
    try:
        for stream, status in streamlink.status():
            logger.info("%s is %s", stream, status)
            lines.append(format_status_line(stream.display_name(), status, color=color))
            if bar:
                bar.inc()
    finally:
        if bar:
            bar.finish_and_clear()

    for line in lines:
        print(line)
    return lines


def print_urls(streamlink: Streamlink) -> list[str]:
    """Print the formatted URL of every stream without probing."""
    lines = [f"{stream.display_name()}: {stream}" for stream in streamlink.stream_urls]
    for line in lines:
        print(line)
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strs",
        description="strs - check whether your Twitch and YouTube streams are live",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Report every stream in the default config
  strs list

  # Use another config file
  strs --config streams.yaml list

  # Print the configured stream URLs without probing
  strs url
        """,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        "-d",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=pathlib.Path,
        metavar="FILE",
        help="Path to the config file (default: ~/.config/strs/config.yaml)",
    )
    parser.add_argument(
        "--log-file",
        type=pathlib.Path,
        help="Also write logs to this file",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("list", help="list streamers and whether they are live")
    subparsers.add_parser("url", help="print formatted URLs")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the strs CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.debug, args.log_file)

    try:
        config = load_config(args.config)
    except (OSError, ValueError, TypeError) as e:
        logger.error("Error while reading config: %s", e)
        return 1

    try:
        streamlink = Streamlink.new(config)
    except UrlError as e:
        logger.error("Error while parsing URL %s", e)
        return 1

    if not len(streamlink):
        logger.warning("No streams configured!")
        return 0

    if args.command == "url":
        print_urls(streamlink)
        return 0

    color = not args.no_color and sys.stdout.isatty()
    if color:
        just_fix_windows_console()
    list_streams(streamlink, color=color, progress=sys.stderr.isatty())
    return 0


if __name__ == "__main__":
    sys.exit(main())
