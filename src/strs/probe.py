"""External status probe."""

import logging
import subprocess
from typing import Protocol

from .errors import ProbeError
from .types import URL

DEFAULT_PROBE_COMMAND = "youtube-dl"
LIST_FORMATS_FLAG = "-F"

logger = logging.getLogger(__name__)


class Prober(Protocol):
    """Anything that can report an exit code for a stream URL."""

    def probe(self, url: URL) -> int: ...


class ExternalProber:
    """
    Probes streams by running a media inspection tool.

    The tool is run in "list formats" mode against the URL with its output
    discarded. Only the exit code is reported: zero means the tool found
    formats, so the stream is online.

    Attributes:
        executable: Name or path of the inspection tool.
        args: Arguments passed before the URL.
        timeout: Seconds to wait for the tool, or None to wait forever.
    """

    def __init__(
        self,
        executable: str = DEFAULT_PROBE_COMMAND,
        args: tuple[str, ...] = (LIST_FORMATS_FLAG,),
        timeout: float | None = None,
    ) -> None:
        """
        Initialize the prober.

        Args:
            executable: Inspection tool to run (default: 'youtube-dl').
            args: Arguments placed before the URL (default: ('-F',)).
            timeout: Optional timeout in seconds (default: None).
        """
        self.executable = executable
        self.args = tuple(args)
        self.timeout = timeout

    def _build_command(self, url: URL) -> list[str]:
        return [self.executable, *self.args, url]

    def probe(self, url: URL) -> int:
        """
        Run the inspection tool against a URL.

        Args:
            url: Stream URL to probe.

        Returns:
            The exit code of the tool.

        Raises:
            ProbeError: If the tool could not be started or timed out.
        """
        cmd = self._build_command(url)
        logger.debug("Running probe: %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise ProbeError(url, f"{self.executable} timed out after {self.timeout}s") from exc
        except OSError as exc:
            raise ProbeError(url, f"failed to run {self.executable}: {exc}") from exc

        logger.debug("%s exited with %d for %s", self.executable, result.returncode, url)
        return result.returncode
