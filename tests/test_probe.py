"""Tests for the external prober."""

import subprocess
from unittest.mock import Mock, patch

import pytest

from strs.errors import ProbeError
from strs.probe import ExternalProber

URL = "https://twitch.tv/food"


def test_prober_defaults() -> None:
    """Test that the default prober runs youtube-dl in list formats mode."""
    prober = ExternalProber()

    assert prober.executable == "youtube-dl"
    assert prober.args == ("-F",)
    assert prober.timeout is None


def test_build_command() -> None:
    """Test command building with a custom tool and arguments."""
    prober = ExternalProber("yt-dlp", args=("--simulate", "-F"))

    assert prober._build_command(URL) == ["yt-dlp", "--simulate", "-F", URL]


def test_probe_runs_tool_with_output_discarded() -> None:
    """Test that the tool runs against the URL with its output discarded."""
    prober = ExternalProber()

    with patch("subprocess.run") as mock_run:
        mock_run.return_value = Mock(returncode=0)
        result = prober.probe(URL)

        assert result == 0
        mock_run.assert_called_once_with(
            ["youtube-dl", "-F", URL],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            timeout=None,
            check=False,
        )


def test_probe_reports_failure_code() -> None:
    """Test that a failing tool's exit code is returned."""
    with patch("subprocess.run") as mock_run:
        mock_run.return_value = Mock(returncode=1)

        assert ExternalProber().probe(URL) == 1


def test_probe_missing_executable() -> None:
    """Test that a missing tool raises ProbeError."""
    with patch("subprocess.run", side_effect=FileNotFoundError("youtube-dl")):
        with pytest.raises(ProbeError) as excinfo:
            ExternalProber().probe(URL)

    assert excinfo.value.url == URL
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_probe_permission_denied() -> None:
    """Test that a tool we may not run raises ProbeError."""
    with patch("subprocess.run", side_effect=PermissionError("denied")):
        with pytest.raises(ProbeError):
            ExternalProber().probe(URL)


def test_probe_timeout() -> None:
    """Test that a tool that times out raises ProbeError."""
    prober = ExternalProber(timeout=0.5)

    with patch(
        "subprocess.run",
        side_effect=subprocess.TimeoutExpired(["youtube-dl", "-F", URL], 0.5),
    ) as mock_run:
        with pytest.raises(ProbeError, match="timed out"):
            prober.probe(URL)

        assert mock_run.call_args.kwargs["timeout"] == 0.5


def test_probe_real_missing_executable() -> None:
    """Test launching a tool that doesn't exist on this system."""
    prober = ExternalProber("strs-test-no-such-executable")

    with pytest.raises(ProbeError):
        prober.probe(URL)
