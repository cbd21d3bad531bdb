"""Unit tests for stanpos.api.util.system."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from stanpos.api.util import system
from stanpos.core.misc import EngineExecutionFailed


def _python(code: str) -> list[str]:
    return [sys.executable, "-c", code]


@pytest.mark.unit
@pytest.mark.noexternal
class TestCallEngine:
    """Tests for running processes with call_engine."""

    def test_stdout_returned(self) -> None:
        """Test that stdout is returned and stderr is not mixed into it."""
        code = "import sys; sys.stdout.write('a#DT b#NN'); sys.stderr.write('Loading model... done')"
        assert system.call_engine(_python(code)) == "a#DT b#NN"

    def test_non_zero_exit(self) -> None:
        """Test that a non-zero exit code raises an error including stderr verbatim."""
        code = "import sys; sys.stderr.write('java.io.IOException: Unable to open model'); sys.exit(2)"
        with pytest.raises(EngineExecutionFailed) as exc_info:
            system.call_engine(_python(code))
        assert exc_info.value.returncode == 2  # noqa: PLR2004
        assert exc_info.value.stderr == "java.io.IOException: Unable to open model"
        assert "java.io.IOException: Unable to open model" in str(exc_info.value)

    def test_missing_binary(self, tmp_path: Path) -> None:
        """Test that a binary that doesn't exist raises an error."""
        with pytest.raises(EngineExecutionFailed) as exc_info:
            system.call_engine([str(tmp_path / "no-java"), "-version"])
        assert exc_info.value.returncode is None

    def test_timeout(self) -> None:
        """Test that a process running past the timeout is killed."""
        code = "import sys, time; sys.stderr.write('working'); sys.stderr.flush(); time.sleep(30)"
        with pytest.raises(EngineExecutionFailed) as exc_info:
            system.call_engine(_python(code), timeout=0.5)
        assert "timed out" in exc_info.value.cause
        assert exc_info.value.returncode is None

    def test_decoding(self) -> None:
        """Test that output is decoded with the given encoding."""
        code = "import sys; sys.stdout.buffer.write('北京#NR'.encode('gb18030'))"
        assert system.call_engine(_python(code), encoding="gb18030") == "北京#NR"


@pytest.mark.unit
@pytest.mark.noexternal
def test_find_binary(tmp_path: Path) -> None:
    """Test finding binaries by absolute path and in PATH."""
    assert system.find_binary(sys.executable) == sys.executable
    assert system.find_binary(str(tmp_path / "missing")) is None
    assert system.find_binary(["no-such-binary-stanpos", sys.executable]) == sys.executable

    not_executable = tmp_path / "java"
    not_executable.touch()
    assert system.find_binary(str(not_executable)) is None
