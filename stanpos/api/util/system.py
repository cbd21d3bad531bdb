"""`stanpos.api.util.system` provides functions for locating and running the tagger process."""

from __future__ import annotations

import errno
import os
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from stanpos.core.misc import EngineExecutionFailed, get_logger

logger = get_logger(__name__)


class Engine(Protocol):
    """Anything that can run a command line and report its output and exit code."""

    def invoke(self, argv: Sequence[str], timeout: float | None = None) -> tuple[bytes, bytes, int]:
        """Run `argv` to completion and return `stdout`, `stderr` and the exit code."""


class SubprocessEngine:
    """Run commands as child processes, blocking until they exit."""

    def invoke(self, argv: Sequence[str], timeout: float | None = None) -> tuple[bytes, bytes, int]:
        """Run a command, capturing `stdout` and `stderr` separately.

        Args:
            argv: The command line. The first element is the binary, which is looked up with `find_binary`.
            timeout: Seconds to wait before killing the process, or None to wait indefinitely.

        Returns:
            A tuple with `stdout`, `stderr` and the exit code.

        Raises:
            EngineExecutionFailed: If the binary can't be found or started, or if it runs past the timeout.
        """
        binary = find_binary(argv[0])
        if binary is None:
            raise EngineExecutionFailed(f"Couldn't find binary: {argv[0]}")
        command = [binary] + [str(a) for a in argv[1:]]
        logger.debug("CALL: %s", " ".join(command))
        try:
            process = subprocess.Popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as e:
            raise EngineExecutionFailed(f"Could not start {binary}: {e}") from e

        try:
            stdout, stderr = process.communicate(timeout=timeout)
        except subprocess.TimeoutExpired:
            kill_process(process)
            _, stderr = process.communicate()
            raise EngineExecutionFailed(
                f"{binary} timed out after {timeout} seconds", stderr.decode(errors="replace")
            ) from None
        except BaseException:
            kill_process(process)
            process.wait()
            raise
        return stdout, stderr, process.returncode


def call_engine(
    argv: Sequence[str],
    engine: Engine | None = None,
    encoding: str = "utf-8",
    timeout: float | None = None,
) -> str:
    """Run the tagger and return its decoded `stdout`.

    Args:
        argv: The full command line, binary first.
        engine: The engine used to run the command. Defaults to a `SubprocessEngine`.
        encoding: Encoding of the process output.
        timeout: Seconds to wait before killing the process, or None to wait indefinitely.

    Returns:
        Everything the process wrote to `stdout`.

    Raises:
        EngineExecutionFailed: If the process could not be run or returned a non-zero exit code. The error includes
            everything the process wrote to `stderr`.
    """
    engine = engine or SubprocessEngine()
    stdout, stderr, returncode = engine.invoke(argv, timeout=timeout)
    stdout = _decode(stdout, encoding)
    stderr = _decode(stderr, encoding)
    if returncode:
        if stdout:
            logger.debug(stdout)
        if stderr:
            logger.debug(stderr)
        raise EngineExecutionFailed(f"{argv[0]} returned error code {returncode:d}", stderr, returncode)
    return stdout


def _decode(data: bytes | str, encoding: str) -> str:
    if isinstance(data, str):
        return data
    try:
        return data.decode(encoding, errors="replace")
    except LookupError:
        return data.decode(errors="replace")


def kill_process(process: subprocess.Popen) -> None:
    """Terminate a process, ignoring any errors if the process is already terminated.

    Args:
        process: The process to be terminated.

    Raises:
        OSError: If an error occurs while killing the process.
    """
    try:
        process.kill()
    except OSError as exc:
        if exc.errno == errno.ESRCH:  # No such process
            pass
        else:
            raise


def find_binary(name: str | list[str]) -> str | None:
    """Locate the binary for a given program.

    Args:
        name: The name of or path to the binary, either as a string or a list of strings with alternative names.
            Names without a directory part are looked up in the environment variable `PATH`.

    Returns:
        The path to the first executable binary found, or `None` if none was found.
    """
    if isinstance(name, str):
        name = [name]
    for binary in map(os.path.expanduser, name):
        binary_path = Path(binary)
        if binary_path.is_absolute():
            if binary_path.is_file() and os.access(binary_path, os.X_OK):
                return str(binary_path)
            continue
        if path_to_bin := shutil.which(binary):
            return path_to_bin
    return None
