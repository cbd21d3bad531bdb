"""Exceptions and logging helpers."""

from __future__ import annotations

import logging


class StanposError(Exception):
    """Base class for all errors raised by stanpos, carrying a user-friendly message."""

    def __init__(self, message: str) -> None:
        """Raise an error with a message suitable for showing to the user.

        Args:
            message: User-friendly error message.
        """
        self.message = message
        super().__init__(message)


class PathNotFound(StanposError):  # noqa: N818
    """A model or tagger jar path does not exist."""

    def __init__(self, kind: str, path: str) -> None:
        """Raise an error for a missing model or tagger file.

        Args:
            kind: Which of the two paths failed, "model" or "tagger".
            path: The path that could not be found.
        """
        self.kind = kind
        self.path = path
        super().__init__(f"{kind} not found (invalid path): {path}")


class TempArtifactError(StanposError):
    """The temporary input file could not be created, written or removed."""


class EngineExecutionFailed(StanposError):  # noqa: N818
    """The tagging engine could not be launched, timed out, or exited with a non-zero code."""

    def __init__(self, cause: str, stderr: str = "", returncode: int | None = None) -> None:
        """Raise an error describing a failed engine call.

        Args:
            cause: Description of what went wrong.
            stderr: Everything the engine wrote to stderr.
            returncode: Exit code of the process, or None if it never exited normally.
        """
        self.cause = cause
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(f"{cause}: {stderr}")


class MalformedToken(StanposError):  # noqa: N818
    """A token in the engine output is not a 'word<delimiter>tag' pair."""

    def __init__(self, token: str, position: int) -> None:
        """Raise an error for a token that can't be split into word and tag.

        Args:
            token: The offending token.
            position: Index of the token in the engine output.
        """
        self.token = token
        self.position = position
        super().__init__(f"Malformed token at position {position}: {token!r}")


def get_logger(name: str) -> logging.Logger:
    """Get a logger that is a child of 'stanpos'.

    Args:
        name: The name of the current module (usually `__name__`).

    Returns:
        Logger object.
    """
    if not name.startswith("stanpos"):
        name = f"stanpos.{name}"
    return logging.getLogger(name)
