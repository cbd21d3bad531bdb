"""Build the command line for a tagger call, and manage the temporary input file it reads from."""

from __future__ import annotations

import contextlib
import os
import tempfile
from collections.abc import Iterator
from pathlib import Path

from stanpos.core.engine_config import ENTRY_POINT, EngineConfig
from stanpos.core.misc import TempArtifactError, get_logger

logger = get_logger(__name__)

TEMP_PREFIX = "stanpos-"


def build_arguments(cfg: EngineConfig, text_file: str | Path) -> list[str]:
    """Build the argument list for the Java executable.

    The classpath is the tagger jar followed by the path separator, which Java reads as "jar plus current directory".

    Args:
        cfg: Tagger configuration.
        text_file: Path to the file with the text to tag.

    Returns:
        Arguments to pass to `cfg.java`.
    """
    return [
        *cfg.java_options,
        "-cp",
        cfg.tagger + cfg.separator,
        ENTRY_POINT,
        "-model",
        cfg.model,
        "-textFile",
        str(text_file),
        "-encoding",
        cfg.encoding,
    ]


def build_command(cfg: EngineConfig, text_file: str | Path) -> list[str]:
    """Build the full command line, executable included."""
    return [cfg.java, *build_arguments(cfg, text_file)]


@contextlib.contextmanager
def temp_text_file(text: str, encoding: str = "utf-8") -> Iterator[Path]:
    """Write text to a new, uniquely named temporary file, and remove it on exit.

    The file is removed whether or not the body raises. If removal fails after the body succeeded, a
    TempArtifactError is raised; if the body raised, the original exception is kept.

    Args:
        text: The text to write, as is.
        encoding: Encoding to write the text with.

    Yields:
        Path to the temporary file.

    Raises:
        TempArtifactError: If the file can't be created, written or removed.
    """
    try:
        data = text.encode(encoding)
    except (LookupError, UnicodeEncodeError) as e:
        raise TempArtifactError(f"Could not encode input text as {encoding!r}: {e}") from e

    try:
        fd, name = tempfile.mkstemp(prefix=TEMP_PREFIX, suffix=".txt")
    except OSError as e:
        raise TempArtifactError(f"Could not create temporary input file: {e}") from e
    path = Path(name)
    logger.debug("Created temporary input file: %s", path)

    try:
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
        except OSError as e:
            raise TempArtifactError(f"Could not write temporary input file {path}: {e}") from e
        yield path
    except BaseException:
        with contextlib.suppress(OSError):
            path.unlink(missing_ok=True)
        raise
    else:
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise TempArtifactError(f"Could not remove temporary input file {path}: {e}") from e
