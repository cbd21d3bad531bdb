"""Fixtures for testing stanpos without Java or a real tagger model."""

from __future__ import annotations

import sys
import tempfile
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from stanpos.core import paths as paths_module

STUB_ENGINE = """\
import json
import sys
import time

args = sys.argv[1:]
text_file = args[args.index("-textFile") + 1]
encoding = args[args.index("-encoding") + 1]
with open(text_file, encoding=encoding) as f:
    words = f.read().split()

TAGS = {tags!r}
ARGS_FILE = {args_file!r}
EXIT_CODE = {exit_code!r}
STDERR = {stderr!r}
SLEEP = {sleep!r}
DELIMITER = {delimiter!r}
OUTPUT = {output!r}

if ARGS_FILE:
    with open(ARGS_FILE, "w", encoding="utf-8") as f:
        json.dump(args, f)
if SLEEP:
    time.sleep(SLEEP)
if EXIT_CODE:
    sys.stderr.buffer.write(STDERR.encode(encoding))
    sys.exit(EXIT_CODE)
output = OUTPUT if OUTPUT is not None else " ".join(word + DELIMITER + TAGS.get(word, "NN") for word in words)
sys.stdout.buffer.write((output + "\\n").encode(encoding))
"""


class FakeEngine:
    """Engine returning canned output, recording every command line and input text it receives."""

    def __init__(self, stdout: str = "", stderr: str = "", returncode: int = 0) -> None:
        self.stdout = stdout
        self.stderr = stderr
        self.returncode = returncode
        self.calls = []
        self.texts = []

    def invoke(self, argv: Sequence[str], timeout: float | None = None) -> tuple[bytes, bytes, int]:
        self.calls.append(list(argv))
        text_file = Path(argv[argv.index("-textFile") + 1])
        self.texts.append(text_file.read_text(encoding="utf-8"))
        return self.stdout.encode("utf-8"), self.stderr.encode("utf-8"), self.returncode


@pytest.fixture
def model_file(tmp_path: Path) -> Path:
    """An (empty) tagger model file."""  # noqa: DOC201
    path = tmp_path / "chinese-distsim.tagger"
    path.touch()
    return path


@pytest.fixture
def jar_file(tmp_path: Path) -> Path:
    """An (empty) tagger jar file."""  # noqa: DOC201
    path = tmp_path / "stanford-postagger.jar"
    path.touch()
    return path


@pytest.fixture
def temp_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect temporary files to an empty directory, so leftovers can be counted."""  # noqa: DOC201
    path = tmp_path / "tmp"
    path.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(path))
    return path


@pytest.fixture
def stub_engine(tmp_path: Path) -> Callable[..., list[str]]:
    """Factory writing a Python script that behaves like the tagger.

    Returns the Java options to use, with `sys.executable` as the Java executable, to run the script instead of the
    real tagger.
    """  # noqa: DOC201

    def make(
        tags: dict | None = None,
        exit_code: int = 0,
        stderr: str = "",
        sleep: float = 0,
        delimiter: str = "#",
        args_file: Path | None = None,
        output: str | None = None,
    ) -> list[str]:
        script = tmp_path / "stub_engine.py"
        script.write_text(
            STUB_ENGINE.format(
                tags=tags or {},
                args_file=str(args_file) if args_file else None,
                exit_code=exit_code,
                stderr=stderr,
                sleep=sleep,
                delimiter=delimiter,
                output=output,
            ),
            encoding="utf-8",
        )
        return [str(script)]

    return make


@pytest.fixture
def fake_engine() -> type[FakeEngine]:
    """The FakeEngine class, for creating engines with canned output."""  # noqa: DOC201
    return FakeEngine


@pytest.fixture
def python() -> str:
    """Path to the Python interpreter, used in place of Java."""  # noqa: DOC201
    return sys.executable


@pytest.fixture(autouse=True)
def isolated_user_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests from reading the real user config file or data dir."""
    monkeypatch.setattr(paths_module.paths, "user_config_file", tmp_path / "user-config" / "config.yaml")
    monkeypatch.setattr(paths_module.paths, "data_dir", None)
    monkeypatch.delenv(paths_module.paths.data_dir_env, raising=False)
