"""Settings describing how to invoke the Stanford POS tagger."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from stanpos.core import config as config_utils
from stanpos.core.misc import PathNotFound

DEFAULT_JAVA_OPTIONS = ("-mx300m",)
DEFAULT_ENCODING = "utf8"
ENTRY_POINT = "edu.stanford.nlp.tagger.maxent.MaxentTagger"


def default_java() -> str:
    """Return the Java executable to use when none is configured.

    If JAVA_HOME is set and contains a java binary, that binary is used; otherwise plain "java", to be looked up in
    PATH when the tagger runs.
    """
    if java_home := os.getenv("JAVA_HOME"):
        java_executable = Path(java_home) / "bin" / "java"
        if java_executable.is_file():
            return str(java_executable)
    return "java"


def _check_path(kind: str, path: str | Path) -> str:
    if path is None or not Path(path).exists():
        raise PathNotFound(kind, str(path))
    return str(path)


class EngineConfig:
    """Configuration for one tagging session.

    The model and tagger jar paths are checked when set, so a config object always points at existing files (as of
    the time they were set). A failed check leaves the previous value untouched.
    """

    def __init__(
        self,
        model: str | Path,
        tagger: str | Path,
        java: str | None = None,
        java_options: Sequence[str] = DEFAULT_JAVA_OPTIONS,
        encoding: str = DEFAULT_ENCODING,
        timeout: float | None = None,
    ) -> None:
        """Create a config, checking that the model and tagger jar exist.

        Args:
            model: Path to the tagger model file.
            tagger: Path to the Stanford POS tagger jar file.
            java: Path to the Java executable. Defaults to `default_java()`.
            java_options: Options passed to Java before the classpath.
            encoding: Encoding of the input text and the tagger output.
            timeout: Seconds to wait for the tagger before killing it, or None to wait indefinitely.

        Raises:
            PathNotFound: If the model or the tagger jar does not exist.
        """
        # Check both paths before assigning anything
        self._model = _check_path("model", model)
        self._tagger = _check_path("tagger", tagger)
        self.java = java or default_java()
        self.java_options = list(java_options)
        self.encoding = encoding
        self.timeout = timeout
        # Classpath list separator, overridable but not a constructor argument
        self.separator = os.pathsep

    @classmethod
    def from_dict(cls, cfg: dict) -> EngineConfig:
        """Create a config from a (possibly nested) config dictionary, as returned by `config.load_config`.

        Args:
            cfg: Dictionary with a 'tagger' section.

        Returns:
            A new EngineConfig.
        """
        options = config_utils.get("tagger.java_options", config_dict=cfg)
        return cls(
            model=config_utils.get("tagger.model", config_dict=cfg),
            tagger=config_utils.get("tagger.jar", config_dict=cfg),
            java=config_utils.get("tagger.java", config_dict=cfg),
            java_options=DEFAULT_JAVA_OPTIONS if options is None else options,
            encoding=config_utils.get("tagger.encoding", DEFAULT_ENCODING, config_dict=cfg) or DEFAULT_ENCODING,
            timeout=config_utils.get("tagger.timeout", config_dict=cfg),
        )

    @property
    def model(self) -> str:
        """Path to the tagger model."""
        return self._model

    @property
    def tagger(self) -> str:
        """Path to the tagger jar file."""
        return self._tagger

    def set_model(self, model: str | Path) -> None:
        """Set the tagger model.

        Raises:
            PathNotFound: If the model does not exist.
        """
        self._model = _check_path("model", model)

    def set_tagger(self, tagger: str | Path) -> None:
        """Set the tagger jar file.

        Raises:
            PathNotFound: If the jar file does not exist.
        """
        self._tagger = _check_path("tagger", tagger)

    def set_java(self, java: str) -> None:
        """Set path to the Java executable."""
        self.java = java

    def set_java_options(self, options: Sequence[str]) -> None:
        """Set Java options (default: -mx300m)."""
        self.java_options = list(options)

    def set_encoding(self, encoding: str) -> None:
        """Set input and output encoding (default: utf8)."""
        self.encoding = encoding

    def __repr__(self) -> str:
        return (
            f"EngineConfig(model={self.model!r}, tagger={self.tagger!r}, java={self.java!r}, "
            f"java_options={self.java_options!r}, encoding={self.encoding!r})"
        )
