"""Part-of-speech tagging with the Stanford POS tagger."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from stanpos.api.util import system
from stanpos.api.util.tagsets import describe
from stanpos.core.engine_config import DEFAULT_ENCODING, DEFAULT_JAVA_OPTIONS, EngineConfig
from stanpos.core.invocation import build_command, temp_text_file
from stanpos.core.misc import get_logger
from stanpos.core.parser import parse_output

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class TaggedToken:
    """A word and its part-of-speech tag."""

    word: str
    tag: str

    @property
    def description(self) -> str:
        """Human-readable description of the tag, or an empty string if the tag is unknown."""
        return describe(self.tag)


class Tagger:
    """Tag sentences by running the Stanford POS tagger in a separate Java process.

    Every call to `tag` writes the sentence to its own temporary file and starts a new process, so a single Tagger can
    be used from several threads at once.
    """

    def __init__(
        self,
        model: str | Path,
        tagger: str | Path,
        java: str | None = None,
        java_options: Sequence[str] = DEFAULT_JAVA_OPTIONS,
        encoding: str = DEFAULT_ENCODING,
        timeout: float | None = None,
        engine: system.Engine | None = None,
    ) -> None:
        """Create a tagger.

        Args:
            model: Path to the tagger model file.
            tagger: Path to the Stanford POS tagger jar file.
            java: Path to the Java executable.
            java_options: Options passed to Java.
            encoding: Encoding of the input text and the tagger output.
            timeout: Seconds to wait for the tagger before killing it, or None to wait indefinitely.
            engine: Runs the tagger command line. Defaults to running it as a subprocess.

        Raises:
            PathNotFound: If the model or the tagger jar does not exist.
        """
        self.config = EngineConfig(model, tagger, java, java_options, encoding, timeout)
        self.engine = engine or system.SubprocessEngine()

    @classmethod
    def from_config(cls, cfg: EngineConfig, engine: system.Engine | None = None) -> Tagger:
        """Create a tagger with the same settings as an existing config object."""
        tagger = cls(cfg.model, cfg.tagger, cfg.java, cfg.java_options, cfg.encoding, cfg.timeout, engine)
        tagger.config.separator = cfg.separator
        return tagger

    def set_model(self, model: str | Path) -> None:
        """Set the tagger model (see `EngineConfig.set_model`)."""
        self.config.set_model(model)

    def set_tagger(self, tagger: str | Path) -> None:
        """Set the tagger jar file (see `EngineConfig.set_tagger`)."""
        self.config.set_tagger(tagger)

    def set_java(self, java: str) -> None:
        self.config.set_java(java)

    def set_java_options(self, options: Sequence[str]) -> None:
        self.config.set_java_options(options)

    def set_encoding(self, encoding: str) -> None:
        self.config.set_encoding(encoding)

    def command(self, text_file: str | Path) -> list[str]:
        """Return the command line used to tag the contents of `text_file`."""
        return build_command(self.config, text_file)

    def tag(self, sentence: str, timeout: float | None = None) -> list[TaggedToken]:
        """Tag a sentence.

        Args:
            sentence: The text to tag.
            timeout: Seconds to wait for the tagger, overriding the configured timeout.

        Returns:
            The tagged tokens, in the order of the tagger output. Empty if the sentence is empty or only whitespace.

        Raises:
            TempArtifactError: If the temporary input file can't be created, written or removed.
            EngineExecutionFailed: If the tagger can't be run or exits with an error.
            MalformedToken: If the tagger output can't be parsed.
        """
        if not sentence.strip():
            return []
        timeout = timeout if timeout is not None else self.config.timeout
        encoding = self.config.encoding

        with temp_text_file(sentence, encoding) as text_file:
            stdout = system.call_engine(self.command(text_file), self.engine, encoding=encoding, timeout=timeout)

        tokens = [TaggedToken(word, tag) for word, tag in parse_output(stdout)]
        logger.debug("Tagged %d tokens: %s", len(tokens), " ".join(f"{t.word}/{t.tag}" for t in tokens))
        return tokens

    def tag_many(self, sentences: Iterable[str], max_workers: int | None = None) -> list[list[TaggedToken]]:
        """Tag several sentences in parallel, each in its own tagger process.

        Args:
            sentences: The sentences to tag.
            max_workers: Maximum number of tagger processes to run at once. Defaults to the ThreadPoolExecutor default.

        Returns:
            One list of tagged tokens per sentence, in the same order as `sentences`.
        """
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(self.tag, sentences))

    @staticmethod
    def describe(tag: str) -> str:
        """Get the description of a tag, or an empty string if the tag is unknown."""
        return describe(tag)
