"""Part-of-speech tagging using the Stanford POS tagger."""

import logging

from stanpos.api.util.tagsets import DESCRIPTIONS, describe
from stanpos.core.engine_config import EngineConfig
from stanpos.core.misc import (
    EngineExecutionFailed,
    MalformedToken,
    PathNotFound,
    StanposError,
    TempArtifactError,
)
from stanpos.tagger import TaggedToken, Tagger

__version__ = "0.1.0"

__all__ = [
    "DESCRIPTIONS",
    "EngineConfig",
    "EngineExecutionFailed",
    "MalformedToken",
    "PathNotFound",
    "StanposError",
    "TaggedToken",
    "Tagger",
    "TempArtifactError",
    "describe",
]

logging.getLogger("stanpos").addHandler(logging.NullHandler())
