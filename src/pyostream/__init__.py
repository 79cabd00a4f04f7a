from ._core import (
    ExtractorStateError,
    StreamConfig,
    StreamMovedError,
    config_context,
    get_config,
    set_config,
)
from ._extractors import Enumerated, Extractor
from ._results import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._stream import Stream, from_

__all__ = [
    "NONE",
    "Enumerated",
    "Extractor",
    "ExtractorStateError",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "Some",
    "Stream",
    "StreamConfig",
    "StreamMovedError",
    "config_context",
    "from_",
    "get_config",
    "set_config",
]
