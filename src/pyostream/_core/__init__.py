from ._config import StreamConfig, config_context, get_config, set_config
from ._depreciation import renamed
from ._errors import ExtractorStateError, StreamMovedError
from ._main import Owner, Pipeable

__all__ = [
    "ExtractorStateError",
    "Owner",
    "Pipeable",
    "StreamConfig",
    "StreamMovedError",
    "config_context",
    "get_config",
    "renamed",
    "set_config",
]
