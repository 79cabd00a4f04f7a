class StreamMovedError(RuntimeError):
    """Raised when a `Stream` is used after its extractor was moved into another `Stream`."""


class ExtractorStateError(RuntimeError):
    """Raised by checked extractors when `get()` is called without a current element."""
