from ._bounding import Filter, Skip, SkipMode, SkipWhile, Take, TakeWhile
from ._combine import Chain, Zip
from ._protocol import Adapter, Extractor, State
from ._source import IterableSource, SequenceSource, source_over
from ._transform import (
    Enumerate,
    Enumerated,
    EnumerateTuple,
    FlatMap,
    Inspect,
    Map,
    Spy,
)

__all__ = [
    "Adapter",
    "Chain",
    "Enumerate",
    "EnumerateTuple",
    "Enumerated",
    "Extractor",
    "Filter",
    "FlatMap",
    "Inspect",
    "IterableSource",
    "Map",
    "SequenceSource",
    "Skip",
    "SkipMode",
    "SkipWhile",
    "Spy",
    "State",
    "Take",
    "TakeWhile",
    "Zip",
    "source_over",
]
