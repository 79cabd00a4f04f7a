from collections.abc import Sequence
from typing import Any

import more_itertools as mit


def seq_repr(data: Sequence[Any], start: int, stop: int, max_items: int) -> str:
    """Render the elements of **data** between **start** and **stop**, truncated to **max_items**."""
    shown = mit.take(max_items, map(data.__getitem__, range(start, stop)))
    parts = [repr(v) for v in shown]
    if stop - start > max_items:
        parts.append("...")
    return f"[{', '.join(parts)}]"
