"""Tests for map, flat_map, enumerate, inspect and spy."""

import pytest

import pyostream as ps
from pyostream._extractors import FlatMap, Map, SequenceSource

S = list(range(100))


def test_map_squares() -> None:
    """Test that map preserves length and order."""
    assert ps.from_(S).map(lambda x: x * x).collect() == [x * x for x in S]


def test_map_changes_type() -> None:
    """Test that map may change the element type."""
    result = ps.from_(S).map(lambda x: str(x * x)).collect()
    assert result == [str(x * x) for x in S]


def test_map_recomputes_on_each_read() -> None:
    """Test that the mapped value is computed on every get(), not cached."""
    calls: list[int] = []

    def _double(x: int) -> int:
        calls.append(x)
        return x * 2

    mapped = Map(SequenceSource([5]), _double)
    assert mapped.advance()
    assert mapped.get() == 10
    assert mapped.get() == 10
    assert calls == [5, 5]


def test_map_is_lazy() -> None:
    """Test that map does not run until elements are read."""
    calls: list[int] = []
    stream = ps.from_(S).map(calls.append)
    assert calls == []
    assert stream.count() == 100
    assert calls == []


def test_flat_map_basic() -> None:
    """Test that inner sequences are yielded in order."""
    result = ps.from_([1, 2, 3]).flat_map(lambda x: [x] * x).collect()
    assert result == [1, 2, 2, 3, 3, 3]


def test_flat_map_skips_empty_inner() -> None:
    """Test that empty inner sequences are skipped, including consecutive ones."""
    result = ps.from_([0, 0, 2, 0, 1, 0]).flat_map(range).collect()
    assert result == [0, 1, 0]


def test_flat_map_all_empty() -> None:
    """Test a flat_map where every inner sequence is empty."""
    assert ps.from_(S).flat_map(lambda _: ()).collect() == []


def test_flat_map_many_empty_inner_sequences() -> None:
    """Test that long runs of empty inner sequences do not grow the call stack."""
    data = [0] * 10_000 + [1]
    assert ps.from_(data).flat_map(range).collect() == [0]


def test_flat_map_accepts_generators() -> None:
    """Test that inner sequences may be one-shot generators."""
    result = ps.from_(["ab", "c"]).flat_map(lambda s: (c * 2 for c in s)).collect()
    assert result == ["aa", "bb", "cc"]


def test_flat_map_pulls_outer_lazily() -> None:
    """Test that an outer element is only pulled when the current inner sequence ends."""
    pulled: list[int] = []
    stream = ps.from_([1, 2, 3]).inspect(pulled.append).flat_map(lambda x: [x, x])
    assert stream.next() == ps.Some(1)
    assert pulled == [1]
    assert stream.next() == ps.Some(1)
    assert pulled == [1]
    assert stream.next() == ps.Some(2)
    assert pulled == [1, 2]


def test_flat_map_get_before_advance() -> None:
    """Test that a checked read of a FlatMap before any pull is refused."""
    flat = FlatMap(SequenceSource([[1]]), lambda x: x)
    with ps.config_context(checked=True):
        with pytest.raises(ps.ExtractorStateError):
            flat.get()
        assert flat.advance()
        assert flat.get() == 1


def test_flatten() -> None:
    """Test removing one nesting level."""
    nested = [[1, 2], [], [3], [[4]]]
    assert ps.from_(nested).flatten().collect() == [1, 2, 3, [4]]


def test_enumerate() -> None:
    """Test that enumerate pairs elements with their index."""
    result = ps.from_("abc").enumerate().collect()
    assert result == [(0, "a"), (1, "b"), (2, "c")]
    assert result[1].idx == 1
    assert result[1].value == "b"
    assert isinstance(result[0], ps.Enumerated)


def test_enumerate_start() -> None:
    """Test a custom starting index."""
    assert ps.from_("ab").enumerate(5).map(lambda e: e.idx).collect() == [5, 6]


def test_enumerate_tuple() -> None:
    """Test enumerate_tuple yields plain tuples."""
    result = ps.from_("ab").enumerate_tuple().collect()
    assert result == [(0, "a"), (1, "b")]
    assert type(result[0]) is tuple


def test_enumerate_counts_pulls_not_reads() -> None:
    """Test that the index follows the number of pulls, even through nth()."""
    stream = ps.from_(S).enumerate()
    assert stream.nth(3) == ps.Some((3, 3))
    assert stream.next() == ps.Some((4, 4))


def test_enumerate_after_filter_counts_matches() -> None:
    """Test that enumerate numbers the elements it receives, not the original positions."""
    result = ps.from_(S).filter(lambda x: x % 10 == 0).enumerate_tuple().take(3).collect()
    assert result == [(0, 0), (1, 10), (2, 20)]


def test_enumerate_negative_start() -> None:
    """Test that a negative start index is refused."""
    with pytest.raises(ValueError, match="start"):
        ps.from_(S).enumerate(-1)


def test_inspect_is_lazy() -> None:
    """Test that inspect does nothing until a terminal operation runs."""
    seen: list[int] = []
    stream = ps.from_(S).inspect(seen.append)
    assert seen == []
    stream.collect()
    assert seen == S


def test_inspect_fires_on_pull() -> None:
    """Test that inspect observes elements discarded by nth()."""
    seen: list[int] = []
    assert ps.from_(S).inspect(seen.append).nth(10) == ps.Some(10)
    assert seen == S[:11]


def test_inspect_fires_without_reads() -> None:
    """Test that count() triggers inspect although nothing is read."""
    seen: list[int] = []
    assert ps.from_(S).inspect(seen.append).count() == 100
    assert seen == S


def test_spy_is_lazy() -> None:
    """Test that spy does nothing until a terminal operation runs."""
    seen: list[int] = []
    stream = ps.from_(S).spy(seen.append)
    assert seen == []
    stream.collect()
    assert seen == S


def test_spy_fires_on_read() -> None:
    """Test that spy only observes the element actually read by nth()."""
    seen: list[int] = []
    assert ps.from_(S).spy(seen.append).nth(10) == ps.Some(10)
    assert seen == [10]


def test_spy_ignores_count() -> None:
    """Test that count() pulls without reading, so spy stays silent."""
    seen: list[int] = []
    assert ps.from_(S).spy(seen.append).count() == 100
    assert seen == []


def test_spy_fires_on_each_read() -> None:
    """Test that spy fires again when the same position is read twice."""
    seen: list[int] = []
    ps.from_([1, 2]).spy(seen.append).map(lambda x: (x, x)).zip([0]).collect()
    assert seen == [1]
    seen.clear()
    ps.from_([7]).spy(seen.append).map(lambda x: x).filter(lambda x: x > 0).collect()
    assert seen == [7, 7]


def test_callable_errors_propagate() -> None:
    """Test that exceptions of user callables are not swallowed."""

    def _boom(x: int) -> int:
        if x == 3:
            raise KeyError(x)
        return x

    stream = ps.from_(S).map(_boom)
    with pytest.raises(KeyError):
        stream.collect()
    assert stream.is_moved() is False
