"""Tests for the Option results returned by single-step operations."""

import pytest

import pyostream as ps


def _describe(option: ps.Option[object]) -> str:
    match option:
        case ps.Some(value):
            return f"some {value!r}"
        case _:
            return "none"


def test_option_pattern_matching() -> None:
    """Test matching Some and NONE results of stream lookups."""
    assert _describe(ps.from_("xyz").nth(1)) == "some 'y'"
    assert _describe(ps.from_("xyz").nth(3)) == "none"
    assert _describe(ps.from_([None]).next()) == "some None"


def test_none_is_distinct_from_falsy_values() -> None:
    """Test that absence is never confused with a falsy element."""
    for value in (0, "", None, False, []):
        option = ps.from_([value]).next()
        assert option != ps.NONE
        assert option == ps.Some(value)


def test_none_singleton_equality() -> None:
    """Test that every NoneOption compares equal."""
    assert ps.NoneOption() == ps.NONE
    assert ps.NONE.is_none()
    assert not ps.NONE.is_some()


def test_unwrap_none_raises() -> None:
    """Test unwrapping and expecting on NONE."""
    with pytest.raises(ps.OptionUnwrapError, match="called `unwrap` on a `NONE`"):
        ps.from_([]).next().unwrap()
    with pytest.raises(ps.OptionUnwrapError, match="empty!"):
        ps.from_([]).last().expect("empty!")


def test_option_combinators() -> None:
    """Test the Option helpers on stream results."""
    assert ps.from_([3]).next().map(lambda x: x * 2) == ps.Some(6)
    assert ps.from_([]).next().map(lambda x: x * 2) == ps.NONE
    assert ps.from_([3]).next().filter(lambda x: x > 5) == ps.NONE
    assert ps.from_([3]).next().is_some_and(lambda x: x == 3)
    assert ps.from_([]).next().unwrap_or_else(lambda: 8) == 8
    assert ps.from_([]).next().or_else(lambda: ps.Some(1)) == ps.Some(1)
    assert ps.from_([[4, 5]]).next().and_then(lambda xs: ps.from_(xs).last()) == ps.Some(5)


def test_option_repr() -> None:
    """Test the repr of both variants."""
    assert repr(ps.Some("a")) == "Some('a')"
    assert repr(ps.NONE) == "NONE"
