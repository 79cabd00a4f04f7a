"""Tests for the process-wide configuration."""

import pytest

import pyostream as ps
from pyostream._extractors import Map, SequenceSource


def test_config_context_restores() -> None:
    """Test that the previous configuration comes back after the block."""
    before = ps.get_config()
    with ps.config_context(checked=True, repr_items=1) as config:
        assert config.checked
        assert ps.get_config().repr_items == 1
    assert ps.get_config() == before


def test_config_context_restores_on_error() -> None:
    """Test that the configuration is restored even when the block raises."""
    before = ps.get_config()
    with pytest.raises(KeyError), ps.config_context(repr_items=0):
        raise KeyError("x")
    assert ps.get_config() == before


def test_set_config_returns_previous() -> None:
    """Test set_config returns the configuration it replaced."""
    previous = ps.set_config(repr_items=3)
    try:
        assert previous.repr_items == 5
        assert ps.get_config().repr_items == 3
    finally:
        ps.set_config(repr_items=previous.repr_items)


def test_invalid_repr_items() -> None:
    """Test that negative repr sizes are refused and leave the config untouched."""
    before = ps.get_config()
    with pytest.raises(ValueError, match="repr_items"):
        ps.set_config(repr_items=-1)
    assert ps.get_config() == before


def test_unknown_field() -> None:
    """Test that unknown settings are refused."""
    with pytest.raises(TypeError):
        ps.set_config(verbose=True)


def test_repr_items() -> None:
    """Test the truncation of source reprs."""
    with ps.config_context(repr_items=0):
        assert repr(ps.from_([1])) == "Stream(SequenceSource([...]))"
        assert repr(ps.from_([])) == "Stream(SequenceSource([]))"
    with ps.config_context(repr_items=2):
        assert repr(ps.from_("abc")) == "Stream(SequenceSource(['a', 'b', ...]))"
        assert repr(ps.from_("ab")) == "Stream(SequenceSource(['a', 'b']))"


def test_checked_reads_through_adapters() -> None:
    """Test that a read through adapters reaches the checked source."""
    with ps.config_context(checked=True):
        mapped = Map(SequenceSource([1]), lambda x: x + 1)
        with pytest.raises(ps.ExtractorStateError):
            mapped.get()
        assert mapped.advance()
        assert mapped.get() == 2


def test_unchecked_is_default() -> None:
    """Test that precondition checks are off unless enabled."""
    assert ps.get_config().checked is False
