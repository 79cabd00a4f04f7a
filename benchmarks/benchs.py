"""Benchmarks for pyostream pipelines against builtins, cytoolz and more_itertools."""

import functools
import itertools

import cytoolz as cz
import more_itertools as mit

import pyostream as ps

from ._registery import bench

# Helper functions
# ------------------------------------------------------------


def _square(x: int) -> int:
    return x * x


def _is_even(x: int) -> bool:
    return x % 2 == 0


def _add(acc: int, x: int) -> int:
    return acc + x


# Benchmark classes
# ------------------------------------------------------------


class MapFilter:
    """Benchmark a filter -> map -> collect pipeline."""

    @bench()
    @staticmethod
    def pyostream(data: list[int]) -> object:
        """Benchmark the pyostream adapters."""
        return ps.from_(data).filter(_is_even).map(_square).collect()

    @bench()
    @staticmethod
    def builtins(data: list[int]) -> object:
        """Benchmark builtin map and filter."""
        return list(map(_square, filter(_is_even, data)))

    @bench()
    @staticmethod
    def comprehension(data: list[int]) -> object:
        """Benchmark a list comprehension."""
        return [_square(x) for x in data if _is_even(x)]


class SkipTake:
    """Benchmark slicing the middle of a sequence."""

    @bench()
    @staticmethod
    def pyostream(data: list[int]) -> object:
        """Benchmark skip then take."""
        return ps.from_(data).skip(len(data) // 4).take(len(data) // 2).collect()

    @bench()
    @staticmethod
    def cytoolz(data: list[int]) -> object:
        """Benchmark cytoolz drop then take."""
        return list(cz.itertoolz.take(len(data) // 2, cz.itertoolz.drop(len(data) // 4, data)))

    @bench()
    @staticmethod
    def islice(data: list[int]) -> object:
        """Benchmark itertools.islice."""
        return list(itertools.islice(data, len(data) // 4, len(data) // 4 + len(data) // 2))


class Nth:
    """Benchmark looking up an element by position."""

    @bench()
    @staticmethod
    def pyostream(data: list[int]) -> object:
        """Benchmark Stream.nth."""
        return ps.from_(data).nth(len(data) - 1)

    @bench()
    @staticmethod
    def more_itertools(data: list[int]) -> object:
        """Benchmark more_itertools.nth."""
        return mit.nth(data, len(data) - 1)


class Count:
    """Benchmark counting the elements of a filtered sequence."""

    @bench()
    @staticmethod
    def pyostream(data: list[int]) -> object:
        """Benchmark Stream.count."""
        return ps.from_(data).filter(_is_even).count()

    @bench()
    @staticmethod
    def more_itertools(data: list[int]) -> object:
        """Benchmark more_itertools.ilen."""
        return mit.ilen(filter(_is_even, data))


class Fold:
    """Benchmark summing through a fold."""

    @bench()
    @staticmethod
    def pyostream(data: list[int]) -> object:
        """Benchmark Stream.fold."""
        return ps.from_(data).fold(0, _add)

    @bench()
    @staticmethod
    def reduce(data: list[int]) -> object:
        """Benchmark functools.reduce."""
        return functools.reduce(_add, data, 0)


class FlatMapZip:
    """Benchmark nesting and pairing."""

    @bench()
    @staticmethod
    def pyostream(data: list[int]) -> object:
        """Benchmark flat_map then zip."""
        return (
            ps.from_(data)
            .flat_map(lambda x: (x, x))
            .zip(data)
            .enumerate_tuple()
            .count()
        )

    @bench()
    @staticmethod
    def itertools(data: list[int]) -> object:
        """Benchmark chain.from_iterable then zip."""
        return mit.ilen(
            enumerate(zip(itertools.chain.from_iterable((x, x) for x in data), data))
        )
