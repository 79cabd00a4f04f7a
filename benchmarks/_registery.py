import statistics
import timeit
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import partial
from typing import Any, Final, NamedTuple, Self

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)

import pyostream as ps

type BenchFn = Callable[[], object]


WARMUP_RUNS: Final = 5
CALLS_BY_RUN: Final = 10
TARGET_BENCH_SEC: Final = 1
MIN_RUNS: Final = 20
SIZES: Final = (256, 1024, 4096)

CONSOLE: Final = Console()


class Variant(NamedTuple):
    """A specific benchmark variant size."""

    size: int
    n_runs: int
    fn: BenchFn

    @classmethod
    def from_fn(cls, fn: BenchFn, size: int) -> Self:
        """Estimate number of runs needed for benchmark variant."""
        warmup_time = timeit.timeit(fn, number=WARMUP_RUNS) / WARMUP_RUNS
        est = int(TARGET_BENCH_SEC / 2 / max(warmup_time, 1e-9) / CALLS_BY_RUN)
        return cls(size, max(MIN_RUNS, est), fn)


class Benchmark(NamedTuple):
    """A benchmark with multiple data sizes."""

    category: str
    name: str
    variants: list[Variant]


@dataclass(slots=True)
class Row:
    """Median timing of one benchmark variant."""

    category: str
    name: str
    size: int
    runs: int
    median: float


BENCHMARKS: list[Benchmark] = []


def bench[P](
    *, gen: Callable[[range], P] = list
) -> Callable[[Callable[[P], object]], Callable[[P], object]]:
    """Decorator to register benchmarks with multiple data sizes.

    The benchmark class name is used as category, so implementations of the same pipeline can be compared side by side.
    """

    def decorator(func: Callable[[P], object]) -> Callable[[P], object]:
        variants = (
            ps.from_(SIZES)
            .map(lambda size: Variant.from_fn(partial(func, gen(range(size))), size))
            .collect()
        )
        BENCHMARKS.append(
            Benchmark(func.__qualname__.split(".")[0], func.__name__, variants)
        )
        return func

    return decorator


def select(benchmarks: Sequence[Benchmark], category: str | None) -> list[Benchmark]:
    """Keep the benchmarks of **category**, or all of them if it is None."""
    return (
        ps.from_(benchmarks)
        .filter(lambda b: category is None or b.category.lower() == category.lower())
        .collect()
    )


def collect_timings(benchmarks: Sequence[Benchmark]) -> list[Row]:
    """Time every variant of every benchmark, and reduce each to its median."""
    total_runs: int = (
        ps.from_(benchmarks)
        .flat_map(lambda b: b.variants)
        .fold(0, lambda acc, v: acc + v.n_runs)
    )
    CONSOLE.print(
        f"Found {len(benchmarks)} benchmarks, {total_runs} total runs",
        style="bold white",
    )

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=total_runs)
        f = partial(_run_variant, progress, task)
        return (
            ps.from_(benchmarks)
            .flat_map(lambda b: ps.from_(b.variants).map(lambda v: f(v, b)))
            .collect()
        )


def _run_variant(
    progress: Progress,
    task: Any,  # noqa: ANN401
    variant: Variant,
    bench: Benchmark,
) -> Row:
    progress.update(
        task,
        description=f"[cyan]{bench.category}: {bench.name} @ {variant.size}",
    )

    def _timed(_: int) -> float:
        time_taken = timeit.timeit(variant.fn, number=CALLS_BY_RUN)
        progress.advance(task)
        return time_taken

    timings = ps.from_(range(variant.n_runs)).map(_timed).collect()
    return Row(
        bench.category,
        bench.name,
        variant.size,
        variant.n_runs,
        statistics.median(timings),
    )
