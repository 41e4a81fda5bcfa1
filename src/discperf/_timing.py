"""Timing and profiling wrappers for comparing implementations."""

from __future__ import annotations

import cProfile
import pstats
import time
import tracemalloc
from dataclasses import dataclass
from typing import Any, Callable

from loguru import logger


class Timer:
    """Context manager for timing code blocks."""

    def __init__(self, label: str | None = None):
        self.label = label
        self.start_time: float = 0
        self.elapsed_ms: float = 0

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.elapsed_ms = (time.perf_counter() - self.start_time) * 1000
        if self.label is not None:
            logger.debug(f"{self.label}: {self.elapsed_ms:.3f} ms")


@dataclass(frozen=True)
class TimingStats:
    """Wall-clock timings over repeated calls."""

    mean_ms: float
    min_ms: float
    n_runs: int


def time_call(fn: Callable[..., Any], *args: Any, n_runs: int = 10) -> TimingStats:
    """Time `fn(*args)` over `n_runs` calls.

    The minimum is usually the more stable figure; the mean includes
    interference from whatever else the machine is doing.
    """
    if n_runs < 1:
        raise ValueError(f"n_runs must be at least 1, got {n_runs}")

    times = []
    for _ in range(n_runs):
        t0 = time.perf_counter()
        fn(*args)
        times.append((time.perf_counter() - t0) * 1000)

    return TimingStats(mean_ms=sum(times) / n_runs, min_ms=min(times), n_runs=n_runs)


@dataclass(frozen=True)
class ProfileEntry:
    """One function's row in a cProfile report."""

    function: str  # "file:line(name)"
    n_calls: int
    total_s: float  # Time spent in the function itself
    cumulative_s: float  # Including callees


def profile_call(
    fn: Callable[..., Any],
    *args: Any,
    top: int = 10,
) -> tuple[Any, list[ProfileEntry]]:
    """Run `fn(*args)` under cProfile.

    Entries are keyed by function name, so functions sharing a name in
    different modules are reported once.

    Returns:
        The call's result and the `top` entries sorted by cumulative time
    """
    profiler = cProfile.Profile()
    result = profiler.runcall(fn, *args)

    profile = pstats.Stats(profiler).get_stats_profile()
    entries = []
    for name, fp in profile.func_profiles.items():
        entries.append(
            ProfileEntry(
                function=f"{fp.file_name}:{fp.line_number}({name})",
                # Recursive functions report "total/primitive"
                n_calls=int(fp.ncalls.split("/")[0]),
                total_s=fp.tottime,
                cumulative_s=fp.cumtime,
            )
        )
    entries.sort(key=lambda e: e.cumulative_s, reverse=True)
    return result, entries[:top]


def peak_allocation(fn: Callable[..., Any], *args: Any) -> tuple[Any, int]:
    """Run `fn(*args)` under tracemalloc and report the peak bytes allocated.

    If tracemalloc is already tracing, it is left running, but its recorded
    peak is reset to the current traced size before `fn` runs.
    """
    already_tracing = tracemalloc.is_tracing()
    if not already_tracing:
        tracemalloc.start()
    tracemalloc.reset_peak()
    try:
        baseline, _ = tracemalloc.get_traced_memory()
        result = fn(*args)
        _, peak = tracemalloc.get_traced_memory()
    finally:
        if not already_tracing:
            tracemalloc.stop()
    return result, max(peak - baseline, 0)
