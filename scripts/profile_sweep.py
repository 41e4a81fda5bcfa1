"""Profile the driver loop and compare its allocations with the batch kernel."""

from __future__ import annotations

from typing import Literal

import numpy as np
import tyro
from loguru import logger

from discperf import (
    SweepParams,
    SweepPreset,
    find_collision2,
    find_collisions_into,
    peak_allocation,
    profile_call,
    sample_heights,
    sweep,
)


def collect_points(ys: np.ndarray, x: float, r: float) -> list:
    """Build a list of collision points, one tuple per particle."""
    return [find_collision2(x, y, r) for y in ys.tolist()]


def main(
    preset: Literal["small", "default", "large"] = "default",
    top: int = 8,
) -> None:
    """Show where the loop spends its time and how much it allocates.

    Args:
        preset: Sweep size preset.
        top: Number of profile entries to print.
    """
    params = SweepParams.from_preset(SweepPreset(preset))
    ys = sample_heights(params)
    x, r = params.x0, params.radius

    logger.info("Profiling sweep()...")
    result, entries = profile_call(sweep, ys, x, r, top=top)
    logger.info(f"{result.n_hits}/{result.n_total} hits")

    print("\n" + "=" * 90)
    print(f"{'Calls':>10} | {'Self s':>10} | {'Cum s':>10} | Function")
    print("-" * 90)
    for e in entries:
        print(f"{e.n_calls:>10} | {e.total_s:>10.4f} | {e.cumulative_s:>10.4f} | {e.function}")
    print("=" * 90)

    _, list_peak = peak_allocation(collect_points, ys, x, r)
    out = np.empty((len(ys), 2))
    _, buffer_peak = peak_allocation(find_collisions_into, out, x, ys, r)

    logger.info(f"List of tuples:      {list_peak / 1024:.1f} KiB peak")
    logger.info(f"Preallocated buffer: {buffer_peak / 1024:.1f} KiB peak")


if __name__ == "__main__":
    tyro.cli(main)
