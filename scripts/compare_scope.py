"""Compare the driver loop reading globals against the one taking arguments."""

from __future__ import annotations

from typing import Literal

import tyro
from loguru import logger

from discperf import (
    SweepParams,
    SweepPreset,
    sample_heights,
    set_globals,
    sweep,
    sweep_globals,
    time_call,
)


def main(preset: Literal["small", "default", "large"] = "default") -> None:
    """Time `sweep` against `sweep_globals` on the same heights.

    Args:
        preset: Sweep size preset.
    """
    params = SweepParams.from_preset(SweepPreset(preset))
    ys = sample_heights(params)
    set_globals(ys, params.x0, params.radius)

    local_result = sweep(ys, params.x0, params.radius)
    global_result = sweep_globals()
    if local_result != global_result:
        logger.warning(f"Results differ: {local_result} vs {global_result}")

    local_stats = time_call(sweep, ys, params.x0, params.radius, n_runs=params.n_runs)
    global_stats = time_call(sweep_globals, n_runs=params.n_runs)

    logger.info(f"Arguments: {local_stats.min_ms:.3f} ms (min of {params.n_runs})")
    logger.info(f"Globals:   {global_stats.min_ms:.3f} ms (min of {params.n_runs})")
    logger.info(f"Slowdown:  {global_stats.min_ms / local_stats.min_ms:.2f}x")


if __name__ == "__main__":
    tyro.cli(main)
