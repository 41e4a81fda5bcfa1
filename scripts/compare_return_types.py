"""Compare collision finders that report a miss in different ways."""

from __future__ import annotations

from typing import Literal

import jax.numpy as jnp
import jax_dataclasses as jdc
import numpy as np
import tyro
from loguru import logger

from discperf import (
    SweepParams,
    SweepPreset,
    find_collision,
    find_collision2,
    find_collision_or_none,
    find_collisions_jax,
    is_type_stable,
    sample_heights,
    sweep,
    sweep_vectorized,
    time_call,
)


def main(
    preset: Literal["small", "default", "large"] = "default",
    radius: float | None = None,
) -> None:
    """Time the driver loop with each finder and the batch kernels.

    Args:
        preset: Sweep size preset.
        radius: Override the disc radius from the preset.

    Examples:
        python scripts/compare_return_types.py
        python scripts/compare_return_types.py --preset large --radius 0.5
    """
    params = SweepParams.from_preset(SweepPreset(preset))
    if radius is not None:
        params = jdc.replace(params, radius=radius)

    logger.info(f"Sampling {params.n_particles} heights (seed={params.seed})...")
    ys = sample_heights(params)
    x, r = params.x0, params.radius

    # A handful of heights that reach both branches
    samples = [(x, y, r) for y in (0.0, 0.5 * r, r, 2.0 * r)]

    print("\n" + "=" * 72)
    print(f"{'Finder':>24} | {'Stable':>6} | {'Hits':>8} | {'Mean ms':>10} | {'Min ms':>10}")
    print("-" * 72)

    for finder in (find_collision, find_collision2, find_collision_or_none):
        stable = is_type_stable(finder, samples)
        result = sweep(ys, x, r, finder)
        stats = time_call(sweep, ys, x, r, finder, n_runs=params.n_runs)
        print(
            f"{finder.__name__:>24} | {str(stable):>6} | {result.n_hits:>8} | "
            f"{stats.mean_ms:>10.3f} | {stats.min_ms:>10.3f}"
        )

    result = sweep_vectorized(ys, x, r)
    stats = time_call(sweep_vectorized, ys, x, r, n_runs=params.n_runs)
    print(
        f"{'numpy kernel':>24} | {'True':>6} | {result.n_hits:>8} | "
        f"{stats.mean_ms:>10.3f} | {stats.min_ms:>10.3f}"
    )

    ys_jax = jnp.asarray(ys, dtype=jnp.float32)
    x_jax = jnp.full_like(ys_jax, x)
    points = find_collisions_jax(x_jax, ys_jax, r).block_until_ready()  # Compile
    n_hits = int(np.isfinite(np.asarray(points[:, 0])).sum())
    stats = time_call(
        lambda: find_collisions_jax(x_jax, ys_jax, r).block_until_ready(),
        n_runs=params.n_runs,
    )
    print(
        f"{'jax kernel':>24} | {'True':>6} | {n_hits:>8} | "
        f"{stats.mean_ms:>10.3f} | {stats.min_ms:>10.3f}"
    )
    print("=" * 72)


if __name__ == "__main__":
    tyro.cli(main)
