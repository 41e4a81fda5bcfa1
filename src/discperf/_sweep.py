"""Driver loops that fire many particles at the disc."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np
from loguru import logger

from ._batch import find_collisions
from ._collision import CollisionPoint, find_collision2, is_collision
from ._config import SweepParams

Finder = Callable[[float, float, float], "CollisionPoint | bool | None"]


@dataclass(frozen=True)
class SweepResult:
    """Aggregate of a sweep over many particles."""

    n_hits: int
    x_sum: float  # Sum of hit x-coordinates
    n_total: int

    @property
    def hit_fraction(self) -> float:
        if self.n_total == 0:
            return 0.0
        return self.n_hits / self.n_total


def sample_heights(params: SweepParams) -> np.ndarray:
    """Draw `n_particles` impact heights uniformly from [-y_span, y_span]."""
    if params.n_particles < 0:
        raise ValueError(f"n_particles must be non-negative, got {params.n_particles}")
    rng = np.random.default_rng(params.seed)
    return rng.uniform(-params.y_span, params.y_span, size=params.n_particles)


def sweep(
    ys: np.ndarray,
    x: float,
    r: float,
    finder: Finder = find_collision2,
) -> SweepResult:
    """Fire one particle per height in `ys` and tally the hits.

    Works with any of the scalar finders; results are identical across them.
    """
    n_hits = 0
    x_sum = 0.0
    for y in np.asarray(ys).tolist():
        point = finder(x, y, r)
        if is_collision(point):
            n_hits += 1
            x_sum += point[0]
    return SweepResult(n_hits=n_hits, x_sum=x_sum, n_total=len(ys))


def sweep_vectorized(ys: np.ndarray, x: float, r: float) -> SweepResult:
    """Same tally as `sweep`, computed with the batch kernel."""
    points = find_collisions(x, ys, r)
    hit = np.isfinite(points[:, 0])
    return SweepResult(
        n_hits=int(hit.sum()),
        x_sum=float(points[hit, 0].sum()),
        n_total=len(ys),
    )


# Module-level state read by `sweep_globals`
_YS: np.ndarray | None = None
_X: float = 0.0
_R: float = 0.0
_N_HITS: int = 0
_X_SUM: float = 0.0


def set_globals(ys: np.ndarray, x: float, r: float) -> None:
    """Store sweep inputs in module globals for `sweep_globals`."""
    global _YS, _X, _R
    _YS = np.asarray(ys)
    _X = x
    _R = r
    logger.debug(f"Set sweep globals: {len(ys)} heights, x={x}, r={r}")


def sweep_globals(finder: Finder = find_collision2) -> SweepResult:
    """`sweep` rewritten against module globals instead of arguments.

    Every iteration looks `_X`, `_R` and the counters up through the module
    dictionary, which is what makes it slower than `sweep`.

    Raises:
        RuntimeError: If `set_globals` has not been called
    """
    global _N_HITS, _X_SUM
    if _YS is None:
        raise RuntimeError("Call set_globals() before sweep_globals()")

    _N_HITS = 0
    _X_SUM = 0.0
    for y in _YS.tolist():
        point = finder(_X, y, _R)
        if is_collision(point):
            _N_HITS += 1
            _X_SUM += point[0]
    return SweepResult(n_hits=_N_HITS, x_sum=_X_SUM, n_total=len(_YS))

