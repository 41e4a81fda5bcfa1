"""Vectorized collision kernels.

Every kernel returns an (N, 2) float array with ``inf`` rows for misses, so
the output shape and dtype never depend on the data.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
import numpy as np
from jaxtyping import Array, Float


def _check_radius(r: float) -> None:
    if not np.isfinite(r) or r < 0:
        raise ValueError(f"Disc radius must be a finite non-negative number, got {r}")


def find_collisions_into(
    out: np.ndarray,
    x: float | np.ndarray,
    y: float | np.ndarray,
    r: float,
) -> np.ndarray:
    """Write collision points for a batch of particles into `out`.

    Args:
        out: Preallocated (N, 2) floating-point buffer, overwritten in place
        x: Starting x-coordinates, scalar or (N,)
        y: Impact heights, scalar or (N,)
        r: Disc radius

    Returns:
        `out`, filled with collision points (``inf`` rows for misses)

    Raises:
        ValueError: If `out` is not (N, 2) or the radius is invalid
        TypeError: If `out` does not have a floating-point dtype
    """
    _check_radius(r)
    if out.ndim != 2 or out.shape[1] != 2:
        raise ValueError(f"Output buffer must have shape (N, 2), got {out.shape}")
    if not np.issubdtype(out.dtype, np.floating):
        raise TypeError(f"Output buffer must be floating point, got {out.dtype}")

    n = out.shape[0]
    x = np.broadcast_to(np.asarray(x, dtype=out.dtype), (n,))
    y = np.broadcast_to(np.asarray(y, dtype=out.dtype), (n,))
    if np.isnan(x).any() or np.isnan(y).any():
        raise ValueError("Particle positions must not contain NaN")

    # Reuse the x column as scratch for h = r * sqrt((1 - s) * (1 + s)), s = |y| / r
    ay = np.abs(y)
    inside = ay < r
    h = out[:, 0]
    h[:] = 0.0
    np.divide(ay, r, out=h, where=inside)
    np.multiply(1.0 - h, 1.0 + h, out=h)
    np.sqrt(h, out=h)
    np.multiply(h, r, out=h)

    near = inside & (x <= -h)
    far = inside & ~near & (x < h)
    hit = near | far

    np.negative(h, out=h, where=near)
    h[~hit] = np.inf
    out[:, 1] = np.where(hit, y, np.inf)
    return out


def find_collisions(
    x: float | np.ndarray,
    y: float | np.ndarray,
    r: float,
) -> np.ndarray:
    """Collision points for a batch of particles.

    `x` and `y` broadcast against each other; the result is (N, 2) float64.
    """
    n = np.broadcast_shapes(np.shape(x), np.shape(y))
    if len(n) > 1:
        raise ValueError(f"Expected scalar or 1-D inputs, got shape {n}")
    out = np.empty((n[0] if n else 1, 2), dtype=np.float64)
    return find_collisions_into(out, x, y, r)


@jax.jit
def find_collisions_jax(
    x: Float[Array, "N"],
    y: Float[Array, "N"],
    r: Float[Array, ""] | float,
) -> Float[Array, "N 2"]:
    """JIT-compiled collision points for a batch of particles.

    Inputs are traced, so the radius is not validated here. Both branches of
    each `jnp.where` must share a shape and dtype, which is what keeps the
    compiled kernel type-stable.
    """
    x, y = jnp.broadcast_arrays(jnp.asarray(x), jnp.asarray(y))
    ay = jnp.abs(y)
    inside = ay < r
    s = jnp.where(inside, ay, 0.0) / jnp.where(r > 0.0, r, 1.0)
    h = r * jnp.sqrt((1.0 - s) * (1.0 + s))

    near = inside & (x <= -h)
    far = inside & ~near & (x < h)
    hit = near | far

    px = jnp.where(near, -h, jnp.where(far, h, jnp.inf))
    py = jnp.where(hit, y, jnp.inf)
    return jnp.stack([px, py], axis=-1)
