"""Where a particle moving along +x first hits a disc centred at the origin.

Three finders share the same geometry and differ only in how they report a
miss:

- `find_collision` returns the point or ``False``. The return type depends
  on which branch runs, so every caller has to inspect it before use.
- `find_collision2` always returns a `CollisionPoint`, with `NO_COLLISION`
  ``(inf, inf)`` for a miss.
- `find_collision_or_none` returns ``None`` for a miss, which type checkers
  understand as ``CollisionPoint | None``.
"""

from __future__ import annotations

import math
from typing import NamedTuple


class CollisionPoint(NamedTuple):
    """Point on the disc boundary where the particle hits."""

    x: float
    y: float


NO_COLLISION = CollisionPoint(math.inf, math.inf)


def _hit_x(x: float, y: float, r: float) -> float | None:
    """Return the x-coordinate of the first boundary crossing, or None."""
    if not math.isfinite(r) or r < 0:
        raise ValueError(f"Disc radius must be a finite non-negative number, got {r}")
    if math.isnan(x) or math.isnan(y):
        raise ValueError(f"Particle position must not be NaN, got ({x}, {y})")

    # Tangent paths graze the disc without entering it
    if abs(y) >= r:
        return None

    # sqrt(r^2 - y^2) scaled by r so large radii do not overflow
    s = abs(y) / r
    h = r * math.sqrt((1.0 - s) * (1.0 + s))
    if x <= -h:
        return -h
    if x < h:
        # Starts inside the disc, leaves through the far side
        return h
    return None


def find_collision(x: float, y: float, r: float) -> CollisionPoint | bool:
    """Collision point of a particle at (x, y) with a disc of radius r.

    Returns ``False`` when the particle misses. Callers must check for
    ``False`` before unpacking; prefer `find_collision2`.
    """
    xc = _hit_x(x, y, r)
    if xc is None:
        return False
    return CollisionPoint(xc, float(y))


def find_collision2(x: float, y: float, r: float) -> CollisionPoint:
    """Collision point of a particle at (x, y) with a disc of radius r.

    Always returns a `CollisionPoint`; a miss is `NO_COLLISION`.
    """
    xc = _hit_x(x, y, r)
    if xc is None:
        return NO_COLLISION
    return CollisionPoint(xc, float(y))


def find_collision_or_none(x: float, y: float, r: float) -> CollisionPoint | None:
    """Collision point of a particle at (x, y), or None on a miss."""
    xc = _hit_x(x, y, r)
    if xc is None:
        return None
    return CollisionPoint(xc, float(y))


def is_collision(point: CollisionPoint | bool | None) -> bool:
    """Whether a finder result represents an actual hit.

    Accepts the output of any of the three finders.
    """
    if point is None or point is False:
        return False
    return math.isfinite(point[0]) and math.isfinite(point[1])
