"""Configuration for collision sweeps."""

from __future__ import annotations

from enum import Enum

import jax_dataclasses as jdc


class SweepPreset(Enum):
    """Preset sizes for a collision sweep.

    SMALL: Quick runs for interactive exploration and tests.

    DEFAULT: Large enough for timing differences to be visible.

    LARGE: Long runs where per-call overhead dominates everything else.
    """

    SMALL = "small"
    DEFAULT = "default"
    LARGE = "large"


@jdc.pytree_dataclass
class SweepParams:
    """Parameters for a sweep of particles fired at a disc."""

    radius: float = 1.0
    """Radius of the disc centred at the origin."""

    x0: float = -2.0
    """Starting x-coordinate shared by every particle."""

    n_particles: jdc.Static[int] = 10_000
    """Number of particles (impact heights) in the sweep."""

    y_span: float = 1.5
    """Heights are drawn uniformly from [-y_span, y_span].

    Values above `radius` make a fraction of the particles miss, which is
    what exercises the no-collision branch.
    """

    seed: jdc.Static[int] = 0
    """Seed for the height generator."""

    n_runs: jdc.Static[int] = 5
    """Repetitions used when timing a sweep."""

    @classmethod
    def from_preset(cls, preset: SweepPreset) -> "SweepParams":
        """Create params from a preset.

        Args:
            preset: Base preset to use

        Returns:
            SweepParams with preset values
        """
        return jdc.replace(_PRESET_PARAMS[preset])


# Preset definitions
_PRESET_PARAMS: dict[SweepPreset, SweepParams] = {
    SweepPreset.SMALL: SweepParams(
        n_particles=1_000,
        n_runs=2,
    ),
    SweepPreset.DEFAULT: SweepParams(),
    SweepPreset.LARGE: SweepParams(
        n_particles=1_000_000,
        y_span=2.0,  # Half the particles miss
        n_runs=3,  # Each run is already slow in the pure-Python loop
    ),
}
