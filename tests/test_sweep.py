"""Tests for the driver loops."""

from __future__ import annotations

import numpy as np
import pytest

import discperf._sweep as sweep_module
from discperf import (
    SweepParams,
    SweepPreset,
    find_collision,
    find_collision2,
    find_collision_or_none,
    sample_heights,
    set_globals,
    sweep,
    sweep_globals,
    sweep_vectorized,
)

from conftest import SUM_TOLERANCE


class TestSampleHeights:
    def test_range_and_count(self, params: SweepParams, heights: np.ndarray):
        assert heights.shape == (params.n_particles,)
        assert np.all(np.abs(heights) <= params.y_span)

    def test_seeded(self, params: SweepParams):
        np.testing.assert_array_equal(sample_heights(params), sample_heights(params))

    def test_different_seeds_differ(self):
        a = sample_heights(SweepParams(n_particles=100, seed=1))
        b = sample_heights(SweepParams(n_particles=100, seed=2))
        assert not np.array_equal(a, b)

    def test_rejects_negative_count(self):
        with pytest.raises(ValueError, match="n_particles"):
            sample_heights(SweepParams(n_particles=-1))


class TestSweep:
    @pytest.mark.parametrize(
        "finder", [find_collision, find_collision2, find_collision_or_none]
    )
    def test_finders_agree(self, heights: np.ndarray, finder):
        expected = sweep(heights, -2.0, 1.0, find_collision2)
        assert sweep(heights, -2.0, 1.0, finder) == expected

    def test_hit_fraction_matches_geometry(self, params: SweepParams, heights: np.ndarray):
        """Uniform heights over [-1.5, 1.5] hit a unit disc about 2/3 of the time."""
        result = sweep(heights, params.x0, params.radius)
        assert result.n_total == params.n_particles
        assert result.hit_fraction == pytest.approx(
            params.radius / params.y_span, abs=0.05
        )

    def test_counts_every_hit(self):
        ys = np.array([0.0, 0.5, -0.5, 2.0, 1.0])
        result = sweep(ys, -2.0, 1.0)
        assert result.n_hits == 3
        assert result.x_sum == pytest.approx(-1.0 - 2 * np.sqrt(0.75))

    def test_accepts_plain_list(self):
        ys = [0.0, 0.5, -0.5, 2.0, 1.0]
        assert sweep(ys, -2.0, 1.0) == sweep(np.array(ys), -2.0, 1.0)
        assert sweep(ys, -2.0, 1.0).n_hits == sweep_vectorized(ys, -2.0, 1.0).n_hits

    @pytest.mark.slow
    def test_default_preset_vectorized_matches_loop(self):
        params = SweepParams.from_preset(SweepPreset.DEFAULT)
        ys = sample_heights(params)
        loop = sweep(ys, params.x0, params.radius)
        vectorized = sweep_vectorized(ys, params.x0, params.radius)
        assert vectorized.n_hits == loop.n_hits
        assert vectorized.x_sum == pytest.approx(loop.x_sum, abs=SUM_TOLERANCE)

    def test_empty(self):
        result = sweep(np.empty(0), -2.0, 1.0)
        assert result.n_hits == 0
        assert result.hit_fraction == 0.0

    def test_vectorized_matches_loop(self, heights: np.ndarray):
        loop = sweep(heights, -2.0, 1.0)
        vectorized = sweep_vectorized(heights, -2.0, 1.0)
        assert vectorized.n_hits == loop.n_hits
        assert vectorized.n_total == loop.n_total
        assert vectorized.x_sum == pytest.approx(loop.x_sum, abs=SUM_TOLERANCE)

    def test_vectorized_empty(self):
        result = sweep_vectorized(np.empty(0), -2.0, 1.0)
        assert result.n_hits == 0
        assert result.n_total == 0


class TestSweepGlobals:
    @pytest.fixture(autouse=True)
    def reset_globals(self, monkeypatch):
        monkeypatch.setattr(sweep_module, "_YS", None)

    def test_requires_set_globals(self):
        with pytest.raises(RuntimeError, match="set_globals"):
            sweep_globals()

    @pytest.mark.parametrize("finder", [find_collision, find_collision2])
    def test_matches_local_loop(self, heights: np.ndarray, finder):
        set_globals(heights, -2.0, 1.0)
        assert sweep_globals(finder) == sweep(heights, -2.0, 1.0, finder)

    def test_accepts_plain_list(self):
        set_globals([0.0, 0.5, 3.0], -2.0, 1.0)
        assert sweep_globals() == sweep([0.0, 0.5, 3.0], -2.0, 1.0)

    def test_repeat_calls_do_not_accumulate(self, heights: np.ndarray):
        set_globals(heights, -2.0, 1.0)
        assert sweep_globals() == sweep_globals()
