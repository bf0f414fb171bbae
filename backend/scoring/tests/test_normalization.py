"""
Unit tests for the shared normalization helpers
"""
import math

import pytest

from scoring.normalization import (
    clamp,
    dryness,
    range_coverage_score,
    range_midpoint_score,
    ratio,
    to_percent,
)


class TestRangeMidpointScore:
    def test_midpoint_scores_one(self):
        assert range_midpoint_score(27.5, 20, 35) == pytest.approx(1.0)

    def test_range_edges_score_half(self):
        assert range_midpoint_score(20, 20, 35) == pytest.approx(0.5)
        assert range_midpoint_score(35, 20, 35) == pytest.approx(0.5)

    def test_symmetric_about_midpoint(self):
        for offset in (0.5, 3.0, 7.5, 12.0):
            assert range_midpoint_score(27.5 - offset, 20, 35) == pytest.approx(
                range_midpoint_score(27.5 + offset, 20, 35)
            )

    def test_zero_at_twice_half_range(self):
        assert range_midpoint_score(42.5, 20, 35) == 0.0
        assert range_midpoint_score(100, 20, 35) == 0.0

    def test_zero_width_range_does_not_divide_by_zero(self):
        assert range_midpoint_score(5.0, 5.0, 5.0) == pytest.approx(1.0)
        assert range_midpoint_score(6.0, 5.0, 5.0) == 0.0


class TestRangeCoverageScore:
    @pytest.mark.parametrize("value", [500, 750, 1000])
    def test_inside_range_scores_one(self, value):
        assert range_coverage_score(value, 500, 1000) == 1.0

    def test_decays_exponentially_outside(self):
        # 250 mm short of a 500 mm band = half a range width
        assert range_coverage_score(250, 500, 1000) == pytest.approx(math.exp(-0.75))
        assert range_coverage_score(1250, 500, 1000) == pytest.approx(math.exp(-0.75))

    def test_monotone_non_increasing_away_from_range(self):
        below = [range_coverage_score(v, 500, 1000) for v in (490, 400, 200, 0)]
        above = [range_coverage_score(v, 500, 1000) for v in (1010, 1500, 3000, 9000)]
        assert below == sorted(below, reverse=True)
        assert above == sorted(above, reverse=True)
        assert all(0.0 <= s < 1.0 for s in below + above)


def test_ratio_missing_value_counts_as_zero():
    assert ratio(None, 120) == 0.0


def test_ratio_clamps_to_ceiling():
    assert ratio(240, 120) == 1.0
    assert ratio(600, 120, hi=2.0) == 2.0
    assert ratio(-5, 120) == 0.0


def test_dryness():
    assert dryness(0.25, 0.25) == 0.0
    assert dryness(0.60, 0.25) == 0.0
    assert dryness(0.0, 0.25) == 1.0
    assert dryness(0.125, 0.25) == pytest.approx(0.5)


def test_clamp():
    assert clamp(1.7) == 1.0
    assert clamp(-0.2) == 0.0
    assert clamp(3.0, 0.0, 4.0) == 3.0


class TestToPercent:
    def test_rounds_half_up(self):
        assert to_percent(0.125) == 13
        assert to_percent(0.375) == 38
        assert to_percent(0.625) == 63
        assert to_percent(0.994) == 99

    def test_saturates(self):
        assert to_percent(2.5) == 100
        assert to_percent(-1.0) == 0

    def test_returns_int(self):
        assert isinstance(to_percent(0.5), int)
