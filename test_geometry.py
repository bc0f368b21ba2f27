"""GeometryCalculator 테스트"""

import math

import pytest

from facial_harmony.models import Point2D
from facial_harmony.processing.geometry import GeometryCalculator
from facial_harmony.utils.exceptions import InvalidInputError


def test_distance():
    assert GeometryCalculator.distance(Point2D(0, 0), Point2D(3, 4)) == 5.0
    assert GeometryCalculator.distance(Point2D(1.5, -2), Point2D(1.5, -2)) == 0.0
    assert GeometryCalculator.distance(Point2D(3, 4), Point2D(0, 0)) == 5.0


def test_centroid():
    center = GeometryCalculator.centroid([Point2D(0, 0), Point2D(4, 0), Point2D(4, 2), Point2D(0, 2)])
    assert center == Point2D(2.0, 1.0)


def test_centroid_of_empty_sequence_fails():
    with pytest.raises(InvalidInputError):
        GeometryCalculator.centroid([])


def test_mirror_across_vertical_axis():
    mirrored = GeometryCalculator.mirror_across_vertical_axis(Point2D(230, 50), 200)
    assert mirrored == Point2D(170, 50)
    # 축 위의 점은 그대로
    assert GeometryCalculator.mirror_across_vertical_axis(Point2D(200, 7), 200) == Point2D(200, 7)


def test_clamp():
    assert GeometryCalculator.clamp(120, 0, 100) == 100
    assert GeometryCalculator.clamp(-3, 0, 100) == 0
    assert GeometryCalculator.clamp(42.5, 0, 100) == 42.5
    with pytest.raises(InvalidInputError):
        GeometryCalculator.clamp(1, 10, 0)


def test_horizontal_extent():
    points = [Point2D(170, 0), Point2D(190, 5), Point2D(180, -5)]
    assert GeometryCalculator.horizontal_extent(points) == 20


def test_safe_denominator():
    assert GeometryCalculator.safe_denominator(0.0, 1e-6, 1e-6) == 1e-6
    assert GeometryCalculator.safe_denominator(1e-9, 1e-6, 1e-6) == 1e-6
    assert GeometryCalculator.safe_denominator(100.0, 1e-6, 1e-6) == 100.0


@pytest.mark.parametrize("tolerance", [0.04, 0.15, 1.0, 25.0])
def test_score_from_zero_error_is_100(tolerance):
    assert GeometryCalculator.score_from_error(0.0, tolerance) == 100.0


def test_score_from_error_matches_gaussian():
    score = GeometryCalculator.score_from_error(0.15, 0.15)
    assert score == pytest.approx(100 * math.exp(-0.5))


def test_score_from_error_is_monotonic():
    errors = [0.0, 0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 10.0, 1e6]
    scores = [GeometryCalculator.score_from_error(e, 0.18) for e in errors]
    assert all(a >= b for a, b in zip(scores, scores[1:]))
    assert all(0.0 <= s <= 100.0 for s in scores)


def test_score_from_error_uses_magnitude():
    assert GeometryCalculator.score_from_error(-0.1, 0.25) == GeometryCalculator.score_from_error(0.1, 0.25)


def test_score_from_huge_error_is_defined():
    score = GeometryCalculator.score_from_error(1e200, 0.04)
    assert score == 0.0
    assert GeometryCalculator.score_from_error(math.inf, 0.04) == 0.0


@pytest.mark.parametrize("tolerance", [0.0, -0.1, math.nan, math.inf])
def test_score_from_error_rejects_bad_tolerance(tolerance):
    with pytest.raises(InvalidInputError):
        GeometryCalculator.score_from_error(0.1, tolerance)


def test_score_from_nan_error_fails():
    with pytest.raises(InvalidInputError):
        GeometryCalculator.score_from_error(math.nan, 0.1)
