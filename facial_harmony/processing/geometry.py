"""얼굴 기하학 계산 유틸리티"""

import math
from typing import Sequence

import numpy as np

from ..models import Point2D
from ..utils.exceptions import InvalidInputError
from ..utils.validators import validate_tolerance


class GeometryCalculator:
    """2D 포인트 기하학 계산 (모두 순수 함수)"""

    @staticmethod
    def distance(a: Point2D, b: Point2D) -> float:
        """
        두 포인트 간 유클리드 거리 계산

        Args:
            a, b: 두 개의 Point2D

        Returns:
            거리 (픽셀 단위, 항상 0 이상)
        """
        dx = b.x - a.x
        dy = b.y - a.y
        return math.sqrt(dx * dx + dy * dy)

    @staticmethod
    def centroid(points: Sequence[Point2D]) -> Point2D:
        """
        포인트 집합의 산술 평균

        Raises:
            InvalidInputError: 빈 시퀀스인 경우
        """
        if not points:
            raise InvalidInputError("Cannot compute the centroid of an empty point sequence")

        coords = np.array([[p.x, p.y] for p in points], dtype=np.float64)
        mean_x, mean_y = coords.mean(axis=0)
        return Point2D(float(mean_x), float(mean_y))

    @staticmethod
    def mirror_across_vertical_axis(point: Point2D, axis_x: float) -> Point2D:
        """x = axis_x 수직선 기준 좌우 반전"""
        return Point2D(2.0 * axis_x - point.x, point.y)

    @staticmethod
    def clamp(value: float, lo: float, hi: float) -> float:
        if lo > hi:
            raise InvalidInputError(f"clamp bounds are inverted: lo={lo}, hi={hi}")
        return max(lo, min(hi, value))

    @staticmethod
    def horizontal_extent(points: Sequence[Point2D]) -> float:
        """포인트 집합의 가로 폭 (max x - min x)"""
        if not points:
            raise InvalidInputError("Cannot compute the extent of an empty point sequence")
        xs = [p.x for p in points]
        return max(xs) - min(xs)

    @staticmethod
    def safe_denominator(value: float, min_value: float, epsilon: float) -> float:
        """
        분모 보호: min_value 미만이면 epsilon으로 대체

        퇴화된 랜드마크(얼굴 너비 ~ 0 등)에서도 NaN/inf 대신 정의된 값을 돌려준다.
        """
        if not math.isfinite(value) or value < min_value:
            return epsilon
        return value

    @staticmethod
    def score_from_error(error: float, tolerance: float) -> float:
        """
        편차를 0~100 점수로 변환 (Gaussian falloff)

        score = 100 * exp(-error^2 / (2 * tolerance^2))

        Args:
            error: 목표값 대비 편차 (부호 무시)
            tolerance: 지표별 scale 상수 (0 초과)

        Returns:
            0~100 점수 (error=0이면 100)

        Raises:
            InvalidInputError: tolerance <= 0 또는 error가 NaN인 경우
        """
        validate_tolerance(tolerance)
        if math.isnan(error):
            raise InvalidInputError("error must be a number, got NaN")

        error = abs(error)
        # z * z: 큰 값은 OverflowError 대신 inf -> exp(-inf) = 0
        z = error / tolerance
        exponent = -0.5 * z * z
        score = 100.0 * math.exp(exponent)
        return GeometryCalculator.clamp(score, 0.0, 100.0)
