"""입력 검증 유틸리티 함수"""

import math
from typing import TYPE_CHECKING

from .exceptions import InvalidInputError

if TYPE_CHECKING:
    from ..core.landmark_registry import LandmarkRegistry
    from ..models import LandmarkSet


def validate_tolerance(tolerance: float, param_name: str = "tolerance") -> None:
    """tolerance 값 검증 (0 초과의 유한한 실수)"""
    if tolerance is None or not math.isfinite(tolerance) or tolerance <= 0:
        raise InvalidInputError(f"{param_name} must be a positive finite number, got {tolerance}")


def validate_weight(weight: float, param_name: str = "weight") -> None:
    """가중치 값 검증 (0 이상의 유한한 실수)"""
    if weight is None or not math.isfinite(weight) or weight < 0:
        raise InvalidInputError(f"{param_name} must be a non-negative finite number, got {weight}")


def validate_landmark_set(landmarks: "LandmarkSet", registry: "LandmarkRegistry") -> None:
    """
    레지스트리가 참조하는 모든 랜드마크가 존재하고 유한한지 검증

    Args:
        landmarks: 검증할 LandmarkSet
        registry: 참조할 LandmarkRegistry

    Raises:
        InvalidInputError: 인덱스가 없거나 좌표가 NaN/inf인 경우
    """
    for index in registry.all_indices():
        if index not in landmarks:
            raise InvalidInputError(f"Landmark index {index} is missing from the landmark set")
        point = landmarks[index]
        if not point.is_finite():
            raise InvalidInputError(f"Landmark index {index} has a non-finite coordinate: {point}")
