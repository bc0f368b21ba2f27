"""지표 점수 가중 집계"""

from typing import Any, Mapping, Optional, Sequence, Union

from ..config.constants import DEFAULT_SCORE_DESCRIPTION, SCORE_DESCRIPTIONS
from ..config.settings import WeightConfiguration
from ..models import FaceMeasurements, FaceShape, MetricResult, OverallResult
from ..utils.exceptions import InvalidInputError

WeightsLike = Union[WeightConfiguration, Mapping[str, Any], None]


def resolve_weights(weights: WeightsLike) -> WeightConfiguration:
    """
    가중치 입력을 WeightConfiguration으로 변환

    None이면 문서화된 기본 가중치(symmetry 40, proportion 25, fifths 20, eye_gap 15)를 사용한다.
    """
    if weights is None:
        return WeightConfiguration.default()
    if isinstance(weights, WeightConfiguration):
        return weights
    return WeightConfiguration.from_mapping(weights)


def aggregate_scores(metrics: Sequence[MetricResult], weights: WeightsLike = None) -> float:
    """
    가중 평균 점수 계산

    overall = sum(score_i * weight_i) / sum(weight_i)

    각 지표 점수가 이미 0~100이므로 결과도 0~100이다. 별도 clamp는 하지 않는다.

    Args:
        metrics: 지표 결과 리스트
        weights: 가중치 (None이면 기본 가중치)

    Returns:
        종합 점수

    Raises:
        InvalidInputError: 가중치 합이 0이거나 지표가 없는 경우
    """
    if not metrics:
        raise InvalidInputError("No metric results to aggregate")

    config = resolve_weights(weights)

    weighted_sum = 0.0
    weight_total = 0.0
    for result in metrics:
        weight = config.weight_for(result.name)
        weighted_sum += result.score * weight
        weight_total += weight

    if weight_total <= 0:
        raise InvalidInputError(f"Sum of metric weights must be positive, got {weight_total}")

    return weighted_sum / weight_total


def aggregate(
    metrics: Sequence[MetricResult],
    weights: WeightsLike = None,
    face_shape: Optional[FaceShape] = None,
    details: Optional[FaceMeasurements] = None,
) -> OverallResult:
    """지표 결과를 OverallResult로 묶는다"""
    config = resolve_weights(weights)
    overall = aggregate_scores(metrics, config)
    return OverallResult(
        overall=overall,
        metrics=tuple(metrics),
        weights=config.as_dict(),
        face_shape=face_shape,
        details=details if details is not None else FaceMeasurements(),
    )


def describe_score(score: float) -> str:
    """종합 점수 구간 설명"""
    for lower, text in SCORE_DESCRIPTIONS:
        if score >= lower:
            return text
    return DEFAULT_SCORE_DESCRIPTION
