"""데이터 모델 정의"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Mapping, Optional, Sequence, Tuple, Union

from .utils.exceptions import InvalidInputError


class FaceShape(Enum):
    """얼굴형 분류 (이마 상단-턱 길이 / 얼굴 너비 기반)"""
    ROUND = "round"
    SQUARE = "square"
    HEART = "heart"
    OVAL = "oval"
    OBLONG = "oblong"


@dataclass(frozen=True)
class Point2D:
    """이미지 픽셀 좌표계의 2D 포인트"""

    x: float
    y: float

    @classmethod
    def coerce(cls, value: Any) -> "Point2D":
        """
        Point2D, (x, y) 시퀀스, {'x':.., 'y':..} 딕셔너리를 Point2D로 변환

        Raises:
            InvalidInputError: 변환할 수 없는 형식인 경우
        """
        if isinstance(value, Point2D):
            return value
        if isinstance(value, Mapping):
            try:
                return cls(float(value['x']), float(value['y']))
            except (KeyError, TypeError, ValueError):
                raise InvalidInputError(f"Cannot convert {value!r} to a 2D point")
        if isinstance(value, (str, bytes)):
            raise InvalidInputError(f"Cannot convert {value!r} to a 2D point")
        try:
            x, y = value[0], value[1]
            return cls(float(x), float(y))
        except (IndexError, KeyError, TypeError, ValueError):
            raise InvalidInputError(f"Cannot convert {value!r} to a 2D point")

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


PointLike = Union[Point2D, Sequence[float], Mapping[str, float]]


class LandmarkSet:
    """
    검출기 인덱스 체계로 색인된 2D 랜드마크 집합

    시퀀스(위치 = 인덱스) 또는 {인덱스: 포인트} 매핑으로 생성한다.
    JSON 객체 키처럼 문자열 인덱스("33")도 정수로 변환한다.
    """

    def __init__(self, points: Union[Mapping[Any, PointLike], Sequence[PointLike]]):
        if isinstance(points, LandmarkSet):
            self._points: Dict[int, Point2D] = dict(points._points)
            return

        if isinstance(points, Mapping):
            items = points.items()
        elif isinstance(points, (str, bytes)) or not hasattr(points, '__iter__'):
            raise InvalidInputError(f"Landmarks must be a sequence or mapping of points, got {type(points).__name__}")
        else:
            items = enumerate(points)

        converted: Dict[int, Point2D] = {}
        for key, value in items:
            try:
                index = int(key)
            except (TypeError, ValueError):
                raise InvalidInputError(f"Landmark index must be an integer, got {key!r}")
            if index < 0:
                raise InvalidInputError(f"Landmark index must be non-negative, got {index}")
            converted[index] = Point2D.coerce(value)
        self._points = converted

    def __getitem__(self, index: int) -> Point2D:
        try:
            return self._points[index]
        except KeyError:
            raise InvalidInputError(f"Landmark index {index} is missing from the landmark set")

    def __contains__(self, index: object) -> bool:
        return index in self._points

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._points))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LandmarkSet):
            return NotImplemented
        return self._points == other._points

    def __repr__(self):
        return f"LandmarkSet({len(self._points)} points)"

    def to_dict(self) -> Dict[int, Tuple[float, float]]:
        """딕셔너리로 변환"""
        return {index: self._points[index].to_tuple() for index in sorted(self._points)}


@dataclass(frozen=True)
class MetricResult:
    """단일 지표 결과 (0~100 점수 + 원시 측정값)"""

    name: str
    score: float
    raw_value: float          # 정규화 전 측정값 (비율 또는 평균 오차)
    target: Optional[float] = None  # 목표값 (대칭은 0)
    error: float = 0.0        # score 계산에 사용된 편차

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환"""
        return {
            'name': self.name,
            'score': round(self.score, 2),
            'raw_value': round(self.raw_value, 4),
            'target': self.target,
            'error': round(self.error, 4),
        }


@dataclass(frozen=True)
class FaceMeasurements:
    """점수 계산에 사용된 픽셀 단위 측정값"""

    face_width: float = 0.0
    face_length: float = 0.0        # 보정 계수 적용된 길이
    average_eye_width: float = 0.0
    inner_corner_gap: float = 0.0
    face_ratio: float = 0.0         # 이마 상단-턱 / 얼굴 너비 (얼굴형 분류용)

    def to_dict(self) -> Dict[str, float]:
        return {
            'face_width': round(self.face_width, 1),
            'face_length': round(self.face_length, 1),
            'average_eye_width': round(self.average_eye_width, 1),
            'inner_corner_gap': round(self.inner_corner_gap, 1),
            'face_ratio': round(self.face_ratio, 3),
        }


@dataclass(frozen=True)
class OverallResult:
    """분석 최종 결과 (종합 점수 + 지표별 결과)"""

    overall: float
    metrics: Tuple[MetricResult, ...]
    weights: Dict[str, float] = field(default_factory=dict)
    face_shape: Optional[FaceShape] = None
    details: FaceMeasurements = field(default_factory=FaceMeasurements)

    def metric(self, name: str) -> MetricResult:
        """이름으로 지표 결과 반환"""
        for result in self.metrics:
            if result.name == name:
                return result
        raise KeyError(name)

    @property
    def scores(self) -> Dict[str, float]:
        return {result.name: result.score for result in self.metrics}

    @property
    def description(self) -> str:
        from .processing.aggregator import describe_score
        return describe_score(self.overall)

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환"""
        return {
            'overall': round(self.overall, 2),
            'description': self.description,
            'metrics': {result.name: result.to_dict() for result in self.metrics},
            'weights': dict(self.weights),
            'face_shape': self.face_shape.value if self.face_shape else None,
            'details': self.details.to_dict(),
        }
