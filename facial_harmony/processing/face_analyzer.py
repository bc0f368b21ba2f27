"""얼굴 조화도 지표 분석 (대칭, 황금비, 5등분, 눈 간격)"""

from typing import Optional, Tuple

from ..config.constants import (
    EYE_GAP,
    FACE_SHAPE_THRESHOLDS,
    FIFTHS,
    PROPORTION,
    SYMMETRY,
    SYMMETRY_PAIRS,
)
from ..config.settings import MetricSettings
from ..core.landmark_registry import LandmarkRegistry, get_registry
from ..models import FaceMeasurements, FaceShape, LandmarkSet, MetricResult
from ..utils.logging_config import get_logger
from ..utils.validators import validate_landmark_set
from .geometry import GeometryCalculator

logger = get_logger(__name__)


class FaceHarmonyAnalyzer:
    """
    얼굴 조화도 지표 분석 클래스

    기능:
    - 좌우 대칭 (눈꼬리/내안각/눈썹/콧볼을 미러링해 비교)
    - 황금비 (얼굴 길이 / 얼굴 너비 vs 1.618)
    - 5등분 법칙 (얼굴 너비 / 평균 눈 너비 vs 5.0)
    - 눈 간격 (내안각 간 거리 / 평균 눈 너비 vs 1.0)
    - 얼굴형 분류

    모든 evaluate_* 메서드는 입력에 대한 순수 함수다. 같은 입력이면 같은 결과를 돌려준다.
    """

    def __init__(
        self,
        settings: Optional[MetricSettings] = None,
        registry: Optional[LandmarkRegistry] = None,
    ):
        """
        FaceHarmonyAnalyzer 초기화

        Args:
            settings: 지표 계산 상수 (기본: MetricSettings())
            registry: 랜드마크 레지스트리 (기본: MediaPipe FaceMesh 레지스트리)
        """
        self.settings = settings or MetricSettings()
        self.registry = get_registry(registry)

    def _denominator(self, value: float) -> float:
        return GeometryCalculator.safe_denominator(
            value, self.settings.min_denominator, self.settings.denominator_epsilon
        )

    def validate(self, landmarks: LandmarkSet) -> None:
        """레지스트리가 참조하는 랜드마크가 모두 있고 유한한지 확인"""
        validate_landmark_set(landmarks, self.registry)

    # ------------------------------------------------------------------
    # 공통 측정값
    # ------------------------------------------------------------------

    def face_width(self, landmarks: LandmarkSet) -> float:
        """광대 양 끝 사이 거리"""
        left = self.registry.point(landmarks, 'left_face_width')
        right = self.registry.point(landmarks, 'right_face_width')
        return GeometryCalculator.distance(left, right)

    def face_length(self, landmarks: LandmarkSet) -> float:
        """콧대 상단-턱 거리에 보정 계수를 곱한 얼굴 길이"""
        bridge = self.registry.point(landmarks, 'nose_bridge_top')
        chin = self.registry.point(landmarks, 'chin')
        return GeometryCalculator.distance(bridge, chin) * self.settings.face_length_correction

    def eye_widths(self, landmarks: LandmarkSet) -> Tuple[float, float]:
        """눈 윤곽의 가로 폭 (왼쪽, 오른쪽)"""
        left = GeometryCalculator.horizontal_extent(self.registry.points(landmarks, 'left_eye_contour'))
        right = GeometryCalculator.horizontal_extent(self.registry.points(landmarks, 'right_eye_contour'))
        return left, right

    def average_eye_width(self, landmarks: LandmarkSet) -> float:
        left, right = self.eye_widths(landmarks)
        return (left + right) / 2.0

    def inner_corner_gap(self, landmarks: LandmarkSet) -> float:
        left = self.registry.point(landmarks, 'left_eye_inner')
        right = self.registry.point(landmarks, 'right_eye_inner')
        return GeometryCalculator.distance(left, right)

    def mirror_axis_x(self, landmarks: LandmarkSet) -> float:
        """두 눈 중심의 중점 x 좌표 (대칭 비교 기준선)"""
        left_center = GeometryCalculator.centroid(self.registry.points(landmarks, 'left_eye_contour'))
        right_center = GeometryCalculator.centroid(self.registry.points(landmarks, 'right_eye_contour'))
        return (left_center.x + right_center.x) / 2.0

    # ------------------------------------------------------------------
    # 지표
    # ------------------------------------------------------------------

    def evaluate_symmetry(self, landmarks: LandmarkSet) -> MetricResult:
        """
        좌우 대칭 점수

        오른쪽 특징점을 눈 중심 중점 기준으로 미러링한 뒤 왼쪽 특징점과의 평균 거리를
        얼굴 너비로 나눈 값을 오차로 사용한다.

        Args:
            landmarks: 얼굴 랜드마크

        Returns:
            MetricResult (raw_value = 얼굴 너비 대비 평균 오차)
        """
        axis_x = self.mirror_axis_x(landmarks)

        deviations = []
        for left_name, right_name in SYMMETRY_PAIRS:
            left = self.registry.point(landmarks, left_name)
            right = self.registry.point(landmarks, right_name)
            mirrored = GeometryCalculator.mirror_across_vertical_axis(right, axis_x)
            deviations.append(GeometryCalculator.distance(left, mirrored))

        mean_deviation = sum(deviations) / len(deviations)
        error = mean_deviation / self._denominator(self.face_width(landmarks))
        score = GeometryCalculator.score_from_error(error, self.settings.symmetry_tolerance)

        logger.debug(f"Symmetry: axis_x={axis_x:.2f}, mean deviation={mean_deviation:.3f}px, "
                     f"normalized error={error:.4f}, score={score:.2f}")

        return MetricResult(name=SYMMETRY, score=score, raw_value=error, target=0.0, error=error)

    def evaluate_proportion(self, landmarks: LandmarkSet) -> MetricResult:
        """황금비 점수 (얼굴 길이 / 얼굴 너비, 목표값 대비 상대 편차)"""
        target = self.settings.golden_ratio
        ratio = self.face_length(landmarks) / self._denominator(self.face_width(landmarks))
        error = abs(ratio - target) / target
        score = GeometryCalculator.score_from_error(error, self.settings.proportion_tolerance)

        logger.debug(f"Proportion: length/width={ratio:.4f} (target {target}), score={score:.2f}")

        return MetricResult(name=PROPORTION, score=score, raw_value=ratio, target=target, error=error)

    def evaluate_fifths(self, landmarks: LandmarkSet) -> MetricResult:
        """5등분 법칙 점수 (얼굴 너비 / 평균 눈 너비, 목표값 대비 상대 편차)"""
        target = self.settings.fifths_target
        ratio = self.face_width(landmarks) / self._denominator(self.average_eye_width(landmarks))
        error = abs(ratio - target) / target
        score = GeometryCalculator.score_from_error(error, self.settings.fifths_tolerance)

        logger.debug(f"Fifths: width/eye={ratio:.4f} (target {target}), score={score:.2f}")

        return MetricResult(name=FIFTHS, score=score, raw_value=ratio, target=target, error=error)

    def evaluate_eye_gap(self, landmarks: LandmarkSet) -> MetricResult:
        """눈 간격 점수 (내안각 거리 / 평균 눈 너비, 목표값 대비 절대 편차)"""
        target = self.settings.eye_gap_target
        ratio = self.inner_corner_gap(landmarks) / self._denominator(self.average_eye_width(landmarks))
        error = abs(ratio - target)
        score = GeometryCalculator.score_from_error(error, self.settings.eye_gap_tolerance)

        logger.debug(f"Eye gap: gap/eye={ratio:.4f} (target {target}), score={score:.2f}")

        return MetricResult(name=EYE_GAP, score=score, raw_value=ratio, target=target, error=error)

    def evaluate_all(self, landmarks: LandmarkSet) -> Tuple[MetricResult, ...]:
        """
        네 가지 지표 일괄 계산

        Raises:
            InvalidInputError: 필요한 랜드마크가 없거나 유한하지 않은 경우
        """
        self.validate(landmarks)
        return (
            self.evaluate_symmetry(landmarks),
            self.evaluate_proportion(landmarks),
            self.evaluate_fifths(landmarks),
            self.evaluate_eye_gap(landmarks),
        )

    # ------------------------------------------------------------------
    # 얼굴형
    # ------------------------------------------------------------------

    def face_ratio(self, landmarks: LandmarkSet) -> float:
        """이마 상단-턱 거리 / 얼굴 너비"""
        forehead = self.registry.point(landmarks, 'forehead_top')
        chin = self.registry.point(landmarks, 'chin')
        height = GeometryCalculator.distance(forehead, chin)
        return height / self._denominator(self.face_width(landmarks))

    def classify_face_shape(self, landmarks: LandmarkSet) -> Tuple[FaceShape, float]:
        """
        종횡비 기반 얼굴형 분류

        Returns:
            (FaceShape, 종횡비)
        """
        ratio = self.face_ratio(landmarks)
        return self._classify_face_shape(ratio), ratio

    @staticmethod
    def _classify_face_shape(ratio: float) -> FaceShape:
        for upper, shape in FACE_SHAPE_THRESHOLDS:
            if ratio < upper:
                return FaceShape(shape)
        return FaceShape.OBLONG

    def measure(self, landmarks: LandmarkSet) -> FaceMeasurements:
        """표시/디버깅용 픽셀 측정값"""
        return FaceMeasurements(
            face_width=self.face_width(landmarks),
            face_length=self.face_length(landmarks),
            average_eye_width=self.average_eye_width(landmarks),
            inner_corner_gap=self.inner_corner_gap(landmarks),
            face_ratio=self.face_ratio(landmarks),
        )
