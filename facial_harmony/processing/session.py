"""
Analysis Session - 검출기 출력을 분석 엔진에 전달하는 얇은 오케스트레이션 계층
"""
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..config.settings import MetricSettings, WeightConfiguration
from ..models import LandmarkSet, OverallResult
from ..utils.config_loader import Config, get_config
from ..utils.exceptions import ConfigurationError, DetectionError, FacialHarmonyException
from ..utils.json_exporter import to_json_dict
from ..utils.logging_config import get_logger
from .aggregator import WeightsLike, aggregate, resolve_weights
from .face_analyzer import FaceHarmonyAnalyzer

logger = get_logger(__name__)


class AnalysisSession:
    """
    얼굴 조화도 분석 세션

    검출기(detector)는 생성자로 주입한다. detect(image)가 랜드마크
    (시퀀스, 매핑 또는 LandmarkSet)를 돌려주거나 얼굴이 없으면 None을 돌려주면 된다.
    세션은 분석 사이에 상태를 유지하지 않는다.
    """

    def __init__(
        self,
        detector: Any = None,
        analyzer: Optional[FaceHarmonyAnalyzer] = None,
        weights: WeightsLike = None,
        config: Optional[Config] = None,
    ):
        """
        Args:
            detector: 랜드마크 검출기 (analyze_image 사용 시 필요)
            analyzer: 분석기 (None이면 config의 harmony 섹션으로 생성)
            weights: 기본 가중치 (None이면 config의 harmony.weights)
            config: 설정 (None이면 전역 config.yaml)
        """
        self.detector = detector

        if analyzer is None or weights is None:
            config = config or get_config()

        if analyzer is None:
            analyzer = FaceHarmonyAnalyzer(settings=MetricSettings.from_config(config))
        self.analyzer = analyzer

        if weights is None:
            self.weights = WeightConfiguration.from_config(config)
        else:
            self.weights = resolve_weights(weights)

    def analyze_landmarks(self, landmarks: Any, weights: WeightsLike = None) -> OverallResult:
        """
        랜드마크 집합 분석

        Args:
            landmarks: LandmarkSet 또는 LandmarkSet으로 변환 가능한 시퀀스/매핑
            weights: 이번 분석에만 사용할 가중치 (없는 키는 세션 가중치 사용)

        Returns:
            OverallResult

        Raises:
            InvalidInputError: 랜드마크 누락/비유한 값, 가중치 합 0
        """
        if not isinstance(landmarks, LandmarkSet):
            landmarks = LandmarkSet(landmarks)

        if weights is None:
            weight_config = self.weights
        elif isinstance(weights, WeightConfiguration):
            weight_config = weights
        else:
            weight_config = WeightConfiguration.from_mapping(weights, base=self.weights)

        metrics = self.analyzer.evaluate_all(landmarks)
        face_shape, _ = self.analyzer.classify_face_shape(landmarks)
        details = self.analyzer.measure(landmarks)

        result = aggregate(metrics, weight_config, face_shape=face_shape, details=details)

        logger.info(f"Harmony analysis complete: overall={result.overall:.1f} "
                    f"({', '.join(f'{name}={score:.1f}' for name, score in result.scores.items())})")
        return result

    def analyze_image(self, image: Any, weights: WeightsLike = None) -> OverallResult:
        """
        검출기로 랜드마크를 얻은 뒤 분석

        Raises:
            ConfigurationError: 검출기가 주입되지 않은 경우
            DetectionError: 얼굴이 검출되지 않은 경우
        """
        if self.detector is None:
            raise ConfigurationError("AnalysisSession has no landmark detector")

        landmarks = self.detector.detect(image)
        if landmarks is None or len(landmarks) == 0:
            raise DetectionError("No face detected. Please upload a clear front-facing photo.")

        return self.analyze_landmarks(landmarks, weights)

    def analyze_batch(
        self,
        items: Iterable[Tuple[str, Any]],
        weights: WeightsLike = None,
    ) -> List[Dict[str, Any]]:
        """
        여러 랜드마크 집합 일괄 분석

        실패한 항목은 건너뛰고 결과에 error를 기록한다.

        Args:
            items: (이름, 랜드마크) 쌍
            weights: 가중치

        Returns:
            항목별 결과 딕셔너리 리스트
        """
        results = []
        for name, landmarks in items:
            try:
                result = self.analyze_landmarks(landmarks, weights)
            except FacialHarmonyException as e:
                logger.warning(f"Skipping {name}: {e}")
                results.append({'filename': name, 'success': False, 'error': str(e)})
                continue

            results.append({'filename': name, 'success': True, 'analysis': to_json_dict(result, source=name)})

        return results
