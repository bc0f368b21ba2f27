"""
Facial Harmony Analysis
얼굴 랜드마크 기반 조화도(대칭/비율/간격) 점수 엔진
"""

__version__ = "0.1.0"

from .config.settings import MetricSettings, WeightConfiguration
from .core.landmark_registry import DEFAULT_REGISTRY, LandmarkRegistry
from .models import FaceShape, LandmarkSet, MetricResult, OverallResult, Point2D
from .processing.aggregator import aggregate, aggregate_scores, describe_score
from .processing.face_analyzer import FaceHarmonyAnalyzer
from .processing.geometry import GeometryCalculator
from .processing.session import AnalysisSession
from .utils.exceptions import (
    ConfigurationError,
    DetectionError,
    FacialHarmonyException,
    InvalidInputError,
)
