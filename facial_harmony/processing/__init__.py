"""Processing layer components"""

from .aggregator import aggregate, aggregate_scores, describe_score
from .face_analyzer import FaceHarmonyAnalyzer
from .geometry import GeometryCalculator
from .session import AnalysisSession

__all__ = [
    'GeometryCalculator',
    'FaceHarmonyAnalyzer',
    'aggregate',
    'aggregate_scores',
    'describe_score',
    'AnalysisSession',
]
