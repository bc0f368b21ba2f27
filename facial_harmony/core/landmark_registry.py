"""특징 이름 -> 랜드마크 인덱스 레지스트리"""

from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from ..config.constants import FEATURE_LANDMARKS, REQUIRED_FEATURES
from ..models import LandmarkSet, Point2D
from ..utils.exceptions import ConfigurationError


class LandmarkRegistry:
    """
    읽기 전용 특징 테이블 (featureName -> 랜드마크 인덱스 시퀀스)

    생성 시 한 번 검증하고 이후에는 변경되지 않는다.
    검출기의 인덱스 체계가 바뀌면 이 테이블만 교체하면 된다.
    """

    def __init__(
        self,
        features: Mapping[str, Sequence[int]] = FEATURE_LANDMARKS,
        required: Iterable[str] = REQUIRED_FEATURES,
    ):
        """
        Args:
            features: 특징 이름 -> 인덱스 시퀀스
            required: 반드시 정의되어야 하는 특징 이름

        Raises:
            ConfigurationError: 필수 특징 누락 또는 잘못된 인덱스
        """
        table = {}
        for name, indices in features.items():
            indices = tuple(indices)
            if not indices:
                raise ConfigurationError(f"Feature '{name}' has no landmark indices")
            for index in indices:
                if not isinstance(index, int) or isinstance(index, bool) or index < 0:
                    raise ConfigurationError(f"Feature '{name}' has an invalid landmark index: {index!r}")
            table[name] = indices

        missing = [name for name in required if name not in table]
        if missing:
            raise ConfigurationError(f"Landmark registry is missing required features: {missing}")

        self._features = MappingProxyType(table)
        self._all_indices = tuple(sorted({i for indices in table.values() for i in indices}))

    @property
    def features(self) -> Mapping[str, Tuple[int, ...]]:
        return self._features

    def indices(self, name: str) -> Tuple[int, ...]:
        """
        특징 이름으로 인덱스 조회

        Raises:
            ConfigurationError: 정의되지 않은 특징 이름
        """
        try:
            return self._features[name]
        except KeyError:
            raise ConfigurationError(f"Unknown facial feature: '{name}'")

    def index(self, name: str) -> int:
        """단일 포인트 특징의 인덱스 (여러 개면 첫 번째)"""
        return self.indices(name)[0]

    def point(self, landmarks: LandmarkSet, name: str) -> Point2D:
        return landmarks[self.index(name)]

    def points(self, landmarks: LandmarkSet, name: str) -> List[Point2D]:
        return [landmarks[i] for i in self.indices(name)]

    def all_indices(self) -> Tuple[int, ...]:
        """레지스트리가 참조하는 모든 인덱스 (정렬됨)"""
        return self._all_indices

    def __contains__(self, name: object) -> bool:
        return name in self._features

    def __repr__(self):
        return f"LandmarkRegistry({len(self._features)} features)"


# 프로세스 전역 상수 (MediaPipe FaceMesh 인덱스 체계)
DEFAULT_REGISTRY = LandmarkRegistry()


def get_registry(registry: Optional[LandmarkRegistry] = None) -> LandmarkRegistry:
    return registry if registry is not None else DEFAULT_REGISTRY
