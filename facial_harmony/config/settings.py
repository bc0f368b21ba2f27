"""분석 설정 클래스 정의"""

import math
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

from . import constants
from ..utils.exceptions import InvalidInputError
from ..utils.validators import validate_tolerance, validate_weight


@dataclass(frozen=True)
class MetricSettings:
    """지표 계산 상수 (tolerance, 목표값, 보정 계수)"""

    symmetry_tolerance: float = constants.DEFAULT_TOLERANCES[constants.SYMMETRY]
    proportion_tolerance: float = constants.DEFAULT_TOLERANCES[constants.PROPORTION]
    fifths_tolerance: float = constants.DEFAULT_TOLERANCES[constants.FIFTHS]
    eye_gap_tolerance: float = constants.DEFAULT_TOLERANCES[constants.EYE_GAP]

    golden_ratio: float = constants.GOLDEN_RATIO
    fifths_target: float = constants.FIFTHS_TARGET
    eye_gap_target: float = constants.EYE_GAP_TARGET

    face_length_correction: float = constants.FACE_LENGTH_CORRECTION
    min_denominator: float = constants.MIN_DENOMINATOR
    denominator_epsilon: float = constants.DENOMINATOR_EPSILON

    def __post_init__(self):
        """설정 값 검증"""
        validate_tolerance(self.symmetry_tolerance, 'symmetry_tolerance')
        validate_tolerance(self.proportion_tolerance, 'proportion_tolerance')
        validate_tolerance(self.fifths_tolerance, 'fifths_tolerance')
        validate_tolerance(self.eye_gap_tolerance, 'eye_gap_tolerance')
        validate_tolerance(self.golden_ratio, 'golden_ratio')
        validate_tolerance(self.fifths_target, 'fifths_target')
        validate_tolerance(self.face_length_correction, 'face_length_correction')
        validate_tolerance(self.denominator_epsilon, 'denominator_epsilon')
        if not math.isfinite(self.eye_gap_target) or self.eye_gap_target < 0:
            raise InvalidInputError(f"eye_gap_target must be non-negative, got {self.eye_gap_target}")
        if not math.isfinite(self.min_denominator) or self.min_denominator < 0:
            raise InvalidInputError(f"min_denominator must be non-negative, got {self.min_denominator}")

    def tolerance_for(self, metric: str) -> float:
        """지표 이름으로 tolerance 반환"""
        return getattr(self, f"{metric}_tolerance")

    @classmethod
    def from_config(cls, config) -> "MetricSettings":
        """
        config.yaml의 harmony 섹션으로 MetricSettings 생성

        Args:
            config: utils.config_loader.Config 인스턴스

        Returns:
            MetricSettings (섹션에 없는 값은 기본값 사용)
        """
        defaults = cls()
        tolerances = config.get('harmony.tolerances', {}) or {}
        targets = config.get('harmony.targets', {}) or {}

        return cls(
            symmetry_tolerance=float(tolerances.get(constants.SYMMETRY, defaults.symmetry_tolerance)),
            proportion_tolerance=float(tolerances.get(constants.PROPORTION, defaults.proportion_tolerance)),
            fifths_tolerance=float(tolerances.get(constants.FIFTHS, defaults.fifths_tolerance)),
            eye_gap_tolerance=float(tolerances.get(constants.EYE_GAP, defaults.eye_gap_tolerance)),
            golden_ratio=float(targets.get('golden_ratio', defaults.golden_ratio)),
            fifths_target=float(targets.get('fifths', defaults.fifths_target)),
            eye_gap_target=float(targets.get('eye_gap', defaults.eye_gap_target)),
            face_length_correction=float(
                config.get('harmony.face_length_correction', defaults.face_length_correction)
            ),
            min_denominator=float(config.get('harmony.min_denominator', defaults.min_denominator)),
            denominator_epsilon=float(
                config.get('harmony.denominator_epsilon', defaults.denominator_epsilon)
            ),
        )


# 외부 설정에서 허용하는 키 -> 내부 지표 이름
_WEIGHT_KEYS: Dict[str, str] = {
    'symmetry': constants.SYMMETRY,
    'proportion': constants.PROPORTION,
    'fifths': constants.FIFTHS,
    'eyeGap': constants.EYE_GAP,
    'eye_gap': constants.EYE_GAP,
}


@dataclass(frozen=True)
class WeightConfiguration:
    """
    지표별 가중치

    합이 특정 값일 필요는 없다 (집계 시 가중치 합으로 정규화).
    기본값: symmetry 40, proportion 25, fifths 20, eye_gap 15
    """

    symmetry: float = constants.DEFAULT_WEIGHTS[constants.SYMMETRY]
    proportion: float = constants.DEFAULT_WEIGHTS[constants.PROPORTION]
    fifths: float = constants.DEFAULT_WEIGHTS[constants.FIFTHS]
    eye_gap: float = constants.DEFAULT_WEIGHTS[constants.EYE_GAP]

    def __post_init__(self):
        for f in fields(self):
            validate_weight(getattr(self, f.name), f.name)

    @classmethod
    def default(cls) -> "WeightConfiguration":
        """문서화된 기본 가중치"""
        return cls()

    @classmethod
    def from_mapping(
        cls,
        mapping: Optional[Mapping[str, Any]],
        base: Optional["WeightConfiguration"] = None,
    ) -> "WeightConfiguration":
        """
        딕셔너리에서 가중치 생성

        인식 키: symmetry, proportion, fifths, eyeGap (eye_gap도 허용).
        알 수 없는 키는 무시하고, 없는 키는 base(기본: 기본 가중치) 값을 사용한다.
        인식 키가 하나도 없는 매핑(빈 설정)은 가중치 합이 0인 설정과 같이 취급한다.

        Args:
            mapping: 가중치 딕셔너리 (None이면 base 반환)
            base: 누락된 키에 사용할 가중치

        Returns:
            WeightConfiguration

        Raises:
            InvalidInputError: 빈 설정, 음수 또는 숫자가 아닌 가중치
        """
        base = base or cls.default()
        if mapping is None:
            return base

        values = base.as_dict()
        recognized = 0
        for key, value in mapping.items():
            name = _WEIGHT_KEYS.get(key)
            if name is None:
                continue
            recognized += 1
            try:
                values[name] = float(value)
            except (TypeError, ValueError):
                raise InvalidInputError(f"Weight '{key}' must be a number, got {value!r}")

        if not recognized:
            raise InvalidInputError(
                f"Weight configuration has no recognized keys (expected one of {sorted(_WEIGHT_KEYS)})"
            )

        return cls(**values)

    @classmethod
    def from_config(cls, config) -> "WeightConfiguration":
        """config.yaml의 harmony.weights 섹션으로 생성"""
        return cls.from_mapping(config.get('harmony.weights'))

    def weight_for(self, metric: str) -> float:
        return getattr(self, metric)

    def total(self) -> float:
        return sum(self.as_dict().values())

    def as_dict(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


DEFAULT_WEIGHTS = WeightConfiguration()
