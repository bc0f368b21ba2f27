"""얼굴 랜드마크 인덱스 및 점수 계산 상수 정의"""

from typing import Dict, Tuple

# 지표 이름
SYMMETRY = 'symmetry'
PROPORTION = 'proportion'
FIFTHS = 'fifths'
EYE_GAP = 'eye_gap'

METRIC_NAMES: Tuple[str, ...] = (SYMMETRY, PROPORTION, FIFTHS, EYE_GAP)

# MediaPipe FaceMesh 468 landmarks 기준 특징별 인덱스
# left/right는 이미지 기준 (검출기 명명과 동일)
FEATURE_LANDMARKS: Dict[str, Tuple[int, ...]] = {
    # 눈 윤곽 (6점: 외안각, 상단 2, 내안각, 하단 2)
    'left_eye_contour': (33, 160, 158, 133, 153, 144),
    'right_eye_contour': (362, 385, 387, 263, 373, 380),

    # 눈 모서리
    'left_eye_outer': (33,),
    'left_eye_inner': (133,),
    'right_eye_inner': (362,),
    'right_eye_outer': (263,),

    # 코
    'nose_bridge_top': (6,),
    'nose_tip': (1,),
    'left_nostril_wing': (98,),
    'right_nostril_wing': (327,),

    # 턱
    'chin': (152,),

    # 얼굴 너비 (광대)
    'left_face_width': (234,),
    'right_face_width': (454,),

    # 눈썹 중앙
    'left_brow_mid': (105,),
    'right_brow_mid': (334,),

    # 이마 상단 (얼굴형 분류용)
    'forehead_top': (10,),
}

# 레지스트리에 반드시 있어야 하는 특징
REQUIRED_FEATURES: Tuple[str, ...] = tuple(FEATURE_LANDMARKS.keys())

# 좌우 대칭 비교 쌍 (왼쪽, 오른쪽)
SYMMETRY_PAIRS: Tuple[Tuple[str, str], ...] = (
    ('left_eye_outer', 'right_eye_outer'),
    ('left_eye_inner', 'right_eye_inner'),
    ('left_brow_mid', 'right_brow_mid'),
    ('left_nostril_wing', 'right_nostril_wing'),
)

# 지표별 tolerance
DEFAULT_TOLERANCES: Dict[str, float] = {
    SYMMETRY: 0.04,
    PROPORTION: 0.15,
    FIFTHS: 0.18,
    EYE_GAP: 0.25,
}

# 목표값
GOLDEN_RATIO = 1.618
FIFTHS_TARGET = 5.0
EYE_GAP_TARGET = 1.0

# 콧대 상단-턱 거리를 헤어라인-턱 거리로 근사하는 보정 계수
FACE_LENGTH_CORRECTION = 1.4

# 분모 보호
MIN_DENOMINATOR = 1e-6
DENOMINATOR_EPSILON = 1e-6

# 기본 가중치
DEFAULT_WEIGHTS: Dict[str, float] = {
    SYMMETRY: 40.0,
    PROPORTION: 25.0,
    FIFTHS: 20.0,
    EYE_GAP: 15.0,
}

# 얼굴형 분류 기준 (이마 상단-턱 / 얼굴 너비)
FACE_SHAPE_THRESHOLDS: Tuple[Tuple[float, str], ...] = (
    (1.3, 'round'),
    (1.5, 'square'),
    (1.7, 'heart'),
    (1.9, 'oval'),
)

# 점수 설명 구간 (하한, 설명)
SCORE_DESCRIPTIONS: Tuple[Tuple[float, str], ...] = (
    (90.0, 'Exceptional facial harmony'),
    (85.0, 'Outstanding features'),
    (80.0, 'Very attractive proportions'),
    (75.0, 'Above average beauty'),
    (70.0, 'Good facial balance'),
    (65.0, 'Pleasant features'),
)
DEFAULT_SCORE_DESCRIPTION = 'Unique charm'
