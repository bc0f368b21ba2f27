"""공통 테스트 fixture: 합성 얼굴 랜드마크"""

from typing import Dict, Tuple

import pytest

from facial_harmony.models import LandmarkSet

# 얼굴 너비 100, 보정된 얼굴 길이 161.8, 눈 너비 20, 내안각 간격 20,
# x = 200 기준 완전 좌우 대칭
MIDLINE_X = 200.0
CHIN_Y = 200.0 + 161.8 / 1.4


def harmonious_face_points() -> Dict[int, Tuple[float, float]]:
    return {
        # 왼쪽 눈 윤곽 (33 외안각, 133 내안각)
        33: (170.0, 220.0), 160: (175.0, 215.0), 158: (185.0, 215.0),
        133: (190.0, 220.0), 153: (185.0, 225.0), 144: (175.0, 225.0),
        # 오른쪽 눈 윤곽 (362 내안각, 263 외안각)
        362: (210.0, 220.0), 385: (215.0, 215.0), 387: (225.0, 215.0),
        263: (230.0, 220.0), 373: (225.0, 225.0), 380: (215.0, 225.0),
        # 코
        6: (200.0, 200.0),
        1: (200.0, 250.0),
        98: (190.0, 260.0),
        327: (210.0, 260.0),
        # 턱
        152: (200.0, CHIN_Y),
        # 얼굴 너비
        234: (150.0, 230.0),
        454: (250.0, 230.0),
        # 눈썹 중앙
        105: (180.0, 195.0),
        334: (220.0, 195.0),
        # 이마 상단
        10: (200.0, 140.0),
    }


@pytest.fixture
def face_points() -> Dict[int, Tuple[float, float]]:
    return harmonious_face_points()


@pytest.fixture
def harmonious_face() -> LandmarkSet:
    return LandmarkSet(harmonious_face_points())


@pytest.fixture
def make_face():
    """일부 포인트를 바꾼 LandmarkSet 생성"""
    def _make(**overrides) -> LandmarkSet:
        points = harmonious_face_points()
        for key, value in overrides.items():
            points[int(key.lstrip('p'))] = value
        return LandmarkSet(points)
    return _make
