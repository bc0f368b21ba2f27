"""커스텀 예외 클래스 정의"""


class FacialHarmonyException(Exception):
    """기본 예외 클래스"""
    pass


class InvalidInputError(FacialHarmonyException):
    """잘못된 입력 예외 (빈 포인트 집합, 잘못된 tolerance, 가중치 합 0 등)"""
    pass


class ConfigurationError(FacialHarmonyException):
    """설정 오류 예외 (정의되지 않은 특징 이름 조회 등)"""
    pass


class DetectionError(FacialHarmonyException):
    """얼굴 검출 실패 예외"""
    pass
