"""src.core.exceptions
커스텀 예외 정의 (Spring CustomException 스타일)
"""


class CustomError(Exception):
    """
    커스텀 예외 (Spring의 CustomException 스타일)

    간단하게 에러 메시지만 전달하여 사용합니다.

    Examples:
        >>> raise CustomError("에러 비디오 설정이 올바르지 않습니다")
        >>> raise CustomError("downstream 응답이 비어 있습니다")

    Usage:
        try:
            config = InterceptorConfig.from_settings(settings)
        except CustomError as e:
            logger.error(f"설정 로드 실패: {e.message}", exc_info=True)
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

    def __str__(self):
        return self.message


class ConfigurationError(CustomError):
    """에러 매핑/STRM 경로 설정이 유효하지 않아 미들웨어를 활성화할 수 없는 경우"""


class IncompleteResponseError(CustomError):
    """downstream 앱이 응답을 시작하지 않았거나 본문을 끝맺지 않고 종료된 경우"""
