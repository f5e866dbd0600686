# app/core/exceptions.py


class FilmorateError(Exception):
    """서비스 계층 공통 예외"""

    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FilmorateError):
    """요청 형태가 잘못된 경우 (예: 지원하지 않는 정렬 기준)"""

    kind = "validation_error"


class DataNotFound(FilmorateError):
    """참조한 엔티티가 저장소에 없는 경우"""

    kind = "not_found"
