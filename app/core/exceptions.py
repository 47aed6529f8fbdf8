from typing import Any, Dict, Optional


class AppException(Exception):
    """모든 커스텀 예외의 부모"""

    status_code: int = 500

    def __init__(self, message: str, extra: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        # 에러 응답에 함께 실어 보낼 필드 (예: instructions)
        self.extra = extra or {}


class ValidationException(AppException):
    status_code = 400


class ConflictException(AppException):
    """중복 지원, 중복 이메일 등"""
    status_code = 400


class UnauthorizedException(AppException):
    status_code = 401


class ForbiddenException(AppException):
    status_code = 403


class NotFoundException(AppException):
    status_code = 404


class DatabaseException(AppException):
    pass
