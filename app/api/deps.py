from typing import Callable, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError

from app.core.db import get_db  # noqa: F401  (라우터에서 deps.get_db로 사용)
from app.core.exceptions import ForbiddenException, UnauthorizedException
from app.core.security import ACCESS_TOKEN_TYPE, decode_token

# =========================================================
# 인증/보안 (Dependency)
# =========================================================

# 헤더가 없을 때 FastAPI 기본 응답(401/403) 대신 직접 에러를 내기 위해 auto_error=False
bearer_scheme = HTTPBearer(auto_error=False)

REFRESH_INSTRUCTIONS = "리프레시 토큰으로 /auth/refresh 를 호출해 새 액세스 토큰을 발급받으세요."


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> dict:
    """
    Access Token을 검증하고 claims(id, email, name, role)를 반환합니다.
    """
    if credentials is None or not credentials.credentials:
        raise ForbiddenException("토큰이 필요합니다.")

    try:
        payload = decode_token(credentials.credentials)
    except ExpiredSignatureError:
        raise UnauthorizedException(
            "토큰이 만료되었습니다.",
            extra={"instructions": REFRESH_INSTRUCTIONS},
        )
    except JWTError:
        # 서명 불일치, 형식 오류 등
        raise ForbiddenException("유효하지 않은 토큰입니다.")

    # 리프레시 토큰으로는 API 호출 불가
    if payload.get("type") != ACCESS_TOKEN_TYPE or payload.get("id") is None:
        raise ForbiddenException("유효하지 않은 토큰입니다.")

    return {
        "id": int(payload["id"]),
        "email": payload.get("email"),
        "name": payload.get("name"),
        "role": payload.get("role"),
    }


def require_roles(*roles: str) -> Callable[..., dict]:
    """
    지정한 역할만 통과시키는 의존성 생성
    예) Depends(require_roles("companyuser", "admin"))
    """
    allowed = {getattr(role, "value", role) for role in roles}

    def _checker(current_user: dict = Depends(get_current_user)) -> dict:
        if current_user.get("role") not in allowed:
            raise ForbiddenException("권한이 없습니다.")
        return current_user

    return _checker
