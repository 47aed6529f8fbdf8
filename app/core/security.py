import hashlib
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import jwt
from passlib.context import CryptContext

from app.core.config import settings

# 비밀번호 해싱 설정
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


def _create_token(claims: Dict[str, Any], token_type: str, expires_delta: timedelta) -> str:
    to_encode = dict(claims)
    to_encode.update({
        "sub": str(claims["id"]),
        "type": token_type,
        "exp": datetime.now(timezone.utc) + expires_delta,
    })
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def create_access_token(claims: Dict[str, Any], expires_delta: timedelta = None) -> str:
    """JWT 액세스 토큰 생성 (claims: id, email, name, role)"""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return _create_token(claims, ACCESS_TOKEN_TYPE, expires_delta)


def create_refresh_token(claims: Dict[str, Any], expires_delta: timedelta = None) -> str:
    """JWT 리프레시 토큰 생성. 액세스 토큰과 같은 claims, 더 긴 만료"""
    if expires_delta is None:
        expires_delta = timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)
    return _create_token(claims, REFRESH_TOKEN_TYPE, expires_delta)


def decode_token(token: str) -> Dict[str, Any]:
    """
    서명과 만료를 검증하고 payload를 반환합니다.
    만료 시 jose.ExpiredSignatureError, 그 외 실패 시 jose.JWTError
    """
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])


# ----------------------------------------------------------------
# bcrypt 72바이트 제한 때문에 SHA-256으로 먼저 전처리
# ----------------------------------------------------------------

def _hash_pre_process(password: str) -> str:
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """비밀번호 비교"""
    return pwd_context.verify(_hash_pre_process(plain_password), hashed_password)


def get_password_hash(password: str) -> str:
    """비밀번호 해싱"""
    return pwd_context.hash(_hash_pre_process(password))
