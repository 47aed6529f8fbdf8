import logging
from typing import Optional

from jose import JWTError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictException, ForbiddenException, NotFoundException, ValidationException
from app.core.security import (
    REFRESH_TOKEN_TYPE,
    create_access_token,
    create_refresh_token,
    decode_token,
    get_password_hash,
    verify_password,
)
from app.core.transaction import transaction
from app.models import User, UserRole
from app.repositories.user_repo import user_repo
from app.schemas.token import AccessToken, TokenPair
from app.schemas.user import UserBrief, UserCreate, UserLogin, UserUpdate

logger = logging.getLogger(__name__)

CLAIM_KEYS = ("id", "email", "name", "role")


class AuthService:
    def register(self, db: Session, user_in: UserCreate) -> User:
        # 1. 이메일 중복 체크
        if user_repo.get_by_email(db, user_in.email):
            raise ConflictException("이미 존재하는 이메일입니다.")

        # 2. 비밀번호 해싱 후 저장
        with transaction(db):
            user = user_repo.add(db, User(
                email=user_in.email,
                password_hash=get_password_hash(user_in.password),
                name=user_in.name,
                role=UserRole(user_in.role),
            ))
        logger.info("회원가입 완료: user_id=%s", user.id)
        return user

    def login(self, db: Session, user_in: UserLogin) -> TokenPair:
        # 1. 유저 조회
        user = user_repo.get_by_email(db, user_in.email)
        if not user:
            raise NotFoundException("이메일에 해당하는 사용자가 없습니다.")

        # 2. 비밀번호 검증
        if not verify_password(user_in.password, user.password_hash):
            raise ValidationException("잘못된 비밀번호입니다.")

        # 3. 토큰 발급 (액세스 + 리프레시, 같은 claims)
        claims = user.to_claims()
        return TokenPair(
            access_token=create_access_token(claims),
            refresh_token=create_refresh_token(claims),
            user=UserBrief.model_validate(user),
        )

    def refresh(self, refresh_token: Optional[str]) -> AccessToken:
        if not refresh_token:
            raise ValidationException("리프레시 토큰이 필요합니다.")

        try:
            payload = decode_token(refresh_token)
        except JWTError:
            # 만료 포함. 리프레시 토큰은 재발급 체인이 없음
            raise ForbiddenException("유효하지 않은 리프레시 토큰입니다.")

        if payload.get("type") != REFRESH_TOKEN_TYPE or payload.get("id") is None:
            raise ForbiddenException("유효하지 않은 리프레시 토큰입니다.")

        claims = {key: payload.get(key) for key in CLAIM_KEYS}
        return AccessToken(access_token=create_access_token(claims))

    def get_profile(self, db: Session, user_id: int) -> User:
        user = user_repo.get_by_id(db, user_id)
        if not user:
            raise NotFoundException("사용자를 찾을 수 없습니다.")
        return user

    def update_profile(self, db: Session, user_id: int, user_in: UserUpdate) -> User:
        if user_in.email is None and user_in.name is None and user_in.password is None:
            raise ValidationException("수정할 정보를 제공해 주세요.")

        user = user_repo.get_by_id(db, user_id)
        if not user:
            raise NotFoundException("사용자 정보를 수정할 수 없습니다.")

        if user_in.email is not None and user_in.email != user.email:
            other = user_repo.get_by_email(db, user_in.email)
            if other and other.id != user.id:
                raise ConflictException("이미 존재하는 이메일입니다.")

        with transaction(db):
            if user_in.email is not None:
                user.email = user_in.email
            if user_in.name is not None:
                user.name = user_in.name
            if user_in.password is not None:
                user.password_hash = get_password_hash(user_in.password)
        return user

    def delete_profile(self, db: Session, user_id: int) -> None:
        user = user_repo.get_by_id(db, user_id)
        if not user:
            raise NotFoundException("사용자를 찾을 수 없거나 삭제할 수 없습니다.")

        # 지원서, 인터뷰, 리뷰, 북마크, 알림까지 함께 삭제
        with transaction(db):
            user_repo.delete(db, user)
        logger.info("회원 탈퇴: user_id=%s", user_id)


auth_service = AuthService()
