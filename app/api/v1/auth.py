from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_db
from app.api.result import ok_response
from app.schemas.token import RefreshRequest
from app.schemas.user import UserBrief, UserCreate, UserLogin, UserResponse, UserUpdate
from app.services.auth_service import auth_service

router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    user_in: UserCreate,
    db: Session = Depends(get_db),
):
    user = auth_service.register(db, user_in)
    return ok_response(UserBrief.model_validate(user), message="회원가입이 완료되었습니다.")


@router.post("/login")
def login(
    user_in: UserLogin,
    db: Session = Depends(get_db),
):
    return ok_response(auth_service.login(db, user_in))


@router.post("/refresh")
def refresh(body: Optional[RefreshRequest] = None):
    return ok_response(auth_service.refresh(body.refresh_token if body else None))


@router.get("/profile")
def get_profile(
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    user = auth_service.get_profile(db, current_user["id"])
    return ok_response(UserResponse.model_validate(user))


@router.put("/profile")
def update_profile(
    user_in: UserUpdate,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    user = auth_service.update_profile(db, current_user["id"], user_in)
    return ok_response(UserResponse.model_validate(user), message="회원 정보가 수정되었습니다.")


@router.delete("/profile")
def delete_profile(
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    auth_service.delete_profile(db, current_user["id"])
    return ok_response(message="회원 탈퇴가 완료되었습니다.")
