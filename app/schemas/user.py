from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, Field

from app.models.enums import UserRole
from app.schemas.common import CamelModel


# [회원가입/로그인 요청] (Input)
class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)
    name: str = Field(min_length=1, max_length=100)
    # admin은 가입으로 만들 수 없음
    role: Literal["user", "companyuser"] = "user"


class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)


class UserUpdate(BaseModel):
    email: Optional[EmailStr] = None
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    password: Optional[str] = Field(default=None, min_length=6)


class UserBrief(CamelModel):
    id: int
    email: str
    name: str
    role: UserRole


# [사용자 정보 응답] (Output) - 비밀번호 절대 제외!
class UserResponse(UserBrief):
    created_at: Optional[datetime] = None
