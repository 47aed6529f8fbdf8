from typing import Optional

from app.schemas.common import CamelModel
from app.schemas.user import UserBrief


class RefreshRequest(CamelModel):
    refresh_token: Optional[str] = None


class AccessToken(CamelModel):
    access_token: str


class TokenPair(AccessToken):
    refresh_token: str
    user: UserBrief
