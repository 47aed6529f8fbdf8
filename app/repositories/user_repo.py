from typing import Optional

from sqlalchemy.orm import Session

from app.models import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User

    def get_by_email(self, db: Session, email: str) -> Optional[User]:
        """
        로그인용: email로 사용자 조회
        """
        return db.query(User).filter(User.email == email).first()


user_repo = UserRepository()
