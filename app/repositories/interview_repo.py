from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from app.models import Interview
from app.repositories.base import BaseRepository


class InterviewRepository(BaseRepository[Interview]):
    model = Interview

    def get_all_by_user_id(self, db: Session, user_id: Optional[int] = None) -> List[Interview]:
        """
        user_id가 None이면 전체 (회사/관리자용)
        """
        query = db.query(Interview).options(joinedload(Interview.application))
        if user_id is not None:
            query = query.filter(Interview.user_id == user_id)
        return query.order_by(Interview.interview_date.desc(), Interview.id.desc()).all()

    def get_by_application_for_user(self, db: Session, application_id: int, user_id: int) -> Optional[Interview]:
        return (
            db.query(Interview)
            .options(joinedload(Interview.application))
            .filter(Interview.application_id == application_id, Interview.user_id == user_id)
            .order_by(Interview.id.desc())
            .first()
        )

    def get_by_id_for_user(self, db: Session, interview_id: int, user_id: int) -> Optional[Interview]:
        return (
            db.query(Interview)
            .filter(Interview.id == interview_id, Interview.user_id == user_id)
            .first()
        )


interview_repo = InterviewRepository()
