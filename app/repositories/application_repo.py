from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from app.models import Application, ApplicationStatus, Job
from app.repositories.base import BaseRepository


class ApplicationRepository(BaseRepository[Application]):
    model = Application

    def get_by_user_and_job(self, db: Session, user_id: int, job_id: int) -> Optional[Application]:
        """(사용자, 공고) 쌍의 기존 지원서. 재지원 판단 기준"""
        return (
            db.query(Application)
            .filter(Application.user_id == user_id, Application.job_id == job_id)
            .first()
        )

    def get_by_id_for_user(self, db: Session, application_id: int, user_id: int) -> Optional[Application]:
        return (
            db.query(Application)
            .filter(Application.id == application_id, Application.user_id == user_id)
            .first()
        )

    def search(
        self,
        db: Session,
        user_id: Optional[int] = None,
        job_id: Optional[int] = None,
        status: Optional[ApplicationStatus] = None,
    ) -> List[Application]:
        query = db.query(Application).options(
            joinedload(Application.job).joinedload(Job.company),
            joinedload(Application.user),
        )
        if user_id is not None:
            query = query.filter(Application.user_id == user_id)
        if job_id is not None:
            query = query.filter(Application.job_id == job_id)
        if status is not None:
            query = query.filter(Application.status == status)

        # 최신순
        return query.order_by(Application.created_at.desc(), Application.id.desc()).all()

    def count_by_status(self, db: Session, job_id: int) -> List[Tuple[ApplicationStatus, int]]:
        """공고별 상태 집계: [(status, count), ...]"""
        return (
            db.query(Application.status, func.count(Application.id))
            .filter(Application.job_id == job_id)
            .group_by(Application.status)
            .order_by(Application.status)
            .all()
        )


application_repo = ApplicationRepository()
