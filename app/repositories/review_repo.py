from typing import List, Optional, Tuple

from sqlalchemy.orm import Session, joinedload

from app.models import Bookmark, Job, JobReview
from app.repositories.base import BaseRepository


class JobReviewRepository(BaseRepository[JobReview]):
    model = JobReview

    def get_all_by_job_id(self, db: Session, job_id: int) -> List[JobReview]:
        return (
            db.query(JobReview)
            .filter(JobReview.job_id == job_id)
            .order_by(JobReview.created_at.desc(), JobReview.id.desc())
            .all()
        )


class BookmarkRepository(BaseRepository[Bookmark]):
    model = Bookmark

    def get_by_user_and_job(self, db: Session, user_id: int, job_id: int) -> Optional[Bookmark]:
        return (
            db.query(Bookmark)
            .filter(Bookmark.user_id == user_id, Bookmark.job_id == job_id)
            .first()
        )

    def page_by_user_id(self, db: Session, user_id: int, offset: int, limit: int) -> Tuple[List[Bookmark], int]:
        query = db.query(Bookmark).filter(Bookmark.user_id == user_id)
        total = query.count()
        rows = (
            query.options(joinedload(Bookmark.job).joinedload(Job.company))
            .order_by(Bookmark.created_at.desc(), Bookmark.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )
        return rows, total


review_repo = JobReviewRepository()
bookmark_repo = BookmarkRepository()
