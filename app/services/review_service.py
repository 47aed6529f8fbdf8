import logging
import math
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundException, ValidationException
from app.core.transaction import transaction
from app.models import Bookmark, JobReview
from app.repositories.job_repo import job_repo
from app.repositories.review_repo import bookmark_repo, review_repo
from app.schemas.review import BookmarkResponse, JobReviewCreate

logger = logging.getLogger(__name__)

DEFAULT_BOOKMARK_PAGE_SIZE = 10


class JobReviewService:
    def list_for_job(self, db: Session, job_id: int) -> List[JobReview]:
        reviews = review_repo.get_all_by_job_id(db, job_id)
        if not reviews:
            raise NotFoundException("해당 공고에 대한 리뷰가 없습니다.")
        return reviews

    def create(self, db: Session, current_user: dict, review_in: JobReviewCreate) -> JobReview:
        if not job_repo.get_by_id(db, review_in.job_id):
            raise NotFoundException("해당 채용 공고를 찾을 수 없습니다.")

        with transaction(db):
            review = review_repo.add(db, JobReview(
                job_id=review_in.job_id,
                user_id=current_user["id"],
                rating=review_in.rating,
                review_text=review_in.review_text,
            ))
        return review


class BookmarkService:
    def toggle(self, db: Session, current_user: dict, job_id: Optional[int]) -> Tuple[Optional[Bookmark], bool]:
        """
        북마크가 없으면 추가 (bookmark, True), 있으면 삭제 (None, False)
        """
        if not job_id:
            raise ValidationException("채용 공고 ID가 필요합니다.")
        if not job_repo.get_by_id(db, job_id):
            raise NotFoundException("해당 채용 공고를 찾을 수 없습니다.")

        user_id = current_user["id"]
        existing = bookmark_repo.get_by_user_and_job(db, user_id, job_id)

        with transaction(db):
            if existing:
                bookmark_repo.delete(db, existing)
                return None, False
            bookmark = bookmark_repo.add(db, Bookmark(user_id=user_id, job_id=job_id))
        return bookmark, True

    def page_for_user(
        self,
        db: Session,
        current_user: dict,
        page: int = 1,
        limit: int = DEFAULT_BOOKMARK_PAGE_SIZE,
    ) -> Dict[str, Any]:
        rows, total = bookmark_repo.page_by_user_id(
            db,
            current_user["id"],
            offset=(page - 1) * limit,
            limit=limit,
        )
        return {
            "data": [BookmarkResponse.from_bookmark(b) for b in rows],
            "pagination": {
                "totalCount": total,
                "totalPages": math.ceil(total / limit),
                "currentPage": page,
                "pageSize": limit,
            },
        }


review_service = JobReviewService()
bookmark_service = BookmarkService()
