from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_db
from app.api.result import ok_response
from app.schemas.review import JobReviewCreate, JobReviewResponse
from app.services.review_service import review_service

router = APIRouter()


@router.get("/{job_id}")
def list_reviews(
    job_id: int,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    reviews = review_service.list_for_job(db, job_id)
    return ok_response([JobReviewResponse.model_validate(r) for r in reviews])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_review(
    review_in: JobReviewCreate,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    review = review_service.create(db, current_user, review_in)
    return ok_response(JobReviewResponse.model_validate(review), message="리뷰가 등록되었습니다.")
