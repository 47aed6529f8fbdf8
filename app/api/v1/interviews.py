from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_db
from app.api.result import ok_response
from app.schemas.interview import InterviewCreate, InterviewFeedbackUpdate
from app.services.interview_service import interview_service

router = APIRouter()


# =========================================================
#  API Endpoints
# =========================================================

@router.get("")
def list_interviews(
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    [인터뷰 목록]
    일반 사용자는 본인 인터뷰만, 회사/관리자는 전체
    """
    return ok_response(interview_service.list_for_caller(db, current_user))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_interview(
    interview_in: InterviewCreate,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    interview = interview_service.create(db, current_user, interview_in)
    return ok_response(interview, message="인터뷰가 등록되었습니다.")


@router.put("/{application_id}")
def update_feedback(
    application_id: int,
    update_in: InterviewFeedbackUpdate,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    interview = interview_service.update_feedback(db, current_user, application_id, update_in)
    return ok_response(interview, message="인터뷰 피드백이 수정되었습니다.")


@router.delete("/{interview_id}")
def delete_interview(
    interview_id: int,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    interview_service.delete(db, current_user, interview_id)
    return ok_response(message="인터뷰가 삭제되었습니다.")
