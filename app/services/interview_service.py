import logging
from typing import List

from sqlalchemy.orm import Session

from app.core.exceptions import ForbiddenException, NotFoundException
from app.core.transaction import transaction
from app.models import Interview, InterviewStatus
from app.repositories.application_repo import application_repo
from app.repositories.interview_repo import interview_repo
from app.schemas.interview import InterviewCreate, InterviewFeedbackUpdate, InterviewResponse
from app.services.application_service import is_privileged

logger = logging.getLogger(__name__)

# 피드백 수정이 허용되는 지원 상태.
# 현재 어떤 흐름도 지원서를 이 값으로 바꾸지 않으므로 수정 API는 사실상 항상 403 (DESIGN.md 참고)
FEEDBACK_EDITABLE_APPLICATION_STATUS = "면접 완료"


class InterviewService:
    def create(self, db: Session, current_user: dict, interview_in: InterviewCreate) -> InterviewResponse:
        user_id = current_user["id"]

        # 본인이 지원한 공고인지 확인
        application = application_repo.get_by_id_for_user(db, interview_in.application_id, user_id)
        if not application:
            raise ForbiddenException("본인이 지원한 공고에 대해서만 인터뷰를 작성할 수 있습니다.")

        with transaction(db):
            interview = interview_repo.add(db, Interview(
                application_id=application.id,
                user_id=user_id,
                interview_date=interview_in.interview_date,
                interview_status=InterviewStatus.SCHEDULED,
                feedback=interview_in.feedback,
            ))
        logger.info("인터뷰 생성: interview_id=%s", interview.id)
        return InterviewResponse.from_interview(interview)

    def list_for_caller(self, db: Session, current_user: dict) -> List[InterviewResponse]:
        # 회사/관리자는 전체, 일반 사용자는 본인 것만
        owner_id = None if is_privileged(current_user) else current_user["id"]
        return [
            InterviewResponse.from_interview(i)
            for i in interview_repo.get_all_by_user_id(db, owner_id)
        ]

    def update_feedback(
        self,
        db: Session,
        current_user: dict,
        application_id: int,
        update_in: InterviewFeedbackUpdate,
    ) -> InterviewResponse:
        interview = interview_repo.get_by_application_for_user(db, application_id, current_user["id"])
        if not interview:
            raise NotFoundException("해당 인터뷰를 찾을 수 없습니다.")

        if interview.application.status != FEEDBACK_EDITABLE_APPLICATION_STATUS:
            raise ForbiddenException("인터뷰 상태가 예정 상태가 아니므로 수정할 수 없습니다.")

        with transaction(db):
            interview.feedback = update_in.feedback
        return InterviewResponse.from_interview(interview)

    def delete(self, db: Session, current_user: dict, interview_id: int) -> None:
        interview = interview_repo.get_by_id_for_user(db, interview_id, current_user["id"])
        if not interview:
            raise NotFoundException("해당 인터뷰를 찾을 수 없거나 권한이 없습니다.")

        with transaction(db):
            interview_repo.delete(db, interview)


interview_service = InterviewService()
