import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from app.core.exceptions import ConflictException, ForbiddenException, NotFoundException, ValidationException
from app.core.transaction import transaction
from app.models import Application, ApplicationStatus
from app.models.enums import PRIVILEGED_ROLES
from app.repositories.application_repo import application_repo
from app.repositories.job_repo import job_repo
from app.repositories.notification_repo import notification_repo
from app.schemas.application import (
    ApplicationCreate,
    ApplicationResponse,
    ApplicationWithApplicant,
    StatusCount,
)

logger = logging.getLogger(__name__)


def is_privileged(current_user: dict) -> bool:
    return current_user.get("role") in PRIVILEGED_ROLES


def parse_status(value: Optional[str]) -> Optional[ApplicationStatus]:
    if not value:
        return None
    try:
        return ApplicationStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in ApplicationStatus)
        raise ValidationException(f"지원 상태는 {allowed} 중 하나여야 합니다.")


class ApplicationService:
    """
    지원 상태 전이
      (없음) --apply--> 지원 완료
      지원 완료 --withdraw--> 지원 취소
      지원 취소 --apply--> 지원 완료 (같은 행을 되돌림)
      지원 완료 --apply--> 거절 (이미 지원)
    """

    def apply(self, db: Session, current_user: dict, application_in: ApplicationCreate) -> Tuple[Application, bool]:
        """
        (지원서, 새로 생성 여부) 반환. 재지원이면 생성 여부는 False
        """
        if not application_in.job_id:
            raise ValidationException("채용 공고 ID가 필요합니다.")

        job = job_repo.get_by_id(db, application_in.job_id)
        if not job:
            raise NotFoundException("해당 채용 공고를 찾을 수 없습니다.")

        user_id = current_user["id"]
        existing = application_repo.get_by_user_and_job(db, user_id, job.id)

        if existing:
            if existing.status != ApplicationStatus.WITHDRAWN:
                raise ConflictException("이미 해당 채용 공고에 지원하셨습니다.")

            with transaction(db):
                existing.status = ApplicationStatus.SUBMITTED
                notification_repo.create(db, user_id, f"'{job.title}' 공고에 다시 지원했습니다.")
            logger.info("재지원: application_id=%s", existing.id)
            return existing, False

        with transaction(db):
            application = application_repo.add(db, Application(
                user_id=user_id,
                job_id=job.id,
                resume=application_in.resume,
                status=ApplicationStatus.SUBMITTED,
            ))
            notification_repo.create(db, user_id, f"'{job.title}' 공고에 지원했습니다.")
        logger.info("지원 완료: application_id=%s", application.id)
        return application, True

    def withdraw(self, db: Session, current_user: dict, job_id: int) -> Application:
        """
        [지원 취소] 호출자 본인의 (사용자, 공고) 지원서를 '지원 취소'로 변경
        """
        application = application_repo.get_by_user_and_job(db, current_user["id"], job_id)
        if not application:
            raise NotFoundException("해당 지원 내역을 찾을 수 없습니다.")
        # 조회 자체가 본인 것으로 한정되지만 한 번 더 확인
        if application.user_id != current_user["id"]:
            raise ForbiddenException("해당 지원 내역을 취소 할 권한이 없습니다.")

        with transaction(db):
            application.status = ApplicationStatus.WITHDRAWN
            notification_repo.create(
                db,
                application.user_id,
                f"'{application.job.title}' 공고 지원을 취소했습니다.",
            )
        logger.info("지원 취소: application_id=%s, job_id=%s", application.id, job_id)
        return application

    def list_for_caller(
        self,
        db: Session,
        current_user: dict,
        status: Optional[str] = None,
        job_id: Optional[int] = None,
        user_id: Optional[int] = None,
    ) -> List[ApplicationResponse]:
        """
        일반 사용자: 본인 지원 내역만 (userId 필터 무시)
        회사/관리자: 임의의 userId/jobId/status 필터 + 지원자 이름/이메일 포함
        """
        privileged = is_privileged(current_user)
        owner_id = user_id if privileged else current_user["id"]

        rows = application_repo.search(
            db,
            user_id=owner_id,
            job_id=job_id,
            status=parse_status(status),
        )
        view = ApplicationWithApplicant if privileged else ApplicationResponse
        return [view.from_application(row) for row in rows]

    def summarize_for_job(self, db: Session, current_user: dict, job_id: int) -> Dict[str, Any]:
        """
        [지원 현황 집계] 상태별 지원자 수 + 회사명
        """
        if not is_privileged(current_user):
            raise ForbiddenException("권한이 없습니다.")

        job = job_repo.get_by_id(db, job_id)
        if not job:
            raise NotFoundException("해당 채용 공고를 찾을 수 없습니다.")

        counts = application_repo.count_by_status(db, job_id)
        return {
            "companyName": job.company_name,
            "data": [StatusCount(status=status, count=count) for status, count in counts],
        }


application_service = ApplicationService()
