import logging
import math
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import ConflictException, NotFoundException, ValidationException
from app.core.transaction import transaction
from app.models import Job
from app.repositories.company_repo import company_repo
from app.repositories.job_repo import SORTABLE_COLUMNS, job_repo
from app.schemas.job import JobCreate, JobDetail, JobDetailWithRelated, JobSummary, JobUpdate

logger = logging.getLogger(__name__)

PAGE_SIZE = 20
RELATED_LIMIT = 5


class JobService:
    def list_jobs(
        self,
        db: Session,
        page: int = 1,
        sort_by: str = "id",
        sort_order: str = "ASC",
        **filters: Optional[str],
    ) -> Dict[str, Any]:
        """
        [채용 공고 목록]
        필터/정렬/페이지네이션 후 (id, title, company, deadline)만 반환
        """
        if sort_by not in SORTABLE_COLUMNS:
            raise ValidationException(
                f"정렬 기준은 {', '.join(SORTABLE_COLUMNS)} 중 하나여야 합니다."
            )
        sort_order = (sort_order or "ASC").upper()
        if sort_order not in ("ASC", "DESC"):
            raise ValidationException("정렬 순서는 ASC 또는 DESC여야 합니다.")

        rows, total = job_repo.search(
            db,
            sort_by=sort_by,
            sort_order=sort_order,
            offset=(page - 1) * PAGE_SIZE,
            limit=PAGE_SIZE,
            **filters,
        )
        return {
            "data": [JobSummary.from_job(job) for job in rows],
            "totalItems": total,
            "totalPages": math.ceil(total / PAGE_SIZE),
            "currentPage": page,
        }

    def get_job_detail(self, db: Session, job_id: int) -> JobDetailWithRelated:
        """
        [채용 공고 상세]
        조회수를 1 올리고, 같은 회사/비슷한 기술 스택의 공고를 최대 5개 추천
        """
        job = job_repo.get_by_id(db, job_id)
        if not job:
            raise NotFoundException("해당 공고를 찾을 수 없습니다.")

        # 조회수 증가와 추천 조회는 별개의 쿼리 (원자적으로 묶지 않음)
        with transaction(db):
            job_repo.increment_views(db, job_id)
        db.refresh(job)

        related = job_repo.find_related(db, job, limit=RELATED_LIMIT)
        return JobDetailWithRelated(
            job=JobDetail.from_job(job),
            related_jobs=[JobSummary.from_job(r) for r in related],
        )

    def _apply(self, db: Session, job: Job, job_in: JobCreate) -> None:
        job.title = job_in.title
        job.company = company_repo.get_or_create(db, job_in.company)
        job.location = job_in.location
        job.experience = job_in.experience
        job.education = job_in.education
        job.employment_type = job_in.employment_type.value
        job.deadline = job_in.deadline
        job.tech_stack = ", ".join(job_in.tech_stack)
        job.salary = job_in.salary_text()
        job.description = job_in.description
        job.link = job_in.link

    def _ensure_link_available(self, db: Session, link: str, job_id: Optional[int] = None) -> None:
        existing = job_repo.get_by_link(db, link)
        if existing and existing.id != job_id:
            raise ConflictException("이미 등록된 공고 링크입니다.")

    def create_job(self, db: Session, job_in: JobCreate, posted_by: int) -> JobDetail:
        self._ensure_link_available(db, job_in.link)

        with transaction(db):
            job = Job(views=0, posted_by=posted_by)
            self._apply(db, job, job_in)
            job_repo.add(db, job)
        logger.info("채용 공고 등록: job_id=%s", job.id)
        return JobDetail.from_job(job)

    def update_job(self, db: Session, job_id: int, job_in: JobUpdate) -> JobDetail:
        job = job_repo.get_by_id(db, job_id)
        if not job:
            raise NotFoundException("해당 채용 공고를 찾을 수 없습니다.")
        self._ensure_link_available(db, job_in.link, job_id=job.id)

        with transaction(db):
            self._apply(db, job, job_in)
            # 수정하면 이전 조회수는 의미가 없으므로 초기화
            job.views = 0
        return JobDetail.from_job(job)

    def delete_job(self, db: Session, job_id: int) -> None:
        job = job_repo.get_by_id(db, job_id)
        if not job:
            raise NotFoundException("해당 채용 공고를 찾을 수 없습니다.")

        with transaction(db):
            job_repo.delete(db, job)
        logger.info("채용 공고 삭제: job_id=%s", job_id)


job_service = JobService()
