from typing import List, Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session, contains_eager

from app.models import Company, Job
from app.repositories.base import BaseRepository

# 정렬 가능한 필드 (query string 값 -> 컬럼)
SORTABLE_COLUMNS = {
    "id": Job.id,
    "title": Job.title,
    "company": Company.name,
    "location": Job.location,
    "experience": Job.experience,
    "deadline": Job.deadline,
    "salary": Job.salary,
    "views": Job.views,
    "createdAt": Job.created_at,
    "created_at": Job.created_at,
}


def _contains(value: str) -> str:
    return f"%{value}%"


class JobRepository(BaseRepository[Job]):
    model = Job

    def _base_query(self, db: Session) -> Query:
        # 회사명 필터/정렬 때문에 항상 companies를 outer join
        return db.query(Job).outerjoin(Job.company).options(contains_eager(Job.company))

    def search(
        self,
        db: Session,
        *,
        location: Optional[str] = None,
        experience: Optional[str] = None,
        salary: Optional[str] = None,
        tech_stack: Optional[str] = None,
        keyword: Optional[str] = None,
        company: Optional[str] = None,
        position: Optional[str] = None,
        sort_by: str = "id",
        sort_order: str = "ASC",
        offset: int = 0,
        limit: int = 20,
    ) -> Tuple[List[Job], int]:
        """
        필터 + 정렬 + 페이지네이션. (해당 페이지 rows, 전체 개수) 반환
        """
        query = self._base_query(db)

        if location:
            query = query.filter(Job.location.ilike(_contains(location)))
        if experience:
            query = query.filter(Job.experience == experience)
        if salary:
            query = query.filter(Job.salary.ilike(_contains(salary)))
        if tech_stack:
            query = query.filter(Job.tech_stack.ilike(_contains(tech_stack)))
        if keyword:
            query = query.filter(or_(
                Job.title.ilike(_contains(keyword)),
                Job.description.ilike(_contains(keyword)),
            ))
        if company:
            query = query.filter(Company.name.ilike(_contains(company)))
        if position:
            # 포지션 컬럼이 따로 없어서 설명에서 찾음
            query = query.filter(Job.description.ilike(_contains(position)))

        total = query.count()

        column = SORTABLE_COLUMNS[sort_by]
        order = column.desc() if sort_order == "DESC" else column.asc()
        rows = (
            query.order_by(order, Job.id.asc())
            .offset(offset)
            .limit(limit)
            .all()
        )
        return rows, total

    def get_by_link(self, db: Session, link: str) -> Optional[Job]:
        return db.query(Job).filter(Job.link == link).first()

    def increment_views(self, db: Session, job_id: int) -> None:
        db.query(Job).filter(Job.id == job_id).update(
            {Job.views: Job.views + 1},
            synchronize_session=False,
        )

    def find_related(self, db: Session, job: Job, limit: int = 5) -> List[Job]:
        """
        같은 회사이거나 기술 스택이 겹치는 다른 공고 (최대 limit개)
        """
        conditions = []
        if job.company_id is not None:
            conditions.append(Job.company_id == job.company_id)
        if job.tech_stack:
            conditions.append(Job.tech_stack.ilike(_contains(job.tech_stack)))
        if not conditions:
            return []

        return (
            self._base_query(db)
            .filter(or_(*conditions), Job.id != job.id)
            .order_by(Job.id.asc())
            .limit(limit)
            .all()
        )


job_repo = JobRepository()
