from datetime import date, datetime
from typing import List, Optional

from pydantic import Field, TypeAdapter, ValidationError, field_validator
from pydantic.networks import AnyUrl

from app.models.enums import EmploymentType
from app.schemas.common import CamelModel, or_placeholder

_url_adapter = TypeAdapter(AnyUrl)


# [공고 등록/수정 요청] (Input)
class JobCreate(CamelModel):
    title: str = Field(min_length=3, max_length=255)
    company: str = Field(min_length=3, max_length=255)
    location: str = Field(min_length=3, max_length=255)
    experience: str = Field(min_length=3, max_length=255)
    education: str = Field(min_length=3, max_length=255)
    employment_type: EmploymentType
    deadline: date
    tech_stack: List[str] = Field(min_length=1)
    salary: float = Field(gt=0)
    description: str = Field(min_length=10)
    link: str

    @field_validator("link")
    @classmethod
    def _check_link(cls, value: str) -> str:
        try:
            _url_adapter.validate_python(value)
        except ValidationError:
            raise ValueError("링크는 유효한 URL 형식이어야 합니다.")
        return value

    @field_validator("tech_stack")
    @classmethod
    def _strip_tech_stack(cls, value: List[str]) -> List[str]:
        items = [item.strip() for item in value if item and item.strip()]
        if not items:
            raise ValueError("기술 스택은 최소 1개 이상이어야 합니다.")
        return items

    def salary_text(self) -> str:
        # 5000000.0 -> "5000000"
        return str(int(self.salary)) if float(self.salary).is_integer() else str(self.salary)


JobUpdate = JobCreate


# [공고 목록 항목] (Output)
class JobSummary(CamelModel):
    id: int
    title: str
    company: str
    deadline: str

    @classmethod
    def from_job(cls, job) -> "JobSummary":
        return cls(
            id=job.id,
            title=or_placeholder(job.title),
            company=or_placeholder(job.company_name),
            deadline=or_placeholder(job.deadline.isoformat() if job.deadline else None),
        )


# [공고 상세] (Output)
class JobDetail(CamelModel):
    id: int
    title: str
    company: str
    company_id: Optional[int] = None
    location: str
    experience: str
    education: str
    employment_type: str
    deadline: str
    tech_stack: str
    salary: str
    description: str
    link: str
    views: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_job(cls, job) -> "JobDetail":
        return cls(
            id=job.id,
            title=or_placeholder(job.title),
            company=or_placeholder(job.company_name),
            company_id=job.company_id,
            location=or_placeholder(job.location),
            experience=or_placeholder(job.experience),
            education=or_placeholder(job.education),
            employment_type=or_placeholder(job.employment_type),
            deadline=or_placeholder(job.deadline.isoformat() if job.deadline else None),
            tech_stack=or_placeholder(job.tech_stack),
            salary=or_placeholder(job.salary),
            description=or_placeholder(job.description),
            link=job.link,
            views=job.views or 0,
            created_at=job.created_at,
            updated_at=job.updated_at,
        )


class JobDetailWithRelated(CamelModel):
    job: JobDetail
    related_jobs: List[JobSummary] = []
