from datetime import datetime
from typing import Optional

from pydantic import field_validator

from app.models.enums import ApplicationStatus
from app.schemas.common import EMPTY_RESUME_PLACEHOLDER, CamelModel, or_placeholder


# [지원 요청] (Input)
class ApplicationCreate(CamelModel):
    job_id: Optional[int] = None
    resume: Optional[str] = None


class ApplicationJob(CamelModel):
    title: str
    company: str


class Applicant(CamelModel):
    name: str
    email: str


# [지원 내역 응답] (Output)
class ApplicationResponse(CamelModel):
    id: int
    user_id: int
    job_id: int
    resume: str
    status: ApplicationStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    job: Optional[ApplicationJob] = None

    @field_validator("resume", mode="before")
    @classmethod
    def _resume_placeholder(cls, value):
        return or_placeholder(value, EMPTY_RESUME_PLACEHOLDER)

    @classmethod
    def from_application(cls, application) -> "ApplicationResponse":
        job = application.job
        return cls(
            id=application.id,
            user_id=application.user_id,
            job_id=application.job_id,
            resume=application.resume,
            status=application.status,
            created_at=application.created_at,
            updated_at=application.updated_at,
            job=ApplicationJob(
                title=or_placeholder(job.title),
                company=or_placeholder(job.company_name),
            ) if job else None,
        )


# 회사/관리자에게만 지원자 정보까지 노출
class ApplicationWithApplicant(ApplicationResponse):
    user: Optional[Applicant] = None

    @classmethod
    def from_application(cls, application) -> "ApplicationWithApplicant":
        base = ApplicationResponse.from_application(application)
        applicant = application.user
        return cls(
            **base.model_dump(),
            user=Applicant(name=applicant.name, email=applicant.email) if applicant else None,
        )


class StatusCount(CamelModel):
    status: ApplicationStatus
    count: int
