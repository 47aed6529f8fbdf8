from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import ApplicationStatus, InterviewStatus


# 인터뷰 필드는 interview_date 처럼 snake_case, FK만 camelCase
class InterviewCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    application_id: int = Field(alias="applicationId")
    interview_date: datetime
    feedback: Optional[str] = None


class InterviewFeedbackUpdate(BaseModel):
    feedback: str


class InterviewResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    application_id: int = Field(alias="applicationId")
    user_id: int = Field(alias="userId")
    interview_date: datetime
    interview_status: InterviewStatus
    feedback: Optional[str] = None
    # 지원서의 현재 상태 (복사본이 아니라 조회 시점의 값)
    application_status: Optional[ApplicationStatus] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_interview(cls, interview) -> "InterviewResponse":
        application = interview.application
        return cls(
            id=interview.id,
            application_id=interview.application_id,
            user_id=interview.user_id,
            interview_date=interview.interview_date,
            interview_status=interview.interview_status,
            feedback=interview.feedback,
            application_status=application.status if application else None,
            created_at=interview.created_at,
        )
