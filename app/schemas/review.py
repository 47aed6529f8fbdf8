from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.job import JobSummary


class JobReviewCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    job_id: int = Field(alias="jobId")
    rating: int
    review_text: Optional[str] = None

    @field_validator("rating")
    @classmethod
    def _check_rating(cls, value: int) -> int:
        if value < 1 or value > 5:
            raise ValueError("평점은 1부터 5까지의 숫자여야 합니다.")
        return value


class JobReviewResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    job_id: int = Field(alias="jobId")
    user_id: int = Field(alias="userId")
    rating: int
    review_text: Optional[str] = None
    created_at: Optional[datetime] = None


class BookmarkToggle(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    job_id: Optional[int] = Field(default=None, alias="jobId")


class BookmarkResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    job_id: int = Field(alias="jobId")
    user_id: int = Field(alias="userId")
    created_at: Optional[datetime] = None
    job: Optional[JobSummary] = None

    @classmethod
    def from_bookmark(cls, bookmark, with_job: bool = True) -> "BookmarkResponse":
        return cls(
            id=bookmark.id,
            job_id=bookmark.job_id,
            user_id=bookmark.user_id,
            created_at=bookmark.created_at,
            job=JobSummary.from_job(bookmark.job) if with_job and bookmark.job else None,
        )
