from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.db import Base
from app.models.enums import InterviewStatus, value_enum


class Interview(Base):
    __tablename__ = "interviews"

    id = Column(Integer, primary_key=True, index=True)
    application_id = Column(Integer, ForeignKey("applications.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    interview_date = Column(DateTime(timezone=True), nullable=False)
    # 지원 상태의 복사본이 아니라 면접 자체의 상태
    interview_status = Column(
        value_enum(InterviewStatus, "interview_status"),
        nullable=False,
        default=InterviewStatus.SCHEDULED,
    )
    feedback = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    application = relationship("Application", back_populates="interviews")
    user = relationship("User", back_populates="interviews")
