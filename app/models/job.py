from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.db import Base


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255))
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="SET NULL"), index=True)
    location = Column(String(255))
    experience = Column(String(255))
    education = Column(String(255))
    employment_type = Column(String(100))
    deadline = Column(Date)
    tech_stack = Column(Text)
    salary = Column(String(255))
    description = Column(Text)
    link = Column(String(500), unique=True, nullable=False)
    views = Column(Integer, nullable=False, default=0, server_default="0")
    # 직접 등록한 공고만 값이 있음 (크롤링 공고는 NULL)
    posted_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    company = relationship("Company", back_populates="jobs")
    applications = relationship("Application", back_populates="job", cascade="all, delete-orphan")
    reviews = relationship("JobReview", back_populates="job", cascade="all, delete-orphan")
    bookmarks = relationship("Bookmark", back_populates="job", cascade="all, delete-orphan")

    @property
    def company_name(self):
        return self.company.name if self.company else None
