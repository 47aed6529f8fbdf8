from .enums import (
    ApplicationStatus,
    EmploymentType,
    InterviewStatus,
    NotificationStatus,
    UserRole,
)
from .user import User
from .company import Company
from .job import Job
from .application import Application
from .interview import Interview
from .review import JobReview, Bookmark
from .notification import Notification

# 이렇게 해두면 다른 파일에서
# from app.models import Job
# 만 해도 됩니다.
