import enum

from sqlalchemy import Enum


class UserRole(str, enum.Enum):
    USER = "user"
    COMPANY_USER = "companyuser"
    ADMIN = "admin"


class ApplicationStatus(str, enum.Enum):
    SUBMITTED = "지원 완료"
    WITHDRAWN = "지원 취소"


class InterviewStatus(str, enum.Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class NotificationStatus(str, enum.Enum):
    UNREAD = "unread"
    READ = "read"


class EmploymentType(str, enum.Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"


# 지원자 정보 열람, 지원 현황 집계가 가능한 역할
PRIVILEGED_ROLES = (UserRole.COMPANY_USER, UserRole.ADMIN)


def value_enum(enum_cls, name: str) -> Enum:
    """enum의 name이 아니라 value("지원 완료" 등)를 VARCHAR로 저장"""
    return Enum(
        enum_cls,
        name=name,
        native_enum=False,
        length=20,
        values_callable=lambda e: [m.value for m in e],
    )
