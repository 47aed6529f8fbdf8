from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundException, ValidationException
from app.core.transaction import transaction
from app.models import Notification, NotificationStatus
from app.repositories.notification_repo import notification_repo


class NotificationService:
    def list_for_user(self, db: Session, current_user: dict, status: Optional[str] = None) -> List[Notification]:
        parsed = None
        if status:
            try:
                parsed = NotificationStatus(status)
            except ValueError:
                raise ValidationException("알림 상태는 unread, read 중 하나여야 합니다.")
        return notification_repo.get_all_by_user_id(db, current_user["id"], parsed)

    def mark_read(self, db: Session, current_user: dict, notification_id: int) -> Notification:
        notification = notification_repo.get_by_id_for_user(db, notification_id, current_user["id"])
        if not notification:
            raise NotFoundException("알림을 찾을 수 없습니다.")

        with transaction(db):
            notification.status = NotificationStatus.READ
        return notification


notification_service = NotificationService()
