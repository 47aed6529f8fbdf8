from typing import List, Optional

from sqlalchemy.orm import Session

from app.models import Notification, NotificationStatus
from app.repositories.base import BaseRepository


class NotificationRepository(BaseRepository[Notification]):
    model = Notification

    def create(self, db: Session, user_id: int, message: str) -> Notification:
        return self.add(db, Notification(user_id=user_id, message=message))

    def get_all_by_user_id(
        self,
        db: Session,
        user_id: int,
        status: Optional[NotificationStatus] = None,
    ) -> List[Notification]:
        query = db.query(Notification).filter(Notification.user_id == user_id)
        if status is not None:
            query = query.filter(Notification.status == status)
        return query.order_by(Notification.created_at.desc(), Notification.id.desc()).all()

    def get_by_id_for_user(self, db: Session, notification_id: int, user_id: int) -> Optional[Notification]:
        return (
            db.query(Notification)
            .filter(Notification.id == notification_id, Notification.user_id == user_id)
            .first()
        )


notification_repo = NotificationRepository()
