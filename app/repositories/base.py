from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType]):
    """
    공통 CRUD. commit은 서비스 계층의 transaction()이 담당하고
    레포지토리는 flush까지만 합니다.
    """
    model: Type[ModelType]

    def get_by_id(self, db: Session, obj_id: int) -> Optional[ModelType]:
        return db.get(self.model, obj_id)

    def get_all(self, db: Session) -> List[ModelType]:
        return db.query(self.model).order_by(self.model.id).all()

    def add(self, db: Session, obj: ModelType) -> ModelType:
        db.add(obj)
        db.flush()
        return obj

    def delete(self, db: Session, obj: ModelType) -> None:
        db.delete(obj)
        db.flush()

    def count(self, db: Session) -> int:
        return db.query(self.model).count()
