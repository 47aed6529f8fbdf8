from typing import Optional

from sqlalchemy.orm import Session

from app.models import Company
from app.repositories.base import BaseRepository


class CompanyRepository(BaseRepository[Company]):
    model = Company

    def get_by_name(self, db: Session, name: str) -> Optional[Company]:
        return db.query(Company).filter(Company.name == name).first()

    def get_or_create(self, db: Session, name: str) -> Company:
        """
        공고의 회사명으로 companies 행을 찾고, 없으면 이름만 채워서 생성
        """
        company = self.get_by_name(db, name)
        if company is None:
            company = self.add(db, Company(name=name))
        return company


company_repo = CompanyRepository()
