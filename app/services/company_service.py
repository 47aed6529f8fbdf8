import logging
from typing import List

from sqlalchemy.orm import Session

from app.core.exceptions import ConflictException, NotFoundException
from app.core.transaction import transaction
from app.models import Company
from app.repositories.company_repo import company_repo
from app.schemas.company import CompanyCreate

logger = logging.getLogger(__name__)

# 이름 외에 POST /companies 로만 채워지는 필드
DETAIL_FIELDS = ("location", "industry", "website", "contact_number")


class CompanyService:
    def list_companies(self, db: Session) -> List[Company]:
        return company_repo.get_all(db)

    def get_company(self, db: Session, company_id: int) -> Company:
        company = company_repo.get_by_id(db, company_id)
        if not company:
            raise NotFoundException("회사를 찾을 수 없습니다.")
        return company

    def create_company(self, db: Session, company_in: CompanyCreate) -> Company:
        """
        공고 등록/크롤링으로 이름만 생긴 회사는 상세 정보를 채워서 등록 처리.
        상세 정보까지 이미 있는 회사만 중복으로 거절
        """
        fields = company_in.model_dump()
        existing = company_repo.get_by_name(db, company_in.name)

        if existing is not None:
            if any(getattr(existing, key) is not None for key in DETAIL_FIELDS):
                raise ConflictException("이미 등록된 회사입니다.")

            with transaction(db):
                for key in DETAIL_FIELDS:
                    setattr(existing, key, fields[key])
            logger.info("회사 정보 등록 (이름만 있던 회사): company_id=%s", existing.id)
            return existing

        with transaction(db):
            company = company_repo.add(db, Company(**fields))
        logger.info("회사 등록: company_id=%s", company.id)
        return company


company_service = CompanyService()
