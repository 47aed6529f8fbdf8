from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_db
from app.api.result import ok_response
from app.schemas.company import CompanyCreate, CompanyResponse
from app.services.company_service import company_service

router = APIRouter()


@router.get("")
def list_companies(
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    companies = company_service.list_companies(db)
    return ok_response([CompanyResponse.model_validate(c) for c in companies])


@router.get("/{company_id}")
def get_company(
    company_id: int,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    company = company_service.get_company(db, company_id)
    return ok_response(CompanyResponse.model_validate(company))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_company(
    company_in: CompanyCreate,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    company = company_service.create_company(db, company_in)
    return ok_response(CompanyResponse.model_validate(company), message="회사가 등록되었습니다.")
