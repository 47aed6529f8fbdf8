from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_db
from app.api.result import ok_response
from app.schemas.job import JobCreate, JobUpdate
from app.services.job_service import job_service

router = APIRouter()


@router.get("")
def list_jobs(
    page: int = Query(1, ge=1),
    sort_by: str = Query("id", alias="sortBy"),
    sort_order: str = Query("ASC", alias="sortOrder"),
    location: Optional[str] = None,
    experience: Optional[str] = None,
    salary: Optional[str] = None,
    tech_stack: Optional[str] = Query(None, alias="techStack"),
    keyword: Optional[str] = None,
    company: Optional[str] = None,
    position: Optional[str] = None,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    [채용 공고 목록]
    - 한 페이지 20개
    - experience만 정확히 일치, 나머지 필터는 부분 일치
    """
    result = job_service.list_jobs(
        db,
        page=page,
        sort_by=sort_by,
        sort_order=sort_order,
        location=location,
        experience=experience,
        salary=salary,
        tech_stack=tech_stack,
        keyword=keyword,
        company=company,
        position=position,
    )
    return ok_response(
        result["data"],
        totalItems=result["totalItems"],
        totalPages=result["totalPages"],
        currentPage=result["currentPage"],
    )


@router.get("/{job_id}")
def get_job(
    job_id: int,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return ok_response(job_service.get_job_detail(db, job_id))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_job(
    job_in: JobCreate,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    job = job_service.create_job(db, job_in, posted_by=current_user["id"])
    return ok_response(job, message="채용 공고가 등록되었습니다.")


@router.put("/{job_id}")
def update_job(
    job_id: int,
    job_in: JobUpdate,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    job = job_service.update_job(db, job_id, job_in)
    return ok_response(job, message="채용 공고가 수정되었습니다.")


@router.delete("/{job_id}")
def delete_job(
    job_id: int,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    job_service.delete_job(db, job_id)
    return ok_response(message="채용 공고가 삭제되었습니다.")
