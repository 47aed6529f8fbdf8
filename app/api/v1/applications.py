from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_db, require_roles
from app.api.result import ok_response
from app.models.enums import UserRole
from app.schemas.application import ApplicationCreate, ApplicationResponse
from app.services.application_service import application_service

router = APIRouter()


@router.post("")
def apply(
    application_in: ApplicationCreate,
    response: Response,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    [지원하기]
    - 처음 지원: 201
    - 취소했던 공고에 다시 지원: 같은 지원서를 '지원 완료'로 되돌리고 200
    - 이미 지원 완료 상태: 400
    """
    application, created = application_service.apply(db, current_user, application_in)
    if created:
        response.status_code = status.HTTP_201_CREATED
        message = "지원이 완료되었습니다."
    else:
        response.status_code = status.HTTP_200_OK
        message = "지원 상태가 '지원 완료'로 변경되었습니다."
    return ok_response(ApplicationResponse.from_application(application), message=message)


@router.get("")
def list_applications(
    status_filter: Optional[str] = Query(None, alias="status"),
    job_id: Optional[int] = Query(None, alias="jobId"),
    user_id: Optional[int] = Query(None, alias="userId"),
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    rows = application_service.list_for_caller(
        db,
        current_user,
        status=status_filter,
        job_id=job_id,
        user_id=user_id,
    )
    return ok_response(rows)


@router.delete("/{job_id}")
def withdraw(
    job_id: int,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    [지원 취소]
    path 값은 공고 ID. 본인이 해당 공고에 낸 지원서를 '지원 취소'로 변경
    """
    application = application_service.withdraw(db, current_user, job_id)
    return ok_response(
        ApplicationResponse.from_application(application),
        message="지원이 취소되었습니다.",
    )


@router.get("/job/{job_id}/summary")
def summarize(
    job_id: int,
    current_user: dict = Depends(require_roles(UserRole.COMPANY_USER, UserRole.ADMIN)),
    db: Session = Depends(get_db),
):
    summary = application_service.summarize_for_job(db, current_user, job_id)
    return ok_response(summary["data"], companyName=summary["companyName"])
