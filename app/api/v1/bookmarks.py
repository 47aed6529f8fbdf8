from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_db
from app.api.result import ok_response
from app.schemas.review import BookmarkResponse, BookmarkToggle
from app.services.review_service import DEFAULT_BOOKMARK_PAGE_SIZE, bookmark_service

router = APIRouter()


@router.post("")
def toggle_bookmark(
    body: BookmarkToggle,
    response: Response,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    [북마크 토글]
    없으면 추가(201), 있으면 삭제(200)
    """
    bookmark, added = bookmark_service.toggle(db, current_user, body.job_id)
    if added:
        response.status_code = status.HTTP_201_CREATED
        return ok_response(
            BookmarkResponse.from_bookmark(bookmark, with_job=False),
            message="북마크가 추가되었습니다.",
        )
    response.status_code = status.HTTP_200_OK
    return ok_response(message="북마크가 제거되었습니다.")


@router.get("")
def list_bookmarks(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_BOOKMARK_PAGE_SIZE, ge=1, le=100),
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    result = bookmark_service.page_for_user(db, current_user, page=page, limit=limit)
    return ok_response(result["data"], pagination=result["pagination"])
