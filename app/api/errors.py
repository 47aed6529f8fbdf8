import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.result import error_response
from app.core.exceptions import AppException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "서버 오류가 발생했습니다."

VALUE_ERROR_PREFIX = "Value error, "

# 요청 필드 -> 에러 메시지에 쓰는 한국어 이름
FIELD_LABELS = {
    # 인증
    "email": "이메일",
    "password": "비밀번호",
    "name": "이름",
    "role": "역할",
    "refreshToken": "리프레시 토큰",
    # 채용 공고
    "title": "제목",
    "company": "회사명",
    "location": "위치",
    "experience": "경력",
    "education": "학력",
    "employmentType": "고용 형태",
    "employment_type": "고용 형태",
    "deadline": "마감일",
    "techStack": "기술 스택",
    "tech_stack": "기술 스택",
    "salary": "연봉",
    "description": "설명",
    "link": "링크",
    # 지원 / 인터뷰
    "jobId": "채용 공고 ID",
    "job_id": "채용 공고 ID",
    "userId": "사용자 ID",
    "applicationId": "지원서 ID",
    "resume": "이력서",
    "status": "상태",
    "interview_date": "면접 일시",
    "feedback": "피드백",
    # 회사 / 리뷰
    "industry": "업종",
    "website": "웹사이트",
    "contact_number": "전화번호",
    "rating": "평점",
    "review_text": "리뷰 내용",
    # 목록 조회
    "page": "페이지",
    "limit": "페이지 크기",
    "sortBy": "정렬 기준",
    "sortOrder": "정렬 순서",
}


def _field_name(loc) -> str:
    # 리스트 항목 에러는 loc 끝에 인덱스(int)가 붙음
    names = [part for part in loc if isinstance(part, str) and part not in ("body", "query", "path", "header")]
    return names[-1] if names else ""


def _topic(label: str) -> str:
    """받침이 있으면 '은', 없으면 '는'. 한글로 끝나지 않으면 '은(는)'"""
    last = label[-1]
    if not "가" <= last <= "힣":
        return f"{label}은(는)"
    has_final = (ord(last) - ord("가")) % 28 != 0
    return f"{label}{'은' if has_final else '는'}"


def _translate(error: Dict[str, Any]) -> str:
    """pydantic 에러 1건 -> 한국어 메시지"""
    err_type = error.get("type", "")
    ctx = error.get("ctx") or {}
    field = _field_name(error.get("loc", ()))
    subject = _topic(FIELD_LABELS.get(field, field)) if field else ""

    if err_type == "missing":
        return f"{subject} 필수 항목입니다." if field else "요청 본문이 필요합니다."
    if err_type == "string_too_short":
        return f"{subject} 최소 {ctx.get('min_length')}자 이상이어야 합니다."
    if err_type == "string_too_long":
        return f"{subject} 최대 {ctx.get('max_length')}자 이하여야 합니다."
    if err_type == "too_short":
        return f"{subject} 최소 {ctx.get('min_length')}개 이상이어야 합니다."
    if err_type in ("enum", "literal_error"):
        return f"{subject} {ctx.get('expected')} 중 하나여야 합니다."
    if err_type == "greater_than":
        return f"{subject} {ctx.get('gt')}보다 커야 합니다."
    if err_type == "greater_than_equal":
        return f"{subject} {ctx.get('ge')} 이상이어야 합니다."
    if err_type.startswith("date") and not err_type.startswith("datetime"):
        return f"{subject} 유효한 날짜(YYYY-MM-DD)여야 합니다."
    if err_type.startswith("datetime"):
        return f"{subject} 유효한 날짜/시간이어야 합니다."
    if err_type in ("int_parsing", "int_type", "int_from_float"):
        return f"{subject} 정수여야 합니다."
    if err_type in ("float_parsing", "float_type"):
        return f"{subject} 숫자여야 합니다."
    if err_type == "string_type":
        return f"{subject} 문자열이어야 합니다."
    if err_type == "list_type":
        return f"{subject} 배열이어야 합니다."
    if err_type == "json_invalid":
        return "요청 본문이 올바른 JSON 형식이 아닙니다."
    if err_type == "value_error":
        if field == "email":
            return "유효한 이메일 형식이어야 합니다."
        msg = error.get("msg", "")
        return msg[len(VALUE_ERROR_PREFIX):] if msg.startswith(VALUE_ERROR_PREFIX) else msg

    return f"{FIELD_LABELS.get(field, field)}: {error.get('msg', '')}" if field else error.get("msg", "")


def format_validation_errors(errors: List[Dict[str, Any]]) -> str:
    return ", ".join(_translate(error) for error in errors)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s 처리 중 에러: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.message, **exc.extra),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_response(format_validation_errors(exc.errors())),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "요청을 처리할 수 없습니다."
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(message),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s %s 처리 중 예상치 못한 에러", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response(INTERNAL_ERROR_MESSAGE),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
