import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_exception_handlers
from app.api.v1 import (
    applications,
    auth,
    bookmarks,
    companies,
    interviews,
    jobreviews,
    jobs,
    notifications,
)
from app.core.config import settings
from app.core.db import get_session_factory, init_db
from app.core.log import setup_logging
from app.services.crawler import seed_jobs_if_empty

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    # 테이블 자동 생성 (없는 테이블만)
    init_db()

    if settings.CRAWL_ON_STARTUP:
        db = get_session_factory()()
        try:
            seed_jobs_if_empty(db)
        except Exception:
            # 시드 실패로 서버가 안 뜨면 안 됨
            logger.exception("초기 채용공고 크롤링 실패")
        finally:
            db.close()

    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    docs_url="/api-docs",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth.router, prefix="/auth", tags=["Auth"])
app.include_router(jobs.router, prefix="/jobs", tags=["Jobs"])
app.include_router(applications.router, prefix="/applications", tags=["Applications"])
app.include_router(interviews.router, prefix="/interviews", tags=["Interviews"])
app.include_router(companies.router, prefix="/companies", tags=["Companies"])
app.include_router(jobreviews.router, prefix="/jobreviews", tags=["JobReviews"])
app.include_router(bookmarks.router, prefix="/bookmarks", tags=["Bookmarks"])
app.include_router(notifications.router, prefix="/notifications", tags=["Notifications"])


# 헬스 체크용 (서버 켜졌나 확인)
@app.get("/")
def health_check():
    return {"status": "ok"}
