"""
API 테스트 공통 베이스.
메모리 SQLite(StaticPool) 위에서 앱을 띄우고 get_db 의존성을 바꿔 끼웁니다.
"""
import unittest
from datetime import date, timedelta
from typing import Any, Dict, Optional

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401  (테이블 등록)
from app.core.db import Base, get_db
from app.main import app

DEFAULT_PASSWORD = "password123"


def make_test_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Postgres와 같이 FK(ON DELETE) 동작
    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_conn, _):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


class DatabaseTestCase(unittest.TestCase):
    """테스트마다 빈 스키마를 새로 만듭니다."""

    @classmethod
    def setUpClass(cls):
        cls.engine = make_test_engine()
        cls.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=cls.engine)

    @classmethod
    def tearDownClass(cls):
        cls.engine.dispose()

    def setUp(self):
        Base.metadata.create_all(bind=self.engine)
        self.db = self.SessionLocal()

    def tearDown(self):
        self.db.close()
        Base.metadata.drop_all(bind=self.engine)


class ApiTestCase(DatabaseTestCase):
    def setUp(self):
        super().setUp()

        def _override_get_db():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = _override_get_db
        # with 블록 없이 쓰므로 lifespan(크롤링)은 실행되지 않음
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()
        super().tearDown()

    # ---------------------------------------------------------
    # helpers
    # ---------------------------------------------------------
    def register(self, email: str, name: str = "tester", role: str = "user",
                 password: str = DEFAULT_PASSWORD):
        return self.client.post("/auth/register", json={
            "email": email,
            "password": password,
            "name": name,
            "role": role,
        })

    def login(self, email: str, password: str = DEFAULT_PASSWORD):
        return self.client.post("/auth/login", json={"email": email, "password": password})

    def auth_headers(self, email: str, role: str = "user") -> Dict[str, str]:
        """가입 + 로그인 후 Authorization 헤더 반환"""
        self.register(email, name=email.split("@")[0], role=role)
        token = self.login(email).json()["data"]["accessToken"]
        return {"Authorization": f"Bearer {token}"}

    def job_payload(self, **overrides: Any) -> Dict[str, Any]:
        payload = {
            "title": "백엔드 개발자",
            "company": "테스트컴퍼니",
            "location": "서울 강남구",
            "experience": "경력 3년",
            "education": "대졸 이상",
            "employmentType": "full-time",
            "deadline": (date.today() + timedelta(days=30)).isoformat(),
            "techStack": ["Python", "FastAPI"],
            "salary": 5000,
            "description": "파이썬 백엔드 개발을 담당합니다.",
            "link": "https://example.com/jobs/1",
        }
        payload.update(overrides)
        return payload

    def create_job(self, headers: Dict[str, str], **overrides: Any) -> Dict[str, Any]:
        response = self.client.post("/jobs", json=self.job_payload(**overrides), headers=headers)
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()["data"]

    def apply(self, headers: Dict[str, str], job_id: int, resume: Optional[str] = None):
        body = {"jobId": job_id}
        if resume is not None:
            body["resume"] = resume
        return self.client.post("/applications", json=body, headers=headers)
