import os
from dotenv import load_dotenv

# .env 파일 로드
load_dotenv()


def _env_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    # 프로젝트 기본 설정
    PROJECT_NAME: str = "Job Board API"
    VERSION: str = "1.0.0"

    # HTTP 리스너
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # 데이터베이스 설정
    DB_USER: str = os.getenv("DB_USER", "postgres")
    DB_PASSWORD: str = os.getenv("DB_PASSWORD", "")
    DB_HOST: str = os.getenv("DB_HOST", "localhost")
    DB_PORT: str = os.getenv("DB_PORT", "5432")
    DB_NAME: str = os.getenv("DB_NAME", "jobboard")

    # 전체 URL을 직접 지정하면 DB_* 값보다 우선 (예: sqlite:///./jobboard.db)
    DATABASE_URL_OVERRIDE: str = os.getenv("DATABASE_URL", "")

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        from urllib.parse import quote_plus
        encoded_user = quote_plus(self.DB_USER)
        encoded_password = quote_plus(self.DB_PASSWORD)
        return f"postgresql://{encoded_user}:{encoded_password}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # JWT
    SECRET_KEY: str = os.getenv("SECRET_KEY", "change-this-secret-key")
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
    REFRESH_TOKEN_EXPIRE_DAYS: int = int(os.getenv("REFRESH_TOKEN_EXPIRE_DAYS", "7"))

    # 채용공고 시드 크롤러
    CRAWL_ON_STARTUP: bool = _env_bool("CRAWL_ON_STARTUP", True)
    CRAWL_PAGES: int = int(os.getenv("CRAWL_PAGES", "3"))
    CRAWL_TIMEOUT_SEC: float = float(os.getenv("CRAWL_TIMEOUT_SEC", "10"))
    CRAWL_BASE_URL: str = os.getenv("CRAWL_BASE_URL", "https://www.saramin.co.kr")


settings = Settings()
