"""
예전 스키마(jobs.company 문자열)로 만들어진 DB를 jobs.company_id FK 구조로 옮기는 일회성 스크립트.
여러 번 실행해도 결과가 같습니다.

    python -m scripts.migrate_company_fk
"""
from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine

LEGACY_COLUMN = "company"


def migrate(engine: Engine) -> int:
    """back-fill 된 jobs 행 수를 반환"""
    from app.models import Company

    # 1. companies 테이블 준비
    Company.__table__.create(bind=engine, checkfirst=True)

    columns = {c["name"] for c in inspect(engine).get_columns("jobs")}
    if LEGACY_COLUMN not in columns:
        print("ℹ️  jobs.company 컬럼이 없습니다. 이미 새 스키마입니다.")
        return 0

    with engine.begin() as conn:
        # 2. company_id 컬럼 추가
        if "company_id" not in columns:
            conn.execute(text(
                "ALTER TABLE jobs ADD COLUMN company_id INTEGER REFERENCES companies(id) ON DELETE SET NULL"
            ))
            print("✅ jobs.company_id 컬럼 추가")

        # 3. 회사명마다 companies 행 생성 (이미 있으면 건너뜀)
        names = conn.execute(text(
            "SELECT DISTINCT TRIM(company) FROM jobs "
            "WHERE company IS NOT NULL AND TRIM(company) <> ''"
        )).scalars().all()
        for name in names:
            exists = conn.execute(
                text("SELECT 1 FROM companies WHERE name = :name"), {"name": name}
            ).first()
            if not exists:
                conn.execute(text("INSERT INTO companies (name) VALUES (:name)"), {"name": name})
        print(f"🏢 회사 {len(names)}곳 확인")

        # 4. company_id back-fill
        result = conn.execute(text(
            "UPDATE jobs SET company_id = ("
            "  SELECT companies.id FROM companies WHERE companies.name = TRIM(jobs.company)"
            ") WHERE company_id IS NULL AND company IS NOT NULL"
        ))
        updated = result.rowcount or 0

    print(f"✅ jobs {updated}건 company_id 연결 완료")
    return updated


def main():
    from app.core.db import get_engine

    migrate(get_engine())


if __name__ == "__main__":
    main()
