"""
사람인 공개 채용공고 목록을 크롤링해서 jobs 테이블을 채우는 시더.

- 서버 시작 시 jobs 테이블이 비어 있을 때만 실행
- 페이지는 순서대로, 항목도 하나씩 저장 (동시 요청 없음)
- 같은 link가 이미 있으면 건너뜀 (여러 번 실행해도 결과가 같음)
- 항목/페이지 단위 실패는 CrawlReport에 모아서 반환
"""
import argparse
import logging
import re
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Callable, Dict, List, Optional

import requests
from bs4 import BeautifulSoup
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.models import Job
from app.repositories.company_repo import company_repo
from app.repositories.job_repo import job_repo

logger = logging.getLogger(__name__)

LIST_PATH = "/zf_user/jobs/public/list"
PAGE_COUNT = 50
HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )
}
CAREER_SEPARATOR = "·"

_D_DAY_RE = re.compile(r"D-(\d+)")
_MONTH_DAY_RE = re.compile(r"~\s*(\d{1,2})\.(\d{1,2})(?:\s*\(.\))?")


@dataclass
class CrawlReport:
    pages_fetched: int = 0
    pages_failed: int = 0
    inserted: int = 0
    skipped: int = 0
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


# ============================================================
# 1) 정규화
# ============================================================
def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = " ".join(value.split())
    return value or None


def format_deadline(text: Optional[str], today: Optional[date] = None) -> Optional[date]:
    """
    마감일 표기를 실제 날짜로 변환
    - "D-3"        -> 오늘 + 3일
    - "~12.31(화)" -> 올해 12월 31일
    - 그 외 ("상시채용" 등) -> None
    """
    if not text:
        return None
    today = today or date.today()

    match = _D_DAY_RE.search(text)
    if match:
        return today + timedelta(days=int(match.group(1)))

    match = _MONTH_DAY_RE.search(text)
    if match:
        try:
            return date(today.year, int(match.group(1)), int(match.group(2)))
        except ValueError:
            return None

    return None


def normalize_job(raw: Dict[str, Optional[str]], today: Optional[date] = None) -> Optional[Dict[str, Any]]:
    """
    필수 필드(title, company, link)가 없으면 None
    """
    title = _clean(raw.get("title"))
    company = _clean(raw.get("company"))
    link = _clean(raw.get("link"))
    if not title or not company or not link:
        return None

    # "경력무관 · 정규직" -> ("경력무관", "정규직")
    career_parts = [p.strip() for p in (raw.get("career") or "").split(CAREER_SEPARATOR)]
    experience = career_parts[0] if career_parts and career_parts[0] else None
    employment_type = career_parts[1] if len(career_parts) > 1 and career_parts[1] else None

    return {
        "title": title,
        "company": company,
        "link": link,
        "location": _clean(raw.get("location")),
        "education": _clean(raw.get("education")),
        "experience": experience,
        "employment_type": employment_type,
        "deadline": format_deadline(raw.get("deadline"), today=today),
        "tech_stack": _clean(raw.get("tech_stack")),
        "salary": _clean(raw.get("salary")),
        # 목록 페이지에는 본문이 없어서 제목을 설명으로 사용
        "description": title,
    }


# ============================================================
# 2) HTML 파싱
# ============================================================
def _text(node, selector: str) -> Optional[str]:
    el = node.select_one(selector)
    return el.get_text(" ", strip=True) if el else None


def parse_item(item, base_url: str) -> Dict[str, Optional[str]]:
    title_el = item.select_one(".job_tit a")
    href = title_el.get("href") if title_el else None
    sectors = [s.get_text(strip=True) for s in item.select(".job_sector span")]

    return {
        "title": title_el.get_text(" ", strip=True) if title_el else None,
        "company": _text(item, ".company_nm a"),
        "link": f"{base_url}{href}" if href else None,
        "location": _text(item, ".work_place"),
        "education": _text(item, ".education"),
        "career": _text(item, ".career"),
        "deadline": _text(item, ".support_detail .date"),
        "tech_stack": ", ".join(s for s in sectors if s) or None,
        "salary": _text(item, ".salary"),
    }


def parse_listing(html: str, report: CrawlReport, base_url: str = None,
                  today: Optional[date] = None) -> List[Dict[str, Any]]:
    """목록 HTML -> 정규화된 공고 dict 목록. 항목별 실패는 report에 기록"""
    base_url = (base_url or settings.CRAWL_BASE_URL).rstrip("/")
    soup = BeautifulSoup(html, "html.parser")

    records = []
    for index, item in enumerate(soup.select(".box_item")):
        try:
            normalized = normalize_job(parse_item(item, base_url), today=today)
        except Exception as e:
            logger.warning("항목 파싱 중 에러 발생 (index=%s): %s", index, e)
            report.errors.append(f"parse item {index}: {e}")
            continue

        if normalized is None:
            logger.debug("필수 필드 누락: index=%s", index)
            report.skipped += 1
            continue
        records.append(normalized)
    return records


# ============================================================
# 3) 요청 / 저장
# ============================================================
def fetch_listing_page(http: requests.Session, page: int, base_url: str = None) -> str:
    base_url = (base_url or settings.CRAWL_BASE_URL).rstrip("/")
    response = http.get(
        f"{base_url}{LIST_PATH}",
        params={"page": page, "type": "all", "page_count": PAGE_COUNT, "isAjaxRequest": "y"},
        headers=HEADERS,
        timeout=settings.CRAWL_TIMEOUT_SEC,
    )
    response.raise_for_status()
    return response.text


def save_jobs(db: Session, records: List[Dict[str, Any]], report: CrawlReport) -> None:
    """link 기준으로 없을 때만 insert. 한 항목이 실패해도 나머지는 계속 저장"""
    for record in records:
        if job_repo.get_by_link(db, record["link"]):
            report.skipped += 1
            continue

        savepoint = db.begin_nested()
        try:
            fields = dict(record)
            company = company_repo.get_or_create(db, fields.pop("company"))
            job_repo.add(db, Job(company=company, views=0, **fields))
            savepoint.commit()
            report.inserted += 1
        except SQLAlchemyError as e:
            savepoint.rollback()
            logger.error("공고 저장 실패 (%s): %s", record["link"], e)
            report.errors.append(f"insert {record['link']}: {e}")
    db.commit()


def crawl_saramin(
    db: Session,
    pages: int = 3,
    fetch: Optional[Callable[[int], str]] = None,
    today: Optional[date] = None,
) -> CrawlReport:
    """
    1 ~ pages 페이지를 순서대로 가져와 저장
    fetch(page) -> html 을 넘기면 HTTP 대신 사용 (테스트용)
    """
    report = CrawlReport()
    http = None
    if fetch is None:
        http = requests.Session()
        fetch = lambda page: fetch_listing_page(http, page)  # noqa: E731

    try:
        for page in range(1, pages + 1):
            try:
                html = fetch(page)
            except requests.RequestException as e:
                logger.error("페이지 요청 중 에러 발생 (page=%s): %s", page, e)
                report.pages_failed += 1
                report.errors.append(f"fetch page {page}: {e}")
                continue

            report.pages_fetched += 1
            save_jobs(db, parse_listing(html, report, today=today), report)
            logger.info("%s페이지 크롤링 완료 (누적 저장 %s건)", page, report.inserted)
    finally:
        if http is not None:
            http.close()

    return report


def seed_jobs_if_empty(db: Session, pages: int = None, **kwargs) -> Optional[CrawlReport]:
    """jobs 테이블이 비어 있을 때만 크롤링. 이미 데이터가 있으면 None"""
    if job_repo.count(db) > 0:
        logger.info("Jobs 테이블에 데이터가 이미 존재합니다. 크롤링을 실행하지 않습니다.")
        return None

    logger.info("Jobs 테이블에 데이터가 없습니다. 크롤링을 시작합니다.")
    report = crawl_saramin(db, pages=settings.CRAWL_PAGES if pages is None else pages, **kwargs)
    logger.info(
        "크롤링 종료: pages=%s (실패 %s), inserted=%s, skipped=%s, errors=%s",
        report.pages_fetched, report.pages_failed, report.inserted, report.skipped, len(report.errors),
    )
    return report


def main() -> None:
    from app.core.db import get_session_factory, init_db
    from app.core.log import setup_logging

    parser = argparse.ArgumentParser(description="사람인 채용공고 크롤링")
    parser.add_argument("--pages", type=int, default=settings.CRAWL_PAGES)
    parser.add_argument("--force", action="store_true", help="jobs 테이블이 비어 있지 않아도 실행")
    args = parser.parse_args()

    setup_logging()
    init_db()
    db = get_session_factory()()
    try:
        if args.force:
            report = crawl_saramin(db, pages=args.pages)
        else:
            report = seed_jobs_if_empty(db, pages=args.pages)
        if report is not None:
            print(f"inserted={report.inserted} skipped={report.skipped} errors={len(report.errors)}")
    finally:
        db.close()


if __name__ == "__main__":
    main()
