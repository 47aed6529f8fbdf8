import unittest
from datetime import date

import requests

from app.models import Company, Job
from app.services.crawler import (
    CrawlReport,
    crawl_saramin,
    format_deadline,
    normalize_job,
    parse_listing,
    seed_jobs_if_empty,
)
from app.testing import DatabaseTestCase

TODAY = date(2026, 10, 18)

LISTING_HTML = """
<div class="list_body">
  <div class="box_item">
    <div class="job_tit"><a href="/zf_user/jobs/relay/view?rec_idx=1">  파이썬 백엔드 개발자  </a></div>
    <div class="company_nm"><a>알파소프트</a></div>
    <p class="work_place">서울 강남구</p>
    <p class="career">경력 3년↑ · 정규직</p>
    <p class="education">대졸↑</p>
    <div class="support_detail"><span class="date">D-5</span></div>
    <div class="job_sector"><span>Python</span><span>Django</span></div>
    <p class="salary">면접 후 결정</p>
  </div>
  <div class="box_item">
    <div class="job_tit"><a href="/zf_user/jobs/relay/view?rec_idx=2">데이터 엔지니어</a></div>
    <div class="company_nm"><a>베타랩스</a></div>
    <p class="work_place">경기 성남시</p>
    <p class="career">신입</p>
    <div class="support_detail"><span class="date">~12.31(목)</span></div>
  </div>
  <div class="box_item">
    <div class="job_tit"><a href="/zf_user/jobs/relay/view?rec_idx=3">회사명 없는 공고</a></div>
  </div>
</div>
"""


class TestFormatDeadline(unittest.TestCase):
    def test_countdown(self):
        self.assertEqual(format_deadline("D-5", today=TODAY), date(2026, 10, 23))
        self.assertEqual(format_deadline("D-0", today=TODAY), TODAY)

    def test_month_day(self):
        self.assertEqual(format_deadline("~12.31(목)", today=TODAY), date(2026, 12, 31))
        self.assertEqual(format_deadline("~ 11.05", today=TODAY), date(2026, 11, 5))

    def test_unrecognized(self):
        self.assertIsNone(format_deadline("상시채용", today=TODAY))
        self.assertIsNone(format_deadline("", today=TODAY))
        self.assertIsNone(format_deadline("~02.30(월)", today=TODAY))


class TestNormalize(unittest.TestCase):
    def test_required_fields(self):
        self.assertIsNone(normalize_job({"title": "t", "company": "c"}))
        self.assertIsNone(normalize_job({"title": "  ", "company": "c", "link": "l"}))

    def test_career_split_and_description(self):
        record = normalize_job({
            "title": "  백엔드  개발자 ",
            "company": "알파",
            "link": "https://x/1",
            "career": "경력무관 · 계약직",
        }, today=TODAY)
        self.assertEqual(record["title"], "백엔드 개발자")
        self.assertEqual(record["experience"], "경력무관")
        self.assertEqual(record["employment_type"], "계약직")
        self.assertEqual(record["description"], "백엔드 개발자")
        self.assertIsNone(record["location"])


class TestParseListing(unittest.TestCase):
    def test_parse(self):
        report = CrawlReport()
        records = parse_listing(LISTING_HTML, report, base_url="https://www.saramin.co.kr", today=TODAY)

        self.assertEqual(len(records), 2)
        self.assertEqual(report.skipped, 1)

        first = records[0]
        self.assertEqual(first["title"], "파이썬 백엔드 개발자")
        self.assertEqual(first["link"], "https://www.saramin.co.kr/zf_user/jobs/relay/view?rec_idx=1")
        self.assertEqual(first["tech_stack"], "Python, Django")
        self.assertEqual(first["deadline"], date(2026, 10, 23))
        self.assertEqual(first["employment_type"], "정규직")

        second = records[1]
        self.assertEqual(second["experience"], "신입")
        self.assertIsNone(second["employment_type"])
        self.assertIsNone(second["salary"])


class TestCrawlAndSeed(DatabaseTestCase):
    def test_crawl_inserts_and_is_idempotent(self):
        report = crawl_saramin(self.db, pages=1, fetch=lambda page: LISTING_HTML, today=TODAY)
        self.assertEqual(report.inserted, 2)
        self.assertEqual(report.pages_fetched, 1)
        self.assertEqual(self.db.query(Job).count(), 2)
        self.assertEqual(self.db.query(Company).count(), 2)

        again = crawl_saramin(self.db, pages=1, fetch=lambda page: LISTING_HTML, today=TODAY)
        self.assertEqual(again.inserted, 0)
        self.assertEqual(self.db.query(Job).count(), 2)

    def test_page_failure_does_not_abort_run(self):
        def fetch(page):
            if page == 1:
                raise requests.ConnectionError("boom")
            return LISTING_HTML

        report = crawl_saramin(self.db, pages=2, fetch=fetch, today=TODAY)
        self.assertEqual(report.pages_failed, 1)
        self.assertEqual(report.pages_fetched, 1)
        self.assertEqual(report.inserted, 2)
        self.assertFalse(report.ok)
        self.assertEqual(len(report.errors), 1)

    def test_same_link_on_two_pages(self):
        report = crawl_saramin(self.db, pages=2, fetch=lambda page: LISTING_HTML, today=TODAY)
        self.assertEqual(report.inserted, 2)
        self.assertEqual(report.skipped, 1 + 1 + 2)

    def test_seed_only_when_empty(self):
        calls = []

        def fetch(page):
            calls.append(page)
            return LISTING_HTML

        first = seed_jobs_if_empty(self.db, pages=1, fetch=fetch, today=TODAY)
        self.assertEqual(first.inserted, 2)

        second = seed_jobs_if_empty(self.db, pages=1, fetch=fetch, today=TODAY)
        self.assertIsNone(second)
        self.assertEqual(calls, [1])

    def test_seed_with_zero_pages_fetches_nothing(self):
        calls = []

        def fetch(page):
            calls.append(page)
            return LISTING_HTML

        report = seed_jobs_if_empty(self.db, pages=0, fetch=fetch, today=TODAY)
        self.assertEqual(calls, [])
        self.assertEqual(report.pages_fetched, 0)
        self.assertEqual(report.inserted, 0)
        self.assertEqual(self.db.query(Job).count(), 0)


if __name__ == "__main__":
    unittest.main()
