import unittest

from app.models import Company, Job
from app.testing import ApiTestCase


class TestJobList(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.headers = self.auth_headers("kim@example.com")

    def _seed(self, count: int, **fields):
        company = Company(name=fields.pop("company_name", "시드컴퍼니"))
        self.db.add(company)
        for i in range(count):
            self.db.add(Job(
                title=f"공고 {i}",
                company=company,
                link=f"https://example.com/seed/{company.name}/{i}",
                views=0,
                **fields,
            ))
        self.db.commit()

    def test_pagination_and_projection(self):
        self._seed(25, location="서울")

        first = self.client.get("/jobs", headers=self.headers).json()
        self.assertEqual(first["status"], "success")
        self.assertEqual(len(first["data"]), 20)
        self.assertEqual(first["totalItems"], 25)
        self.assertEqual(first["totalPages"], 2)
        self.assertEqual(first["currentPage"], 1)
        self.assertEqual(set(first["data"][0].keys()), {"id", "title", "company", "deadline"})

        second = self.client.get("/jobs?page=2", headers=self.headers).json()
        self.assertEqual(len(second["data"]), 5)

    def test_blank_fields_replaced_by_placeholder(self):
        self._seed(1)
        item = self.client.get("/jobs", headers=self.headers).json()["data"][0]
        self.assertEqual(item["deadline"], "미기제")
        self.assertEqual(item["company"], "시드컴퍼니")

    def test_filter_and_sort(self):
        self.create_job(self.headers, location="서울 강남구", salary=3000, link="https://example.com/a")
        self.create_job(self.headers, location="서울 마포구", salary=5000, link="https://example.com/b")
        self.create_job(self.headers, location="부산 해운대구", salary=4000, link="https://example.com/c")

        body = self.client.get(
            "/jobs?location=서울&sortBy=salary&sortOrder=desc",
            headers=self.headers,
        ).json()
        self.assertEqual(body["totalItems"], 2)
        salaries = [
            self.client.get(f"/jobs/{item['id']}", headers=self.headers).json()["data"]["job"]["salary"]
            for item in body["data"]
        ]
        self.assertEqual(salaries, ["5000", "3000"])

    def test_experience_is_exact_match(self):
        self.create_job(self.headers, experience="경력 3년", link="https://example.com/a")
        self.create_job(self.headers, experience="경력 3년 이상", link="https://example.com/b")

        body = self.client.get("/jobs?experience=경력 3년", headers=self.headers).json()
        self.assertEqual(body["totalItems"], 1)

    def test_keyword_company_and_tech_stack_filters(self):
        self.create_job(self.headers, title="데이터 엔지니어", company="알파소프트",
                        techStack=["Spark"], link="https://example.com/a")
        self.create_job(self.headers, company="베타랩스", link="https://example.com/b")

        self.assertEqual(self.client.get("/jobs?keyword=데이터", headers=self.headers).json()["totalItems"], 1)
        self.assertEqual(self.client.get("/jobs?company=베타", headers=self.headers).json()["totalItems"], 1)
        self.assertEqual(self.client.get("/jobs?techStack=spark", headers=self.headers).json()["totalItems"], 1)

    def test_invalid_sort_key(self):
        response = self.client.get("/jobs?sortBy=password", headers=self.headers)
        self.assertEqual(response.status_code, 400)

    def test_invalid_sort_order(self):
        response = self.client.get("/jobs?sortOrder=sideways", headers=self.headers)
        self.assertEqual(response.status_code, 400)


class TestJobDetail(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.headers = self.auth_headers("kim@example.com")

    def test_views_increase_on_every_read(self):
        job = self.create_job(self.headers)
        for expected in (1, 2, 3):
            data = self.client.get(f"/jobs/{job['id']}", headers=self.headers).json()["data"]
            self.assertEqual(data["job"]["views"], expected)

    def test_related_jobs_same_company_or_stack(self):
        target = self.create_job(self.headers, company="알파소프트", techStack=["Go"],
                                 link="https://example.com/target")
        same_company = self.create_job(self.headers, company="알파소프트", techStack=["Rust"],
                                       link="https://example.com/same-company")
        same_stack = self.create_job(self.headers, company="베타랩스", techStack=["Go"],
                                     link="https://example.com/same-stack")
        self.create_job(self.headers, company="감마웍스", techStack=["Kotlin"],
                        link="https://example.com/unrelated")

        data = self.client.get(f"/jobs/{target['id']}", headers=self.headers).json()["data"]
        related_ids = {r["id"] for r in data["relatedJobs"]}
        self.assertEqual(related_ids, {same_company["id"], same_stack["id"]})
        self.assertNotIn(target["id"], related_ids)

    def test_related_jobs_at_most_five(self):
        target = self.create_job(self.headers, link="https://example.com/target")
        for i in range(7):
            self.create_job(self.headers, link=f"https://example.com/{i}")

        data = self.client.get(f"/jobs/{target['id']}", headers=self.headers).json()["data"]
        self.assertEqual(len(data["relatedJobs"]), 5)

    def test_unknown_job(self):
        self.assertEqual(self.client.get("/jobs/999", headers=self.headers).status_code, 404)


class TestJobMutation(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.headers = self.auth_headers("kim@example.com")

    def test_create_stores_joined_stack_and_company_fk(self):
        job = self.create_job(self.headers, techStack=[" Python ", "FastAPI"], salary=5000.0)
        self.assertEqual(job["techStack"], "Python, FastAPI")
        self.assertEqual(job["salary"], "5000")
        self.assertIsNotNone(job["companyId"])

        self.assertEqual(self.db.query(Company).filter(Company.name == "테스트컴퍼니").count(), 1)

    def test_create_reuses_company_by_name(self):
        first = self.create_job(self.headers, link="https://example.com/a")
        second = self.create_job(self.headers, link="https://example.com/b")
        self.assertEqual(first["companyId"], second["companyId"])

    def test_create_validation_messages_joined(self):
        response = self.client.post(
            "/jobs",
            json=self.job_payload(title="ab", techStack=[], salary=-1, link="not a url",
                                  employmentType="freelance"),
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 400)
        message = response.json()["message"]
        self.assertIn("제목은 최소 3자 이상이어야 합니다.", message)
        self.assertIn("기술 스택은 최소 1개 이상이어야 합니다.", message)
        self.assertIn("연봉은 0보다 커야 합니다.", message)
        self.assertIn("링크는 유효한 URL 형식이어야 합니다.", message)
        self.assertIn("고용 형태는", message)
        self.assertNotIn("employmentType", message)
        self.assertEqual(self.db.query(Job).count(), 0)

    def test_duplicate_link(self):
        self.create_job(self.headers)
        response = self.client.post("/jobs", json=self.job_payload(), headers=self.headers)
        self.assertEqual(response.status_code, 400)

    def test_update_resets_views(self):
        job = self.create_job(self.headers)
        self.client.get(f"/jobs/{job['id']}", headers=self.headers)
        self.client.get(f"/jobs/{job['id']}", headers=self.headers)

        response = self.client.put(
            f"/jobs/{job['id']}",
            json=self.job_payload(title="수정된 공고"),
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["views"], 0)
        self.assertEqual(response.json()["data"]["title"], "수정된 공고")

    def test_update_unknown(self):
        response = self.client.put("/jobs/999", json=self.job_payload(), headers=self.headers)
        self.assertEqual(response.status_code, 404)

    def test_delete(self):
        job = self.create_job(self.headers)
        self.assertEqual(self.client.delete(f"/jobs/{job['id']}", headers=self.headers).status_code, 200)
        self.assertEqual(self.client.delete(f"/jobs/{job['id']}", headers=self.headers).status_code, 404)


if __name__ == "__main__":
    unittest.main()
