import unittest

from app.models import Application, Notification
from app.testing import ApiTestCase


class TestApplicationLifecycle(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.user_a = self.auth_headers("a@example.com")
        self.user_b = self.auth_headers("b@example.com")
        # 공고 ID와 지원서 ID가 서로 다르도록 공고를 몇 개 먼저 만든다
        self.create_job(self.user_a, link="https://example.com/first")
        self.create_job(self.user_a, link="https://example.com/second")
        self.job = self.create_job(self.user_a)

    def test_apply_then_duplicate_is_rejected(self):
        first = self.apply(self.user_a, self.job["id"], resume="이력서")
        self.assertEqual(first.status_code, 201)
        self.assertEqual(first.json()["data"]["status"], "지원 완료")

        second = self.apply(self.user_a, self.job["id"], resume="이력서")
        self.assertEqual(second.status_code, 400)
        self.assertEqual(self.db.query(Application).count(), 1)

    def test_withdraw_by_job_id_and_reapply_reuses_row(self):
        application_id = self.apply(self.user_a, self.job["id"]).json()["data"]["id"]
        self.assertNotEqual(application_id, self.job["id"])

        withdrawn = self.client.delete(f"/applications/{self.job['id']}", headers=self.user_a)
        self.assertEqual(withdrawn.status_code, 200)
        self.assertEqual(withdrawn.json()["data"]["id"], application_id)
        self.assertEqual(withdrawn.json()["data"]["status"], "지원 취소")

        again = self.apply(self.user_a, self.job["id"])
        self.assertEqual(again.status_code, 200)
        self.assertEqual(again.json()["data"]["id"], application_id)
        self.assertEqual(again.json()["data"]["status"], "지원 완료")
        self.assertEqual(self.db.query(Application).count(), 1)

    def test_apply_requires_job(self):
        self.assertEqual(self.client.post("/applications", json={}, headers=self.user_a).status_code, 400)
        self.assertEqual(self.apply(self.user_a, 999).status_code, 404)

    def test_withdraw_without_application(self):
        self.assertEqual(self.client.delete("/applications/999", headers=self.user_a).status_code, 404)
        # 지원하지 않은 공고
        self.assertEqual(
            self.client.delete(f"/applications/{self.job['id']}", headers=self.user_a).status_code,
            404,
        )

    def test_withdraw_application_id_is_not_accepted(self):
        application_id = self.apply(self.user_a, self.job["id"]).json()["data"]["id"]
        response = self.client.delete(f"/applications/{application_id}", headers=self.user_a)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(self.db.query(Application).one().status.value, "지원 완료")

    def test_withdraw_is_scoped_to_caller(self):
        self.apply(self.user_a, self.job["id"])
        response = self.client.delete(f"/applications/{self.job['id']}", headers=self.user_b)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(self.db.query(Application).one().status.value, "지원 완료")

    def test_notifications_written_for_each_transition(self):
        self.apply(self.user_a, self.job["id"])
        self.client.delete(f"/applications/{self.job['id']}", headers=self.user_a)
        self.apply(self.user_a, self.job["id"])

        self.assertEqual(self.db.query(Notification).count(), 3)


class TestApplicationQuery(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.user_a = self.auth_headers("a@example.com")
        self.user_b = self.auth_headers("b@example.com")
        self.company = self.auth_headers("hr@example.com", role="companyuser")
        self.job = self.create_job(self.company)
        self.other_job = self.create_job(self.company, link="https://example.com/other")

        self.apply(self.user_a, self.job["id"])
        self.apply(self.user_b, self.job["id"], resume="b의 이력서")
        self.apply(self.user_b, self.other_job["id"])

    def test_plain_user_sees_only_own(self):
        rows = self.client.get("/applications", headers=self.user_a).json()["data"]
        self.assertEqual(len(rows), 1)
        self.assertEqual(rows[0]["resume"], "미등록")
        self.assertEqual(rows[0]["job"]["company"], "테스트컴퍼니")
        self.assertNotIn("user", rows[0])

    def test_plain_user_cannot_read_others_by_user_id(self):
        b_id = self.client.get("/applications", headers=self.user_b).json()["data"][0]["userId"]
        rows = self.client.get(f"/applications?userId={b_id}", headers=self.user_a).json()["data"]
        self.assertTrue(all(row["userId"] != b_id for row in rows))

    def test_privileged_sees_all_with_applicant(self):
        rows = self.client.get("/applications", headers=self.company).json()["data"]
        self.assertEqual(len(rows), 3)
        self.assertTrue(all(row["user"]["email"] for row in rows))

    def test_privileged_filters(self):
        rows = self.client.get(
            f"/applications?jobId={self.job['id']}&status=지원 완료",
            headers=self.company,
        ).json()["data"]
        self.assertEqual(len(rows), 2)

    def test_invalid_status_filter(self):
        response = self.client.get("/applications?status=합격", headers=self.company)
        self.assertEqual(response.status_code, 400)

    def test_summary(self):
        response = self.client.get(f"/applications/job/{self.job['id']}/summary", headers=self.company)
        self.assertEqual(response.status_code, 200)

        body = response.json()
        self.assertEqual(body["companyName"], "테스트컴퍼니")
        self.assertEqual(body["data"], [{"status": "지원 완료", "count": 2}])

    def test_summary_forbidden_for_plain_user(self):
        response = self.client.get(f"/applications/job/{self.job['id']}/summary", headers=self.user_a)
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["message"], "권한이 없습니다.")

    def test_summary_unknown_job(self):
        response = self.client.get("/applications/job/999/summary", headers=self.company)
        self.assertEqual(response.status_code, 404)


if __name__ == "__main__":
    unittest.main()
