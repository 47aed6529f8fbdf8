import unittest

from app.models import JobReview
from app.testing import ApiTestCase


class TestJobReviews(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.headers = self.auth_headers("kim@example.com")
        self.job = self.create_job(self.headers)

    def test_no_reviews_is_404(self):
        self.assertEqual(self.client.get(f"/jobreviews/{self.job['id']}", headers=self.headers).status_code, 404)

    def test_create_and_list(self):
        response = self.client.post("/jobreviews", json={
            "jobId": self.job["id"],
            "rating": 4,
            "review_text": "분위기가 좋았습니다.",
        }, headers=self.headers)
        self.assertEqual(response.status_code, 201)

        rows = self.client.get(f"/jobreviews/{self.job['id']}", headers=self.headers).json()["data"]
        self.assertEqual(len(rows), 1)
        self.assertEqual(rows[0]["rating"], 4)

    def test_rating_out_of_range_not_persisted(self):
        for rating in (0, 6):
            response = self.client.post("/jobreviews", json={"jobId": self.job["id"], "rating": rating},
                                        headers=self.headers)
            self.assertEqual(response.status_code, 400)
            self.assertEqual(response.json()["message"], "평점은 1부터 5까지의 숫자여야 합니다.")
        self.assertEqual(self.db.query(JobReview).count(), 0)

    def test_unknown_job(self):
        response = self.client.post("/jobreviews", json={"jobId": 999, "rating": 3}, headers=self.headers)
        self.assertEqual(response.status_code, 404)


if __name__ == "__main__":
    unittest.main()
