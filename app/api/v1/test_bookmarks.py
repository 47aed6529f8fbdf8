import unittest

from app.testing import ApiTestCase


class TestBookmarks(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.headers = self.auth_headers("kim@example.com")

    def test_toggle(self):
        job = self.create_job(self.headers)

        added = self.client.post("/bookmarks", json={"jobId": job["id"]}, headers=self.headers)
        self.assertEqual(added.status_code, 201)

        removed = self.client.post("/bookmarks", json={"jobId": job["id"]}, headers=self.headers)
        self.assertEqual(removed.status_code, 200)

        body = self.client.get("/bookmarks", headers=self.headers).json()
        self.assertEqual(body["data"], [])
        self.assertEqual(body["pagination"]["totalCount"], 0)

    def test_unknown_job(self):
        response = self.client.post("/bookmarks", json={"jobId": 999}, headers=self.headers)
        self.assertEqual(response.status_code, 404)

    def test_list_is_paginated_newest_first(self):
        ids = [self.create_job(self.headers, link=f"https://example.com/{i}")["id"] for i in range(3)]
        for job_id in ids:
            self.client.post("/bookmarks", json={"jobId": job_id}, headers=self.headers)

        body = self.client.get("/bookmarks?page=1&limit=2", headers=self.headers).json()
        self.assertEqual([b["job"]["id"] for b in body["data"]], [ids[2], ids[1]])
        self.assertEqual(body["pagination"], {
            "totalCount": 3,
            "totalPages": 2,
            "currentPage": 1,
            "pageSize": 2,
        })

    def test_bookmarks_are_per_user(self):
        job = self.create_job(self.headers)
        self.client.post("/bookmarks", json={"jobId": job["id"]}, headers=self.headers)

        other = self.auth_headers("lee@example.com")
        self.assertEqual(self.client.get("/bookmarks", headers=other).json()["data"], [])


if __name__ == "__main__":
    unittest.main()
