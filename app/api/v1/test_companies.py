import unittest

from app.testing import ApiTestCase

COMPANY = {
    "name": "알파소프트",
    "location": "서울 강남구",
    "industry": "IT",
    "website": "https://alpha.example.com",
    "contact_number": "02-123-4567",
}


class TestCompanies(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.headers = self.auth_headers("kim@example.com")

    def test_create_and_get(self):
        response = self.client.post("/companies", json=COMPANY, headers=self.headers)
        self.assertEqual(response.status_code, 201)
        company_id = response.json()["data"]["id"]

        detail = self.client.get(f"/companies/{company_id}", headers=self.headers)
        self.assertEqual(detail.json()["data"]["name"], "알파소프트")

        listing = self.client.get("/companies", headers=self.headers).json()["data"]
        self.assertEqual([c["name"] for c in listing], ["알파소프트"])

    def test_invalid_contact_number(self):
        response = self.client.post(
            "/companies",
            json=dict(COMPANY, contact_number="0212345678"),
            headers=self.headers,
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("전화번호는", response.json()["message"])

    def test_missing_required_fields(self):
        response = self.client.post("/companies", json={"name": "알파"}, headers=self.headers)
        self.assertEqual(response.status_code, 400)

    def test_duplicate_name(self):
        self.client.post("/companies", json=COMPANY, headers=self.headers)
        response = self.client.post("/companies", json=COMPANY, headers=self.headers)
        self.assertEqual(response.status_code, 400)

    def test_register_company_created_by_job(self):
        job = self.create_job(self.headers, company="알파소프트")

        response = self.client.post("/companies", json=COMPANY, headers=self.headers)
        self.assertEqual(response.status_code, 201)

        data = response.json()["data"]
        self.assertEqual(data["id"], job["companyId"])
        self.assertEqual(data["industry"], "IT")
        self.assertEqual(data["contact_number"], "02-123-4567")

        listing = self.client.get("/companies", headers=self.headers).json()["data"]
        self.assertEqual(len(listing), 1)

        # 상세 정보가 채워진 뒤에는 중복
        again = self.client.post("/companies", json=COMPANY, headers=self.headers)
        self.assertEqual(again.status_code, 400)

    def test_unknown_company(self):
        self.assertEqual(self.client.get("/companies/999", headers=self.headers).status_code, 404)


if __name__ == "__main__":
    unittest.main()
