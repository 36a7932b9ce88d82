"""
Test suite for job endpoints.

Tests cover:
- Creation (admin only)
- Filtered listing
- Retrieval, partial update and deletion
"""

from app.models.job import Job


class TestJobCreation:
    """Tests for POST /jobs"""

    def test_create_as_admin(self, client, admin_headers):
        response = client.post("/api/v1/jobs/", json={
            "companyHandle": "c1",
            "title": "J-new",
            "salary": 10,
            "equity": 0.2,
        }, headers=admin_headers)

        assert response.status_code == 201
        job = response.json()["job"]
        assert isinstance(job["id"], int)
        assert job["title"] == "J-new"
        assert job["salary"] == 10
        assert job["equity"] == 0.2
        assert job["companyHandle"] == "c1"

    def test_create_as_non_admin_forbidden(self, client, u1_headers):
        response = client.post("/api/v1/jobs/", json={"companyHandle": "c1", "title": "J-new"},
                               headers=u1_headers)

        assert response.status_code == 403

    def test_create_for_unknown_company(self, client, admin_headers):
        response = client.post("/api/v1/jobs/", json={"companyHandle": "nope", "title": "J-new"},
                               headers=admin_headers)

        assert response.status_code == 404

    def test_create_equity_above_one(self, client, admin_headers):
        response = client.post("/api/v1/jobs/", json={"companyHandle": "c1", "title": "J-new", "equity": 1.5},
                               headers=admin_headers)

        assert response.status_code == 422

    def test_create_missing_title(self, client, admin_headers):
        response = client.post("/api/v1/jobs/", json={"companyHandle": "c1"}, headers=admin_headers)

        assert response.status_code == 422


class TestJobListing:
    """Tests for GET /jobs with filters"""

    def test_list_all(self, client, seed):
        response = client.get("/api/v1/jobs/")

        assert response.status_code == 200
        assert [j["title"] for j in response.json()["jobs"]] == ["J1", "J2", "J3", "J4"]

    def test_filter_min_salary(self, client, seed):
        response = client.get("/api/v1/jobs/?minSalary=150")

        assert [j["title"] for j in response.json()["jobs"]] == ["J2", "J3"]

    def test_filter_has_equity(self, client, seed):
        response = client.get("/api/v1/jobs/?hasEquity=true")

        # J3 has zero equity and J4 has none
        assert [j["title"] for j in response.json()["jobs"]] == ["J1", "J2"]

    def test_has_equity_false_does_not_filter(self, client, seed):
        response = client.get("/api/v1/jobs/?hasEquity=false")

        assert len(response.json()["jobs"]) == 4

    def test_filter_title(self, client, seed):
        response = client.get("/api/v1/jobs/?title=j1")

        assert [j["title"] for j in response.json()["jobs"]] == ["J1"]

    def test_filter_all(self, client, seed):
        response = client.get("/api/v1/jobs/?minSalary=150&hasEquity=true&title=J")

        assert [j["title"] for j in response.json()["jobs"]] == ["J2"]

    def test_non_numeric_min_salary(self, client, seed):
        response = client.get("/api/v1/jobs/?minSalary=lots")

        assert response.status_code == 400
        assert response.json()["param"] == "minSalary"

    def test_min_salary_with_thousands_of_digits(self, client, seed):
        response = client.get("/api/v1/jobs/", params={"minSalary": "1" * 5000})

        assert response.status_code == 400
        assert response.json()["param"] == "minSalary"


class TestJobRetrieval:
    """Tests for GET /jobs/{id}"""

    def test_get_job(self, client, seed):
        response = client.get(f"/api/v1/jobs/{seed['J1']}")

        assert response.status_code == 200
        assert response.json() == {
            "job": {
                "id": seed["J1"],
                "title": "J1",
                "salary": 100,
                "equity": 0.1,
                "companyHandle": "c1",
            }
        }

    def test_get_nonexistent(self, client, seed):
        response = client.get("/api/v1/jobs/99999")

        assert response.status_code == 404


class TestJobUpdate:
    """Tests for PATCH /jobs/{id}"""

    def test_update_as_admin(self, client, seed, admin_headers):
        response = client.patch(f"/api/v1/jobs/{seed['J1']}", json={"title": "J1-new", "salary": 500},
                                headers=admin_headers)

        assert response.status_code == 200
        job = response.json()["job"]
        assert job["title"] == "J1-new"
        assert job["salary"] == 500
        assert job["equity"] == 0.1

    def test_update_company_not_allowed(self, client, seed, admin_headers):
        response = client.patch(f"/api/v1/jobs/{seed['J1']}", json={"companyHandle": "c2"},
                                headers=admin_headers)

        assert response.status_code == 422

    def test_update_empty_body(self, client, seed, admin_headers):
        response = client.patch(f"/api/v1/jobs/{seed['J1']}", json={}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["kind"] == "invalid_input"

    def test_update_as_non_admin_forbidden(self, client, seed, u1_headers):
        response = client.patch(f"/api/v1/jobs/{seed['J1']}", json={"title": "x"}, headers=u1_headers)

        assert response.status_code == 403

    def test_update_nonexistent(self, client, seed, admin_headers):
        response = client.patch("/api/v1/jobs/99999", json={"title": "x"}, headers=admin_headers)

        assert response.status_code == 404


class TestJobDeletion:
    """Tests for DELETE /jobs/{id}"""

    def test_delete_as_admin(self, client, db_session, seed, admin_headers):
        response = client.delete(f"/api/v1/jobs/{seed['J1']}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"deleted": seed["J1"]}
        assert db_session.get(Job, seed["J1"]) is None

    def test_delete_as_non_admin_forbidden(self, client, seed, u1_headers):
        response = client.delete(f"/api/v1/jobs/{seed['J1']}", headers=u1_headers)

        assert response.status_code == 403

    def test_delete_nonexistent(self, client, seed, admin_headers):
        response = client.delete("/api/v1/jobs/99999", headers=admin_headers)

        assert response.status_code == 404
