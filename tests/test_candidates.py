"""
Test suite for candidate endpoints.

Tests cover:
- Candidate registration and validation
- Listing with boolean, membership and date range filters
- Sorting and search
"""

from datetime import date


def names(response):
    return [record["can_name"] for record in response.json()["records"]]


class TestCandidateRegistration:
    """Tests for candidate registration"""

    def test_create_candidate_success(self, client, portal):
        response = client.post("/api/v1/candidates/", json={
            "can_name": "Dave Brown",
            "can_email": "dave@example.com",
            "can_mobn": "0987654321",
            "can_job_cate": portal["design"].cate_code,
            "can_skill": "Figma, Sketch",
        })

        assert response.status_code == 201
        data = response.json()
        assert data["can_appr"] is False
        assert data["reg_date"] == date.today().isoformat()
        assert data["job_category"]["cate_desc"] == "Design"

    def test_create_candidate_invalid_mobile(self, client, portal):
        """Mobile numbers must be exactly 10 digits"""
        response = client.post("/api/v1/candidates/", json={
            "can_name": "Dave Brown",
            "can_email": "dave@example.com",
            "can_mobn": "12345",
            "can_job_cate": portal["design"].cate_code,
        })

        assert response.status_code == 422

    def test_create_candidate_duplicate_email(self, client, portal):
        response = client.post("/api/v1/candidates/", json={
            "can_name": "Another Alice",
            "can_email": "alice@example.com",
            "can_mobn": "0987654321",
            "can_job_cate": portal["design"].cate_code,
        })

        assert response.status_code == 409

    def test_create_candidate_unknown_category(self, client, portal):
        response = client.post("/api/v1/candidates/", json={
            "can_name": "Dave Brown",
            "can_email": "dave@example.com",
            "can_mobn": "0987654321",
            "can_job_cate": 99999,
        })

        assert response.status_code == 404


class TestCandidateListing:
    """Tests for POST /candidates/list"""

    def test_filter_by_approval(self, client, portal):
        response = client.post("/api/v1/candidates/list", json={"can_appr": True})

        assert names(response) == ["Alice Smith", "Carol White"]

    def test_false_is_a_filter_value(self, client, portal):
        """A falsy value still filters"""
        response = client.post("/api/v1/candidates/list", json={"can_appr": False})

        assert names(response) == ["Bob Jones"]

    def test_filter_by_category_membership(self, client, portal):
        response = client.post("/api/v1/candidates/list", json={
            "can_job_cate": [portal["engineering"].cate_code],
        })

        assert names(response) == ["Alice Smith", "Bob Jones"]

    def test_empty_membership_matches_nothing(self, client, portal):
        response = client.post("/api/v1/candidates/list", json={"can_job_cate": []})

        assert response.json()["records"] == []

    def test_registration_date_range(self, client, portal):
        response = client.post("/api/v1/candidates/list", json={
            "reg_date_from": "2024-01-01",
            "reg_date_to": "2024-02-20",
        })

        assert names(response) == ["Alice Smith", "Bob Jones"]

    def test_search_by_email(self, client, portal):
        response = client.post("/api/v1/candidates/list", json={"search": "CAROL@"})

        assert names(response) == ["Carol White"]

    def test_sort_by_name_descending_with_pagination(self, client, portal):
        response = client.post("/api/v1/candidates/list", json={
            "sortBy": "can_name",
            "sortOrder": "DESC",
            "page": 1,
            "limit": 2,
        })

        body = response.json()
        assert names(response) == ["Carol White", "Bob Jones"]
        assert body["pagination"]["totalItems"] == 3
        assert body["pagination"]["hasNextPage"] is True
        assert body["pagination"]["prevPage"] is None

    def test_records_embed_category(self, client, portal):
        response = client.post("/api/v1/candidates/list", json={"can_name": "Carol White"})

        records = response.json()["records"]
        assert len(records) == 1
        assert records[0]["job_category"] == {
            "cate_code": portal["design"].cate_code,
            "cate_desc": "Design",
        }


class TestCandidateRetrieval:
    """Tests for GET /candidates/{can_code}"""

    def test_get_candidate(self, client, portal):
        response = client.get(f"/api/v1/candidates/{portal['bob'].can_code}")

        assert response.status_code == 200
        assert response.json()["can_email"] == "bob@example.com"

    def test_get_nonexistent_candidate(self, client):
        response = client.get("/api/v1/candidates/99999")

        assert response.status_code == 404
