"""
Test suite for job application endpoints.

Tests cover:
- Applying to job posts and the rules around it
- Listing applications filtered by candidate, job and status
- Searching applications by the related job title
"""


class TestApplying:
    """Tests for POST /job-applications/"""

    def test_apply_success(self, client, portal):
        response = client.post("/api/v1/job-applications/", json={
            "candidate_id": portal["carol"].can_code,
            "job_id": portal["posts"][3].job_id,
        })

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "pending"
        assert data["job_post"]["job_title"] == "Product Designer"

    def test_apply_to_inactive_post(self, client, portal):
        response = client.post("/api/v1/job-applications/", json={
            "candidate_id": portal["carol"].can_code,
            "job_id": portal["posts"][4].job_id,
        })

        assert response.status_code == 400

    def test_apply_twice(self, client, portal, applications):
        response = client.post("/api/v1/job-applications/", json={
            "candidate_id": portal["alice"].can_code,
            "job_id": portal["posts"][0].job_id,
        })

        assert response.status_code == 409

    def test_apply_unknown_candidate(self, client, portal):
        response = client.post("/api/v1/job-applications/", json={
            "candidate_id": 99999,
            "job_id": portal["posts"][0].job_id,
        })

        assert response.status_code == 404
        assert "candidate" in response.json()["detail"].lower()

    def test_apply_unknown_job_post(self, client, portal):
        response = client.post("/api/v1/job-applications/", json={
            "candidate_id": portal["alice"].can_code,
            "job_id": 99999,
        })

        assert response.status_code == 404


class TestApplicationListing:
    """Tests for POST /job-applications/list"""

    def test_filter_by_candidate(self, client, portal, applications):
        response = client.post("/api/v1/job-applications/list", json={
            "candidate_id": portal["alice"].can_code,
        })

        records = response.json()["records"]
        assert [record["job_post"]["job_title"] for record in records] == [
            "Senior Python Developer",
            "Junior Python Developer",
        ]

    def test_filter_by_job_as_string(self, client, portal, applications):
        response = client.post("/api/v1/job-applications/list", json={
            "job_id": str(portal["posts"][0].job_id),
        })

        records = response.json()["records"]
        assert sorted(record["candidate"]["can_name"] for record in records) == ["Alice Smith", "Bob Jones"]

    def test_filter_by_status(self, client, portal, applications):
        pending = client.post("/api/v1/job-applications/list", json={"status": "pending"})
        accepted = client.post("/api/v1/job-applications/list", json={"status": "accepted"})

        assert len(pending.json()["records"]) == 3
        assert accepted.json()["records"] == []

    def test_search_by_job_title(self, client, portal, applications):
        response = client.post("/api/v1/job-applications/list", json={"search": "junior"})

        records = response.json()["records"]
        assert len(records) == 1
        assert records[0]["candidate"]["can_name"] == "Alice Smith"

    def test_applied_at_range_sorted_descending(self, client, portal, applications):
        response = client.post("/api/v1/job-applications/list", json={
            "applied_at_from": "2024-02-02",
            "applied_at_to": "2024-02-03",
            "sortBy": "applied_at",
            "sortOrder": "desc",
        })

        records = response.json()["records"]
        assert [record["id"] for record in records] == [applications[2].id, applications[1].id]

    def test_relations_load_without_per_row_queries(self, client, portal, applications, sql_statements):
        """One count, one fetch and one batched load per embedded relation"""
        sql_statements.clear()

        response = client.post("/api/v1/job-applications/list", json={})

        assert len(response.json()["records"]) == 3
        assert all(record["candidate"]["created_at"] for record in response.json()["records"])
        assert len(sql_statements) == 4

    def test_get_nonexistent_application(self, client):
        response = client.get("/api/v1/job-applications/99999")

        assert response.status_code == 404
