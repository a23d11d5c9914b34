"""
Integration tests for the receipt points HTTP endpoints.
"""


class TestProcess:
    def test_process_returns_id(self, client, target_payload):
        resp = client.post("/receipts/process", json=target_payload)
        assert resp.status_code == 200
        body = resp.json()
        assert set(body) == {"id"}
        assert len(body["id"]) == 36

    def test_resubmission_same_id(self, client, target_payload):
        first = client.post("/receipts/process", json=target_payload).json()["id"]
        second = client.post("/receipts/process", json=target_payload).json()["id"]
        assert first == second

    def test_different_content_different_id(self, client, target_payload):
        first = client.post("/receipts/process", json=target_payload).json()["id"]
        target_payload["total"] = "35.36"
        second = client.post("/receipts/process", json=target_payload).json()["id"]
        assert first != second

    def test_malformed_json(self, client):
        resp = client.post(
            "/receipts/process",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        assert resp.json()["detail"] == "The receipt is invalid."

    def test_wrong_field_type(self, client, target_payload):
        target_payload["items"] = "lots"
        resp = client.post("/receipts/process", json=target_payload)
        assert resp.status_code == 400

    def test_malformed_fields_still_scored(self, client, target_payload):
        target_payload.update(purchaseDate="someday", purchaseTime="later", total="n/a")
        rid = client.post("/receipts/process", json=target_payload).json()["id"]
        resp = client.get(f"/receipts/{rid}/points")
        assert resp.status_code == 200
        assert resp.json()["points"] >= 0


class TestPoints:
    def test_points_target(self, client, target_payload):
        rid = client.post("/receipts/process", json=target_payload).json()["id"]
        resp = client.get(f"/receipts/{rid}/points")
        assert resp.status_code == 200
        assert resp.json() == {"points": 28}

    def test_points_corner_market(self, client, corner_market_payload):
        rid = client.post("/receipts/process", json=corner_market_payload).json()["id"]
        assert client.get(f"/receipts/{rid}/points").json() == {"points": 109}

    def test_points_not_found(self, client):
        resp = client.get("/receipts/does-not-exist/points")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "No receipt found for that ID."


class TestService:
    def test_root(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.json()["status"] == "running"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}
