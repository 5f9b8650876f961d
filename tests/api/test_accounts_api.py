"""
API tests for account endpoints.

Tests cover:
- Create account (success + validation errors)
- List, get, update, delete
- Owner header scoping
- Error responses (400, 404, 422)
"""

from fastapi.testclient import TestClient


class TestCreateAccountAPI:
    """Tests for POST /accounts endpoint."""

    def test_create_account_success(self, client: TestClient):
        """
        GIVEN no accounts exist
        WHEN I POST /accounts with a name and category
        THEN response is 201 with the account and its derived type
        """
        response = client.post("/accounts", json={"name": "Visa", "category": "Credit Card"})

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Visa"
        assert data["category"] == "credit card"
        assert data["type"] == "liability"
        assert data["account_id"]

    def test_create_account_default_category(self, client: TestClient):
        response = client.post("/accounts", json={"name": "Jar"})

        assert response.status_code == 201
        assert response.json()["category"] == "other"
        assert response.json()["type"] == "asset"

    def test_create_account_duplicate_name_returns_400(self, client: TestClient):
        client.post("/accounts", json={"name": "Brokerage"})

        response = client.post("/accounts", json={"name": "Brokerage"})

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_create_account_blank_name_returns_400(self, client: TestClient):
        response = client.post("/accounts", json={"name": "   "})

        assert response.status_code == 400

    def test_create_account_missing_name_returns_422(self, client: TestClient):
        response = client.post("/accounts", json={})

        assert response.status_code == 422


class TestAccountCrudAPI:
    """Tests for reading, updating and deleting accounts."""

    def test_list_accounts_sorted(self, client: TestClient):
        client.post("/accounts", json={"name": "Zeta"})
        client.post("/accounts", json={"name": "Alpha"})

        response = client.get("/accounts")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 2
        assert [a["name"] for a in data["accounts"]] == ["Alpha", "Zeta"]

    def test_get_unknown_account_returns_404(self, client: TestClient):
        response = client.get("/accounts/missing")

        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"

    def test_update_account(self, client: TestClient):
        account_id = client.post("/accounts", json={"name": "Loan"}).json()["account_id"]

        response = client.patch(f"/accounts/{account_id}", json={"name": "Car Loan", "category": "loans"})

        assert response.status_code == 200
        assert response.json()["name"] == "Car Loan"
        assert response.json()["type"] == "liability"

    def test_delete_account(self, client: TestClient):
        account_id = client.post("/accounts", json={"name": "Old"}).json()["account_id"]

        assert client.delete(f"/accounts/{account_id}").status_code == 204
        assert client.delete(f"/accounts/{account_id}").status_code == 404

    def test_owner_header_scopes_accounts(self, client: TestClient):
        """
        GIVEN an account created for owner "alice"
        WHEN owner "bob" lists accounts
        THEN bob sees none of alice's accounts
        """
        client.post("/accounts", json={"name": "Checking"}, headers={"X-Owner-Id": "alice"})

        bob = client.get("/accounts", headers={"X-Owner-Id": "bob"}).json()
        alice = client.get("/accounts", headers={"X-Owner-Id": "alice"}).json()

        assert bob["count"] == 0
        assert alice["count"] == 1


class TestHealthAPI:
    def test_health_check(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, client: TestClient):
        assert client.get("/").json()["docs"] == "/docs"
