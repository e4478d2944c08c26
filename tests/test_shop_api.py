"""HTTP tests for transactions and suppliers, focused on the role gate around them."""

import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from repairshop.core.config import Settings
from repairshop.main import create_app
from repairshop.models import Base, Supplier, SupplierPayment, Transaction


def _transaction(**overrides: object) -> dict:
    """Minimal valid POST /transactions body in the client's camelCase."""
    body = {
        "customerName": "Ravi",
        "mobileNumber": "9876543210",
        "deviceModel": "Galaxy S21",
        "repairType": "Screen replacement",
        "repairCost": 2500,
        "paymentMethod": "cash",
        "amountGiven": 3000,
        "changeReturned": 500,
        "status": "completed",
    }
    body.update(overrides)
    return body


class ShopApiTestCase(unittest.TestCase):
    def setUp(self) -> None:
        settings = Settings(
            JWT_SECRET="shop-test-signing-secret-0123456789abcdef",
            DATABASE_URL="sqlite://",
            BCRYPT_ROUNDS=4,
            _env_file=None,
        )
        app = create_app(settings)
        Base.metadata.create_all(app.state.engine)
        self.session_factory = app.state.session_factory
        self.client = TestClient(app)
        self.user_headers = self._headers("staff", "pw", "user")
        self.admin_headers = self._headers("owner", "pw", "admin")

    def _headers(self, username: str, password: str, role: str) -> dict[str, str]:
        r = self.client.post(
            "/api/auth/register",
            json={"username": username, "password": password, "role": role},
        )
        self.assertEqual(r.status_code, 201)
        return {"Authorization": f"Bearer {r.json()['token']}"}

    def _count(self, model: type) -> int:
        db = self.session_factory()
        try:
            return db.query(model).count()
        finally:
            db.close()


class TestTransactions(ShopApiTestCase):
    def test_create_and_list(self) -> None:
        body = _transaction(
            partsCost=[{"item": "AMOLED panel", "cost": 1200, "store": "PartsHub"}]
        )
        r = self.client.post("/api/transactions", json=body, headers=self.user_headers)
        self.assertEqual(r.status_code, 201)
        created = r.json()
        self.assertEqual(created["message"], "Transaction created successfully")
        self.assertEqual(created["data"]["customerName"], "Ravi")
        self.assertEqual(len(created["data"]["expenditures"]), 1)
        self.assertEqual(created["data"]["expenditures"][0]["store"], "PartsHub")

        r = self.client.get("/api/transactions", headers=self.user_headers)
        self.assertEqual(r.status_code, 200)
        listed = r.json()["data"]
        self.assertEqual(len(listed), 1)
        self.assertEqual(listed[0]["id"], created["data"]["id"])
        self.assertEqual(listed[0]["expenditures"][0]["cost"], 1200)

    def test_missing_required_fields(self) -> None:
        body = _transaction()
        del body["deviceModel"]
        r = self.client.post("/api/transactions", json=body, headers=self.user_headers)
        self.assertEqual(r.status_code, 400)
        self.assertIn("deviceModel", r.json()["error"])
        self.assertEqual(self._count(Transaction), 0)

    def test_unauthenticated_requests_rejected_without_side_effects(self) -> None:
        self.assertEqual(self.client.get("/api/transactions").status_code, 401)
        r = self.client.post("/api/transactions", json=_transaction())
        self.assertEqual(r.status_code, 401)
        self.assertEqual(self._count(Transaction), 0)

    def test_clear_requires_admin(self) -> None:
        self.client.post("/api/transactions", json=_transaction(), headers=self.user_headers)

        r = self.client.delete("/api/transactions", headers=self.user_headers)
        self.assertEqual(r.status_code, 403)
        self.assertEqual(r.json(), {"error": "Admin access required"})
        self.assertEqual(self._count(Transaction), 1)

        r = self.client.delete("/api/transactions")
        self.assertEqual(r.status_code, 401)
        self.assertEqual(self._count(Transaction), 1)

    def test_admin_clears_transactions_and_expenditures(self) -> None:
        body = _transaction(partsCost=[{"item": "Battery", "cost": 800, "store": "PartsHub"}])
        self.client.post("/api/transactions", json=body, headers=self.user_headers)

        r = self.client.delete("/api/transactions", headers=self.admin_headers)
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), {"message": "All transactions cleared"})
        listed = self.client.get("/api/transactions", headers=self.admin_headers).json()
        self.assertEqual(listed["data"], [])


class TestSuppliers(ShopApiTestCase):
    def _create_supplier(self, name: str = "PartsHub") -> dict:
        r = self.client.post(
            "/api/suppliers",
            json={"name": name, "contactPerson": "Meena", "address": "MG Road"},
            headers=self.user_headers,
        )
        self.assertEqual(r.status_code, 201)
        return r.json()["data"]

    def test_due_amount_tracks_expenditures_and_payments(self) -> None:
        supplier = self._create_supplier()
        self.assertEqual(supplier["dueAmount"], 0)

        body = _transaction(partsCost=[{"item": "Display", "cost": 500, "store": "PartsHub"}])
        self.client.post("/api/transactions", json=body, headers=self.user_headers)
        r = self.client.post(
            f"/api/suppliers/{supplier['id']}/payments",
            json={"amount": 200, "paymentMethod": "upi"},
            headers=self.user_headers,
        )
        self.assertEqual(r.status_code, 201)
        self.assertEqual(r.json()["data"]["supplierId"], supplier["id"])

        listed = self.client.get("/api/suppliers", headers=self.user_headers).json()["data"]
        self.assertEqual(len(listed), 1)
        self.assertEqual(listed[0]["totalExpenditure"], 500)
        self.assertEqual(listed[0]["totalPayments"], 200)
        self.assertEqual(listed[0]["dueAmount"], 300)

    def test_duplicate_supplier(self) -> None:
        self._create_supplier()
        r = self.client.post(
            "/api/suppliers",
            json={"name": "PartsHub", "contactPerson": "Someone"},
            headers=self.user_headers,
        )
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json(), {"error": "Supplier already exists"})

    def test_payment_to_unknown_supplier(self) -> None:
        r = self.client.post(
            "/api/suppliers/999/payments", json={"amount": 10}, headers=self.user_headers
        )
        self.assertEqual(r.status_code, 404)
        self.assertEqual(r.json(), {"error": "Supplier not found"})

    def test_clear_requires_admin(self) -> None:
        self._create_supplier()
        r = self.client.delete("/api/suppliers", headers=self.user_headers)
        self.assertEqual(r.status_code, 403)
        self.assertEqual(self._count(Supplier), 1)

        r = self.client.delete("/api/suppliers", headers=self.admin_headers)
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), {"message": "All suppliers cleared"})
        self.assertEqual(self._count(Supplier), 0)

    def test_concurrent_duplicate_is_conflict_not_server_error(self) -> None:
        self._create_supplier()
        # The name lookup misses, as when another request inserts between check and commit.
        with patch("repairshop.services.shop._find_supplier_by_name", return_value=None):
            r = self.client.post(
                "/api/suppliers",
                json={"name": "PartsHub", "contactPerson": "Someone"},
                headers=self.user_headers,
            )
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json(), {"error": "Supplier already exists"})
        self.assertEqual(self._count(Supplier), 1)
        # The session was rolled back and the next request still works.
        self._create_supplier("CellFix")
        self.assertEqual(self._count(Supplier), 2)


class TestSupplierPayments(ShopApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        r = self.client.post(
            "/api/suppliers",
            json={"name": "PartsHub", "contactPerson": "Meena"},
            headers=self.user_headers,
        )
        self.supplier_id = r.json()["data"]["id"]

    def _pay(self, amount: float) -> dict:
        r = self.client.post(
            f"/api/suppliers/{self.supplier_id}/payments",
            json={"amount": amount, "paymentMethod": "cash"},
            headers=self.user_headers,
        )
        self.assertEqual(r.status_code, 201)
        return r.json()["data"]

    def test_list_newest_first(self) -> None:
        first = self._pay(100)
        second = self._pay(250)
        r = self.client.get("/api/suppliers/payments", headers=self.user_headers)
        self.assertEqual(r.status_code, 200)
        listed = r.json()["data"]
        self.assertEqual([p["id"] for p in listed], [second["id"], first["id"]])
        self.assertEqual(listed[0]["supplierId"], self.supplier_id)
        self.assertEqual(listed[0]["amount"], 250)

    def test_list_requires_auth(self) -> None:
        self.assertEqual(self.client.get("/api/suppliers/payments").status_code, 401)

    def test_clear_requires_admin(self) -> None:
        self._pay(100)
        r = self.client.delete("/api/suppliers/payments", headers=self.user_headers)
        self.assertEqual(r.status_code, 403)
        self.assertEqual(r.json(), {"error": "Admin access required"})
        self.assertEqual(self._count(SupplierPayment), 1)

    def test_admin_clears_payments_and_keeps_suppliers(self) -> None:
        self._pay(100)
        self._pay(50)
        r = self.client.delete("/api/suppliers/payments", headers=self.admin_headers)
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), {"message": "All supplier payments cleared"})
        self.assertEqual(self._count(SupplierPayment), 0)
        self.assertEqual(self._count(Supplier), 1)
        listed = self.client.get("/api/suppliers", headers=self.user_headers).json()["data"]
        self.assertEqual(listed[0]["totalPayments"], 0)
