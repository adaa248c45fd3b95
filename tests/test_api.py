from datetime import date, timedelta

from budgeter import DEFAULT_CATEGORIES
from budgeter.models import Category


def _category(client, name="Groceries", type="expense"):
    resp = client.post("/api/categories", json={"name": name, "type": type})
    assert resp.status_code == 201
    return resp.get_json()


def test_health(client):
    assert client.get("/api/health").get_json() == {"status": "ok"}


def test_category_crud(client):
    created = _category(client)
    assert created["color"] == "#2196f3"

    resp = client.put(f"/api/categories/{created['id']}", json={"color": "#000000"})
    assert resp.get_json()["color"] == "#000000"
    assert resp.get_json()["name"] == "Groceries"

    _category(client, "Salary", "income")
    names = [c["name"] for c in client.get("/api/categories").get_json()]
    assert names == ["Groceries", "Salary"]

    assert client.delete(f"/api/categories/{created['id']}").status_code == 204
    assert client.delete(f"/api/categories/{created['id']}").status_code == 404


def test_category_requires_name_and_type(client):
    resp = client.post("/api/categories", json={"name": "Groceries"})
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "type is required"}


def test_transactions_flow(client):
    category = _category(client)
    payload = {"amount": 12.5, "description": "Milk", "category_id": category["id"],
               "date": "2024-03-02", "type": "expense"}
    created = client.post("/api/transactions", json=payload)
    assert created.status_code == 201
    txn_id = created.get_json()["id"]

    listed = client.get("/api/transactions?startDate=2024-03-01&endDate=2024-03-31&type=expense").get_json()
    assert [t["id"] for t in listed] == [txn_id]
    assert client.get("/api/transactions?startDate=2024-04-01").get_json() == []

    updated = client.put(f"/api/transactions/{txn_id}", json={"amount": 15})
    assert updated.get_json()["amount"] == 15

    assert client.delete(f"/api/transactions/{txn_id}").status_code == 204
    assert client.put(f"/api/transactions/{txn_id}", json={"amount": 1}).status_code == 404


def test_transaction_filter_validation(client):
    resp = client.get("/api/transactions?type=transfer")
    assert resp.status_code == 400
    assert client.get("/api/transactions?startDate=yesterday").status_code == 400


def test_missing_transaction_fields(client):
    resp = client.post("/api/transactions", json={"amount": 5})
    assert resp.status_code == 400
    assert "required" in resp.get_json()["error"]


def test_bills_and_payments(client):
    category = _category(client, "Rent")
    today = date.today()
    resp = client.post("/api/bills", json={
        "name": "Rent", "amount": 900, "category_id": category["id"],
        "frequency": "monthly", "due_day": today.day,
    })
    assert resp.status_code == 201
    bill = resp.get_json()
    assert bill["next_due_date"] == today.isoformat()

    upcoming = client.get("/api/bills/upcoming?days=0").get_json()
    assert [b["id"] for b in upcoming] == [bill["id"]]

    paid = client.post(f"/api/bills/{bill['id']}/pay", json={"amount": 900, "paid_date": today.isoformat()})
    assert paid.status_code == 201
    assert paid.get_json()["due_date"] == today.isoformat()
    assert paid.get_json()["status"] == "paid"

    assert client.post("/api/bills/999/pay", json={"amount": 1, "paid_date": "2024-01-01"}).status_code == 404
    assert client.post(f"/api/bills/{bill['id']}/pay", json={"amount": 1}).status_code == 400

    history = client.get("/api/reports/bills").get_json()
    assert history[0]["recurring_bill"]["name"] == "Rent"

    paused = client.put(f"/api/bills/{bill['id']}", json={"is_active": False}).get_json()
    assert paused["is_active"] is False
    assert client.get("/api/bills/upcoming").get_json() == []
    assert client.delete(f"/api/bills/{bill['id']}").status_code == 204


def test_standalone_payments(client):
    resp = client.post("/api/payments", json={"amount": 40, "paid_date": "2024-05-02", "due_date": "2024-05-01"})
    assert resp.status_code == 201
    payment = resp.get_json()
    assert payment["recurring_bill_id"] is None
    assert payment["status"] == "paid"

    updated = client.put(f"/api/payments/{payment['id']}", json={"status": "overdue"}).get_json()
    assert updated["status"] == "overdue"
    assert client.put(f"/api/payments/{payment['id']}", json={"status": "lost"}).status_code == 400
    assert client.put("/api/payments/999", json={"status": "paid"}).status_code == 404

    assert len(client.get("/api/payments?startDate=2024-05-01&endDate=2024-05-31").get_json()) == 1
    assert client.get("/api/payments?startDate=2024-06-01").get_json() == []
    assert client.post("/api/payments", json={"amount": 40}).status_code == 400


def test_budgets_endpoints(client):
    category = _category(client)
    client.post("/api/transactions", json={"amount": 50, "description": "a", "category_id": category["id"],
                                           "date": "2024-03-10", "type": "expense"})
    first = client.post("/api/budgets", json={"category_id": category["id"], "amount": 300, "month": "2024-03"})
    assert first.status_code == 201
    client.post("/api/budgets", json={"category_id": category["id"], "amount": 200, "month": "2024-03"})

    budgets = client.get("/api/budgets?month=2024-03").get_json()
    assert [b["amount"] for b in budgets] == [200]

    [row] = client.get("/api/budgets/summary?month=2024-03").get_json()
    assert row["spent"] == 50
    assert row["percentage"] == 25

    assert client.get("/api/budgets/summary").status_code == 400
    assert client.post("/api/budgets", json={"amount": 1, "month": "2024-03"}).status_code == 400
    assert client.post("/api/budgets", json={"category_id": 99, "amount": 1, "month": "2024-03"}).status_code == 404


def test_reports_endpoints(client):
    category = _category(client)
    client.post("/api/transactions", json={"amount": 50, "description": "a", "category_id": category["id"],
                                           "date": date.today().isoformat(), "type": "expense"})
    start = (date.today() - timedelta(days=1)).isoformat()
    end = date.today().isoformat()

    spending = client.get(f"/api/reports/spending?startDate={start}&endDate={end}").get_json()
    assert spending[0]["percentage"] == 100
    assert client.get("/api/reports/spending?startDate=2024-01-01").status_code == 400

    trends = client.get("/api/reports/trends?months=2").get_json()
    assert len(trends) == 2
    assert trends[-1]["expenses"] == 50
    assert len(client.get("/api/reports/trends").get_json()) == 6

    export = client.get("/api/reports/export.csv")
    assert export.headers["Content-Type"].startswith("text/csv")
    assert b"Groceries" in export.data


def test_dashboard_endpoint(client):
    body = client.get("/api/dashboard").get_json()
    assert set(body) == {
        "total_income", "total_expenses", "savings",
        "upcoming_bills", "recent_transactions", "budget_status",
    }
    assert body["savings"] == 0


def test_unknown_route_is_json(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert "error" in resp.get_json()


def test_seed_categories_command(app, session):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["seed-categories"])
    assert f"Seeded {len(DEFAULT_CATEGORIES)} categories" in result.output

    result = runner.invoke(args=["seed-categories"])
    assert "Seeded 0 categories" in result.output
    assert session.query(Category).count() == len(DEFAULT_CATEGORIES)


def test_window_parameters_are_range_checked(client):
    resp = client.get("/api/bills/upcoming?days=1000000000")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "days must be between 0 and 3660"}
    assert client.get("/api/bills/upcoming?days=-1").status_code == 400
    assert client.get("/api/bills/upcoming?days=3660").status_code == 200

    assert client.get("/api/reports/trends?months=100000").status_code == 400
    assert client.get("/api/reports/trends?months=0").status_code == 400
    assert len(client.get("/api/reports/trends?months=120").get_json()) == 120


def test_payment_for_unknown_bill_is_404(client):
    resp = client.post("/api/payments", json={
        "recurring_bill_id": 999, "amount": 40, "paid_date": "2024-05-02", "due_date": "2024-05-01",
    })
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Bill not found"}
