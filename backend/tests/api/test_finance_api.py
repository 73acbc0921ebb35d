def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_asset_income_round_trip(client):
    # create
    r = client.post(
        "/assets",
        json={"type": "Stocks", "value": 12000, "is_monthly_income": True, "interest_rate": 6},
    )
    assert r.status_code == 201, r.text
    asset = r.json()
    assert asset["value"] == "12000.00"
    assert asset["monthly_income_amount"] == "60.00"

    assert client.get("/incomes/asset-types").json() == ["Stocks"]

    # asset income -> deduct
    r2 = client.post(
        "/incomes",
        json={"type": "asset", "asset_type": "Stocks", "amount": 2000, "year": 2024, "month": 3},
    )
    assert r2.status_code == 201, r2.text
    income_id = r2.json()["id"]

    listed = client.get("/assets").json()
    assert listed["items"][0]["value"] == "10000.00"
    assert listed["items"][0]["monthly_income_amount"] == "50.00"
    assert listed["total_monthly_income"] == "50.00"

    r3 = client.get("/incomes?year=2024&month=3").json()
    assert [it["id"] for it in r3["items"]] == [income_id]
    assert r3["total"] == "2000.00"

    # delete -> restore
    assert client.delete(f"/incomes/{income_id}").status_code == 204
    assert client.get("/assets").json()["items"][0]["value"] == "12000.00"
    assert client.get("/incomes?year=2024&month=3").json()["items"] == []


def test_income_suggestion(client):
    client.post("/assets", json={"type": "Bonds", "value": 2400, "is_monthly_income": True, "interest_rate": 5})

    r = client.get("/incomes/suggestion?asset_type=Bonds")
    assert r.status_code == 200
    assert r.json()["amount"] == "10.00"

    assert client.get("/incomes/suggestion?asset_type=Nope").status_code == 404


def test_asset_income_without_asset_type_is_rejected(client):
    r = client.post("/incomes", json={"type": "asset", "amount": 100, "year": 2024, "month": 3})
    assert r.status_code == 422
    assert client.get("/incomes?year=2024&month=3").json()["items"] == []


def test_negative_amount_is_rejected(client):
    r = client.post("/assets", json={"type": "Cash", "value": -1})
    assert r.status_code == 422


def test_liability_expenditure_flow(client):
    r = client.post(
        "/liabilities",
        json={"type": "Mortgage", "amount": 100000, "interest_rate": 6, "has_monthly_payment": True},
    )
    assert r.status_code == 201, r.text
    assert r.json()["monthly_payment"] == "599.55"

    options = client.get("/expenditures/liabilities").json()
    assert options == [{"type": "Mortgage", "amount": "599.55"}]
    assert client.get("/expenditures/suggestion?liability_type=Mortgage").json()["amount"] == "599.55"

    r2 = client.post(
        "/expenditures",
        json={
            "expenditure_type": "other",
            "liability_type": "Mortgage",
            "amount": 600,
            "type": "static",
            "year": 2024,
            "month": 3,
        },
    )
    assert r2.status_code == 201, r2.text
    assert client.get("/liabilities").json()["items"][0]["amount"] == "99400.00"

    client.post(
        "/expenditures",
        json={"name": "Food", "amount": 50, "type": "dynamic", "state": "high", "year": 2024, "month": 3},
    )
    client.post(
        "/expenditures",
        json={"name": "Bars", "amount": 30, "type": "dynamic", "year": 2024, "month": 3},
    )

    listed = client.get("/expenditures?year=2024&month=3").json()
    assert listed["total"] == "680.00"
    assert listed["tiers"] == {"essential": "600.00", "tight": "650.00", "light": "650.00"}
    assert listed["items"][2]["state"] == "medium"

    assert client.delete(f"/expenditures/{r2.json()['id']}").status_code == 204
    assert client.get("/liabilities").json()["items"][0]["amount"] == "100000.00"


def test_expenditure_personal_requires_name(client):
    r = client.post("/expenditures", json={"amount": 10, "year": 2024, "month": 3})
    assert r.status_code == 422


def test_dashboard(client):
    client.post("/assets", json={"type": "Savings", "value": 5000})
    client.post("/liabilities", json={"type": "Card", "amount": 1000, "interest_rate": 20})
    client.post("/incomes", json={"amount": 3000, "year": 2024, "month": 3})
    client.post("/expenditures", json={"name": "Rent", "amount": 1200, "year": 2024, "month": 3})

    d = client.get("/dashboard?year=2024&month=3").json()
    assert d["total_income"] == "3000.00"
    assert d["total_expenditure"] == "1200.00"
    assert d["balance"] == "1800.00"
    assert d["trend"] == "positive"
    assert d["net_worth"] == "4000.00"

    other = client.get("/dashboard?year=2024&month=4").json()
    assert other["balance"] == "0.00"
    assert other["net_worth"] == "4000.00"


def test_unknown_ids_return_404(client):
    for path in ("/assets/1", "/liabilities/1", "/incomes/1", "/expenditures/1"):
        assert client.delete(path).status_code == 404


def test_monthly_income_preview(client):
    r = client.get("/assets/monthly-income-preview?value=12000&interest_rate=6")
    assert r.status_code == 200
    assert r.json()["monthly_income"] == "60.00"


def test_sql_store_backend(tmp_path, monkeypatch):
    from fastapi.testclient import TestClient

    from pocketledger.api.deps import get_store, reset_dependencies
    from pocketledger.api.main import app
    from pocketledger.repositories.sql_store import SqlStore

    monkeypatch.setenv("POCKETLEDGER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("POCKETLEDGER_DATABASE_URL", f"sqlite:///{(tmp_path / 'api.db').as_posix()}")
    reset_dependencies()
    try:
        client = TestClient(app)
        assert client.post("/assets", json={"type": "Cash", "value": 10}).status_code == 201
        assert isinstance(get_store(), SqlStore)
        assert client.get("/assets").json()["total_value"] == "10.00"
    finally:
        reset_dependencies()
