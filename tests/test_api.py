def test_root_and_health(client):
    assert client.get("/").status_code == 200
    assert client.get("/api/v1/system/health").json() == {"status": "ok"}


def test_allocate_preview(client):
    res = client.post("/api/v1/expense/allocate", json={
        "amount": "100.00",
        "split_type": "PERCENTAGE",
        "percentages": {"1": "33.33", "2": "33.33", "3": "33.34"},
    })
    assert res.status_code == 200
    assert res.json() == [
        {"user_id": 1, "amount": "33.33", "percentage": "33.33"},
        {"user_id": 2, "amount": "33.33", "percentage": "33.33"},
        {"user_id": 3, "amount": "33.34", "percentage": "33.34"},
    ]


def test_allocate_preview_rejects_mismatch(client):
    res = client.post("/api/v1/expense/allocate", json={
        "amount": "120.00",
        "split_type": "EXACT",
        "exact_amounts": {"1": "50", "2": "40", "3": "29"},
    })
    assert res.status_code == 400
    assert "must equal expense amount" in res.json()["detail"]


def test_expense_then_balances(client):
    res = client.post("/api/v1/expense/", json={
        "group_id": 10,
        "paid_by": 1,
        "amount": "1500.00",
        "description": "cabin",
        "split_type": "EQUAL",
        "split_among": [1, 2, 3],
    })
    assert res.status_code == 200
    body = res.json()
    assert body["amount"] == "1500.00"
    assert [s["amount"] for s in body["splits"]] == ["500.00", "500.00", "500.00"]

    res = client.get("/api/v1/groups/10/balances")
    assert res.status_code == 200
    assert res.json() == [
        {"from_id": 2, "from_name": "Bilal", "to_id": 1, "to_name": "Asha", "amount": "500.00"},
        {"from_id": 3, "from_name": "Chen", "to_id": 1, "to_name": "Asha", "amount": "500.00"},
    ]

    summary = client.get("/api/v1/groups/10/balances/user/2").json()
    assert summary["user_name"] == "Bilal"
    assert summary["total_owed"] == "500.00"
    assert summary["net_balance"] == "-500.00"
    assert summary["is_settled"] is False

    pair = client.get("/api/v1/groups/10/balances/between/3/1").json()
    assert pair == {"user_id": 3, "other_id": 1, "amount": "500.00"}


def test_settlement_clears_balances(client):
    client.post("/api/v1/expense/", json={
        "group_id": 10, "paid_by": 1, "amount": "50.00",
        "split_type": "EXACT", "exact_amounts": {"2": "50.00"},
    })
    res = client.post("/api/v1/settlements/", json={"group_id": 10, "payer_id": 2, "payee_id": 1, "amount": "50.00"})
    assert res.status_code == 200
    assert res.json()["amount"] == "50.00"

    assert client.get("/api/v1/groups/10/balances").json() == []
    overall = client.get("/api/v1/users/2/balance").json()
    assert overall["is_settled"] is True
    assert overall["debts"] == [] and overall["credits"] == []


def test_settlement_to_self_rejected(client):
    res = client.post("/api/v1/settlements/", json={"group_id": 10, "payer_id": 2, "payee_id": 2, "amount": "5"})
    assert res.status_code == 400
    assert res.json() == {"detail": "Payer and payee cannot be the same"}


def test_unknown_group_is_404(client):
    res = client.get("/api/v1/groups/404/balances")
    assert res.status_code == 404


def test_delete_expense_and_settlement(client):
    expense = client.post("/api/v1/expense/", json={
        "group_id": 10, "paid_by": 1, "amount": "50.00",
        "split_type": "EXACT", "exact_amounts": {"2": "50.00"},
    }).json()
    settlement = client.post(
        "/api/v1/settlements/", json={"group_id": 10, "payer_id": 2, "payee_id": 1, "amount": "50.00"}
    ).json()
    assert client.get("/api/v1/groups/10/balances").json() == []

    res = client.delete(f"/api/v1/settlements/{settlement['id']}")
    assert res.status_code == 200
    assert res.json() == {"status": "deleted"}
    assert client.get("/api/v1/groups/10/balances").json()[0]["amount"] == "50.00"

    res = client.delete(f"/api/v1/expense/{expense['id']}")
    assert res.status_code == 200
    assert client.get("/api/v1/groups/10/balances").json() == []

    res = client.delete(f"/api/v1/expense/{expense['id']}")
    assert res.status_code == 404
    assert res.json() == {"detail": f"Expense {expense['id']} not found"}
    assert client.delete("/api/v1/settlements/404").status_code == 404
