import pytest


@pytest.fixture
def add_earning(client, auth_headers):
    def _add(amount, earning_type, title="Pay", created_on=None):
        body = {"amount": amount, "type": earning_type, "title": title}
        if created_on:
            body["createdOn"] = created_on
        response = client.post("/api/earnings", json=body, headers=auth_headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]["earning"]

    return _add


@pytest.fixture
def add_saving(client, auth_headers):
    def _add(amount, saving_type, category="fixed", title="Savings", created_on=None):
        body = {"amount": amount, "type": saving_type, "category": category, "title": title}
        if created_on:
            body["createdOn"] = created_on
        response = client.post("/api/savings", json=body, headers=auth_headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]["saving"]

    return _add


def test_earning_stats_by_type(client, auth_headers, add_earning):
    add_earning(1000, "salary")
    add_earning(250.5, "freelance")
    add_earning(99.99, "others")
    add_earning(0.01, "others")

    data = client.get("/api/earnings", headers=auth_headers).json()["data"]

    assert data["stats"] == {
        "totalEarnings": 1350.5,
        "bySalary": 1000,
        "byFreelance": 250.5,
        "byOthers": 100,
    }
    assert data["pagination"]["totalItems"] == 4


def test_earning_type_filter(client, auth_headers, add_earning):
    add_earning(1000, "salary")
    add_earning(250, "freelance")

    data = client.get("/api/earnings", params={"type": "freelance"}, headers=auth_headers).json()["data"]

    assert [e["amount"] for e in data["earnings"]] == [250]
    assert data["stats"]["bySalary"] == 0


def test_earning_month_filter(client, auth_headers, add_earning):
    add_earning(1000, "salary", created_on="2024-02-29T12:00:00")
    add_earning(1000, "salary", created_on="2024-03-01T00:00:00")

    data = client.get(
        "/api/earnings", params={"month": 2, "year": 2024}, headers=auth_headers
    ).json()["data"]

    assert data["stats"]["totalEarnings"] == 1000


def test_earning_rejects_unknown_type(client, auth_headers):
    response = client.post(
        "/api/earnings", json={"amount": 5, "type": "lottery", "title": "Win"}, headers=auth_headers
    )

    assert response.status_code == 400
    assert response.json()["errors"][0].startswith("type")


def test_earning_update_and_delete(client, auth_headers, other_headers, add_earning):
    earning = add_earning(1000, "salary")

    foreign = client.put(f"/api/earnings/{earning['id']}", json={"amount": 1}, headers=other_headers)
    updated = client.put(
        f"/api/earnings/{earning['id']}", json={"amount": 1200, "title": "Raise"}, headers=auth_headers
    )
    deleted = client.delete(f"/api/earnings/{earning['id']}", headers=auth_headers)

    assert foreign.status_code == 404
    assert updated.json()["data"]["earning"]["amount"] == 1200
    assert updated.json()["data"]["earning"]["title"] == "Raise"
    assert updated.json()["data"]["earning"]["type"] == "salary"
    assert deleted.status_code == 200
    assert client.get("/api/earnings", headers=auth_headers).json()["data"]["earnings"] == []


def test_saving_stats_net(client, auth_headers, add_saving):
    add_saving(500, "add")
    add_saving(200, "add", category="topup")
    add_saving(150, "withdraw")

    data = client.get("/api/savings", headers=auth_headers).json()["data"]

    assert data["stats"] == {"totalAdded": 700, "totalWithdrawn": 150, "netSavings": 550}


def test_saving_filters(client, auth_headers, add_saving):
    add_saving(500, "add")
    add_saving(200, "add", category="topup")
    add_saving(150, "withdraw", category="topup")

    topup = client.get("/api/savings", params={"category": "topup"}, headers=auth_headers).json()["data"]
    withdrawals = client.get("/api/savings", params={"type": "withdraw"}, headers=auth_headers).json()["data"]

    assert topup["stats"]["netSavings"] == 50
    assert [s["amount"] for s in withdrawals["savings"]] == [150]


def test_saving_sort_and_pages(client, auth_headers, add_saving):
    for amount in (30, 10, 20):
        add_saving(amount, "add")

    data = client.get(
        "/api/savings", params={"sort": "amount", "limit": 2}, headers=auth_headers
    ).json()["data"]

    assert [s["amount"] for s in data["savings"]] == [10, 20]
    assert data["pagination"]["totalPages"] == 2


def test_saving_update_and_delete(client, auth_headers, add_saving):
    saving = add_saving(500, "add")

    updated = client.put(
        f"/api/savings/{saving['id']}", json={"type": "withdraw"}, headers=auth_headers
    )
    deleted = client.delete(f"/api/savings/{saving['id']}", headers=auth_headers)
    missing = client.delete(f"/api/savings/{saving['id']}", headers=auth_headers)

    assert updated.json()["data"]["saving"]["type"] == "withdraw"
    assert deleted.json()["message"] == "Saving transaction deleted successfully"
    assert missing.status_code == 404
