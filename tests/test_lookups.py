import pytest

CATEGORIES = "/api/expense-categories"
TYPES = "/api/expense-types"


def _create_category(client, headers, name, icon="tag"):
    return client.post(
        CATEGORIES,
        json={"expenseCategoryName": name, "expenseCategoryIcon": icon},
        headers=headers,
    )


def test_create_category(client, auth_headers):
    response = _create_category(client, auth_headers, "Travel", icon="plane")

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Category created successfully"
    assert body["data"]["category"]["expenseCategoryName"] == "Travel"
    assert body["data"]["category"]["expenseCategoryIcon"] == "plane"


def test_duplicate_name_for_same_owner_is_rejected(client, auth_headers):
    _create_category(client, auth_headers, "Travel")

    response = _create_category(client, auth_headers, "Travel")

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "message": "Category with this name already exists",
    }


def test_uniqueness_is_case_sensitive(client, auth_headers):
    _create_category(client, auth_headers, "Travel")

    assert _create_category(client, auth_headers, "travel").status_code == 201


def test_same_name_for_different_owners(client, auth_headers, other_headers):
    assert _create_category(client, auth_headers, "Travel").status_code == 201
    assert _create_category(client, other_headers, "Travel").status_code == 201


@pytest.mark.parametrize("name", ["", "   "])
def test_blank_name_is_rejected(client, auth_headers, name):
    response = _create_category(client, auth_headers, name)

    assert response.status_code == 400
    assert response.json()["errors"][0].startswith("expenseCategoryName")


def test_list_is_owner_scoped_and_searchable(client, auth_headers, other_headers):
    for name in ("Rent", "Restaurants", "Fuel"):
        _create_category(client, auth_headers, name)
    _create_category(client, other_headers, "Retail")

    everything = client.get(CATEGORIES, headers=auth_headers).json()["data"]
    matches = client.get(CATEGORIES, params={"search": "re"}, headers=auth_headers).json()["data"]

    assert [c["expenseCategoryName"] for c in everything["categories"]] == ["Fuel", "Rent", "Restaurants"]
    assert everything["total"] == 3
    assert [c["expenseCategoryName"] for c in matches["categories"]] == ["Rent", "Restaurants"]


def test_search_treats_wildcards_literally(client, auth_headers):
    _create_category(client, auth_headers, "Rent")

    response = client.get(CATEGORIES, params={"search": "%"}, headers=auth_headers)

    assert response.json()["data"]["total"] == 0


def test_rename_checks_uniqueness(client, auth_headers):
    _create_category(client, auth_headers, "Rent")
    fuel_id = _create_category(client, auth_headers, "Fuel").json()["data"]["category"]["id"]

    clash = client.put(f"{CATEGORIES}/{fuel_id}", json={"expenseCategoryName": "Rent"}, headers=auth_headers)
    same = client.put(
        f"{CATEGORIES}/{fuel_id}",
        json={"expenseCategoryName": "Fuel", "expenseCategoryIcon": "pump"},
        headers=auth_headers,
    )

    assert clash.status_code == 400
    assert same.status_code == 200
    assert same.json()["data"]["category"]["expenseCategoryIcon"] == "pump"


def test_other_owner_cannot_touch_category(client, category_id, other_headers):
    update = client.put(
        f"{CATEGORIES}/{category_id}", json={"expenseCategoryName": "Mine"}, headers=other_headers
    )
    delete = client.delete(f"{CATEGORIES}/{category_id}", headers=other_headers)

    assert update.status_code == 404
    assert delete.status_code == 404
    assert delete.json()["message"] == (
        "Category not found or you do not have permission to access it"
    )


def test_delete_unused_category(client, auth_headers, category_id):
    response = client.delete(f"{CATEGORIES}/{category_id}", headers=auth_headers)

    assert response.status_code == 200
    assert client.get(CATEGORIES, headers=auth_headers).json()["data"]["total"] == 0


def test_delete_referenced_lookups_is_refused(client, auth_headers, category_id, type_id):
    client.post(
        "/api/expenses",
        json={
            "expenses": [
                {
                    "amount": 10,
                    "expenseCategory": category_id,
                    "expenseTypeId": type_id,
                    "need_or_want": "need",
                }
            ]
        },
        headers=auth_headers,
    )

    category = client.delete(f"{CATEGORIES}/{category_id}", headers=auth_headers)
    expense_type = client.delete(f"{TYPES}/{type_id}", headers=auth_headers)

    assert category.status_code == 400
    assert "cannot be deleted" in category.json()["message"]
    assert expense_type.status_code == 400


def test_expense_types_crud(client, auth_headers, type_id):
    duplicate = client.post(TYPES, json={"expenseTypeName": "Card"}, headers=auth_headers)
    renamed = client.put(f"{TYPES}/{type_id}", json={"expenseTypeName": "Credit card"}, headers=auth_headers)
    listed = client.get(TYPES, headers=auth_headers).json()["data"]
    deleted = client.delete(f"{TYPES}/{type_id}", headers=auth_headers)

    assert duplicate.status_code == 400
    assert duplicate.json()["message"] == "Expense type with this name already exists"
    assert renamed.json()["data"]["type"]["expenseTypeName"] == "Credit card"
    assert listed["total"] == 1
    assert deleted.json()["message"] == "Expense type deleted successfully"


def test_lookups_require_authentication(client):
    assert client.get(CATEGORIES).status_code == 401
    assert client.post(TYPES, json={"expenseTypeName": "Cash"}).status_code == 401
