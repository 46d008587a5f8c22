# tests/test_api.py
"""
Tests for the HTTP layer: routing, status codes and the error envelope.
"""

from fastapi import status
from fastapi.testclient import TestClient

from catalog_api.app.core.config import Settings
from catalog_api.app.main import create_app

API = "/api/v1"

# Request-shape failures.
UNPROCESSABLE = 422

EMPLOYEE = {
    "first_name": "Ada",
    "last_name": "Lovelace",
    "email": "ada@example.com",
    "department": "INFORMATION_TECHNOLOGY",
    "position": "SENIOR",
    "salary": 50000,
    "hire_date": "2024-01-15",
}


def assert_error(response, status_code, kind):
    assert response.status_code == status_code
    error = response.json()["error"]
    assert error["kind"] == kind
    return error


class TestEmployeeEndpoints:
    def test_create_and_get(self, client):
        response = client.post(f"{API}/employees/", json=EMPLOYEE)
        assert response.status_code == status.HTTP_201_CREATED
        created = response.json()
        assert created["id"] == 1
        assert created["active"] is True

        response = client.get(f"{API}/employees/1")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["last_name"] == "Lovelace"

    def test_missing_employee(self, client):
        error = assert_error(client.get(f"{API}/employees/5"), status.HTTP_404_NOT_FOUND, "not_found")
        assert error["entity"] == "Employee"
        assert error["id"] == 5

    def test_salary_scenario(self, client):
        for salary in (50000, 70000, 60000):
            client.post(f"{API}/employees/", json={**EMPLOYEE, "salary": salary})

        response = client.get(f"{API}/employees/", params={"sort": "salary"})
        assert [e["salary"] for e in response.json()] == [50000, 60000, 70000]

        response = client.post(f"{API}/employees/1/salary", json={"salary": -10})
        assert_error(response, status.HTTP_400_BAD_REQUEST, "invalid_argument")
        assert client.get(f"{API}/employees/1").json()["salary"] == 50000

    def test_transfer_and_department_listing(self, client):
        client.post(f"{API}/employees/", json=EMPLOYEE)
        response = client.post(f"{API}/employees/1/transfer", json={"department": "SALES"})
        assert response.json()["department"] == "SALES"
        listed = client.get(f"{API}/employees/department/SALES").json()
        assert [e["id"] for e in listed] == [1]

    def test_promote_and_deactivate(self, client):
        client.post(f"{API}/employees/", json=EMPLOYEE)
        assert client.post(f"{API}/employees/1/promote", json={"position": "LEAD"}).json()["position"] == "LEAD"
        assert client.post(f"{API}/employees/1/deactivate").json()["active"] is False
        assert client.post(f"{API}/employees/1/activate").json()["active"] is True

    def test_partial_update(self, client):
        client.post(f"{API}/employees/", json=EMPLOYEE)
        response = client.put(f"{API}/employees/1", json={"phone_number": "555-0100"})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["phone_number"] == "555-0100"
        assert response.json()["first_name"] == "Ada"

    def test_delete_is_idempotent(self, client):
        client.post(f"{API}/employees/", json=EMPLOYEE)
        assert client.delete(f"{API}/employees/1").status_code == status.HTTP_204_NO_CONTENT
        assert client.delete(f"{API}/employees/1").status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"{API}/employees/1").status_code == status.HTTP_404_NOT_FOUND

    def test_statistics(self, client):
        client.post(f"{API}/employees/", json={**EMPLOYEE, "salary": 40000})
        client.post(f"{API}/employees/", json={**EMPLOYEE, "salary": 60000, "department": "SALES"})
        client.post(f"{API}/employees/2/deactivate")

        response = client.get(f"{API}/employees/statistics")
        assert response.status_code == status.HTTP_200_OK
        stats = response.json()
        assert (stats["total_employees"], stats["active_employees"]) == (2, 1)
        assert stats["total_salary_cost"] == 40000
        assert [d["department"] for d in stats["departments"]] == ["SALES", "INFORMATION_TECHNOLOGY"]


class TestBookEndpoints:
    def test_lending_cycle(self, client):
        response = client.post(f"{API}/books/", json={"title": "Dune", "category": "SF", "total_copies": 1})
        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["available_copies"] == 1

        assert client.post(f"{API}/books/1/lend").json()["available_copies"] == 0
        error = assert_error(client.post(f"{API}/books/1/lend"), status.HTTP_409_CONFLICT, "unavailable")
        assert error["entity"] == "Book"
        assert error["id"] == 1

        assert client.post(f"{API}/books/1/return").json()["available_copies"] == 1
        assert_error(client.post(f"{API}/books/1/return"), status.HTTP_409_CONFLICT, "invariant_violation")

    def test_add_copies_and_available(self, client):
        client.post(f"{API}/books/", json={"title": "Dune", "category": "SF", "total_copies": 1})
        client.post(f"{API}/books/1/lend")
        assert client.get(f"{API}/books/available").json() == []
        book = client.post(f"{API}/books/1/copies", json={"count": 2}).json()
        assert (book["total_copies"], book["available_copies"]) == (3, 2)
        assert [b["id"] for b in client.get(f"{API}/books/available").json()] == [1]
        assert [b["id"] for b in client.get(f"{API}/books/category/SF").json()] == [1]

    def test_invalid_book(self, client):
        response = client.post(
            f"{API}/books/",
            json={"title": "Dune", "category": "SF", "total_copies": 1, "available_copies": 2},
        )
        assert_error(response, status.HTTP_400_BAD_REQUEST, "invalid_argument")

    def test_put_cannot_set_copy_counters(self, client):
        client.post(f"{API}/books/", json={"title": "Dune", "category": "SF", "total_copies": 3})
        client.post(f"{API}/books/1/lend")
        client.post(f"{API}/books/1/lend")

        response = client.put(f"{API}/books/1", json={"available_copies": 3})
        assert_error(response, UNPROCESSABLE, "invalid_argument")
        response = client.put(f"{API}/books/1", json={"total_copies": 1, "available_copies": 0})
        assert_error(response, UNPROCESSABLE, "invalid_argument")

        book = client.get(f"{API}/books/1").json()
        assert (book["total_copies"], book["available_copies"]) == (3, 1)

    def test_search_and_statistics(self, client):
        client.post(f"{API}/books/", json={"title": "Dune", "author": "Frank Herbert", "category": "SF"})
        client.post(
            f"{API}/books/",
            json={"title": "Emma", "author": "Jane Austen", "category": "Classics", "total_copies": 2},
        )
        client.post(f"{API}/books/2/lend")

        titles = client.get(f"{API}/books/search/title", params={"q": "dun"}).json()
        assert [b["title"] for b in titles] == ["Dune"]
        authors = client.get(f"{API}/books/search/author", params={"q": "AUSTEN"}).json()
        assert [b["title"] for b in authors] == ["Emma"]
        response = client.get(f"{API}/books/search/title", params={"q": " "})
        assert_error(response, status.HTTP_400_BAD_REQUEST, "invalid_argument")

        stats = client.get(f"{API}/books/statistics").json()
        assert stats == {"titles": 2, "total_copies": 3, "available_copies": 2, "lent_copies": 1}


class TestProductEndpoints:
    def test_crud_and_categories(self, client):
        client.post(f"{API}/products/", json={"name": "Laptop", "price": 999.0, "category": "Electronics"})
        client.post(f"{API}/products/", json={"name": "Desk", "price": 349.0, "category": "Furniture"})
        assert client.get(f"{API}/products/categories").json() == ["Electronics", "Furniture"]

        client.put(f"{API}/products/2", json={"category": "Electronics"})
        assert client.get(f"{API}/products/categories").json() == ["Electronics"]
        names = [p["name"] for p in client.get(f"{API}/products/category/Electronics").json()]
        assert names == ["Laptop", "Desk"]

    def test_non_positive_price(self, client):
        response = client.post(f"{API}/products/", json={"name": "Free", "price": 0, "category": "Misc"})
        assert_error(response, status.HTTP_400_BAD_REQUEST, "invalid_argument")


class TestUserEndpoints:
    def test_duplicate_email(self, client):
        user = {"name": "John Doe", "email": "john@example.com", "age": 25}
        assert client.post(f"{API}/users/", json=user).status_code == status.HTTP_201_CREATED
        assert_error(client.post(f"{API}/users/", json=user), status.HTTP_409_CONFLICT, "conflict")

    def test_bulk_and_queries(self, client):
        users = [
            {"name": "John Doe", "email": "john.doe@email.com", "age": 25},
            {"name": "Jane Smith", "email": "jane.smith@email.com", "age": 30},
            {"name": "Bob Johnson", "email": "bob.johnson@email.com", "age": 35},
        ]
        response = client.post(f"{API}/users/bulk", json=users)
        assert response.status_code == status.HTTP_201_CREATED
        assert [u["id"] for u in response.json()] == [1, 2, 3]

        found = client.get(f"{API}/users/search", params={"name": "john"}).json()
        assert [u["name"] for u in found] == ["John Doe", "Bob Johnson"]

        in_range = client.get(f"{API}/users/age-range", params={"minAge": 26, "maxAge": 40}).json()
        assert [u["name"] for u in in_range] == ["Jane Smith", "Bob Johnson"]

        client.patch(f"{API}/users/3/status", json={"status": "INACTIVE"})
        assert [u["id"] for u in client.get(f"{API}/users/status/INACTIVE").json()] == [3]
        assert client.get(f"{API}/users/status-counts").json() == {"ACTIVE": 2, "INACTIVE": 1}

        stats = client.get(f"{API}/users/statistics").json()
        assert stats["total_users"] == 3
        assert stats["active_users"] == 2

    def test_invalid_age_range(self, client):
        response = client.get(f"{API}/users/age-range", params={"minAge": 50, "maxAge": 10})
        assert_error(response, status.HTTP_400_BAD_REQUEST, "invalid_argument")


class TestRequestValidation:
    def test_missing_field(self, client):
        body = {k: v for k, v in EMPLOYEE.items() if k != "salary"}
        error = assert_error(
            client.post(f"{API}/employees/", json=body),
            UNPROCESSABLE,
            "invalid_argument",
        )
        assert any(detail["field"] == "salary" for detail in error["details"])

    def test_non_integer_id(self, client):
        assert_error(client.get(f"{API}/books/abc"), UNPROCESSABLE, "invalid_argument")

    def test_unknown_sort(self, client):
        response = client.get(f"{API}/employees/", params={"sort": "name"})
        assert response.status_code == UNPROCESSABLE


class TestApplicationState:
    def test_apps_do_not_share_data(self, settings):
        first, second = TestClient(create_app(settings)), TestClient(create_app(settings))
        first.post(f"{API}/products/", json={"name": "Laptop", "price": 1.0, "category": "Electronics"})
        assert second.get(f"{API}/products/").json() == []

    def test_sample_data(self):
        client = TestClient(create_app(Settings(seed_sample_data=True)))
        users = client.get(f"{API}/users/").json()
        assert [u["id"] for u in users] == [1, 2, 3, 4, 5]
        assert users[0]["name"] == "John Doe"
        assert client.get(f"{API}/books/").json()
        assert client.get(f"{API}/employees/").json()
        assert client.get(f"{API}/products/").json()
