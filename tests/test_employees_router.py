"""
Tests for employee endpoints.
"""

import uuid

import pytest

BASE = "/api/v1/employees"


@pytest.fixture
def position_id(client):
    """Identifier of a position created over HTTP."""
    response = client.post("/api/v1/positions", json={"name": "worker", "salary": "500"})
    return response.json()["id"]


def employee_body(position_id, first_name="Nick", last_name="Bobs"):
    return {"first_name": first_name, "last_name": last_name, "position_id": position_id}


class TestCreateEmployeeEndpoint:
    """Test POST /api/v1/employees."""

    def test_create(self, client, position_id):
        """Test creation returns the new identifier."""
        response = client.post(BASE, json=employee_body(position_id))

        assert response.status_code == 201
        uuid.UUID(response.json()["id"])

    def test_duplicate_conflict(self, client, position_id):
        """Test a duplicate name is a conflict."""
        client.post(BASE, json=employee_body(position_id))

        response = client.post(BASE, json=employee_body(position_id))

        assert response.status_code == 409
        assert response.json()["error"] == "EmployeeAlreadyExists"

    def test_unknown_position(self, client):
        """Test an unknown position is unprocessable."""
        response = client.post(BASE, json=employee_body(str(uuid.uuid4())))

        assert response.status_code == 422
        assert response.json()["error"] == "PositionDoesNotExist"


class TestGetEmployeeEndpoint:
    """Test GET /api/v1/employees/{id}."""

    def test_found(self, client, position_id):
        """Test a created employee is returned."""
        employee_id = client.post(BASE, json=employee_body(position_id)).json()["id"]

        response = client.get(f"{BASE}/{employee_id}")

        assert response.status_code == 200
        assert response.json() == {
            "id": employee_id,
            "first_name": "Nick",
            "last_name": "Bobs",
            "position_id": position_id,
        }

    def test_malformed_identifier(self, client):
        """Test a malformed identifier is a parse error."""
        response = client.get(f"{BASE}/9")

        assert response.status_code == 400
        assert response.json()["error"] == "ParseError"

    def test_not_found(self, client):
        """Test an unknown identifier is 404."""
        assert client.get(f"{BASE}/{uuid.uuid4()}").status_code == 404


class TestListEmployeesEndpoint:
    """Test GET /api/v1/employees."""

    def test_pages(self, client, position_id):
        """Test paging over two employees."""
        first = client.post(BASE, json=employee_body(position_id)).json()["id"]
        second = client.post(BASE, json=employee_body(position_id, "Bob", "Daddy")).json()["id"]

        response = client.get(BASE, params={"limit": 1, "offset": 2})

        assert response.status_code == 200
        assert [e["id"] for e in response.json()] == [second]
        assert [e["id"] for e in client.get(BASE, params={"limit": 2}).json()] == [first, second]
        assert client.get(BASE, params={"limit": 101}).status_code == 400


class TestUpdateEmployeeEndpoint:
    """Test PUT /api/v1/employees/{id}."""

    def test_update(self, client, position_id):
        """Test the stored employee is replaced."""
        employee_id = client.post(BASE, json=employee_body(position_id)).json()["id"]

        response = client.put(
            f"{BASE}/{employee_id}", json=employee_body(position_id, "Bob", "Daddy")
        )

        assert response.status_code == 204
        assert client.get(f"{BASE}/{employee_id}").json()["first_name"] == "Bob"

    def test_malformed_identifier(self, client, position_id):
        """Test a malformed path identifier is a bad request."""
        response = client.put(f"{BASE}/nope", json=employee_body(position_id))

        assert response.status_code == 400


class TestDeleteEmployeeEndpoint:
    """Test DELETE /api/v1/employees/{id}."""

    def test_delete(self, client, position_id):
        """Test a deleted employee is gone."""
        employee_id = client.post(BASE, json=employee_body(position_id)).json()["id"]

        assert client.delete(f"{BASE}/{employee_id}").status_code == 204
        assert client.get(f"{BASE}/{employee_id}").status_code == 404

    def test_delete_by_uppercase_identifier(self, client, position_id):
        """Test an uppercase identifier deletes the employee."""
        employee_id = client.post(BASE, json=employee_body(position_id)).json()["id"]

        assert client.delete(f"{BASE}/{employee_id.upper()}").status_code == 204
        assert client.get(f"{BASE}/{employee_id}").status_code == 404

    def test_position_delete_keeps_employee(self, client, position_id):
        """Test deleting a held position leaves the employee's reference."""
        employee_id = client.post(BASE, json=employee_body(position_id)).json()["id"]

        client.delete(f"/api/v1/positions/{position_id}")

        assert client.get(f"{BASE}/{employee_id}").json()["position_id"] == position_id
