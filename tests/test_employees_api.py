import pytest

from hrms.models.employee import Employee
from hrms.services.benefit_service import BenefitService
from hrms.services.employee_service import EmployeeService


def _employee_payload(**overrides):
    payload = {
        "first_name": "Sara",
        "last_name": "Nasser",
        "email": "sara.nasser@example.com",
        "position": "Accountant",
        "hire_date": "2021-06-15",
        "salary": 8000,
    }
    payload.update(overrides)
    return payload


def test_create_department(client):
    response = client.post("/api/departments", json={"name": "Finance", "open_positions": 1})
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Finance"
    assert data["employee_count"] == 0


def test_duplicate_department_name(client, department):
    response = client.post("/api/departments", json={"name": "Engineering"})
    assert response.status_code == 409
    assert response.json()["errors"][0]["code"] == "CONFLICT"


def test_department_counts_members(client, department, employee):
    data = client.get(f"/api/departments/{department.id}").json()
    assert data["employee_count"] == 1


def test_create_employee(client, department):
    response = client.post("/api/employees", json=_employee_payload(department_id=department.id))
    assert response.status_code == 201
    data = response.json()
    assert data["full_name"] == "Sara Nasser"
    assert data["status"] == "active"


def test_create_employee_in_unknown_department(client):
    response = client.post("/api/employees", json=_employee_payload(department_id=4242))
    assert response.status_code == 404


def test_duplicate_email(client, employee):
    response = client.post("/api/employees", json=_employee_payload(email=employee.email))
    assert response.status_code == 409


def test_invalid_email_is_a_validation_error(client):
    response = client.post("/api/employees", json=_employee_payload(email="not-an-email"))
    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["errors"][0]["field"] == "email"


def test_filter_employees_by_department(client, department, employee):
    client.post("/api/employees", json=_employee_payload())
    members = client.get("/api/employees", params={"department_id": department.id}).json()
    assert [e["id"] for e in members] == [employee.id]


def test_update_employee(client, employee):
    response = client.put(f"/api/employees/{employee.id}", json={"position": "Lead Engineer", "status": "inactive"})
    assert response.status_code == 200
    assert response.json()["position"] == "Lead Engineer"
    assert response.json()["status"] == "inactive"


def test_missing_employee(client):
    response = client.get("/api/employees/9999")
    assert response.status_code == 404
    error = response.json()["errors"][0]
    assert error["msg"] == "Employee not found"
    assert error["details"] == {"id": 9999}


def test_delete_department_keeps_employees(client, db_session, department, employee):
    assert client.delete(f"/api/departments/{department.id}").status_code == 204
    db_session.expire_all()
    assert db_session.get(Employee, employee.id).department_id is None


def test_delete_employee_removes_their_leave(client, employee):
    client.post(
        "/api/leaves",
        json={"employee_id": employee.id, "leave_type": "Sick Leave", "start_date": "2024-01-02", "end_date": "2024-01-02"},
    )
    assert client.delete(f"/api/employees/{employee.id}").status_code == 204
    assert client.get("/api/leaves").json() == []


def test_null_salary_is_a_validation_error(client, employee):
    response = client.put(f"/api/employees/{employee.id}", json={"salary": None})
    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "salary"


def test_department_can_be_cleared(client, employee):
    response = client.put(f"/api/employees/{employee.id}", json={"department_id": None})
    assert response.status_code == 200
    assert response.json()["department_id"] is None


def test_failed_gratuity_resync_keeps_previous_salary(db_session, employee, monkeypatch):
    def failing_sync(self, emp):
        raise RuntimeError("resync failed")

    monkeypatch.setattr(BenefitService, "sync_salary", failing_sync)
    with pytest.raises(RuntimeError):
        EmployeeService(db_session).update(employee.id, {"salary": 20000})

    db_session.expire_all()
    assert db_session.get(Employee, employee.id).salary == 10000
