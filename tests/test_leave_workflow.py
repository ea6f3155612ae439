import pytest
from hrms.models.audit_log import AuditLog
from hrms.models.leave_request import LeaveRequest, LeaveStatus


def _submit(client, employee, leave_type="Annual Leave", start="2024-03-04", end="2024-03-08", **extra):
    return client.post(
        "/api/leaves",
        json={
            "employee_id": employee.id,
            "leave_type": leave_type,
            "start_date": start,
            "end_date": end,
            "reason": "Family trip",
            **extra,
        },
    )


def test_submit_derives_days_and_starts_pending(client, employee):
    response = _submit(client, employee)
    assert response.status_code == 201
    data = response.json()
    assert data["days"] == 5
    assert data["status"] == LeaveStatus.PENDING.value
    assert data["employee"]["first_name"] == "Omar"


def test_client_supplied_days_and_status_are_ignored(client, employee):
    data = _submit(client, employee, start="2024-03-04", end="2024-03-04", days=10, status="approved").json()
    assert data["days"] == 1
    assert data["status"] == "pending"


def test_end_before_start_is_rejected(client, employee):
    response = _submit(client, employee, start="2024-03-08", end="2024-03-04")
    assert response.status_code == 400
    assert response.json()["errors"][0]["code"] == "INVALID_DATE_RANGE"


def test_submit_for_unknown_employee(client, employee):
    response = client.post(
        "/api/leaves",
        json={"employee_id": 9999, "leave_type": "Sick Leave", "start_date": "2024-03-04", "end_date": "2024-03-04"},
    )
    assert response.status_code == 404


def test_approve_pending_request(client, employee, db_session):
    leave_id = _submit(client, employee).json()["id"]
    response = client.post(f"/api/leaves/{leave_id}/approve", json={"comment": "Enjoy"})
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "approved"
    assert data["decision_comment"] == "Enjoy"
    assert data["decided_at"] is not None

    actions = [log.action for log in db_session.query(AuditLog).filter(AuditLog.entity_id == leave_id).all()]
    assert "approve_leave" in actions


def test_approve_without_body(client, employee):
    leave_id = _submit(client, employee).json()["id"]
    assert client.post(f"/api/leaves/{leave_id}/approve").status_code == 200


def test_reject_pending_request(client, employee):
    leave_id = _submit(client, employee).json()["id"]
    response = client.post(f"/api/leaves/{leave_id}/reject", json={"comment": "Peak season"})
    assert response.status_code == 200
    assert response.json()["status"] == "rejected"


@pytest.mark.parametrize("first,second", [
    ("approve", "reject"),
    ("reject", "approve"),
    ("approve", "approve"),
])
def test_decided_request_cannot_transition_again(client, employee, first, second):
    leave_id = _submit(client, employee).json()["id"]
    client.post(f"/api/leaves/{leave_id}/{first}")
    response = client.post(f"/api/leaves/{leave_id}/{second}")
    assert response.status_code == 409
    assert response.json()["errors"][0]["code"] == "INVALID_STATE_TRANSITION"


def test_edit_recomputes_days(client, employee):
    leave_id = _submit(client, employee).json()["id"]
    response = client.put(f"/api/leaves/{leave_id}", json={"end_date": "2024-03-05"})
    assert response.status_code == 200
    assert response.json()["days"] == 2


def test_edit_cannot_touch_status(client, employee, db_session):
    leave_id = _submit(client, employee).json()["id"]
    client.put(f"/api/leaves/{leave_id}", json={"status": "approved", "reason": "Updated"})
    leave = db_session.get(LeaveRequest, leave_id)
    assert leave.status == "pending"
    assert leave.reason == "Updated"


def test_edit_after_decision_is_rejected(client, employee):
    leave_id = _submit(client, employee).json()["id"]
    client.post(f"/api/leaves/{leave_id}/approve")
    response = client.put(f"/api/leaves/{leave_id}", json={"reason": "late edit"})
    assert response.status_code == 409


def test_list_filters(client, employee):
    first = _submit(client, employee, leave_type="Sick Leave").json()["id"]
    _submit(client, employee, leave_type="Annual Leave")
    client.post(f"/api/leaves/{first}/approve")

    approved = client.get("/api/leaves", params={"status": "approved"}).json()
    assert [item["id"] for item in approved] == [first]
    sick = client.get("/api/leaves", params={"leave_type": "Sick Leave"}).json()
    assert len(sick) == 1


def test_balance_counts_only_approved_requests(client, employee):
    approved = _submit(client, employee, start="2024-03-04", end="2024-03-08").json()["id"]
    rejected = _submit(client, employee, start="2024-04-01", end="2024-04-02").json()["id"]
    _submit(client, employee, start="2024-05-01", end="2024-05-03")  # stays pending
    client.post(f"/api/leaves/{approved}/approve")
    client.post(f"/api/leaves/{rejected}/reject")

    response = client.get(f"/api/leaves/balance/{employee.id}")
    assert response.status_code == 200
    annual = next(row for row in response.json() if row["leave_type"] == "Annual Leave")
    assert annual == {"leave_type": "Annual Leave", "total_days": 20, "used_days": 5, "remaining_days": 15}


def test_allotments(client):
    assert client.get("/api/leaves/allotments").json()["Unpaid Leave"] == 30


def test_delete_leave_request(client, employee):
    leave_id = _submit(client, employee).json()["id"]
    assert client.delete(f"/api/leaves/{leave_id}").status_code == 204
    assert client.get(f"/api/leaves/{leave_id}").status_code == 404


def test_edit_with_null_date_is_rejected(client, employee):
    leave_id = _submit(client, employee).json()["id"]
    response = client.put(f"/api/leaves/{leave_id}", json={"start_date": None})
    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "start_date"
    assert client.get(f"/api/leaves/{leave_id}").json()["days"] == 5


def test_edit_can_clear_reason(client, employee):
    leave_id = _submit(client, employee).json()["id"]
    response = client.put(f"/api/leaves/{leave_id}", json={"reason": None})
    assert response.status_code == 200
    assert response.json()["reason"] is None
