import pytest

from hrms.models.benefit import BenefitRecord


def _create(client, employee, years=7, salary=10000):
    return client.post(
        "/api/benefits",
        json={"employee_id": employee.id, "years_of_service": years, "basic_salary": salary},
    )


def test_create_computes_gratuity(client, employee):
    response = _create(client, employee)
    assert response.status_code == 201
    data = response.json()
    assert data["gratuity_amount"] == pytest.approx(45000)
    assert data["status"] == "accruing"
    assert data["last_calculated"] is not None


def test_supplied_amount_and_status_are_ignored(client, employee):
    response = client.post(
        "/api/benefits",
        json={
            "employee_id": employee.id, "years_of_service": 1, "basic_salary": 10000,
            "gratuity_amount": 1, "status": "paid_out",
        },
    )
    data = response.json()
    assert data["gratuity_amount"] == pytest.approx(5000)
    assert data["status"] == "accruing"


def test_negative_inputs_fail_validation(client, employee):
    assert _create(client, employee, years=-1).status_code == 422


def test_update_recomputes_amount(client, employee):
    benefit_id = _create(client, employee, years=3).json()["id"]
    response = client.put(f"/api/benefits/{benefit_id}", json={"years_of_service": 5})
    assert response.status_code == 200
    assert response.json()["gratuity_amount"] == pytest.approx(25000)


def test_update_cannot_set_status(client, employee, db_session):
    benefit_id = _create(client, employee).json()["id"]
    client.put(f"/api/benefits/{benefit_id}", json={"status": "paid_out", "gratuity_amount": 0})
    record = db_session.get(BenefitRecord, benefit_id)
    assert record.status == "accruing"
    assert record.gratuity_amount == pytest.approx(45000)


def test_payout_is_one_way(client, employee):
    benefit_id = _create(client, employee).json()["id"]
    response = client.post(f"/api/benefits/{benefit_id}/payout")
    assert response.status_code == 200
    assert response.json()["status"] == "paid_out"
    assert response.json()["paid_out_at"] is not None

    again = client.post(f"/api/benefits/{benefit_id}/payout")
    assert again.status_code == 409
    assert client.post(f"/api/benefits/{benefit_id}/recalculate", json={"years_of_service": 9}).status_code == 409
    assert client.put(f"/api/benefits/{benefit_id}", json={"basic_salary": 1}).status_code == 409


def test_recalculate_with_explicit_inputs(client, employee):
    benefit_id = _create(client, employee, years=1).json()["id"]
    response = client.post(
        f"/api/benefits/{benefit_id}/recalculate",
        json={"years_of_service": 6, "basic_salary": 12000},
    )
    assert response.status_code == 200
    assert response.json()["gratuity_amount"] == pytest.approx(6000 * 5 + 12000)


def test_recalculate_from_employee_profile(client, employee):
    # employee hired 2018-01-01 on 10000
    benefit_id = _create(client, employee, years=1, salary=1).json()["id"]
    response = client.post(f"/api/benefits/{benefit_id}/recalculate", json={"as_of": "2024-01-01"})
    data = response.json()
    assert data["basic_salary"] == 10000
    assert data["years_of_service"] == pytest.approx(6.0, abs=0.01)
    assert data["gratuity_amount"] == pytest.approx(25000 + 10000 * (data["years_of_service"] - 5))


def test_salary_change_resyncs_accruing_records(client, employee):
    accruing_id = _create(client, employee, years=2).json()["id"]
    paid_id = _create(client, employee, years=2).json()["id"]
    client.post(f"/api/benefits/{paid_id}/payout")

    response = client.put(f"/api/employees/{employee.id}", json={"salary": 20000})
    assert response.status_code == 200

    accruing = client.get(f"/api/benefits/{accruing_id}").json()
    paid = client.get(f"/api/benefits/{paid_id}").json()
    assert accruing["basic_salary"] == 20000
    assert accruing["gratuity_amount"] == pytest.approx(20000)
    assert paid["basic_salary"] == 10000
    assert paid["gratuity_amount"] == pytest.approx(10000)


def test_quote_does_not_persist(client, db_session):
    response = client.post("/api/benefits/calculate", json={"years_of_service": 0.5, "basic_salary": 10000})
    assert response.json()["gratuity_amount"] == 0
    assert db_session.query(BenefitRecord).count() == 0


def test_summary(client, employee):
    _create(client, employee, years=0.5)
    _create(client, employee, years=7)
    paid_id = _create(client, employee, years=4, salary=50000).json()["id"]
    client.post(f"/api/benefits/{paid_id}/payout")

    data = client.get("/api/benefits/summary").json()
    assert data["total_records"] == 3
    assert data["total_liability"] == pytest.approx(0 + 45000 + 100000)
    assert data["accruing"] == 2
    assert data["paid_out"] == 1
    assert data["by_service"] == {"< 1 year": 1, "1-3 years": 0, "3-5 years": 1, "5+ years": 1}
    assert data["by_amount"]["> 100K"] == 1
    assert data["average_years_of_service"] == pytest.approx(3.83)


def test_summary_of_nothing_is_zero(client):
    data = client.get("/api/benefits/summary").json()
    assert data["total_liability"] == 0
    assert data["average_years_of_service"] == 0


def test_missing_benefit(client):
    response = client.get("/api/benefits/12345")
    assert response.status_code == 404
    assert response.json()["errors"][0]["code"] == "NOT_FOUND"


def test_explicit_null_input_is_rejected(client, employee):
    benefit_id = _create(client, employee).json()["id"]
    response = client.put(f"/api/benefits/{benefit_id}", json={"years_of_service": None})
    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "years_of_service"
    assert client.get(f"/api/benefits/{benefit_id}").json()["gratuity_amount"] == pytest.approx(45000)
