def test_company_settings_start_with_defaults(client):
    response = client.get("/api/settings/company")
    assert response.status_code == 200
    data = response.json()
    assert data["company_name"] == "My Company"
    assert data["work_start"] == "09:00"
    assert data["work_end"] == "17:00"


def test_update_company_settings(client):
    response = client.put(
        "/api/settings/company",
        json={"company_name": "Falcon Logistics", "company_email": "hr@falcon.example.com", "work_start": "08:00"},
    )
    assert response.status_code == 200
    assert response.json()["company_name"] == "Falcon Logistics"
    assert client.get("/api/settings/company").json()["work_start"] == "08:00"


def test_working_day_must_end_after_it_starts(client):
    response = client.put("/api/settings/company", json={"work_start": "18:00"})
    assert response.status_code == 400
    assert response.json()["errors"][0]["code"] == "INVALID_ARGUMENT"
    assert client.get("/api/settings/company").json()["work_start"] == "09:00"


def test_malformed_clock_time(client):
    assert client.put("/api/settings/company", json={"work_end": "5pm"}).status_code == 422


def test_company_name_cannot_be_null(client):
    assert client.put("/api/settings/company", json={"company_name": None}).status_code == 422
