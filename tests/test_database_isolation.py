"""
Rows committed through the API in one test must be gone in the next.
The two tests run in file order.
"""


def test_commit_inside_a_test(client):
    response = client.post("/api/departments", json={"name": "Isolation Check"})
    assert response.status_code == 201
    assert len(client.get("/api/departments").json()) == 1


def test_previous_commit_was_rolled_back(client):
    assert client.get("/api/departments").json() == []
    assert client.post("/api/departments", json={"name": "Isolation Check"}).status_code == 201
