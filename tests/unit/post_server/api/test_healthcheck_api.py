from fastapi.testclient import TestClient

from post_server.main import app


def test_healthcheck():
    with TestClient(app) as client:
        response = client.get("/healthcheck")
    assert response.status_code == 200
    assert response.json() == {"healthcheck": "Everything is OK!", "posts": 0}


def test_healthcheck_counts_posts():
    with TestClient(app) as client:
        client.post("/posts", json={"body": "one"})
        client.post("/posts", json={"body": "two"})
        client.delete("/posts/1")
        response = client.get("/healthcheck")
    assert response.json()["posts"] == 1
