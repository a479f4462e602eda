from fastapi.testclient import TestClient

def test_index(client: TestClient):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.text == "Hello, World!"

def test_health(client: TestClient):
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"

def test_unknown_route_uses_error_shape(client: TestClient):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found"}

def test_cors_allows_frontend_origin(client: TestClient):
    resp = client.options(
        "/api/quizes",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "http://localhost:5173"

def test_cors_rejects_other_origin(client: TestClient):
    resp = client.get("/", headers={"Origin": "http://evil.example"})
    assert "access-control-allow-origin" not in resp.headers
