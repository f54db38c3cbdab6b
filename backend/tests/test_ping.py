from liftlog import main as app_main


def test_root_and_ping(client):
    assert client.get("/").json() == {"ok": True, "name": "LiftLog API"}
    assert client.get("/ping").json() == {"pong": True}


def test_version(client):
    r = client.get("/version")
    assert r.status_code == 200
    assert "version" in r.json()


def test_request_id_echoed(client):
    r = client.get("/ping", headers={"X-Request-ID": "abc123"})
    assert r.headers["X-Request-ID"] == "abc123"
    assert client.get("/ping").headers["X-Request-ID"]


def test_healthz_ok(client):
    assert client.get("/healthz").json() == {"status": "ok"}


def test_healthz_degraded(client, monkeypatch):
    # force SessionLocal to throw
    class Boom:
        def __enter__(self): raise RuntimeError("db down")
        def __exit__(self, *a): return False
    monkeypatch.setattr(app_main, "SessionLocal", lambda: Boom())
    r = client.get("/healthz")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "degraded"
    assert "db down" in body["error"]
