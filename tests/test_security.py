import time

from fastapi.testclient import TestClient
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware
from api.app import app

PAYLOAD = {
    "swiss_data": {
        "synastry_aspects": {"pairs": [{"type": "trine", "a": "Sun", "b": "Moon", "orb": 1.0}]}
    }
}


def test_rate_limit(monkeypatch):
    from api.middleware.ratelimit import _counters

    monkeypatch.setenv("RATE_LIMIT_ENABLED", "true")
    monkeypatch.setenv("RATE_LIMIT_PER_MINUTE", "2")
    _counters.clear()
    with TestClient(app, raise_server_exceptions=False) as client:
        for i in range(3):
            r = client.post("/v1/sync/profile", json=PAYLOAD)
            if i < 2:
                assert r.status_code == 200
    assert r.status_code == 429
    assert r.headers["retry-after"] == "60"
    _counters.clear()


def test_spoofed_forwarded_header_does_not_bypass_limit(monkeypatch):
    from api.middleware.ratelimit import _counters

    monkeypatch.setenv("RATE_LIMIT_ENABLED", "true")
    monkeypatch.setenv("RATE_LIMIT_PER_MINUTE", "1")
    _counters.clear()
    with TestClient(app, raise_server_exceptions=False) as client:
        codes = [
            client.post("/v1/sync/profile", json=PAYLOAD, headers={"X-Forwarded-For": f"1.1.1.{i}"}).status_code
            for i in range(5)
        ]
    assert codes == [200, 429, 429, 429, 429]
    assert list(_counters) == ["testclient"]
    _counters.clear()


def test_trusted_proxy_limits_each_forwarded_client(monkeypatch):
    from api.middleware.ratelimit import _counters

    monkeypatch.setenv("RATE_LIMIT_ENABLED", "true")
    monkeypatch.setenv("RATE_LIMIT_PER_MINUTE", "1")
    _counters.clear()
    proxied = ProxyHeadersMiddleware(app, trusted_hosts=["testclient"])
    with TestClient(proxied, raise_server_exceptions=False) as client:
        first = client.post("/v1/sync/profile", json=PAYLOAD, headers={"X-Forwarded-For": "10.0.0.1"})
        second = client.post("/v1/sync/profile", json=PAYLOAD, headers={"X-Forwarded-For": "10.0.0.2"})
        third = client.post("/v1/sync/profile", json=PAYLOAD, headers={"X-Forwarded-For": "10.0.0.1"})
    assert [first.status_code, second.status_code, third.status_code] == [200, 200, 429]
    _counters.clear()


def test_idle_buckets_are_dropped(monkeypatch):
    from api.middleware import ratelimit

    monkeypatch.setenv("RATE_LIMIT_ENABLED", "true")
    ratelimit._counters.clear()
    ratelimit._counters["203.0.113.9"] = [time.time() - ratelimit.WINDOW_SECONDS - 1]
    with TestClient(app, raise_server_exceptions=False) as client:
        client.post("/v1/sync/profile", json=PAYLOAD)
    assert "203.0.113.9" not in ratelimit._counters
    ratelimit._counters.clear()
    with TestClient(app, raise_server_exceptions=False) as client:
        first = client.post("/v1/sync/profile", json=PAYLOAD, headers={"X-Forwarded-For": "10.0.0.1"})
        second = client.post("/v1/sync/profile", json=PAYLOAD, headers={"X-Forwarded-For": "10.0.0.2"})
        third = client.post("/v1/sync/profile", json=PAYLOAD, headers={"X-Forwarded-For": "10.0.0.1"})
    assert first.status_code == 200
    assert second.status_code == 200
    assert third.status_code == 429
    ratelimit._counters.clear()


def test_rate_limit_disabled_by_default(monkeypatch):
    monkeypatch.delenv("RATE_LIMIT_ENABLED", raising=False)
    with TestClient(app, raise_server_exceptions=False) as client:
        for _ in range(15):
            r = client.post("/v1/sync/profile", json=PAYLOAD)
    assert r.status_code == 200


def test_dev_cors_allows_localhost():
    with TestClient(app) as client:
        r = client.options(
            "/v1/sync/profile",
            headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "POST"},
        )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "http://localhost:5173"
