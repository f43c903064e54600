import json
import logging

from fastapi.testclient import TestClient
from api.app import app

client = TestClient(app)


def test_health():
    r = client.get("/__health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_profile_endpoint(intense_synastry):
    r = client.post("/v1/sync/profile", json={"swiss_data": intense_synastry})
    assert r.status_code == 200
    j = r.json()
    assert j["score"] == 68
    assert j["archetype"]["id"] == "the-catalyst"
    assert j["headline"] == "The Catalyst"
    assert j["color_scheme"] == "crimson and indigo gradient"
    assert j["features"]["dominant_element"] == "water"


def test_profile_endpoint_accepts_empty_chart():
    r = client.post("/v1/sync/profile", json={"swiss_data": {}})
    assert r.status_code == 200
    j = r.json()
    assert j["score"] == 50
    assert j["archetype"]["id"] == "yin-yang"


def test_profile_endpoint_requires_swiss_data():
    r = client.post("/v1/sync/profile", json={})
    assert r.status_code == 422


def test_score_endpoint(intense_synastry):
    r = client.post("/v1/sync/score", json={"swiss_data": intense_synastry})
    assert r.status_code == 200
    j = r.json()
    assert j["overall"] == 68
    assert j["rarity_percentile"] == 50
    assert j["breakdown"]["dominant_theme"] == "transformational"
    assert j["calculated_at"]


def test_score_endpoint_rejects_chart_without_aspects():
    r = client.post("/v1/sync/score", json={"swiss_data": {"synastry_aspects": {"pairs": []}}})
    assert r.status_code == 400
    assert r.json()["detail"] == "NO_SYNASTRY_ASPECTS"


def test_score_endpoint_rejects_chart_with_only_malformed_aspects():
    pairs = [{"type": "trine", "a": "Sun"}, {"a": "Moon", "b": "Venus"}, "square"]
    r = client.post("/v1/sync/score", json={"swiss_data": {"synastry_aspects": {"pairs": pairs}}})
    assert r.status_code == 400
    assert r.json()["detail"] == "NO_SYNASTRY_ASPECTS"


def test_list_archetypes():
    r = client.get("/v1/sync/archetypes")
    assert r.status_code == 200
    j = r.json()
    assert len(j) == 8
    assert [a["id"] for a in j["mental"]] == ["the-thinkers", "the-inventors", "perfect-conversation"]


def test_list_archetypes_for_theme():
    r = client.get("/v1/sync/archetypes", params={"theme": "unheard-of"})
    assert r.status_code == 200
    assert [a["id"] for a in r.json()["unheard-of"]] == [
        "cosmic-counterparts", "natural-connection", "yin-yang",
    ]


def test_get_archetype():
    r = client.get("/v1/sync/archetypes/the-phoenix")
    assert r.status_code == 200
    assert r.json()["name"] == "The Phoenix Pair"

    r = client.get("/v1/sync/archetypes/not-real")
    assert r.status_code == 404
    assert r.json()["detail"] == "ARCHETYPE_NOT_FOUND"


def test_access_log(monkeypatch, caplog):
    monkeypatch.setenv("LOGGING_ENABLED", "true")
    with caplog.at_level(logging.INFO, logger="api.access"):
        client.get("/")
        client.get("/v1/sync/archetypes/nope")
        client.get("/__health")
    entries = {json.loads(rec.getMessage())["endpoint"]: rec.levelno for rec in caplog.records if rec.name == "api.access"}
    assert entries == {"/": logging.INFO, "/v1/sync/archetypes/nope": logging.WARNING}
