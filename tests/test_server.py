from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

import server
from backend import llm_gateway
from tests.fakes import GOOD_RESULT, FakeOpenAI, status_error

PROFILE = {
    "platform": "linkedin",
    "name": "Jane Doe",
    "headline": "Staff Engineer",
    "jobTitle": "Staff Engineer",
    "company": "Acme Corp",
    "location": "Berlin",
    "interests": "Python, Go",
    "recentActivity": "",
}


@pytest.fixture
def client():
    return TestClient(server.app)


@pytest.fixture
def fake_openai(monkeypatch):
    fake = FakeOpenAI()
    made = []

    def make_client(api_key):
        made.append(api_key)
        return fake

    monkeypatch.setenv("OPENAI_API_KEY", "sk-test-123")
    monkeypatch.setattr(llm_gateway, "make_client", make_client)
    fake.made = made
    return fake


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["message"]
    assert body["timestamp"]


def test_analyze_success(client, fake_openai):
    resp = client.post("/analyze", json={"profileData": PROFILE})
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "data": GOOD_RESULT}
    assert fake_openai.made == ["sk-test-123"]
    user_turn = fake_openai.completions.calls[0]["messages"][1]["content"]
    assert "- Name: Jane Doe" in user_turn
    assert "- Recent Activity: Not available" in user_turn


def test_analyze_without_profile_data_is_400(client, fake_openai):
    resp = client.post("/analyze", json={})
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["error"]
    assert fake_openai.made == []


def test_analyze_with_non_json_body_is_400(client, fake_openai):
    resp = client.post("/analyze", content=b"not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_missing_api_key_is_500_without_outbound_call(client, fake_openai, monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    resp = client.post("/analyze", json={"profileData": PROFILE})
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Server misconfigured: API key missing"}
    assert fake_openai.made == []
    assert fake_openai.completions.calls == []


@pytest.mark.parametrize("upstream,expected_status,needle", [
    (429, 429, "rate limit"),
    (401, 500, "API key"),
    (403, 500, "forbidden"),
    (502, 500, "Failed to analyze profile"),
])
def test_upstream_status_mapping(client, fake_openai, upstream, expected_status, needle):
    fake_openai.completions.exc = status_error(upstream)
    resp = client.post("/analyze", json={"profileData": PROFILE})
    assert resp.status_code == expected_status
    body = resp.json()
    assert body["success"] is False
    assert needle in body["error"]
    # upstream body is logged, never returned
    assert "nope" not in body["error"]


def test_malformed_model_output_is_500(client, fake_openai):
    fake_openai.completions.content = "I cannot do that"
    resp = client.post("/analyze", json={"profileData": PROFILE})
    assert resp.status_code == 500
    assert resp.json()["error"] == "AI returned invalid response format. Please try again."


def test_unknown_route_is_404_envelope(client):
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Endpoint not found"}


def test_cors_preflight_allows_any_origin(client):
    resp = client.options("/analyze", headers={
        "Origin": "chrome-extension://abcdef",
        "Access-Control-Request-Method": "POST",
        "Access-Control-Request-Headers": "Content-Type",
    })
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"
    assert "POST" in resp.headers["access-control-allow-methods"]


@pytest.mark.parametrize("method,path", [("get", "/analyze"), ("post", "/health")])
def test_wrong_method_on_known_path_is_404_envelope(client, method, path):
    resp = getattr(client, method)(path)
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Endpoint not found"}


def test_server_default_port_matches_extension_backend_url(monkeypatch):
    from backend.config import load_config as load_server_config
    from extension.config import ExtensionConfig

    monkeypatch.delenv("PORT", raising=False)
    assert ExtensionConfig().backend_url.endswith(f":{load_server_config().port}")
