import requests

from lifetracker.db.crud import get_inbox


def test_voice_creates_task_in_inbox(client, auth_headers, llm_client, session):
    llm_client.generate.return_value = '{"title": "Call the dentist"}'

    response = client.post(
        "/api/voice", json={"input": "Remind me to call the dentist tomorrow"}, headers=auth_headers
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Added: Call the dentist"
    assert body["parsing"] == {"confidence": "high", "warning": False, "errors": None}
    task = body["task"]
    assert task["list_id"] == str(get_inbox(session).id)
    assert task["raw_input"] == "Remind me to call the dentist tomorrow"
    assert task["parse_warning"] is False


def test_voice_falls_back_when_llm_down(client, auth_headers, llm_client):
    llm_client.generate.side_effect = requests.ConnectionError("connection refused")

    body = client.post(
        "/api/voice", json={"input": "Add buy milk to my list"}, headers=auth_headers
    ).json()

    assert body["message"] == "Added: buy milk"
    assert body["parsing"]["confidence"] == "low"
    assert body["parsing"]["warning"] is True
    assert "LLM request failed" in body["parsing"]["errors"]
    assert body["task"]["parse_warning"] is True
    assert body["task"]["parse_errors"] == body["parsing"]["errors"]


def test_voice_input_is_trimmed(client, auth_headers, llm_client):
    llm_client.generate.return_value = '{"title": "Buy eggs"}'

    body = client.post("/api/voice", json={"input": "  Buy eggs  "}, headers=auth_headers).json()

    assert body["task"]["raw_input"] == "Buy eggs"


def test_voice_rejects_blank_input(client, auth_headers, llm_client):
    response = client.post("/api/voice", json={"input": "   "}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["error"] == "Validation Error"
    llm_client.generate.assert_not_called()


def test_voice_rejects_long_input(client, auth_headers):
    response = client.post("/api/voice", json={"input": "x" * 1001}, headers=auth_headers)
    assert response.status_code == 400


def test_voice_requires_key(client, llm_client):
    assert client.post("/api/voice", json={"input": "Buy eggs"}).status_code == 401
    llm_client.generate.assert_not_called()


def test_voice_health_ok(client, auth_headers, llm_client):
    llm_client.list_models.return_value = ["gpt-oss:20b"]

    body = client.get("/api/voice/health", headers=auth_headers).json()

    assert body == {"status": "ok", "llm": "available", "message": "LLM is ready"}


def test_voice_health_degraded(client, auth_headers, llm_client):
    llm_client.list_models.side_effect = requests.ConnectionError()

    body = client.get("/api/voice/health", headers=auth_headers).json()

    assert body["status"] == "degraded"
    assert body["llm"] == "unavailable"
