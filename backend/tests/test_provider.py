from unittest.mock import Mock

import pytest
import requests

from lifetracker.core.config import Settings
from lifetracker.services.provider import OllamaClient


def make_response(payload=None, error=None):
    response = Mock()
    response.json.return_value = payload
    response.raise_for_status.side_effect = error
    return response


@pytest.fixture
def http():
    return Mock(spec=requests.Session)


def test_generate_posts_non_streaming_request(http):
    http.post.return_value = make_response({"response": '{"title": "Buy milk"}', "done": True})
    client = OllamaClient("http://ollama:11434/", "gpt-oss:20b", session=http)

    text = client.generate("extract", options={"temperature": 0.1, "num_predict": 200})

    assert text == '{"title": "Buy milk"}'
    http.post.assert_called_once_with(
        "http://ollama:11434/api/generate",
        json={
            "model": "gpt-oss:20b",
            "prompt": "extract",
            "stream": False,
            "options": {"temperature": 0.1, "num_predict": 200},
        },
        timeout=None,
    )


def test_generate_missing_response_field(http):
    http.post.return_value = make_response({"done": True})
    assert OllamaClient("http://x", "m", session=http).generate("p") == ""


def test_generate_raises_on_http_error(http):
    http.post.return_value = make_response(error=requests.HTTPError("503 Server Error"))
    with pytest.raises(requests.HTTPError):
        OllamaClient("http://x", "m", session=http).generate("p")


def test_list_models(http):
    http.get.return_value = make_response({"models": [{"name": "gpt-oss:20b"}, {"name": "llama3:8b"}, {"size": 1}]})
    client = OllamaClient("http://x", "m", timeout=5.0, session=http)

    assert client.list_models() == ["gpt-oss:20b", "llama3:8b"]
    http.get.assert_called_once_with("http://x/api/tags", timeout=5.0)


def test_list_models_without_models_key(http):
    http.get.return_value = make_response({})
    assert OllamaClient("http://x", "m", session=http).list_models() == []


def test_from_settings():
    settings = Settings(OLLAMA_HOST="http://gpu-box:11434", OLLAMA_MODEL="gpt-oss:120b", OLLAMA_TIMEOUT=30)
    client = OllamaClient.from_settings(settings)

    assert client.base_url == "http://gpu-box:11434"
    assert client.model == "gpt-oss:120b"
    assert client.timeout == 30


@pytest.mark.parametrize("payload", [
    {"response": 123, "done": True},
    {"response": ["not", "text"]},
    {"response": None},
    ["unexpected", "list"],
])
def test_generate_ignores_malformed_body(http, payload):
    http.post.return_value = make_response(payload)
    assert OllamaClient("http://x", "m", session=http).generate("p") == ""


@pytest.mark.parametrize("payload", [
    {"models": 5},
    {"models": {"name": "gpt-oss:20b"}},
    [{"name": "gpt-oss:20b"}],
])
def test_list_models_ignores_malformed_body(http, payload):
    http.get.return_value = make_response(payload)
    assert OllamaClient("http://x", "m", session=http).list_models() == []


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("OLLAMA_MODEL", "llama3:8b")
    monkeypatch.setenv("OLLAMA_TIMEOUT", "12.5")

    settings = Settings()

    assert settings.OLLAMA_MODEL == "llama3:8b"
    assert settings.OLLAMA_TIMEOUT == 12.5
