from typing import Any, Dict, List, Optional

import requests

from ..core.config import Settings

class OllamaClient:
    """Thin client for the Ollama HTTP API (generate + model listing)."""

    def __init__(
        self,
        base_url: str,
        model: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings) -> "OllamaClient":
        return cls(settings.OLLAMA_HOST, settings.OLLAMA_MODEL, timeout=settings.OLLAMA_TIMEOUT)

    def generate(self, prompt: str, options: Optional[Dict[str, Any]] = None) -> str:
        r = self.session.post(
            f"{self.base_url}/api/generate",
            json={"model": self.model, "prompt": prompt, "stream": False, "options": options or {}},
            timeout=self.timeout,
        )
        r.raise_for_status()
        data = r.json()
        if not isinstance(data, dict):
            return ""
        text = data.get("response")
        return text if isinstance(text, str) else ""

    def list_models(self) -> List[str]:
        r = self.session.get(f"{self.base_url}/api/tags", timeout=self.timeout)
        r.raise_for_status()
        data = r.json()
        models = data.get("models") if isinstance(data, dict) else None
        if not isinstance(models, list):
            return []
        return [m["name"] for m in models if isinstance(m, dict) and isinstance(m.get("name"), str)]
