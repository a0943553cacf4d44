import json
import logging
import re
from typing import Any, Dict, Optional

import requests

from ..core.config import Settings
from ..schemas.voice import Confidence, ParsedTask
from .provider import OllamaClient

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = """You are a task extraction assistant. Extract the task title from the user's voice input.

Rules:
1. Extract only the core task action (what needs to be done)
2. Remove filler words like "add", "create", "remind me to", "I need to"
3. Remove list references like "to my list", "to inbox", "to groceries"
4. Keep the task title concise but complete
5. Respond with ONLY a JSON object, no other text

Examples:
Input: "Add buy milk to my grocery list"
Output: {{"title": "Buy milk"}}

Input: "Remind me to call the dentist tomorrow"
Output: {{"title": "Call the dentist"}}

Input: "I need to finish the report by Friday"
Output: {{"title": "Finish the report"}}

Input: "Add task research health insurance options"
Output: {{"title": "Research health insurance options"}}

Input: "Buy eggs"
Output: {{"title": "Buy eggs"}}

Now extract the task from this input:
Input: "{text}"
Output:"""

LEADING_FILLER = re.compile(r"^(add|create|remind me to|i need to)\s+", re.IGNORECASE)
TRAILING_LIST_REF = re.compile(r"\s+(to my list|to inbox|to my inbox)$", re.IGNORECASE)
# first-brace-to-first-closing-brace; only used when the tokenizer scan finds nothing
_BRACED = re.compile(r"\{[\s\S]*?\}")

def build_prompt(raw_input: str) -> str:
    return PROMPT_TEMPLATE.format(text=raw_input.replace('"', '\\"'))

def clean_fallback_title(raw_input: str) -> str:
    title = LEADING_FILLER.sub("", raw_input, count=1)
    title = TRAILING_LIST_REF.sub("", title, count=1).strip()
    return title or raw_input

def extract_json_object(text: str) -> Optional[Dict[str, Any]]:
    """
    Return the first JSON object embedded in ``text``.

    Each ``{`` is tried as the start of a JSON value with the real decoder, so
    braces inside string values are handled. When none decodes, the first
    braced substring is parsed as-is so the caller gets the decoder's error.
    Returns None when the text holds no braced substring at all.
    """
    decoder = json.JSONDecoder()
    start = text.find("{")
    while start != -1:
        try:
            obj, _ = decoder.raw_decode(text, start)
        except json.JSONDecodeError:
            pass
        else:
            if isinstance(obj, dict):
                return obj
        start = text.find("{", start + 1)

    match = _BRACED.search(text)
    if match is None:
        return None
    return json.loads(match.group(0))

class VoiceTaskParser:
    """Turns free-form voice input into a task title, degrading to a heuristic when the LLM fails."""

    def __init__(
        self,
        client: OllamaClient,
        model_family: str = "gpt-oss",
        temperature: float = 0.1,
        num_predict: int = 200,
    ):
        self.client = client
        self.model_family = model_family
        self.options = {"temperature": temperature, "num_predict": num_predict}

    @classmethod
    def from_settings(cls, settings: Settings) -> "VoiceTaskParser":
        return cls(
            OllamaClient.from_settings(settings),
            model_family=settings.OLLAMA_MODEL_FAMILY,
            temperature=settings.OLLAMA_TEMPERATURE,
            num_predict=settings.OLLAMA_NUM_PREDICT,
        )

    def parse(self, raw_input: str) -> ParsedTask:
        try:
            text = self.client.generate(build_prompt(raw_input), options=self.options)
        except (requests.RequestException, ValueError) as exc:
            return self._fallback(raw_input, f"LLM request failed: {exc}")
        return self._from_response(text, raw_input)

    def check_health(self) -> bool:
        try:
            names = self.client.list_models()
        except (requests.RequestException, ValueError) as exc:
            logger.debug("LLM health check failed: %s", exc)
            return False
        return any(name.startswith(self.model_family) for name in names)

    def _from_response(self, text: str, raw_input: str) -> ParsedTask:
        try:
            data = extract_json_object(text)
        except (json.JSONDecodeError, RecursionError) as exc:
            return self._fallback(raw_input, f"JSON parse error: {exc}")

        if data is None:
            return self._fallback(raw_input, "no JSON found in LLM response")

        title = data.get("title")
        if not isinstance(title, str):
            return self._fallback(raw_input, "LLM response missing title field")

        title = title.strip()
        if not title:
            return self._fallback(raw_input, "LLM returned empty title")

        return ParsedTask(title=title, confidence=Confidence.HIGH, parse_warning=False, parse_errors=None)

    def _fallback(self, raw_input: str, reason: str) -> ParsedTask:
        logger.warning("LLM parsing failed, using fallback title: %s", reason)
        return ParsedTask(
            title=clean_fallback_title(raw_input),
            confidence=Confidence.LOW,
            parse_warning=True,
            parse_errors=reason,
        )
