from functools import lru_cache
from typing import Optional

from fastapi import Header, HTTPException, status

from ..core.config import settings
from ..services.voice_parse import VoiceTaskParser

def verify_api_key(x_api_key: Optional[str] = Header(default=None)) -> None:
    if not x_api_key or x_api_key != settings.API_KEY:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or missing API key")

@lru_cache
def get_voice_parser() -> VoiceTaskParser:
    return VoiceTaskParser.from_settings(settings)
