from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .tasks import TaskOut

class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"  # reserved, never produced by the parser
    LOW = "low"

class ParsedTask(BaseModel):
    title: str
    confidence: Confidence
    parse_warning: bool
    parse_errors: Optional[str] = None

class VoiceIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    input: str = Field(min_length=1, max_length=1000)

class ParsingInfo(BaseModel):
    confidence: Confidence
    warning: bool
    errors: Optional[str] = None

class VoiceOut(BaseModel):
    success: bool
    message: str
    task: TaskOut
    parsing: ParsingInfo

class VoiceHealth(BaseModel):
    status: str
    llm: str
    message: str
