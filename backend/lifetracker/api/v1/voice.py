import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from ...db.crud import create_task, get_inbox
from ...db.models import Task
from ...db.session import get_session
from ...schemas.tasks import TaskOut
from ...schemas.voice import ParsingInfo, VoiceHealth, VoiceIn, VoiceOut
from ...services.voice_parse import VoiceTaskParser
from ..deps import get_voice_parser, verify_api_key

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(verify_api_key)])

@router.post("/voice", response_model=VoiceOut)
def voice_input(
    body: VoiceIn,
    session: Session = Depends(get_session),
    parser: VoiceTaskParser = Depends(get_voice_parser),
):
    parsed = parser.parse(body.input)

    inbox = get_inbox(session)
    if inbox is None:
        raise HTTPException(status_code=500, detail="Inbox list not found")

    task = create_task(session, Task(
        title=parsed.title,
        list_id=inbox.id,
        raw_input=body.input,
        parse_warning=parsed.parse_warning,
        parse_errors=parsed.parse_errors,
    ))
    logger.info("Voice task created: %s (confidence=%s)", task.id, parsed.confidence.value)

    # message doubles as the iOS Shortcut notification text
    return VoiceOut(
        success=True,
        message=f"Added: {task.title}",
        task=TaskOut.model_validate(task),
        parsing=ParsingInfo(
            confidence=parsed.confidence,
            warning=parsed.parse_warning,
            errors=parsed.parse_errors,
        ),
    )

@router.get("/voice/health", response_model=VoiceHealth)
def voice_health(parser: VoiceTaskParser = Depends(get_voice_parser)):
    if parser.check_health():
        return VoiceHealth(status="ok", llm="available", message="LLM is ready")
    return VoiceHealth(status="degraded", llm="unavailable", message="LLM unavailable, will use fallback parsing")
