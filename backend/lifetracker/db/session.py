import logging
from pathlib import Path

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from ..core.config import settings
from ..utils.normalize import normalize_list_name
from .crud import INBOX, get_inbox
from .models import TaskList

logger = logging.getLogger(__name__)

def make_engine(url: str) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        # sessions are handed across FastAPI's threadpool
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=False, connect_args=connect_args)

engine = make_engine(settings.DATABASE_URL)

def init_db(bind: Engine = engine) -> None:
    database = bind.url.database
    if bind.url.get_backend_name() == "sqlite" and database and database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)
    SQLModel.metadata.create_all(bind)
    with Session(bind) as session:
        seed_inbox(session)

def seed_inbox(session: Session) -> TaskList:
    inbox = get_inbox(session)
    if inbox is None:
        inbox = TaskList(name=normalize_list_name(INBOX), is_system=True, is_deletable=False, position=0)
        session.add(inbox)
        session.commit()
        session.refresh(inbox)
        logger.info("Created Inbox list: %s", inbox.id)
    return inbox

def get_session():
    with Session(engine) as session:
        yield session
