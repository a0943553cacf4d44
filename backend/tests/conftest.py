from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from lifetracker.api.deps import get_voice_parser
from lifetracker.core.config import settings
from lifetracker.db.session import get_session, init_db
from lifetracker.main import app
from lifetracker.services.provider import OllamaClient
from lifetracker.services.voice_parse import VoiceTaskParser


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def llm_client():
    """Inference client double; configure generate/list_models per test."""
    return Mock(spec=OllamaClient)


@pytest.fixture
def parser(llm_client):
    return VoiceTaskParser(llm_client)


@pytest.fixture
def client(session, parser):
    app.dependency_overrides[get_session] = lambda: session
    app.dependency_overrides[get_voice_parser] = lambda: parser
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"X-API-Key": settings.API_KEY}
