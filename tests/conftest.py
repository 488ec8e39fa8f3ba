"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import httpx
import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from goal_assistant.config import Settings  # noqa: E402
from goal_assistant.models import ConversationState, ConversationStep, Message  # noqa: E402


@pytest.fixture
def settings(tmp_path):
    """Settings that never touch the real environment."""
    return Settings(api_key=None, log_file=tmp_path / "app.log")


@pytest.fixture
def mock_llm():
    """Create mock LLM provider."""
    llm = Mock()
    llm.complete = AsyncMock(return_value="Test response")
    return llm


@pytest.fixture
async def application(settings, mock_llm):
    """Started Application backed by the mock LLM."""
    from goal_assistant.app import Application

    app = Application(settings=settings, llm_provider=mock_llm)
    await app.start()
    yield app
    await app.stop()


@pytest.fixture
def fastapi_app(application):
    """FastAPI app wired to the started Application."""
    from goal_assistant.api import create_fastapi_app

    return create_fastapi_app(application)


@pytest.fixture
async def api_client(fastapi_app):
    """HTTP client driving the FastAPI app in-process."""
    transport = httpx.ASGITransport(app=fastapi_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
def collecting_state():
    """Two questions asked, first one pending an answer."""
    return ConversationState(
        current_step=ConversationStep.COLLECTING_ANSWERS,
        goal="run a marathon",
        questions=["Q1", "Q2"],
        current_question_index=0,
    )


@pytest.fixture
def user_history():
    """History whose latest entry is a user answer."""
    return [
        Message.user("I want to run a marathon"),
        Message.assistant("Question: Q1"),
        Message.user("A1"),
    ]
