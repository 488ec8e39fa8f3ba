"""Turn endpoint."""

from typing import Any, Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from ...app import IApplication
from ...errors import BadRequestError, EngineFailure
from ...logging_config import get_logger
from ...models import ConversationState, ConversationStep, Message

logger = get_logger(__name__)


class ChatMessage(BaseModel):
    """One history entry. Extra client keys (id, sender) are ignored."""

    role: Literal["user", "assistant"]
    content: str


class ConversationStatePayload(BaseModel):
    """Client snapshot of the conversation state."""

    model_config = ConfigDict(populate_by_name=True)

    current_step: ConversationStep = Field(
        ConversationStep.GOAL_IDENTIFICATION, alias="currentStep"
    )
    goal: str | None = None
    questions: list[str] | None = None
    current_question_index: int | None = Field(None, alias="currentQuestionIndex")
    answers: dict[str, str] | None = None
    action_plan: str | None = Field(None, alias="actionPlan")

    def to_state(self) -> ConversationState:
        return ConversationState.from_wire(self.model_dump(by_alias=True, mode="json"))


class ChatRequest(BaseModel):
    """Request model for one turn."""

    model_config = ConfigDict(populate_by_name=True)

    messages: list[ChatMessage] = Field(min_length=1)
    conversation_state: ConversationStatePayload = Field(
        default_factory=ConversationStatePayload, alias="conversationState"
    )

    def to_messages(self) -> list[Message]:
        return [
            Message.user(msg.content)
            if msg.role == "user"
            else Message.assistant(msg.content)
            for msg in self.messages
        ]


class ChatResponse(BaseModel):
    """Response model for one turn."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    new_state: dict[str, Any] = Field(alias="newState")
    follow_up_questions: list[str] | None = Field(None, alias="followUpQuestions")


class ErrorResponse(BaseModel):
    error: str


def create_chat_router(app: IApplication) -> APIRouter:
    """Create chat router."""
    router = APIRouter(prefix="/api", tags=["chat"])

    @router.post(
        "/chat",
        response_model=ChatResponse,
        response_model_by_alias=True,
        response_model_exclude_none=True,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def chat(request: ChatRequest) -> Any:
        """Run one conversational turn."""
        try:
            messages = request.to_messages()
            state = request.conversation_state.to_state()
        except ValueError as e:
            raise BadRequestError(str(e)) from e

        try:
            result = await app.dialogue_engine.handle_turn(messages, state)
        except EngineFailure as e:
            logger.error("Completion engine failure: %s", e, exc_info=True)
            return JSONResponse(
                status_code=500, content={"error": "Internal Server Error"}
            )
        except Exception as e:
            logger.error("Error processing request: %s", e, exc_info=True)
            return JSONResponse(
                status_code=500, content={"error": "Internal Server Error"}
            )

        return ChatResponse(
            message=result.reply,
            new_state=result.delta.to_wire(),
            follow_up_questions=result.follow_up_questions or None,
        )

    @router.get("/health")
    async def health() -> dict:
        """Liveness probe."""
        return {"status": "ok"}

    return router
