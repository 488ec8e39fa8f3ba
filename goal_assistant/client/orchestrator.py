"""Turn orchestration over the HTTP turn endpoint."""

from contextlib import contextmanager
from typing import Iterator

import httpx

from ..errors import GoalAssistantError, TransportFailure, TurnInFlightError
from ..logging_config import get_logger
from ..models import ConversationStep, Message, StateDelta
from .store import ConversationStore

logger = get_logger(__name__)

CHAT_PATH = "/api/chat"
CONTINUE_TEXT = "continue"
GENERATE_PLAN_TEXT = "generate action plan"


class TurnOrchestrator:
    """
    Decides when to issue a turn, sends it, and merges the reply.

    At most one turn is in flight per orchestrator. A submission made
    while another turn is running is rejected with TurnInFlightError
    before anything is appended to the store.
    """

    def __init__(
        self,
        store: ConversationStore,
        base_url: str = "http://localhost:8000",
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 60.0,
    ):
        self._store = store
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            base_url=base_url, timeout=timeout
        )
        self._in_flight = False
        self._completion_revision: int | None = None

    @property
    def store(self) -> ConversationStore:
        return self._store

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "TurnOrchestrator":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def submit_user_text(self, text: str) -> Message:
        """
        Send user input as a turn.

        Empty input is only accepted while answers are being collected and
        is sent as "continue", which asks for the current question again.
        """
        text = text.strip()
        if not text:
            if self._store.state.current_step != ConversationStep.COLLECTING_ANSWERS:
                raise ValueError("Message text is required")
            text = CONTINUE_TEXT

        reply = await self.round_trip(Message.user(text))
        try:
            await self.detect_completion()
        except GoalAssistantError as e:
            # The user's turn already succeeded; only the plan request failed.
            logger.warning("Action plan request failed: %s", e)
        return reply

    async def continue_question(self) -> Message:
        """Ask the assistant to show the current question again."""
        return await self.submit_user_text(CONTINUE_TEXT)

    async def ask_follow_up(self, question: str) -> Message:
        """Send one of the offered follow-up questions."""
        return await self.submit_user_text(question)

    async def round_trip(self, outgoing: Message) -> Message:
        """
        Append outgoing, post the full log with the state snapshot, merge the reply.

        Raises TransportFailure when the endpoint cannot be reached or
        answers with an error. The outgoing message stays in the log and
        nothing else changes.
        """
        with self._single_flight():
            self._store.append(outgoing)
            payload = {
                "messages": [msg.to_wire() for msg in self._store.messages],
                "conversationState": self._store.snapshot().to_wire(),
            }

            with self._store.typing():
                data = await self._post(payload)

            reply, delta = _parse_reply(data)
            self._store.append(reply)
            if delta is not None:
                self._store.merge_state(delta)

        logger.debug(
            "Turn merged",
            extra={"context": {"step": self._store.state.current_step.value}},
        )
        return reply

    def completion_pending(self) -> bool:
        """True when every question has been answered but no plan was requested."""
        state = self._store.state
        if state.current_step.rank > ConversationStep.COLLECTING_ANSWERS.rank:
            return False
        return bool(state.questions) and state.current_question_index >= len(
            state.questions
        )

    async def detect_completion(self) -> Message | None:
        """
        Request the action plan without user input once answers are complete.

        Fires at most once per state revision and never while another turn
        is in flight.
        """
        if self._in_flight or not self.completion_pending():
            return None
        if self._completion_revision == self._store.revision:
            return None

        self._completion_revision = self._store.revision
        logger.info("All questions answered, requesting action plan")
        return await self.round_trip(Message.user(GENERATE_PLAN_TEXT))

    @contextmanager
    def _single_flight(self) -> Iterator[None]:
        if self._in_flight:
            raise TurnInFlightError("A turn is already in progress")
        self._in_flight = True
        try:
            yield
        finally:
            self._in_flight = False

    async def _post(self, payload: dict) -> dict:
        try:
            response = await self._client.post(CHAT_PATH, json=payload)
        except httpx.HTTPError as e:
            logger.error("Error fetching response: %s", e)
            raise TransportFailure(f"Turn request failed: {e}") from e

        if response.is_error:
            detail = _error_detail(response)
            logger.error(
                "Turn endpoint returned %s: %s", response.status_code, detail
            )
            raise TransportFailure(detail, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Turn endpoint returned invalid JSON: %s", e)
            raise TransportFailure("Invalid response body") from e

        if not isinstance(data, dict):
            raise TransportFailure("Invalid response body")
        return data


def _parse_reply(data: dict) -> tuple[Message, StateDelta | None]:
    """Build the assistant message and state delta before touching the store."""
    try:
        reply = Message.assistant(
            str(data.get("message") or ""),
            data.get("followUpQuestions") or (),
        )
        new_state = data.get("newState")
        delta = StateDelta.from_wire(new_state) if new_state else None
    except (ValueError, TypeError, AttributeError) as e:
        logger.error("Turn endpoint returned an unusable reply: %s", e)
        raise TransportFailure("Invalid response body") from e
    return reply, delta


def _error_detail(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return response.reason_phrase
