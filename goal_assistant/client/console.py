"""Line-based terminal front end for the turn orchestrator."""

import asyncio

from ..errors import GoalAssistantError
from ..logging_config import get_logger
from ..models import Sender
from .orchestrator import TurnOrchestrator
from .store import ConversationStore
from .view import can_continue, current_question, header_text, input_placeholder

logger = get_logger(__name__)

HELP_TEXT = (
    "Commands: /again shows the current question, /follow <n> asks an "
    "offered follow-up question, /new starts over, /quit exits."
)


async def _read_line(prompt: str) -> str:
    return await asyncio.to_thread(input, prompt)


def _render_status(store: ConversationStore) -> None:
    state = store.state
    print(f"\n== {header_text(state.current_step)} (step: {state.current_step.value})")
    question = current_question(state)
    if question:
        print(f"   Current question: {question}")


def _render_follow_ups(store: ConversationStore) -> None:
    for number, question in enumerate(store.follow_up_questions, start=1):
        print(f"   [{number}] {question}")


async def _dispatch(orchestrator: TurnOrchestrator, line: str) -> bool:
    """Handle one input line. Returns False when the user quits."""
    store = orchestrator.store
    seen = len(store.messages)
    command, _, argument = line.strip().partition(" ")

    if command == "/quit":
        return False
    if command == "/help":
        print(HELP_TEXT)
        return True
    if command == "/new":
        store.reset()
        return True
    if command == "/again":
        if not can_continue(store.state):
            print("No question to show again yet.")
            return True
        await orchestrator.continue_question()
    elif command == "/follow":
        offered = store.follow_up_questions
        if not argument.isdigit() or not 1 <= int(argument) <= len(offered):
            print("Pick one of the numbered follow-up questions.")
            return True
        await orchestrator.ask_follow_up(offered[int(argument) - 1])
    else:
        await orchestrator.submit_user_text(line)

    # A synthetic plan request may follow the user turn
    for message in store.messages[seen:]:
        if message.sender == Sender.ASSISTANT:
            print(f"\nassistant> {message.content}")
    _render_follow_ups(store)
    return True


async def run_console(base_url: str, timeout: float = 60.0) -> None:
    """Chat with a running server until /quit or end of input."""
    store = ConversationStore()
    async with TurnOrchestrator(store, base_url=base_url, timeout=timeout) as orchestrator:
        print(HELP_TEXT)
        while True:
            _render_status(store)
            try:
                line = await _read_line(f"{input_placeholder(store.state.current_step)} > ")
            except EOFError:
                break

            try:
                if not await _dispatch(orchestrator, line):
                    break
            except ValueError as e:
                print(e)
            except GoalAssistantError as e:
                logger.error("Turn failed: %s", e)
                print("The assistant could not be reached. Try again.")
