"""Stateless turn handler for the goal-setting dialogue."""

from dataclasses import dataclass, field
from typing import Protocol, Sequence

from ..llm import ILLMProvider
from ..logging_config import get_logger
from ..models import ConversationState, ConversationStep, Message, Role, StateDelta
from .markers import (
    QUESTION_MARKER,
    GoalMarker,
    PlanMarker,
    QuestionMarker,
    extract_follow_up_questions,
    parse_reply_marker,
)
from .prompts import build_system_prompt

logger = get_logger(__name__)

FALLBACK_REPLY = "No response received from the AI"


@dataclass
class TurnResult:
    """Reply text plus the state delta it implies."""

    reply: str
    delta: StateDelta
    follow_up_questions: list[str] = field(default_factory=list)


class IDialogueEngine(Protocol):
    """Server side of a turn: prompt, complete, classify."""

    async def handle_turn(
        self, messages: Sequence[Message], state: ConversationState
    ) -> TurnResult:
        """Run one turn against the completion engine and compute the delta."""
        ...


def _classify(reply: str, state: ConversationState, delta: StateDelta) -> None:
    marker = parse_reply_marker(reply)

    if isinstance(marker, GoalMarker):
        step = ConversationStep.GENERATING_QUESTIONS
        # goal is set once and never moves the dialogue backwards
        if step.rank < state.current_step.rank or state.goal is not None:
            return
        delta.current_step = step
        delta.goal = marker.text

    elif isinstance(marker, QuestionMarker):
        step = ConversationStep.COLLECTING_ANSWERS
        if step.rank < state.current_step.rank:
            return
        delta.current_step = step
        delta.questions = [*state.questions, marker.text]
        delta.current_question_index = len(state.questions)

    elif isinstance(marker, PlanMarker):
        step = ConversationStep.GENERATING_ACTION_PLAN
        if step.rank < state.current_step.rank or state.action_plan is not None:
            return
        delta.current_step = step
        delta.action_plan = marker.plan


def compute_state_delta(
    reply: str, messages: Sequence[Message], state: ConversationState
) -> StateDelta:
    """
    Derive the partial state update implied by a reply.

    Classification runs first. The advancement override and the answer
    capture both read the incoming state, never the classified delta,
    and the override overwrites whatever classification set.
    """
    delta = StateDelta()
    _classify(reply, state, delta)

    collecting = state.current_step == ConversationStep.COLLECTING_ANSWERS

    if collecting and QUESTION_MARKER not in reply:
        if state.current_question_index == len(state.questions) - 1:
            delta.current_step = ConversationStep.GENERATING_ACTION_PLAN
        else:
            delta.current_question_index = state.current_question_index + 1

    if collecting and messages and messages[-1].role == Role.USER:
        question = state.current_question()
        if question is not None:
            delta.answers = {**state.answers, question: messages[-1].content}

    if (
        state.current_step == ConversationStep.GENERATING_ACTION_PLAN
        and state.action_plan is not None
        and delta.action_plan is None
    ):
        delta.current_step = ConversationStep.FOLLOW_UP

    return delta


class DialogueEngine:
    """Builds the prompt, calls the completion engine once, classifies the reply."""

    def __init__(self, llm_provider: ILLMProvider, max_tokens: int = 4096):
        self._llm = llm_provider
        self._max_tokens = max_tokens

    async def handle_turn(
        self, messages: Sequence[Message], state: ConversationState
    ) -> TurnResult:
        """
        Run one turn.

        The caller's state is treated as ground truth and is not mutated.
        EngineFailure from the provider propagates untouched; no delta is
        computed in that case.
        """
        system = build_system_prompt(state)
        context = [msg.to_wire() for msg in messages]

        reply = await self._llm.complete(
            messages=context, system=system, max_tokens=self._max_tokens
        )
        if reply is None:
            reply = FALLBACK_REPLY

        delta = compute_state_delta(reply, messages, state)

        follow_ups: list[str] = []
        if delta.action_plan is not None:
            follow_ups = extract_follow_up_questions(reply)

        logger.info(
            "Turn handled",
            extra={
                "context": {
                    "step_in": state.current_step.value,
                    "step_out": (delta.current_step or state.current_step).value,
                    "changed": sorted(delta.to_wire()),
                    "history_length": len(messages),
                }
            },
        )

        return TurnResult(reply=reply, delta=delta, follow_up_questions=follow_ups)
