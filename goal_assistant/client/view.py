"""Presentation helpers derived from the conversation state."""

from ..models import ConversationState, ConversationStep

_HEADERS = {
    ConversationStep.GOAL_IDENTIFICATION: "What is your goal?",
    ConversationStep.GENERATING_QUESTIONS: "Generating questions...",
    ConversationStep.COLLECTING_ANSWERS: "Answering questions",
    ConversationStep.GENERATING_ACTION_PLAN: "Generating action plan",
}

_PLACEHOLDERS = {
    ConversationStep.GOAL_IDENTIFICATION: "Enter your goal...",
    ConversationStep.COLLECTING_ANSWERS: "Type your answer...",
}


def header_text(step: ConversationStep) -> str:
    return _HEADERS.get(step, "Goal Setting Assistant")


def input_placeholder(step: ConversationStep) -> str:
    return _PLACEHOLDERS.get(step, "Type your message...")


def current_question(state: ConversationState) -> str | None:
    """Question being answered, shown only while collecting answers."""
    if state.current_step != ConversationStep.COLLECTING_ANSWERS:
        return None
    return state.current_question()


def can_continue(state: ConversationState) -> bool:
    """Whether "see question again" is offered."""
    return state.current_step == ConversationStep.COLLECTING_ANSWERS
