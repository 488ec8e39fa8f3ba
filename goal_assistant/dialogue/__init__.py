"""Dialogue module."""

from .engine import DialogueEngine, IDialogueEngine, TurnResult, compute_state_delta
from .markers import (
    GoalMarker,
    NoMarker,
    PlanMarker,
    QuestionMarker,
    ReplyMarker,
    parse_reply_marker,
)

__all__ = [
    "DialogueEngine",
    "IDialogueEngine",
    "TurnResult",
    "compute_state_delta",
    "GoalMarker",
    "NoMarker",
    "PlanMarker",
    "QuestionMarker",
    "ReplyMarker",
    "parse_reply_marker",
]
