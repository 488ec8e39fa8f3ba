"""
Reply marker parsing.

The completion engine answers in free text. State transitions are
inferred from three fixed substrings. Checks form an else-if chain in the
order goal, question, plan: a reply carrying several markers yields the
first of that chain, whatever their position in the text.
"""

import re
from dataclasses import dataclass
from typing import Union

GOAL_MARKER = "Goal identified:"
QUESTION_MARKER = "Question:"
PLAN_MARKER = "Action Plan:"


@dataclass(frozen=True)
class NoMarker:
    """Reply carries no state-relevant marker."""


@dataclass(frozen=True)
class GoalMarker:
    text: str


@dataclass(frozen=True)
class QuestionMarker:
    text: str


@dataclass(frozen=True)
class PlanMarker:
    plan: str


ReplyMarker = Union[NoMarker, GoalMarker, QuestionMarker, PlanMarker]


def text_after_marker(reply: str, marker: str) -> str:
    """Text between the first occurrence of marker and the next line break."""
    tail = reply.split(marker, 1)[1]
    return tail.split("\n", 1)[0].strip()


def parse_reply_marker(reply: str) -> ReplyMarker:
    if GOAL_MARKER in reply:
        return GoalMarker(text_after_marker(reply, GOAL_MARKER))
    if QUESTION_MARKER in reply:
        return QuestionMarker(text_after_marker(reply, QUESTION_MARKER))
    if PLAN_MARKER in reply:
        return PlanMarker(reply)
    return NoMarker()


_LIST_PREFIX = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s+")


def extract_follow_up_questions(reply: str) -> list[str]:
    """Lines of a plan reply that read as questions, bullets stripped."""
    questions: list[str] = []
    for line in reply.splitlines():
        candidate = _LIST_PREFIX.sub("", line).strip().strip("*_").strip()
        if not candidate.endswith("?") or QUESTION_MARKER in candidate:
            continue
        if candidate not in questions:
            questions.append(candidate)
    return questions
