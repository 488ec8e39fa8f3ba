"""Conversation state data models."""

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any


class ConversationStep(str, Enum):
    """Steps of the goal-setting dialogue, in the order they are visited."""

    GOAL_IDENTIFICATION = "goalIdentification"
    GENERATING_QUESTIONS = "generatingQuestions"
    COLLECTING_ANSWERS = "collectingAnswers"
    GENERATING_ACTION_PLAN = "generatingActionPlan"
    FOLLOW_UP = "followUp"

    @property
    def rank(self) -> int:
        """Position in the dialogue sequence."""
        return list(ConversationStep).index(self)


# snake_case attribute -> camelCase wire key
WIRE_KEYS = {
    "current_step": "currentStep",
    "goal": "goal",
    "questions": "questions",
    "current_question_index": "currentQuestionIndex",
    "answers": "answers",
    "action_plan": "actionPlan",
}


@dataclass
class ConversationState:
    """Where the dialogue stands. Owned by the client store."""

    current_step: ConversationStep = ConversationStep.GOAL_IDENTIFICATION
    goal: str | None = None
    questions: list[str] = field(default_factory=list)
    current_question_index: int = -1
    answers: dict[str, str] = field(default_factory=dict)
    action_plan: str | None = None

    def merge(self, delta: "StateDelta") -> "ConversationState":
        """Shallow last-write-wins merge. Set fields replace, never extend."""
        changes = delta.changes()
        if "questions" in changes:
            changes["questions"] = list(changes["questions"])
        if "answers" in changes:
            changes["answers"] = dict(changes["answers"])
        return replace(self.copy(), **changes)

    def copy(self) -> "ConversationState":
        return replace(
            self, questions=list(self.questions), answers=dict(self.answers)
        )

    def current_question(self) -> str | None:
        """Question addressed by current_question_index, if any."""
        if 0 <= self.current_question_index < len(self.questions):
            return self.questions[self.current_question_index]
        return None

    def to_wire(self) -> dict[str, Any]:
        return {
            "currentStep": self.current_step.value,
            "goal": self.goal,
            "questions": list(self.questions),
            "currentQuestionIndex": self.current_question_index,
            "answers": dict(self.answers),
            "actionPlan": self.action_plan,
        }

    @classmethod
    def from_wire(cls, data: dict[str, Any] | None) -> "ConversationState":
        """Build from the camelCase shape; missing keys keep their defaults."""
        data = data or {}
        state = cls()
        if data.get("currentStep") is not None:
            state.current_step = ConversationStep(data["currentStep"])
        state.goal = data.get("goal")
        state.questions = list(data.get("questions") or [])
        if data.get("currentQuestionIndex") is not None:
            state.current_question_index = int(data["currentQuestionIndex"])
        state.answers = dict(data.get("answers") or {})
        state.action_plan = data.get("actionPlan")
        return state


@dataclass
class StateDelta:
    """
    Sparse update computed by the server for one turn.

    A field left as None means "no change". None is never a meaningful
    new value for any field, so it doubles as the unset marker.
    """

    current_step: ConversationStep | None = None
    goal: str | None = None
    questions: list[str] | None = None
    current_question_index: int | None = None
    answers: dict[str, str] | None = None
    action_plan: str | None = None

    def changes(self) -> dict[str, Any]:
        """Set fields only, keyed by attribute name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def is_empty(self) -> bool:
        return not self.changes()

    def to_wire(self) -> dict[str, Any]:
        wire = {}
        for name, value in self.changes().items():
            if isinstance(value, ConversationStep):
                value = value.value
            wire[WIRE_KEYS[name]] = value
        return wire

    @classmethod
    def from_wire(cls, data: dict[str, Any] | None) -> "StateDelta":
        data = data or {}
        kwargs = {}
        for name, key in WIRE_KEYS.items():
            if data.get(key) is None:
                continue
            value = data[key]
            if name == "current_step":
                value = ConversationStep(value)
            elif name == "questions":
                value = list(value)
            elif name == "answers":
                value = dict(value)
            kwargs[name] = value
        return cls(**kwargs)
