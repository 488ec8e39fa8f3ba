"""Message-related data models."""

import uuid
from dataclasses import dataclass, field
from enum import Enum


class Sender(str, Enum):
    """Who authored a message."""

    USER = "user"
    ASSISTANT = "assistant"


class Role(str, Enum):
    """Role forwarded verbatim to the completion engine."""

    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """A single turn in the conversation log. Never mutated after creation."""

    id: str
    sender: Sender
    role: Role
    content: str
    follow_up_questions: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(
            id=str(uuid.uuid4()),
            sender=Sender.USER,
            role=Role.USER,
            content=content,
        )

    @classmethod
    def assistant(
        cls, content: str, follow_up_questions: tuple[str, ...] | list[str] = ()
    ) -> "Message":
        return cls(
            id=str(uuid.uuid4()),
            sender=Sender.ASSISTANT,
            role=Role.ASSISTANT,
            content=content,
            follow_up_questions=tuple(follow_up_questions),
        )

    def to_wire(self) -> dict:
        """Shape sent to the turn endpoint and on to the completion engine."""
        return {"role": self.role.value, "content": self.content}
