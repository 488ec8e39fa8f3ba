"""Client-resident conversation state store."""

from contextlib import contextmanager
from typing import Iterator

from ..models import ConversationState, Message, Sender, StateDelta


class ConversationStore:
    """Ordered message log plus the current structured state."""

    def __init__(self, state: ConversationState | None = None):
        self._messages: list[Message] = []
        self._state = state.copy() if state else ConversationState()
        self._is_typing = False
        self._revision = 0

    @property
    def messages(self) -> list[Message]:
        return self._messages.copy()

    @property
    def state(self) -> ConversationState:
        """Copy of the current state. Changes go through merge_state()."""
        return self._state.copy()

    @property
    def is_typing(self) -> bool:
        return self._is_typing

    @property
    def revision(self) -> int:
        """Bumped on every state merge."""
        return self._revision

    @property
    def follow_up_questions(self) -> list[str]:
        """Follow-up questions offered by the latest assistant message."""
        for message in reversed(self._messages):
            if message.sender == Sender.ASSISTANT:
                return list(message.follow_up_questions)
        return []

    def append(self, message: Message) -> None:
        """Add a message to the end of the log."""
        self._messages.append(message)

    def merge_state(self, delta: StateDelta) -> None:
        """Shallow-merge a partial update. Not validated."""
        self._state = self._state.merge(delta)
        self._revision += 1

    def snapshot(self) -> ConversationState:
        """Independent copy of the current state."""
        return self._state.copy()

    @contextmanager
    def typing(self) -> Iterator[None]:
        """Hold the typing indicator for the duration of the block."""
        self._is_typing = True
        try:
            yield
        finally:
            self._is_typing = False

    def reset(self) -> None:
        """Start a new conversation."""
        self._messages.clear()
        self._state = ConversationState()
        self._revision += 1
