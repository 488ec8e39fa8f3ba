"""Core data models for Goal Assistant."""

from .conversation import ConversationState, ConversationStep, StateDelta
from .messages import Message, Role, Sender

__all__ = [
    # Messages
    "Message",
    "Role",
    "Sender",
    # Conversation
    "ConversationState",
    "ConversationStep",
    "StateDelta",
]
