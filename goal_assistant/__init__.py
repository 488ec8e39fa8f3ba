"""Goal Assistant: goal-setting dialogue driven by a completion engine."""

from .app import Application, IApplication
from .client import ConversationStore, TurnOrchestrator
from .dialogue import DialogueEngine, IDialogueEngine, TurnResult, compute_state_delta
from .errors import (
    BadRequestError,
    EngineFailure,
    GoalAssistantError,
    TransportFailure,
    TurnInFlightError,
)
from .llm import ILLMProvider, LLMProvider
from .models import ConversationState, ConversationStep, Message, Role, Sender, StateDelta

__all__ = [
    # Application
    "Application",
    "IApplication",
    # Models
    "Message",
    "Role",
    "Sender",
    "ConversationState",
    "ConversationStep",
    "StateDelta",
    # Components
    "ILLMProvider",
    "LLMProvider",
    "IDialogueEngine",
    "DialogueEngine",
    "TurnResult",
    "compute_state_delta",
    "ConversationStore",
    "TurnOrchestrator",
    # Errors
    "GoalAssistantError",
    "BadRequestError",
    "EngineFailure",
    "TransportFailure",
    "TurnInFlightError",
]
