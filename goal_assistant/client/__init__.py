"""Client side: conversation store and turn orchestration."""

from .orchestrator import TurnOrchestrator
from .store import ConversationStore

__all__ = ["ConversationStore", "TurnOrchestrator"]
