"""Application bootstrap and lifecycle management."""

from typing import Protocol

from .config import Settings, load_settings
from .dialogue import DialogueEngine, IDialogueEngine
from .llm import ILLMProvider, LLMProvider
from .logging_config import get_logger

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    @property
    def dialogue_engine(self) -> IDialogueEngine:
        ...


class Application:
    """Main application bootstrap."""

    def __init__(
        self,
        settings: Settings | None = None,
        llm_provider: ILLMProvider | None = None,
    ):
        self._settings = settings or load_settings()
        self._injected_llm = llm_provider

        # Components (will be initialized in start())
        self._llm: ILLMProvider | None = None
        self._dialogue_engine: IDialogueEngine | None = None

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting application")

        # 1. LLMProvider (no internal dependencies)
        self._llm = self._injected_llm or LLMProvider(
            api_key=self._settings.api_key,
            model=self._settings.model,
            timeout=self._settings.llm_timeout,
        )
        logger.info("LLM provider initialized")

        # 2. DialogueEngine (depends on LLM)
        self._dialogue_engine = DialogueEngine(
            llm_provider=self._llm,
            max_tokens=self._settings.max_tokens,
        )
        logger.info("DialogueEngine initialized")

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        self._dialogue_engine = None
        self._llm = None
        logger.info("Application stopped")

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def dialogue_engine(self) -> IDialogueEngine:
        """Get dialogue engine instance."""
        if not self._dialogue_engine:
            raise RuntimeError("Application not started")
        return self._dialogue_engine
