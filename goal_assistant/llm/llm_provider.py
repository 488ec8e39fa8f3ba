"""LLM Provider implementation using Anthropic Claude API."""

import asyncio
from typing import Protocol

import anthropic

from ..config import DEFAULT_MODEL
from ..errors import EngineFailure
from ..logging_config import get_logger

logger = get_logger(__name__)


class ILLMProvider(Protocol):
    """Abstraction for completion engine access."""

    async def complete(
        self,
        messages: list[dict],  # [{"role": "user", "content": "..."}]
        system: str | None = None,
        max_tokens: int = 4096,
    ) -> str | None:
        """Return the first text block of the completion, or None."""
        ...


class LLMProvider:
    """Anthropic Claude API provider."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        timeout: float = 45.0,
    ):
        self._api_key = api_key
        if not self._api_key:
            raise ValueError("ANTHROPIC_API_KEY environment variable not set")

        self._model = model
        self._timeout = timeout
        # One call per turn, no retries
        self._client = anthropic.AsyncAnthropic(
            api_key=self._api_key, max_retries=0
        )

    async def complete(
        self,
        messages: list[dict],
        system: str | None = None,
        max_tokens: int = 4096,
    ) -> str | None:
        """Generate completion using Claude API."""
        kwargs = {
            "model": self._model,
            "messages": messages,
            "max_tokens": max_tokens,
        }
        if system:
            kwargs["system"] = system

        try:
            response = await asyncio.wait_for(
                self._client.messages.create(**kwargs), timeout=self._timeout
            )
        except asyncio.TimeoutError as e:
            raise EngineFailure(
                f"LLM call timed out after {self._timeout}s"
            ) from e
        except Exception as e:
            # Re-raise for handling by caller
            raise EngineFailure(f"LLM API error: {e}") from e

        for block in response.content or []:
            if getattr(block, "type", None) == "text":
                return block.text

        logger.warning("Completion contained no text block")
        return None
