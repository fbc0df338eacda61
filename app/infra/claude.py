"""
Claude API Client

Thin async wrapper around the Anthropic Messages API used by the
free-form fallback responder. Single attempt per call: callers decide
how to degrade when a call fails.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Optional

from anthropic import AsyncAnthropic, APIError

from app.config import settings

logger = logging.getLogger(__name__)


class ClaudeClientError(Exception):
    """Raised when Claude API call fails."""
    pass


@dataclass
class ClaudeResponse:
    """Response from Claude API."""
    content: str
    model: str
    input_tokens: int
    output_tokens: int
    stop_reason: str
    latency_ms: float


class ClaudeClient:
    """
    Async Claude API client wrapper.

    Features:
    - Async API calls
    - Multi-turn message lists with optional system prompt
    - Token counting and latency tracking
    """

    _instance: Optional["ClaudeClient"] = None

    def __init__(self, api_key: Optional[str] = None):
        """Initialize Claude client.

        Args:
            api_key: Anthropic API key (defaults to settings)
        """
        self.api_key = api_key or settings.anthropic_api_key
        if not self.api_key:
            raise ValueError("Anthropic API key is required")

        self._client = AsyncAnthropic(api_key=self.api_key)
        self._default_model = settings.claude_chat_model

        logger.info(f"ClaudeClient initialized with model={self._default_model}")

    @classmethod
    def get_instance(cls) -> "ClaudeClient":
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset singleton instance (useful for testing)."""
        cls._instance = None

    async def generate(
        self,
        messages: list[dict],
        system_prompt: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: int = 1024,
        temperature: float = 0.0,
    ) -> ClaudeResponse:
        """
        Generate a response from Claude.

        Args:
            messages: Conversation in Anthropic format ({"role", "content"})
            system_prompt: System prompt (optional)
            model: Model to use (defaults to chat model)
            max_tokens: Maximum tokens in response
            temperature: Sampling temperature

        Returns:
            ClaudeResponse with generated content

        Raises:
            ClaudeClientError: If the API call fails or returns no text
        """
        model = model or self._default_model
        start_time = time.time()

        kwargs: dict[str, Any] = {
            "model": model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": messages,
        }
        if system_prompt:
            kwargs["system"] = system_prompt

        try:
            response = await self._client.messages.create(**kwargs)
        except APIError as e:
            logger.error(f"API error: {e}")
            raise ClaudeClientError(f"Claude API call failed: {e}") from e

        text = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )
        if not text:
            raise ClaudeClientError("Claude returned an empty completion")

        latency_ms = (time.time() - start_time) * 1000
        logger.debug(
            f"Claude reply in {latency_ms:.0f}ms "
            f"({response.usage.input_tokens} in / {response.usage.output_tokens} out)"
        )

        return ClaudeResponse(
            content=text,
            model=model,
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
            stop_reason=response.stop_reason,
            latency_ms=latency_ms,
        )

    async def close(self) -> None:
        """Close the client."""
        await self._client.close()


# Singleton accessor
async def get_claude_client() -> ClaudeClient:
    """Get Claude client singleton instance."""
    return ClaudeClient.get_instance()
