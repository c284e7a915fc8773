"""LLM Provider interface: abstract base for chat-completion backends.

Every provider must implement ``generate_text``.  The plan orchestrator
calls providers via dependency injection, so tests can hand in a mock and
the production path can use :class:`~core.providers.openai_provider.OpenAIProvider`.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LLMConfig:
    """Immutable configuration for a single LLM call."""

    model: Optional[str] = None  # None: the provider's default model
    temperature: float = 0.4
    max_tokens: Optional[int] = None


@dataclass
class LLMResponse:
    """Standardised response from any LLM provider."""

    raw_text: str
    model: str = ""
    provider: str = ""
    input_tokens: int = 0
    output_tokens: int = 0
    latency_ms: int = 0
    stop_reason: str = ""
    prompt_hash: str = ""


class LLMProvider(abc.ABC):
    """Abstract base class for LLM providers.

    Subclasses must implement ``generate_text``: send one system + user
    prompt pair and return the model's free-form answer.
    """

    provider_name: str = "base"

    @abc.abstractmethod
    def generate_text(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        config: Optional[LLMConfig] = None,
    ) -> LLMResponse:
        """Send a prompt and return the raw model text.

        Parameters
        ----------
        system_prompt : str
            System-level instruction (persona, output format rules).
        user_prompt : str
            User-level content (the rendered campaign brief).
        config : LLMConfig, optional
            Override default config for this call.

        Returns
        -------
        LLMResponse
            ``raw_text`` holds the answer exactly as the model produced it.

        Raises
        ------
        LLMError
            On transport or service failure.  Providers never retry.
        """
        ...

    def _default_config(self, config: Optional[LLMConfig]) -> LLMConfig:
        return config or LLMConfig()


class LLMError(Exception):
    """Base exception for LLM provider errors."""

    def __init__(self, message: str, provider: str = "", retryable: bool = False):
        super().__init__(message)
        self.provider = provider
        self.retryable = retryable


class LLMTimeoutError(LLMError):
    """LLM call exceeded the transport timeout."""

    def __init__(self, message: str, provider: str = ""):
        super().__init__(message, provider=provider, retryable=True)
