"""LLM Provider abstraction layer.

The plan orchestrator talks to a single chat-completion backend (OpenAI)
through the ``LLMProvider`` interface, which keeps the call swappable and
mockable in tests.
"""

from .base import LLMConfig, LLMError, LLMProvider, LLMResponse, LLMTimeoutError
from .openai_provider import OpenAIProvider
from .registry import get_provider

__all__ = [
    "LLMProvider",
    "LLMResponse",
    "LLMConfig",
    "LLMError",
    "LLMTimeoutError",
    "OpenAIProvider",
    "get_provider",
]
