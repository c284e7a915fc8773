"""LLM provider factory.

The plan generator is tuned for one provider/model pair; the factory keeps
construction in one place so callers never import a concrete provider.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from .base import LLMProvider

DEFAULT_PROVIDER = "openai"
DEFAULT_MODEL = "gpt-4o-mini"


def get_provider(
    provider_name: str = DEFAULT_PROVIDER,
    model: Optional[str] = None,
    api_key: Optional[str] = None,
) -> LLMProvider:
    """Create and return an LLMProvider instance for the given provider/model.

    Parameters
    ----------
    provider_name :
        Currently only "openai".
    model :
        Optional model ID override. Passed as default_model to the provider.
    api_key :
        Optional credential; the provider reads ``OPENAI_API_KEY`` otherwise.

    Raises
    ------
    ValueError
        If the provider_name is not recognized.
    """
    kwargs: Dict[str, Any] = {}
    if model:
        kwargs["default_model"] = model
    if api_key:
        kwargs["api_key"] = api_key

    if provider_name == "openai":
        from .openai_provider import OpenAIProvider
        return OpenAIProvider(**kwargs)
    raise ValueError(
        f"Unknown LLM provider: {provider_name!r}. Supported: openai"
    )
