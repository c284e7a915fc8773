"""OpenAI chat-completion provider.

One request, one response: no retries, no streaming.  Transport and
service failures surface as :class:`LLMError` so the caller can decide
how to degrade.
"""

from __future__ import annotations

import hashlib
import logging
import os
import time
from typing import Any, Dict, Optional

from .base import LLMConfig, LLMError, LLMProvider, LLMResponse, LLMTimeoutError

logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """LLM Provider backed by the OpenAI chat completions API."""

    provider_name = "openai"

    def __init__(
        self,
        api_key: Optional[str] = None,
        default_model: str = "gpt-4o-mini",
        base_url: Optional[str] = None,
    ):
        self.api_key = api_key or os.environ.get("OPENAI_API_KEY", "")
        self.default_model = default_model
        self.base_url = base_url
        self._client = None

    @property
    def client(self):
        if self._client is None:
            if not self.api_key:
                raise LLMError("OPENAI_API_KEY is not set", provider=self.provider_name)
            try:
                from openai import OpenAI
            except ImportError:
                raise LLMError(
                    "openai package required: pip install openai",
                    provider=self.provider_name,
                )
            kwargs: Dict[str, Any] = {"api_key": self.api_key}
            if self.base_url:
                kwargs["base_url"] = self.base_url
            self._client = OpenAI(**kwargs)
        return self._client

    def generate_text(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        config: Optional[LLMConfig] = None,
    ) -> LLMResponse:
        from openai import APITimeoutError, OpenAIError

        cfg = self._default_config(config)
        model = cfg.model or self.default_model

        prompt_hash = hashlib.sha256(
            (system_prompt + user_prompt).encode()
        ).hexdigest()[:16]

        kwargs: Dict[str, Any] = {
            "model": model,
            "temperature": cfg.temperature,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        }
        if cfg.max_tokens:
            kwargs["max_tokens"] = cfg.max_tokens

        t0 = time.time()
        try:
            response = self.client.chat.completions.create(**kwargs)
        except APITimeoutError as e:
            raise LLMTimeoutError(
                f"OpenAI request timed out: {e}", provider=self.provider_name
            ) from e
        except OpenAIError as e:
            raise LLMError(
                f"OpenAI API call failed: {e}", provider=self.provider_name
            ) from e
        latency_ms = int((time.time() - t0) * 1000)

        choices = response.choices or []
        raw_text = ""
        stop_reason = ""
        if choices:
            raw_text = choices[0].message.content or ""
            stop_reason = choices[0].finish_reason or ""
        usage = getattr(response, "usage", None)
        input_tokens = getattr(usage, "prompt_tokens", 0) if usage else 0
        output_tokens = getattr(usage, "completion_tokens", 0) if usage else 0

        logger.info(
            "OpenAI call model=%s prompt=%s latency=%dms tokens=%d/%d stop=%s",
            model, prompt_hash, latency_ms, input_tokens, output_tokens, stop_reason,
        )

        return LLMResponse(
            raw_text=raw_text,
            model=model,
            provider=self.provider_name,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            latency_ms=latency_ms,
            stop_reason=stop_reason,
            prompt_hash=prompt_hash,
        )
