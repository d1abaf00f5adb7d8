from __future__ import annotations

import logging
from typing import Any

from langfuse.openai import openai

from docsmith import config

from .base import ChatCompletionProvider

logger = logging.getLogger(__name__)


class OpenAIChatProvider(ChatCompletionProvider):
    """Wrapper around the async OpenAI Chat Completions API."""

    def __init__(self, model: str = config.OPENAI_CHAT_MODEL, client=None, temperature: float | None = None) -> None:
        if client is None:
            if not config.OPENAI_API_KEY:
                raise RuntimeError("OPENAI_API_KEY is not configured")
            client = openai.AsyncOpenAI(api_key=config.OPENAI_API_KEY)
        self._client = client
        self._model = model
        self._temperature = temperature

    def name(self) -> str:
        return f"openai:{self._model}"

    async def generate(self, prompt: str, *, system: str | None = None) -> str:
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        payload: dict[str, Any] = {"model": self._model, "messages": messages}
        if self._temperature is not None:
            payload["temperature"] = self._temperature

        try:
            response = await self._client.chat.completions.create(**payload)
        except Exception as exc:  # noqa: BLE001
            logger.exception("OpenAI chat completion failed: %s", exc)
            raise

        return response.choices[0].message.content or ""
