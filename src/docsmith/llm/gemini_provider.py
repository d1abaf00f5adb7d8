from __future__ import annotations

import logging

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from docsmith import config

from .base import ChatCompletionProvider

logger = logging.getLogger(__name__)


class GeminiChatProvider(ChatCompletionProvider):
    """Gemini chat completions through LangChain's Google GenAI integration."""

    def __init__(self, model: str = config.GEMINI_MODEL, llm=None) -> None:
        if llm is None:
            if not config.GEMINI_API_KEY:
                raise RuntimeError("GEMINI_API_KEY is not configured")
            llm = ChatGoogleGenerativeAI(model=model, google_api_key=config.GEMINI_API_KEY)
        self._llm = llm
        self._model = model

    def name(self) -> str:
        return f"gemini:{self._model}"

    async def generate(self, prompt: str, *, system: str | None = None) -> str:
        messages = [HumanMessage(content=prompt)]
        if system:
            messages.insert(0, SystemMessage(content=system))
        try:
            result = await self._llm.ainvoke(messages)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Gemini generation failed: %s", exc)
            raise
        content = result.content
        if isinstance(content, list):
            # multi-part replies come back as a list of text parts
            content = "".join(part if isinstance(part, str) else part.get("text", "") for part in content)
        return content or ""
