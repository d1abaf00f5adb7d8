from __future__ import annotations

import logging
from typing import Mapping

from .base import ChatCompletionProvider

logger = logging.getLogger(__name__)

OPENAI = "openai"
GEMINI = "gemini"


def select_provider(model_type: str | None, providers: Mapping[str, ChatCompletionProvider]) -> ChatCompletionProvider:
    """`"openai"` picks OpenAI; every other value, missing included, picks Gemini."""
    key = OPENAI if model_type == OPENAI else GEMINI
    provider = providers[key]
    logger.info("Using chat provider %s (requested modelType=%r)", provider.name(), model_type)
    return provider
