from __future__ import annotations

from abc import ABC, abstractmethod


class ChatCompletionProvider(ABC):
    """Abstract contract for chat completion providers."""

    @abstractmethod
    async def generate(self, prompt: str, *, system: str | None = None) -> str:
        """Return the model's reply to a single user prompt."""

    @abstractmethod
    def name(self) -> str:
        """Return provider identifier."""
