import logging
from enum import Enum

from docsmith.rag.prompts import load_prompts

logger = logging.getLogger(__name__)


class OutputIntent(str, Enum):
    PDF = "pdf"
    EXCEL = "excel"
    DOC = "doc"
    TEXT = "text"

    @classmethod
    def from_reply(cls, reply: str) -> "OutputIntent":
        token = reply.strip().lower()
        match token:
            case "pdf" | "excel" | "doc":
                return cls(token)
            case _:
                # anything outside the closed set is a plain-text answer
                return cls.TEXT


class IntentClassifier:
    """Asks a language model which output format the user wants."""

    def __init__(self, provider, prompts=None):
        self.provider = provider
        self.prompts = prompts or load_prompts()

    async def classify(self, user_query: str) -> OutputIntent:
        template = self.prompts["intent_detection"]["user_prompt_template"]
        reply = await self.provider.generate(template.format(query_text=user_query))
        intent = OutputIntent.from_reply(reply)
        logger.info("Classified output intent as %r (raw reply %r)", intent.value, reply.strip())
        return intent
