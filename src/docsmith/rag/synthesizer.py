import asyncio
import logging

from docsmith import config
from docsmith.llm.factory import select_provider
from docsmith.rag.prompts import load_prompts
from docsmith.structured import ParsedReply, parse_reply

logger = logging.getLogger(__name__)


class ResponseSynthesizer:
    """
    Retrieves context for a prompt from the vector index and asks the selected
    language model for a structured JSON answer.
    """
    def __init__(self, embedder, vector_store, providers, prompts=None, top_k: int = config.TOP_K):
        self.embedder = embedder
        self.vector_store = vector_store
        self.providers = providers
        self.prompts = prompts or load_prompts()
        self.top_k = top_k

    async def retrieve_context(self, user_query: str) -> str:
        embedding = await self.embedder.embed_text(user_query)
        hits = await asyncio.to_thread(self.vector_store.query_vectors, embedding, self.top_k)
        return "\n\n".join(hit["text"] for hit in hits)

    def build_prompt(self, user_query: str, context: str) -> str:
        template = self.prompts["file_generation"]["user_prompt_template"]
        return template.format(query_text=user_query, context=context)

    async def synthesize(self, user_query: str, context: str, model_type: str | None = None) -> ParsedReply:
        provider = select_provider(model_type, self.providers)
        reply = await provider.generate(
            self.build_prompt(user_query, context),
            system=self.prompts["file_generation"]["system_prompt"],
        )
        return parse_reply(reply)
