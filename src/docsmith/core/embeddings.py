import asyncio

from langfuse.openai import openai
import backoff

from docsmith import config


class OpenAIEmbedding:
    """
    Thin wrapper around the async OpenAI v1 client (`pip install openai>=1.0`).

    Usage:
        embedder = OpenAIEmbedding(model="text-embedding-3-small")
        vector   = await embedder.embed_text("hello")
        vectors  = await embedder.embed_texts(["hello", "world"])
    """
    def __init__(self, model: str = config.EMBEDDING_MODEL, client=None):
        self.model  = model
        self.client = client or openai.AsyncOpenAI(api_key=config.OPENAI_API_KEY)

    # automatic exponential back-off on rate-limit / transient errors
    @backoff.on_exception(backoff.expo,
                          (openai.RateLimitError, openai.APIError),
                          max_tries=5)
    async def embed_text(self, text: str) -> list[float]:
        resp = await self.client.embeddings.create(
            model=self.model,
            input=text,
        )
        return resp.data[0].embedding

    async def embed_texts(self, texts: list[str]) -> list[list[float]]:
        """
        One request per text, issued concurrently. Returns vectors in input order;
        the first failure is raised and the requests still in flight are cancelled.
        """
        tasks = [asyncio.ensure_future(self.embed_text(t)) for t in texts]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            # wait for the cancellations so no request outlives the call
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
