import logging

from pinecone import Pinecone, ServerlessSpec

from docsmith import config

logger = logging.getLogger(__name__)


class PineconeVectorStore:
    """
    Manages Pinecone index operations: upserting, querying and full resets.
    This class centralizes all direct interactions with the Pinecone vector database.
    """

    def __init__(self, index, index_name: str = config.PINECONE_INDEX_NAME):
        self.index = index
        self.index_name = index_name

    @classmethod
    def from_config(cls, client: Pinecone | None = None) -> "PineconeVectorStore":
        """Connect to (or create) the configured serverless index."""
        pc = client or Pinecone(api_key=config.PINECONE_API_KEY)
        name = config.PINECONE_INDEX_NAME
        if name not in pc.list_indexes().names():
            logger.info("Creating Pinecone index: %s", name)
            pc.create_index(
                name=name,
                dimension=config.EMBEDDING_DIMENSION,
                metric="cosine",
                spec=ServerlessSpec(cloud=config.PINECONE_CLOUD, region=config.PINECONE_REGION),
            )
        else:
            logger.info("Connecting to existing Pinecone index: %s", name)
        return cls(pc.Index(name), name)

    # ---- safe batched upsert -----------------------------------------

    @staticmethod
    def _chunk(vectors: list[dict], size: int):
        for i in range(0, len(vectors), size):
            yield vectors[i : i + size]

    def _upsert_batched(self, vectors: list[dict], batch: int = 80):
        """Internal helper that upserts in <=2 MB chunks (≈80 vectors)."""
        for slice_ in self._chunk(vectors, batch):
            self.index.upsert(vectors=slice_)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def upsert_vectors(self, vectors: list[dict]) -> int:
        """Upsert vectors, automatically batching if payload is large."""
        if not vectors:
            logger.info("No vectors provided for upsert. Skipping operation.")
            return 0

        logger.info("Upserting %d vectors to Pinecone index '%s'", len(vectors), self.index_name)
        if len(vectors) >= 80:
            self._upsert_batched(vectors)
        else:
            self.index.upsert(vectors=vectors)
        return len(vectors)

    def query_vectors(self, query_embedding: list[float], top_k: int = config.TOP_K) -> list[dict]:
        """Semantic search; each hit carries the chunk text stored in its metadata."""
        if not query_embedding:
            logger.warning("Query embedding is empty. Cannot perform query.")
            return []

        query_response = self.index.query(
            vector=query_embedding,
            top_k=top_k,
            include_metadata=True,
        )

        hits = []
        for match in query_response.matches:
            metadata = match.metadata or {}
            hits.append(
                {
                    "id": match.id,
                    "score": match.score,
                    "text": metadata.get("text", ""),
                }
            )
        logger.info("Retrieved %d chunks from Pinecone.", len(hits))
        return hits

    def describe(self):
        return self.index.describe_index_stats()

    def clear(self) -> bool:
        """Delete every vector in the index. Returns True when a delete was issued."""
        stats = self.describe()
        if not stats.total_vector_count:
            return False
        self.index.delete(delete_all=True)
        logger.info("Cleared %d vectors from Pinecone index '%s'", stats.total_vector_count, self.index_name)
        return True
