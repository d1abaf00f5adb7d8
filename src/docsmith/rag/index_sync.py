"""Replace the indexed corpus with the documents of the current upload batch.

Only one upload set is live at a time: a new batch removes every other object
under the upload prefix, resets the vector index and re-embeds from scratch.
"""
import asyncio
import logging
from typing import Sequence

from docsmith import config
from docsmith.core.chunking import build_chunks
from docsmith.core.schema import SyncReport, UploadedFile

logger = logging.getLogger(__name__)


class IndexSynchronizer:
    def __init__(self, storage, vector_store, embedder, extractor, chunk_size: int = config.CHUNK_SIZE):
        self.storage = storage
        self.vector_store = vector_store
        self.embedder = embedder
        self.extractor = extractor
        self.chunk_size = chunk_size

    async def sync(self, files: Sequence[UploadedFile]) -> SyncReport:
        report = SyncReport()
        report.deleted_keys = await self.remove_stale_uploads({f.key for f in files})
        report.index_reset = await self.reset_index()

        text = await self.extractor.extract_all(self.storage, files)
        chunks = build_chunks(text, self.chunk_size)
        report.chunk_count = len(chunks)
        logger.info("Extracted %d characters from %d file(s) into %d chunks", len(text), len(files), len(chunks))
        if not chunks:
            return report

        vectors = await self.embedder.embed_texts([c.text for c in chunks])
        for chunk, vector in zip(chunks, vectors):
            chunk.embedding = vector
        await asyncio.to_thread(self.vector_store.upsert_vectors, [c.to_vector() for c in chunks])
        return report

    async def remove_stale_uploads(self, current_keys: set[str]) -> list[str]:
        keys = await asyncio.to_thread(self.storage.list_keys, config.UPLOAD_PREFIX)
        stale = [key for key in keys if key not in current_keys]
        for key in stale:
            await asyncio.to_thread(self.storage.delete, key)
        if stale:
            logger.info("Deleted %d stale upload(s): %s", len(stale), ", ".join(stale))
        return stale

    async def reset_index(self) -> bool:
        # best effort: a failed reset never fails the request
        try:
            return await asyncio.to_thread(self.vector_store.clear)
        except Exception as err:
            logger.warning("Pinecone cleanup skipped: %s", err)
            return False
