import uuid
from typing import List

from docsmith.core.schema import TextChunk


def chunk_text(text: str, size: int) -> List[str]:
    """Split *text* into consecutive, non-overlapping slices of *size* characters.

    Every slice except possibly the last is exactly *size* long, and joining the
    slices gives back *text*.
    """
    if size <= 0:
        raise ValueError(f"Chunk size must be positive, got {size}")
    return [text[i : i + size] for i in range(0, len(text), size)]


def build_chunks(text: str, size: int) -> List[TextChunk]:
    return [TextChunk(id=f"chunk-{uuid.uuid4()}", text=piece) for piece in chunk_text(text, size)]
