from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class UploadedFile:
    key: str             # storage key, "uploads/<millis>-<name>"
    name: str            # original file name


@dataclass
class TextChunk:
    id: str
    text: str
    embedding: Optional[List[float]] = None

    def to_vector(self) -> dict:
        return {
            "id": self.id,
            "values": self.embedding,
            "metadata": {"text": self.text},
        }


@dataclass
class SyncReport:
    deleted_keys: List[str] = field(default_factory=list)
    chunk_count: int = 0
    index_reset: bool = False
