from __future__ import annotations

import asyncio
import json
import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass

from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from docsmith import config
from docsmith.structured import JsonReply, ParsedReply, UnparseableReply

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedFile:
    key: str
    body: bytes


@dataclass(frozen=True)
class GeneratedFile:
    key: str
    download_url: str
    content_type: str


def timestamp_millis() -> int:
    return int(time.time() * 1000)


def xml_safe(text) -> str:
    """Drop the control characters Office XML cannot hold (tab, newline and CR stay)."""
    return ILLEGAL_CHARACTERS_RE.sub("", str(text))


def pretty_json(data) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


class FileMaterializer(ABC):
    """Renders a model reply into a binary file, uploads it under `results/` and signs a download link."""

    content_type: str
    label: str

    def __init__(self, storage, link_ttl: int = config.DOWNLOAD_URL_TTL):
        self.storage = storage
        self.link_ttl = link_ttl

    def render(self, reply: ParsedReply) -> RenderedFile:
        match reply:
            case JsonReply(data=data):
                return self.render_data(data)
            case UnparseableReply(raw=raw):
                logger.warning("Failed to parse %s JSON, rendering fallback document", self.label)
                return self.render_data(self.fallback(raw))

    @abstractmethod
    def render_data(self, data) -> RenderedFile:
        """Build the file from decoded JSON."""

    @abstractmethod
    def fallback(self, raw: str) -> dict:
        """Minimal document holding the raw reply text."""

    async def materialize(self, reply: ParsedReply) -> GeneratedFile:
        rendered = self.render(reply)
        await asyncio.to_thread(self.storage.put_bytes, rendered.key, rendered.body, self.content_type)
        url = await asyncio.to_thread(self.storage.presign_download, rendered.key, self.link_ttl)
        logger.info("%s generated at %s", self.label, rendered.key)
        return GeneratedFile(key=rendered.key, download_url=url, content_type=self.content_type)
