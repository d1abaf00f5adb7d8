"""Model replies as a tagged union: either decoded JSON or the raw text that failed to decode."""
from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Union

FENCE_RE = re.compile(r"```json|```")


@dataclass(frozen=True)
class JsonReply:
    data: Any
    raw: str


@dataclass(frozen=True)
class UnparseableReply:
    raw: str


ParsedReply = Union[JsonReply, UnparseableReply]


def strip_code_fences(text: str) -> str:
    return FENCE_RE.sub("", text).strip()


def parse_reply(text: str) -> ParsedReply:
    cleaned = strip_code_fences(text)
    try:
        return JsonReply(data=json.loads(cleaned), raw=cleaned)
    except json.JSONDecodeError:
        return UnparseableReply(raw=cleaned)


def reply_text(reply: ParsedReply) -> Any:
    """The answer shown to the user for a plain-text request."""
    match reply:
        case JsonReply(data={"content": content}) if content is not None:
            return content
        case JsonReply(raw=raw) | UnparseableReply(raw=raw):
            return raw
