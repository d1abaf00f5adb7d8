import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from docsmith.core.schema import UploadedFile
from docsmith.rag.intent import OutputIntent
from docsmith.structured import reply_text

logger = logging.getLogger(__name__)


@dataclass
class PromptRequest:
    prompt: str
    files: List[UploadedFile] = field(default_factory=list)
    model_type: Optional[str] = None


@dataclass
class PromptResult:
    message: str
    download_url: Optional[str] = None
    result: Any = None

    def to_body(self) -> dict:
        if self.download_url is not None:
            return {"message": self.message, "downloadUrl": self.download_url}
        return {"message": self.message, "result": self.result}


class PromptPipeline:
    """
    Runs one prompt end to end: index the uploaded files (if any), retrieve
    context, classify the wanted output, generate structured JSON and turn it
    into a downloadable file or a text answer.
    """
    def __init__(self, synchronizer, synthesizer, classifier, materializers):
        self.synchronizer = synchronizer
        self.synthesizer = synthesizer
        self.classifier = classifier
        self.materializers = materializers
        logger.info("PromptPipeline initialized with outputs: %s", ", ".join(i.value for i in materializers))

    async def run(self, request: PromptRequest) -> PromptResult:
        if request.files:
            report = await self.synchronizer.sync(request.files)
            logger.info("Index synced: %d chunks, %d stale uploads removed", report.chunk_count, len(report.deleted_keys))

        context = await self.synthesizer.retrieve_context(request.prompt)
        intent = await self.classifier.classify(request.prompt)
        reply = await self.synthesizer.synthesize(request.prompt, context, request.model_type)

        match intent:
            case OutputIntent.DOC:
                generated = await self.materializers[OutputIntent.DOC].materialize(reply)
                return PromptResult(message="DOC generated", download_url=generated.download_url)
            case OutputIntent.EXCEL:
                generated = await self.materializers[OutputIntent.EXCEL].materialize(reply)
                return PromptResult(message="Excel generated", download_url=generated.download_url)
            case OutputIntent.PDF:
                generated = await self.materializers[OutputIntent.PDF].materialize(reply)
                return PromptResult(message="PDF generated", download_url=generated.download_url)
            case _:
                return PromptResult(message="Text answer", result=reply_text(reply))
