import logging
from dataclasses import dataclass

from docsmith import config
from docsmith.core.embeddings import OpenAIEmbedding
from docsmith.core.extraction import TextExtractor
from docsmith.llm.factory import GEMINI, OPENAI
from docsmith.llm.gemini_provider import GeminiChatProvider
from docsmith.llm.openai_provider import OpenAIChatProvider
from docsmith.outputs.docx_builder import DocxMaterializer
from docsmith.outputs.excel_builder import ExcelMaterializer
from docsmith.outputs.pdf_builder import PdfMaterializer
from docsmith.rag.index_sync import IndexSynchronizer
from docsmith.rag.intent import IntentClassifier, OutputIntent
from docsmith.rag.pipeline import PromptPipeline
from docsmith.rag.prompts import load_prompts
from docsmith.rag.synthesizer import ResponseSynthesizer
from docsmith.rag.vector_store import PineconeVectorStore
from docsmith.storage import S3Storage


@dataclass
class Services:
    storage: S3Storage
    pipeline: PromptPipeline


def configure_logging():
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    for name in config.QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def build_pipeline(storage, vector_store, embedder, providers, intent_provider, prompts=None) -> PromptPipeline:
    """Wire the pipeline from explicitly constructed clients."""
    prompts = prompts or load_prompts()
    return PromptPipeline(
        synchronizer=IndexSynchronizer(storage, vector_store, embedder, TextExtractor()),
        synthesizer=ResponseSynthesizer(embedder, vector_store, providers, prompts),
        classifier=IntentClassifier(intent_provider, prompts),
        materializers={
            OutputIntent.DOC: DocxMaterializer(storage),
            OutputIntent.EXCEL: ExcelMaterializer(storage),
            OutputIntent.PDF: PdfMaterializer(storage),
        },
    )


def build_services() -> Services:
    """Construct every external client from configuration."""
    storage = S3Storage.from_config()
    providers = {
        OPENAI: OpenAIChatProvider(model=config.OPENAI_CHAT_MODEL),
        GEMINI: GeminiChatProvider(model=config.GEMINI_MODEL),
    }
    pipeline = build_pipeline(
        storage=storage,
        vector_store=PineconeVectorStore.from_config(),
        embedder=OpenAIEmbedding(model=config.EMBEDDING_MODEL),
        providers=providers,
        intent_provider=OpenAIChatProvider(model=config.INTENT_MODEL),
    )
    return Services(storage=storage, pipeline=pipeline)
