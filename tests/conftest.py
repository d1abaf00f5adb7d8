"""Pytest configuration and fixtures."""

import json
import os

# docsmith.config reads the environment at import time
os.environ["OPENAI_API_KEY"] = "test-openai-key"
os.environ["GEMINI_API_KEY"] = "test-gemini-key"
os.environ["PINECONE_API_KEY"] = "test-pinecone-key"
os.environ["UPLOAD_BUCKET"] = "test-bucket"
os.environ["LANGFUSE_TRACING_ENABLED"] = "false"

import pytest

from docsmith.llm.factory import GEMINI, OPENAI
from docsmith.rag.vector_store import PineconeVectorStore
from docsmith.services import Services, build_pipeline
from tests.fakes.fake_llm import FakeChatProvider, FakeEmbedder
from tests.fakes.fake_pinecone import FakeIndex
from tests.fakes.fake_s3 import FakeStorage

EXCEL_REPLY = json.dumps({
    "type": "excel",
    "filename": "safety_checklist.xlsx",
    "sheets": [{
        "name": "Checklist",
        "data": [
            {"Item": "Wear a helmet", "Done": "No"},
            {"Item": "Check harness", "Done": "No"},
            {"Item": "Clear the walkway", "Done": "No"},
        ],
    }],
})


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def index():
    return FakeIndex()


@pytest.fixture
def vector_store(index):
    return PineconeVectorStore(index, "test-index")


@pytest.fixture
def embedder():
    return FakeEmbedder()


@pytest.fixture
def openai_provider():
    return FakeChatProvider(reply=EXCEL_REPLY, label="openai:fake")


@pytest.fixture
def gemini_provider():
    return FakeChatProvider(reply=EXCEL_REPLY, label="gemini:fake")


@pytest.fixture
def intent_provider():
    return FakeChatProvider(reply="excel\n", label="intent:fake")


@pytest.fixture
def pipeline(storage, vector_store, embedder, openai_provider, gemini_provider, intent_provider):
    return build_pipeline(
        storage=storage,
        vector_store=vector_store,
        embedder=embedder,
        providers={OPENAI: openai_provider, GEMINI: gemini_provider},
        intent_provider=intent_provider,
    )


@pytest.fixture
def services(storage, pipeline):
    return Services(storage=storage, pipeline=pipeline)
