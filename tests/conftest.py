"""Shared test fixtures for Flashdeck."""

import io
import zipfile

import pytest
from unittest.mock import AsyncMock, MagicMock

from flashdeck.config.models import FlashdeckConfig
from flashdeck.extractor.models import Document
from flashdeck.llm.base import LLMProvider
from flashdeck.llm.client import ModelClient
from flashdeck.llm.models import LLMConfig, LLMResponse, TokenUsage

MITOCHONDRIA_TEXT = "The mitochondria is the powerhouse of the cell."

FENCED_MITOCHONDRIA_OUTPUT = (
    '```json\n[{"question":"What is the powerhouse of the cell?",'
    '"answer":"The mitochondria"}]\n```'
)


def make_response(content: str) -> LLMResponse:
    return LLMResponse(
        content=content,
        usage=TokenUsage(input_tokens=100, output_tokens=40),
        model="test-model",
    )


@pytest.fixture
def text_document():
    return Document(
        content=MITOCHONDRIA_TEXT.encode("utf-8"),
        mime_type="text/plain",
        filename="biology.txt",
    )


@pytest.fixture
def mock_llm_provider():
    provider = MagicMock(spec=LLMProvider)
    provider.config = LLMConfig(provider="openai", model="test-model")
    provider.generate = AsyncMock(return_value=make_response(FENCED_MITOCHONDRIA_OUTPUT))
    return provider


@pytest.fixture
def model_client(mock_llm_provider):
    return ModelClient(mock_llm_provider, max_tokens=1000)


@pytest.fixture
def sample_config():
    return FlashdeckConfig()


_DOCX_CONTENT_TYPES = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">
  <Default Extension="rels" ContentType="application/vnd.openxmlformats-package.relationships+xml"/>
  <Default Extension="xml" ContentType="application/xml"/>
  <Override PartName="/word/document.xml" ContentType="application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"/>
</Types>"""

_DOCX_RELS = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">
  <Relationship Id="rId1" Type="http://schemas.openxmlformats.org/officeDocument/2006/relationships/officeDocument" Target="word/document.xml"/>
</Relationships>"""

_DOCX_DOCUMENT = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">
  <w:body>
    <w:p><w:r><w:t>Cell Biology</w:t></w:r></w:p>
    <w:p><w:r><w:t>The mitochondria is the powerhouse of the cell.</w:t></w:r></w:p>
  </w:body>
</w:document>"""


@pytest.fixture
def docx_bytes():
    """Smallest package mammoth accepts: content types, root rels, one document part."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("[Content_Types].xml", _DOCX_CONTENT_TYPES)
        zf.writestr("_rels/.rels", _DOCX_RELS)
        zf.writestr("word/document.xml", _DOCX_DOCUMENT)
    return buf.getvalue()
