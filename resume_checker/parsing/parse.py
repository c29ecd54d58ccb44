from __future__ import annotations

from io import BytesIO
import logging
from pathlib import PurePath
from zipfile import ZipFile

import defusedxml.ElementTree as ET
from docx import Document
from pypdf import PdfReader

from resume_checker.core.scoring import get_scoring_value

from .models import IngestedDocument, ParseFailedError, UnsupportedFormatError
from .ocr import extract_image_text

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg")
SUPPORTED_EXTENSIONS = (".txt", ".pdf", ".docx") + IMAGE_EXTENSIONS

SCANNED_PDF_MESSAGE = (
    "PDF appears to be scanned (contains images). For OCR, upload PDF pages as images "
    "(jpg/png) or paste the resume text."
)


def file_extension(filename: str | None) -> str:
    return PurePath(filename or "").suffix.lower()


def is_supported(filename: str | None) -> bool:
    return file_extension(filename) in SUPPORTED_EXTENSIONS


def unsupported_format_message(filename: str | None) -> str:
    extension = file_extension(filename) or "(no extension)"
    return (
        f"Unsupported file type '{extension}'. "
        f"Supported types: {', '.join(SUPPORTED_EXTENSIONS)}"
    )


def _parse_txt(content: bytes) -> str:
    return content.decode("utf-8", errors="replace")


def _extract_pdf_text(content: bytes) -> str:
    reader = PdfReader(BytesIO(content))
    page_chunks: list[str] = []
    for page in reader.pages:
        page_text = page.extract_text() or ""
        if page_text.strip():
            page_chunks.append(page_text)
    return "\n".join(page_chunks)


def _parse_pdf(content: bytes) -> IngestedDocument:
    try:
        text = _extract_pdf_text(content)
    except Exception as exc:
        logger.warning("pdf_parse_failed: %s", exc)
        raise ParseFailedError("Failed to parse PDF file.") from exc

    min_chars = int(get_scoring_value("ingestion.scanned_pdf_min_chars", 30))
    if len(text.strip()) < min_chars:
        logger.info("pdf_looks_scanned characters=%s", len(text.strip()))
        return IngestedDocument(text="", scanned=True, message=SCANNED_PDF_MESSAGE)
    return IngestedDocument(text=text)


def _extract_docx_xml_text(content: bytes) -> str:
    with ZipFile(BytesIO(content)) as archive:
        raw = archive.read("word/document.xml")
    root = ET.fromstring(raw)
    paragraphs: list[str] = []
    for paragraph in root.iter():
        if not paragraph.tag.endswith("}p"):
            continue
        texts: list[str] = []
        for node in paragraph.iter():
            if node.tag.endswith("}t") and node.text:
                value = node.text.strip()
                if value:
                    texts.append(value)
        if texts:
            paragraphs.append(" ".join(texts))
    return "\n".join(paragraphs)


def _extract_docx_text(content: bytes) -> str:
    try:
        document = Document(BytesIO(content))
    except Exception as exc:
        logger.info("docx_reader_fallback: %s", exc)
        return _extract_docx_xml_text(content)
    return "\n".join(paragraph.text for paragraph in document.paragraphs if paragraph.text.strip())


def _parse_docx(content: bytes) -> IngestedDocument:
    try:
        return IngestedDocument(text=_extract_docx_text(content))
    except Exception as exc:
        logger.warning("docx_parse_failed: %s", exc)
        raise ParseFailedError("Failed to parse DOCX file.") from exc


def ingest(content: bytes, filename: str, *, ocr_api_key: str | None = None) -> IngestedDocument:
    """Extract resume text from an uploaded file, dispatching on its extension.

    Raises an ``IngestionError`` subclass for unsupported formats, missing OCR
    credentials and parser failures. A PDF without a usable text layer is not an
    error: it comes back as ``IngestedDocument(scanned=True)``.
    """
    extension = file_extension(filename)
    if extension == ".txt":
        return IngestedDocument(text=_parse_txt(content))
    if extension == ".pdf":
        return _parse_pdf(content)
    if extension == ".docx":
        return _parse_docx(content)
    if extension in IMAGE_EXTENSIONS:
        return IngestedDocument(text=extract_image_text(content, api_key=ocr_api_key))
    raise UnsupportedFormatError(unsupported_format_message(filename))
