from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

IngestionErrorKind = Literal["unsupported_format", "ocr_unavailable", "ocr_failed", "parse_failed"]


class IngestedDocument(BaseModel):
    """Text extracted from an upload.

    ``scanned`` marks a recognized file with no extractable text (image-only PDF);
    ``text`` is empty then and must not be analyzed.
    """

    model_config = ConfigDict(frozen=True)

    text: str = ""
    scanned: bool = False
    message: str | None = None


class IngestionError(RuntimeError):
    kind: IngestionErrorKind = "parse_failed"
    status_code: int = 500

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class UnsupportedFormatError(IngestionError):
    kind = "unsupported_format"
    status_code = 400


class OcrUnavailableError(IngestionError):
    kind = "ocr_unavailable"
    status_code = 400


class OcrFailedError(IngestionError):
    kind = "ocr_failed"
    status_code = 500


class ParseFailedError(IngestionError):
    kind = "parse_failed"
    status_code = 500
