from .models import (
    IngestedDocument,
    IngestionError,
    OcrFailedError,
    OcrUnavailableError,
    ParseFailedError,
    UnsupportedFormatError,
)
from .parse import SUPPORTED_EXTENSIONS, file_extension, ingest, is_supported, unsupported_format_message

__all__ = [
    "IngestedDocument",
    "IngestionError",
    "UnsupportedFormatError",
    "OcrUnavailableError",
    "OcrFailedError",
    "ParseFailedError",
    "SUPPORTED_EXTENSIONS",
    "file_extension",
    "ingest",
    "is_supported",
    "unsupported_format_message",
]
