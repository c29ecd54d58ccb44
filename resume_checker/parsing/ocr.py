from __future__ import annotations

import base64
import logging
from typing import Any

import httpx

from resume_checker.core.config import settings

from .models import OcrFailedError, OcrUnavailableError

logger = logging.getLogger(__name__)

OCR_UNAVAILABLE_MESSAGE = (
    "GOOGLE_API_KEY is not configured on the server. Set it in .env to enable OCR for images."
)


def _vision_request_body(content: bytes) -> dict[str, Any]:
    return {
        "requests": [
            {
                "image": {"content": base64.b64encode(content).decode("ascii")},
                "features": [{"type": "DOCUMENT_TEXT_DETECTION", "maxResults": 1}],
            }
        ]
    }


def text_from_vision_response(payload: Any) -> str:
    """Prefer fullTextAnnotation.text, then the first textAnnotations description."""
    if not isinstance(payload, dict):
        return ""
    responses = payload.get("responses")
    if not isinstance(responses, list) or not responses or not isinstance(responses[0], dict):
        return ""
    first = responses[0]

    full_text = first.get("fullTextAnnotation")
    if isinstance(full_text, dict) and full_text.get("text"):
        return str(full_text["text"])

    annotations = first.get("textAnnotations")
    if isinstance(annotations, list) and annotations and isinstance(annotations[0], dict):
        description = annotations[0].get("description")
        if description:
            return str(description)
    return ""


def extract_image_text(
    content: bytes,
    *,
    api_key: str | None = None,
    transport: httpx.BaseTransport | None = None,
) -> str:
    key = (api_key if api_key is not None else settings.google_api_key) or ""
    if not key.strip():
        raise OcrUnavailableError(OCR_UNAVAILABLE_MESSAGE)

    try:
        with httpx.Client(timeout=settings.ocr_timeout_s, transport=transport) as client:
            response = client.post(
                settings.google_vision_url,
                params={"key": key.strip()},
                json=_vision_request_body(content),
            )
        response.raise_for_status()
        payload = response.json()
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("vision_ocr_failed: %s", exc)
        raise OcrFailedError("Vision OCR failed.") from exc

    return text_from_vision_response(payload)
