from __future__ import annotations

from typing import Any

import httpx

from resume_checker.parsing.models import IngestedDocument
from resume_checker.schemas.analysis import AnalysisResult


class RemoteServiceError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def is_client_error(self) -> bool:
        return self.status_code is not None and 400 <= self.status_code < 500


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        message = payload.get("error") or payload.get("detail")
        if isinstance(message, str) and message.strip():
            return message.strip()
    return f"Remote service responded with HTTP {response.status_code}."


def _raise_for_status(response: httpx.Response) -> None:
    if not response.is_success:
        raise RemoteServiceError(_error_message(response), status_code=response.status_code)


class ResumeCheckerClient:
    """Async client for the resume checker HTTP service (``/api/analyze``, ``/api/parse-file``).

    A fresh ``httpx.AsyncClient`` is opened per call so that cancelling a call
    also closes its connection.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout, transport=self._transport)

    async def analyze(self, resume: str, job_description: str) -> AnalysisResult:
        async with self._client() as client:
            response = await client.post(
                "/api/analyze",
                json={"resume": resume, "jobDescription": job_description},
            )
        _raise_for_status(response)
        return AnalysisResult.model_validate(response.json())

    async def parse_file(self, filename: str, content: bytes) -> IngestedDocument:
        async with self._client() as client:
            response = await client.post("/api/parse-file", files={"file": (filename, content)})
        _raise_for_status(response)

        payload: Any = response.json()
        if not isinstance(payload, dict) or not isinstance(payload.get("text", ""), str):
            raise RemoteServiceError("Malformed parse-file response.", status_code=response.status_code)
        message = payload.get("message")
        return IngestedDocument(
            text=payload.get("text") or "",
            scanned=bool(payload.get("scanned")),
            message=message if isinstance(message, str) else None,
        )
