from __future__ import annotations

import asyncio
import logging
from typing import Literal

import httpx
from pydantic import BaseModel, Field

from resume_checker.analysis.engine import evaluate
from resume_checker.core.config import settings
from resume_checker.core.scoring import get_scoring_value
from resume_checker.parsing.models import IngestedDocument, IngestionError
from resume_checker.parsing.parse import file_extension, ingest, is_supported, unsupported_format_message
from resume_checker.schemas.analysis import AnalysisResult

from .clients import RemoteServiceError, ResumeCheckerClient
from .fallback import with_timeout_fallback
from .samples import SAMPLE_RESUME, placeholder_resume

logger = logging.getLogger(__name__)

ResumeSource = Literal["pasted", "upload", "remote_parse", "placeholder"]
Evaluator = Literal["remote", "local"]

MISSING_RESUME_MESSAGE = "Please upload a resume file or paste your resume text."
NO_JOB_DESCRIPTION_NOTICE = "No job description provided; running a generic analysis."
LONG_RESUME_NOTICE = "Resume text looks quite long. Consider trimming it to the most relevant content."
PARSE_UNAVAILABLE_NOTICE = "The file could not be parsed; the analysis below uses sample resume text."


class Upload(BaseModel):
    filename: str
    content: bytes = b""


class PipelineOutcome(BaseModel):
    result: AnalysisResult | None = None
    error: str | None = None
    notices: list[str] = Field(default_factory=list)
    resume_source: ResumeSource | None = None
    evaluated_by: Evaluator | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.result is not None


class ResumeCheckPipeline:
    """Obtain resume text, then evaluate it, preferring the remote service at each step.

    Stage A turns an upload into text via the remote parse service (6 s budget by
    default) and substitutes placeholder text when that fails. Stage B asks the
    remote service for an evaluation (2.5 s budget) and otherwise evaluates
    locally with the same shared engine. Without a client both stages run locally.
    """

    def __init__(
        self,
        client: ResumeCheckerClient | None = None,
        *,
        parse_timeout: float | None = None,
        analyze_timeout: float | None = None,
        pre_delay: float | None = None,
        post_delay: float | None = None,
    ) -> None:
        self.client = client
        self.parse_timeout = settings.parse_timeout_s if parse_timeout is None else parse_timeout
        self.analyze_timeout = settings.analyze_timeout_s if analyze_timeout is None else analyze_timeout
        self.pre_delay = settings.pipeline_pre_delay_s if pre_delay is None else pre_delay
        self.post_delay = settings.pipeline_post_delay_s if post_delay is None else post_delay

    @classmethod
    def from_settings(
        cls,
        api_url: str | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        **kwargs,
    ) -> "ResumeCheckPipeline":
        base_url = api_url if api_url is not None else settings.api_url
        client = ResumeCheckerClient(base_url, transport=transport) if base_url else None
        return cls(client, **kwargs)

    async def run(
        self,
        *,
        resume_text: str | None = "",
        job_description: str | None = "",
        upload: Upload | None = None,
    ) -> PipelineOutcome:
        try:
            return await self._run(
                resume_text=(resume_text or "").strip(),
                job_description=(job_description or "").strip(),
                upload=upload,
            )
        except Exception:  # pragma: no cover - guard rail
            logger.exception("pipeline_unexpected_failure")
            return PipelineOutcome(
                result=evaluate((resume_text or "").strip() or SAMPLE_RESUME, job_description or ""),
                resume_source="pasted" if (resume_text or "").strip() else "placeholder",
                evaluated_by="local",
            )

    async def _run(self, *, resume_text: str, job_description: str, upload: Upload | None) -> PipelineOutcome:
        if not resume_text and upload is None:
            return PipelineOutcome(error=MISSING_RESUME_MESSAGE)

        notices: list[str] = []
        if not job_description:
            notices.append(NO_JOB_DESCRIPTION_NOTICE)

        await self._pace(self.pre_delay)

        source: ResumeSource = "pasted"
        if not resume_text and upload is not None:
            if not is_supported(upload.filename):
                return PipelineOutcome(error=unsupported_format_message(upload.filename), notices=notices)
            resume_text, source = await self._resume_from_upload(upload, notices)

        long_resume_chars = int(get_scoring_value("pipeline.long_resume_chars", 10000))
        if len(resume_text) > long_resume_chars:
            notices.append(LONG_RESUME_NOTICE)

        result, evaluated_by = await self._evaluate(resume_text or SAMPLE_RESUME, job_description)

        await self._pace(self.post_delay)
        return PipelineOutcome(
            result=result,
            notices=notices,
            resume_source=source,
            evaluated_by=evaluated_by,
        )

    async def _resume_from_upload(self, upload: Upload, notices: list[str]) -> tuple[str, ResumeSource]:
        if file_extension(upload.filename) == ".txt":
            return ingest(upload.content, upload.filename).text, "upload"

        client = self.client
        if client is None:
            return await self._local_parse(upload, notices)

        document = await with_timeout_fallback(
            lambda: self._remote_parse(client, upload),
            lambda: None,
            self.parse_timeout,
            stage="parse",
        )
        if document is None:
            notices.append(PARSE_UNAVAILABLE_NOTICE)
            return placeholder_resume(upload.filename), "placeholder"
        if document.scanned or not document.text.strip():
            notices.append(document.message or PARSE_UNAVAILABLE_NOTICE)
            return placeholder_resume(upload.filename), "placeholder"
        return document.text, "remote_parse"

    @staticmethod
    async def _local_parse(upload: Upload, notices: list[str]) -> tuple[str, ResumeSource]:
        try:
            document = await asyncio.to_thread(ingest, upload.content, upload.filename)
        except IngestionError as exc:
            logger.info("local_parse_failed kind=%s message=%s", exc.kind, exc.message)
            notices.append(exc.message)
            return placeholder_resume(upload.filename), "placeholder"
        if document.scanned or not document.text.strip():
            notices.append(document.message or PARSE_UNAVAILABLE_NOTICE)
            return placeholder_resume(upload.filename), "placeholder"
        return document.text, "upload"

    @staticmethod
    async def _remote_parse(client: ResumeCheckerClient, upload: Upload) -> IngestedDocument:
        try:
            return await client.parse_file(upload.filename, upload.content)
        except RemoteServiceError as exc:
            # 4xx carries a user-facing reason (e.g. OCR not configured); keep it as a notice.
            if exc.is_client_error:
                logger.info("remote_parse_rejected status=%s message=%s", exc.status_code, exc.message)
                return IngestedDocument(text="", message=exc.message)
            raise

    async def _evaluate(self, resume_text: str, job_description: str) -> tuple[AnalysisResult, Evaluator]:
        if self.client is None:
            return evaluate(resume_text, job_description), "local"

        client = self.client
        used_local = False

        def local() -> AnalysisResult:
            nonlocal used_local
            used_local = True
            return evaluate(resume_text, job_description)

        result = await with_timeout_fallback(
            lambda: client.analyze(resume_text, job_description),
            local,
            self.analyze_timeout,
            stage="analyze",
        )
        return result, "local" if used_local else "remote"

    @staticmethod
    async def _pace(seconds: float) -> None:
        if seconds > 0:
            await asyncio.sleep(seconds)
