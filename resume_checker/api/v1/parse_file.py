import asyncio

from fastapi import APIRouter, File, Request, UploadFile, status
from fastapi.responses import JSONResponse

from resume_checker.core.config import settings
from resume_checker.core.rate_limit import rate_limit
from resume_checker.parsing.parse import ingest
from resume_checker.schemas.analysis import ParseFileResponse

router = APIRouter()

READ_CHUNK_BYTES = 64 * 1024


@router.post(
    "/parse-file",
    response_model=ParseFileResponse,
    response_model_exclude_none=True,
    summary="Parse Resume File",
    description="Extract text from an uploaded .txt, .pdf, .docx or image resume.",
)
@rate_limit()
async def parse_file(request: Request, file: UploadFile | None = File(default=None)):
    _ = request
    if file is None:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "No file uploaded"})

    filename = file.filename or "uploaded-file"
    max_bytes = settings.max_upload_bytes
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(READ_CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        if total > max_bytes:
            return JSONResponse(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                content={"error": f"File too large. Maximum allowed size is {max_bytes // (1024 * 1024)} MB."},
            )
        chunks.append(chunk)

    # IngestionError propagates to the handler registered in main.py.
    document = await asyncio.to_thread(ingest, b"".join(chunks), filename)
    if document.scanned:
        return ParseFileResponse(text="", scanned=True, message=document.message)
    return ParseFileResponse(text=document.text)
