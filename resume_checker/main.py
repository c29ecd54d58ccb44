import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler
import sentry_sdk

from resume_checker.api.v1.health import router as health_router
from resume_checker.api.v1.analyze import router as analyze_router
from resume_checker.api.v1.parse_file import router as parse_file_router
from resume_checker.core.rate_limit import limiter
from resume_checker.core.config import settings
from resume_checker.parsing.models import IngestionError
from dotenv import load_dotenv
from resume_checker.core.lifespan import lifespan

logger = logging.getLogger(__name__)

load_dotenv()
logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="Resume Checker API", version="0.1.0", lifespan=lifespan)


async def _ingestion_error_handler(request: Request, exc: IngestionError) -> JSONResponse:
    logger.warning("parse_file_failed kind=%s path=%s message=%s", exc.kind, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allowed_origins),
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_exception_handler(IngestionError, _ingestion_error_handler)
app.add_middleware(SlowAPIMiddleware)

app.include_router(health_router, prefix="/api", tags=["Health"])
app.include_router(analyze_router, prefix="/api", tags=["Analyze"])
app.include_router(parse_file_router, prefix="/api", tags=["Parse"])
