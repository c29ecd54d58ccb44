from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    log_level: str
    sentry_dsn: str | None
    rate_limit: str
    rate_limit_enabled: bool
    cors_allowed_origins: tuple[str, ...]
    cors_allow_credentials: bool
    max_upload_bytes: int
    google_api_key: str | None
    google_vision_url: str
    ocr_timeout_s: float
    api_url: str | None
    parse_timeout_s: float
    analyze_timeout_s: float
    pipeline_pre_delay_s: float
    pipeline_post_delay_s: float


settings = Settings(
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    rate_limit=_get_env("RATE_LIMIT", "60/minute") or "60/minute",
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ],
    ),
    cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", False),
    max_upload_bytes=_get_env_int("MAX_UPLOAD_BYTES", 10 * 1024 * 1024),
    google_api_key=_get_env("GOOGLE_API_KEY"),
    google_vision_url=_get_env("GOOGLE_VISION_URL", "https://vision.googleapis.com/v1/images:annotate")
    or "https://vision.googleapis.com/v1/images:annotate",
    ocr_timeout_s=_get_env_float("OCR_TIMEOUT_S", 15.0),
    api_url=_get_env("RESUME_CHECKER_API_URL"),
    parse_timeout_s=_get_env_float("PARSE_TIMEOUT_S", 6.0),
    analyze_timeout_s=_get_env_float("ANALYZE_TIMEOUT_S", 2.5),
    pipeline_pre_delay_s=_get_env_float("PIPELINE_PRE_DELAY_S", 0.3),
    pipeline_post_delay_s=_get_env_float("PIPELINE_POST_DELAY_S", 0.4),
)

if settings.parse_timeout_s <= 0 or settings.analyze_timeout_s <= 0:
    raise RuntimeError("PARSE_TIMEOUT_S and ANALYZE_TIMEOUT_S must be positive numbers of seconds.")

if settings.pipeline_pre_delay_s < 0 or settings.pipeline_post_delay_s < 0:
    raise RuntimeError("PIPELINE_PRE_DELAY_S and PIPELINE_POST_DELAY_S must not be negative.")
