from contextlib import asynccontextmanager
import logging

from resume_checker.core.config import settings
from resume_checker.core.scoring import get_scoring_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    # Fail at startup rather than on the first request if scoring.yaml is broken.
    config = get_scoring_config()
    logger.info("scoring_config_loaded sections=%s", sorted(config))

    if not settings.google_api_key:
        logger.info("ocr_disabled: GOOGLE_API_KEY is not set; image uploads will be rejected.")

    yield
