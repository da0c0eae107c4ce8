"""
Application configuration.

Settings are read from the environment (and an optional ``.env`` file) once,
when the app is created, and passed by reference to whatever needs them.

Responsibilities:
- Load environment variables
- Load the studio reference document excerpt used in every prompt
- Configure logging
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER_URL: str = "https://api.openai.com/v1"
DEFAULT_IMAGE_MODEL: str = "gpt-image-1"
DEFAULT_STUDIO_DOC_PATH: str = "instructions/Studio_Full_Instructions.txt"
REFERENCE_EXCERPT_LIMIT: int = 6000


def load_reference_excerpt(path: str, limit: int = REFERENCE_EXCERPT_LIMIT) -> str:
    """
    Read the studio reference document and keep only its first ``limit`` characters.

    A missing or unreadable document is not fatal: prompts are still built
    with the built-in standards, just without the excerpt.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        logger.warning("Studio instructions file not found or unreadable: %s", e)
        return ""
    return text[:limit]


def _parse_timeout(value: Optional[str]) -> Optional[float]:
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring invalid PROVIDER_TIMEOUT value %r", value)
        return None


class Settings:
    PROJECT_NAME: str = "Fashion Shoot Studio API"
    API_PREFIX: str = "/api"

    def __init__(
        self,
        provider_api_key: str = "",
        provider_url: str = DEFAULT_PROVIDER_URL,
        image_model: str = DEFAULT_IMAGE_MODEL,
        provider_timeout: Optional[float] = None,
        debug_image: bool = False,
        reference_excerpt: str = "",
        cors_origins: Optional[List[str]] = None,
        log_level: str = "INFO",
    ):
        self.provider_api_key = provider_api_key
        self.provider_url = provider_url.rstrip("/")
        self.image_model = image_model
        self.provider_timeout = provider_timeout
        self.debug_image = debug_image
        self.reference_excerpt = reference_excerpt
        self.cors_origins = cors_origins or ["*"]
        self.log_level = log_level

    @property
    def has_credentials(self) -> bool:
        return bool(self.provider_api_key)


def load_settings() -> Settings:
    load_dotenv()
    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        provider_api_key=os.getenv("OPENAI_API_KEY", ""),
        provider_url=os.getenv("IMAGE_PROVIDER_URL", DEFAULT_PROVIDER_URL),
        image_model=os.getenv("IMAGE_MODEL", DEFAULT_IMAGE_MODEL),
        provider_timeout=_parse_timeout(os.getenv("PROVIDER_TIMEOUT")),
        debug_image=os.getenv("DEBUG_IMAGE", "").lower() == "true",
        reference_excerpt=load_reference_excerpt(
            os.getenv("STUDIO_DOC_PATH", DEFAULT_STUDIO_DOC_PATH)
        ),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
