import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException

from shootdesk.catalog import OPTIONS
from shootdesk.config import Settings
from shootdesk.deps import get_provider_client, get_settings
from shootdesk.errors import (
    ConfigurationError,
    MalformedRequest,
    ShootDeskError,
    UnexpectedError,
)
from shootdesk.provider import ImageProviderClient
from shootdesk.services.generation import handle_submission, parse_submission

logger = logging.getLogger(__name__)

router = APIRouter()


def _is_attached(value) -> bool:
    if isinstance(value, UploadFile):
        return bool(value.filename or value.size)
    return bool(value)


@router.post("/generate-image")
async def generate_image(
    request: Request,
    settings: Settings = Depends(get_settings),
    provider: ImageProviderClient = Depends(get_provider_client),
):
    """Plan a shoot, or generate and post-process its image once confirmed."""
    # checked before the multipart body (and its attachments) is read
    if not settings.has_credentials:
        logger.error("Image generation requested without OPENAI_API_KEY configured.")
        raise ConfigurationError("Server configuration error: OpenAI API key is missing.")

    try:
        async with request.form() as form:
            submission = parse_submission(
                form.get("payload"),
                pose_present=_is_attached(form.get("poseRef")),
                wardrobe_present=_is_attached(form.get("wardrobeRef")),
            )
        result = await run_in_threadpool(handle_submission, submission, settings, provider)
        return result.to_json()
    except ShootDeskError:
        raise
    except StarletteHTTPException as e:
        # raised by request.form() for an unparseable multipart body
        raise MalformedRequest(f"Invalid form data: {e.detail}") from e
    except Exception as e:
        logger.exception("Error generating image")
        raise UnexpectedError(details=str(e) if settings.debug_image else None) from e


@router.get("/options")
async def get_options():
    """Option lists the shoot form offers for each category."""
    return OPTIONS


def get_router():
    return router
