"""
Generation services

Implements the request flow between the API endpoint and the image
provider client.

A submission is first turned into a shoot plan. Unless the caller asked to
generate *and* confirmed, the plan is returned for review and the provider
is never contacted. A confirmed generation composes the prompt, makes one
provider call, post-processes the returned bitmap and attaches the
filename, caption and EXIF block.

Responsibilities:
- Parse the submitted payload into a ``Submission``
- Dispatch plan-only and generate requests
- Turn every failure into a ``ShootDeskError`` (nothing is retried)
"""

import json
import logging
import random
from datetime import date
from typing import Optional, Union

from shootdesk.config import Settings
from shootdesk.errors import ImageProcessingError, MalformedRequest
from shootdesk.provider import ImageProviderClient
from shootdesk.schemas import (
    GenerationRequest,
    GenerationResult,
    Intent,
    ProcessedAsset,
    ProviderImage,
    ReferenceFlags,
    ShootSheetResponse,
    Submission,
)
from shootdesk.services.images import post_process
from shootdesk.services.metadata import (
    build_caption,
    build_exif,
    build_exif_block,
    build_filename,
)
from shootdesk.services.prompting import compose_prompt
from shootdesk.services.shoot_plan import build_shoot_plan, map_provider_size, parse_aspect
from shootdesk.utils import decode_b64_image, is_http_url, is_truthy_flag

logger = logging.getLogger(__name__)

PLAN_MESSAGE = (
    "Review the Shoot Sheet. Upload a pose reference (required) and optional "
    "wardrobe reference. Reply with confirm=true to generate."
)


def parse_submission(
    payload_text: Optional[str],
    pose_present: bool = False,
    wardrobe_present: bool = False,
) -> Submission:
    try:
        payload = json.loads(payload_text or "{}")
    except (TypeError, ValueError) as e:
        raise MalformedRequest(f"Invalid payload: {e}") from e
    if not isinstance(payload, dict):
        raise MalformedRequest("Invalid payload: expected a JSON object")

    action = payload.pop("action", None)
    confirm = payload.pop("confirm", False)
    return Submission(
        selections=payload,
        action=action if isinstance(action, str) else None,
        confirm=is_truthy_flag(confirm),
        references=ReferenceFlags(
            pose_provided=pose_present, wardrobe_provided=wardrobe_present
        ),
    )


def resolve_intent(submission: Submission) -> Intent:
    if submission.action == Intent.GENERATE.value and submission.confirm:
        return Intent.GENERATE
    return Intent.PLAN


def plan_shoot(submission: Submission, **_) -> ShootSheetResponse:
    plan = build_shoot_plan(submission.selections, submission.references)
    return ShootSheetResponse(
        shoot_sheet=plan.summary, settings=plan.settings, message=PLAN_MESSAGE
    )


def build_generation_request(
    submission: Submission, reference_excerpt: str = ""
) -> GenerationRequest:
    plan = build_shoot_plan(submission.selections, submission.references)
    prompt = compose_prompt(
        plan.settings, submission.selections, submission.references, reference_excerpt
    )
    return GenerationRequest(
        settings=plan.settings,
        prompt=prompt,
        provider_size_hint=map_provider_size(submission.selections.get("aspectRatio")),
        reference_flags=submission.references,
    )


def load_image_bytes(
    image: ProviderImage, provider: ImageProviderClient, debug: bool = False
) -> bytes:
    if is_http_url(image.url):
        return provider.fetch_image(image.url)
    # a non-http url is expected to be a data: URL
    try:
        return decode_b64_image(image.b64_data or image.url or "")
    except ValueError as e:
        logger.error("Provider returned undecodable image data: %s", e)
        raise ImageProcessingError(details=str(e) if debug else None) from e


def process_generated_image(
    img_bytes: bytes, target_ratio: float, rng=None, debug: bool = False
) -> ProcessedAsset:
    try:
        return post_process(img_bytes, target_ratio, rng)
    except Exception as e:
        logger.exception("Error post-processing generated image")
        raise ImageProcessingError(details=str(e) if debug else None) from e


def generate_image(
    submission: Submission,
    settings: Settings,
    provider: ImageProviderClient,
    today: Optional[date] = None,
    rng: Optional[random.Random] = None,
) -> GenerationResult:
    request = build_generation_request(submission, settings.reference_excerpt)
    if submission.references.pose_provided or submission.references.wardrobe_provided:
        logger.info("Reference attachments only shape the prompt; they are not uploaded")

    image = provider.generate(request)
    img_bytes = load_image_bytes(image, provider, settings.debug_image)

    aspect_label = submission.selections.get("aspectRatio") or ""
    asset = process_generated_image(
        img_bytes, parse_aspect(aspect_label).ratio, rng, settings.debug_image
    )
    logger.info("Generated %sx%s image", asset.width, asset.height)

    shoot = request.settings
    filename = build_filename(shoot, today)
    caption = build_caption(shoot.lighting_preset, shoot.film_stock)
    return GenerationResult(
        image_url=asset.data_url,
        filename=filename,
        caption=caption,
        exif=build_exif(shoot, str(aspect_label), filename),
        exif_block=build_exif_block(shoot, filename, caption),
    )


HANDLERS = {
    Intent.PLAN: plan_shoot,
    Intent.GENERATE: generate_image,
}


def handle_submission(
    submission: Submission,
    settings: Settings,
    provider: ImageProviderClient,
    today: Optional[date] = None,
    rng: Optional[random.Random] = None,
) -> Union[ShootSheetResponse, GenerationResult]:
    intent = resolve_intent(submission)
    logger.info("Handling %s request", intent.value)
    return HANDLERS[intent](
        submission, settings=settings, provider=provider, today=today, rng=rng
    )
