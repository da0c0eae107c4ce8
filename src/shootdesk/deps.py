"""
Provides the shared settings and provider client to the endpoints.

Both are created once by ``create_app`` and stored on ``app.state``; the
functions below are the FastAPI dependencies that hand them out.
"""

from fastapi import Request

from shootdesk.config import Settings
from shootdesk.provider import ImageProviderClient


def build_provider_client(settings: Settings) -> ImageProviderClient:
    return ImageProviderClient(
        api_key=settings.provider_api_key,
        base_url=settings.provider_url,
        model=settings.image_model,
        timeout=settings.provider_timeout,
        debug=settings.debug_image,
    )


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_provider_client(request: Request) -> ImageProviderClient:
    return request.app.state.provider
