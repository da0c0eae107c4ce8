import base64
from io import BytesIO

import pytest
from fastapi.testclient import TestClient
from PIL import Image, ImageDraw

from shootdesk.config import Settings
from shootdesk.main import create_app
from shootdesk.schemas import ProviderImage


def make_image_bytes(size=(64, 96), fmt="PNG", mode="RGB") -> bytes:
    """A small gradient with a few shapes so filters have something to work on."""
    width, height = size
    img = Image.new("RGB", size)
    draw = ImageDraw.Draw(img)
    for x in range(width):
        shade = int(255 * x / max(width - 1, 1))
        draw.line([(x, 0), (x, height)], fill=(shade, 90, 255 - shade))
    draw.ellipse([width // 4, height // 4, width // 2, height // 2], fill="white")
    output_buffer = BytesIO()
    img.convert(mode).save(output_buffer, format=fmt)
    return output_buffer.getvalue()


class FakeProvider:
    """Stands in for ImageProviderClient and records what it was asked."""

    def __init__(self, image=None, error=None, fetched=b""):
        self.image = image
        self.error = error
        self.fetched = fetched
        self.requests = []
        self.fetched_urls = []

    def generate(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.image

    def fetch_image(self, url):
        self.fetched_urls.append(url)
        return self.fetched


@pytest.fixture
def settings():
    return Settings(provider_api_key="test-key", reference_excerpt="Studio rules.")


@pytest.fixture
def inline_provider():
    def factory(size=(64, 96)):
        b64 = base64.b64encode(make_image_bytes(size)).decode("ascii")
        return FakeProvider(image=ProviderImage(b64_data=b64))

    return factory


@pytest.fixture
def make_client(settings):
    def factory(provider=None, app_settings=None):
        app = create_app(app_settings or settings)
        if provider is not None:
            app.state.provider = provider
        return TestClient(app)

    return factory
