"""Fashion shoot planning and image generation API."""

__version__ = "0.1.0"
