"""
Image processing services

Post-processes the bitmap returned by the image provider with a fixed,
linear chain of Pillow operations. Every step takes an image and returns a
new one so each can be exercised on its own.

Chain:
- Decode and cover-crop to the requested aspect ratio (attention weighted)
- Mild sharpening
- JPEG round trip at high quality
- Brightness/saturation modulation
- Grain overlay built from a uniform mid-gray noise plane
- Final JPEG encode
"""

import random
from io import BytesIO
from typing import Optional, Tuple

from PIL import Image, ImageChops, ImageEnhance, ImageFilter, ImageOps

from shootdesk.schemas import ProcessedAsset

DEFAULT_SIZE = 1024
JPEG_QUALITY = 96
SHARPEN_RADIUS = 0.6
SHARPEN_PERCENT = 60
BRIGHTNESS = 1.02
SATURATION = 1.02
NOISE_OPACITY = 0.12
NOISE_FLOOR = 112
NOISE_SPREAD = 32
ATTENTION_SAMPLE = 64

# 256 is a multiple of NOISE_SPREAD, so mapping uniform bytes through this
# table keeps the draw uniform over [NOISE_FLOOR, NOISE_FLOOR + NOISE_SPREAD).
NOISE_LUT = [NOISE_FLOOR + (v % NOISE_SPREAD) for v in range(256)]


def decode_image(img_bytes: bytes) -> Image.Image:
    img = Image.open(BytesIO(img_bytes))
    img.load()
    if img.mode != "RGB":
        img = img.convert("RGB")
    return img


def natural_size(img: Image.Image) -> Tuple[int, int]:
    width, height = img.size
    return width or DEFAULT_SIZE, height or DEFAULT_SIZE


def cover_crop_size(width: int, height: int, ratio: float) -> Tuple[int, int]:
    target_width = min(width, round(height * ratio))
    target_height = min(height, round(width / ratio))
    return max(target_width, 1), max(target_height, 1)


def attention_centering(img: Image.Image) -> Tuple[float, float]:
    """
    Centre of edge energy, as fractions of width and height.

    Busy, detailed regions (faces, hair, fabric) pull the crop window
    towards them; a flat image yields the geometric centre.
    """
    sample = img.convert("L").resize((ATTENTION_SAMPLE, ATTENTION_SAMPLE))
    edges = sample.filter(ImageFilter.FIND_EDGES).tobytes()

    total = weighted_x = weighted_y = 0
    last = ATTENTION_SAMPLE - 1
    # skip the outer ring, the edge filter is unreliable there
    for y in range(1, last):
        row = y * ATTENTION_SAMPLE
        for x in range(1, last):
            energy = edges[row + x]
            total += energy
            weighted_x += energy * x
            weighted_y += energy * y

    if not total:
        return 0.5, 0.5
    return weighted_x / total / last, weighted_y / total / last


def cover_crop(img: Image.Image, ratio: Optional[float]) -> Image.Image:
    if not ratio:
        return img
    width, height = natural_size(img)
    target = cover_crop_size(width, height, ratio)
    if target == (width, height):
        return img
    return ImageOps.fit(
        img, target, method=Image.Resampling.LANCZOS, centering=attention_centering(img)
    )


def make_noise_plane(
    size: Tuple[int, int], rng: Optional[random.Random] = None
) -> Image.Image:
    """Single channel grain, each pixel drawn uniformly from [112, 144)."""
    rng = rng or random.Random()
    width, height = size
    raw = Image.frombytes("L", size, rng.randbytes(width * height))
    return raw.point(NOISE_LUT)


def sharpen(img: Image.Image) -> Image.Image:
    return img.filter(
        ImageFilter.UnsharpMask(radius=SHARPEN_RADIUS, percent=SHARPEN_PERCENT, threshold=0)
    )


def encode_jpeg(img: Image.Image, quality: int = JPEG_QUALITY) -> bytes:
    output_buffer = BytesIO()
    img.save(output_buffer, format="JPEG", quality=quality)
    return output_buffer.getvalue()


def reencode(img: Image.Image) -> Image.Image:
    return decode_image(encode_jpeg(img))


def modulate(
    img: Image.Image, brightness: float = BRIGHTNESS, saturation: float = SATURATION
) -> Image.Image:
    img = ImageEnhance.Brightness(img).enhance(brightness)
    return ImageEnhance.Color(img).enhance(saturation)


def overlay_noise(
    img: Image.Image, noise: Image.Image, opacity: float = NOISE_OPACITY
) -> Image.Image:
    grain = Image.merge("RGB", (noise, noise, noise))
    overlaid = ImageChops.overlay(img, grain)
    return Image.blend(img, overlaid, opacity)


def post_process(
    img_bytes: bytes,
    target_ratio: Optional[float] = None,
    rng: Optional[random.Random] = None,
) -> ProcessedAsset:
    img = cover_crop(decode_image(img_bytes), target_ratio)
    noise = make_noise_plane(img.size, rng)

    for step in (sharpen, reencode, modulate):
        img = step(img)
    img = overlay_noise(img, noise)

    width, height = img.size
    return ProcessedAsset(data=encode_jpeg(img), width=width, height=height)
