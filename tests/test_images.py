import random
from io import BytesIO

import pytest
from PIL import Image, ImageChops, ImageDraw

from shootdesk.services.images import (
    attention_centering,
    cover_crop,
    cover_crop_size,
    decode_image,
    make_noise_plane,
    modulate,
    overlay_noise,
    post_process,
    reencode,
    sharpen,
)

from conftest import make_image_bytes


def _flat(size=(40, 30), color=(100, 100, 100)):
    return Image.new("RGB", size, color)


def test_decode_image_converts_to_rgb():
    img = decode_image(make_image_bytes((20, 10), mode="RGBA"))
    assert img.mode == "RGB"
    assert img.size == (20, 10)


def test_decode_image_rejects_garbage():
    with pytest.raises(Exception):
        decode_image(b"not an image")


@pytest.mark.parametrize(
    "size, ratio, expected",
    [
        ((1024, 1024), 1.0, (1024, 1024)),
        ((1536, 1024), 9 / 16, (576, 1024)),
        ((1024, 1024), 4 / 5, (819, 1024)),
        ((1024, 1536), 3 / 4, (1024, 1365)),
        ((1536, 1024), 16 / 9, (1536, 864)),
    ],
)
def test_cover_crop_size(size, ratio, expected):
    assert cover_crop_size(*size, ratio) == expected


def test_cover_crop_changes_size():
    img = decode_image(make_image_bytes((160, 90)))
    assert cover_crop(img, 9 / 16).size == (51, 90)


def test_cover_crop_square_is_noop():
    img = _flat((50, 50))
    assert cover_crop(img, 1.0) is img
    assert cover_crop(img, None) is img


def test_attention_centering_flat_image_is_centre():
    assert attention_centering(_flat()) == (0.5, 0.5)


def test_attention_centering_follows_detail():
    img = Image.new("RGB", (200, 100), "black")
    draw = ImageDraw.Draw(img)
    for x in range(150, 195, 6):
        draw.rectangle([x, 10, x + 2, 90], fill="white")
    cx, cy = attention_centering(img)
    assert cx > 0.6
    assert 0.3 < cy < 0.7

    cropped = cover_crop(img, 1.0)
    assert cropped.size == (100, 100)
    # the stripes on the right survive the crop
    assert cropped.crop((50, 0, 100, 100)).getextrema()[0][1] > 200


def test_noise_plane_is_uniform_mid_gray():
    noise = make_noise_plane((50, 40), random.Random(7))
    assert noise.mode == "L"
    assert noise.size == (50, 40)
    assert noise.getextrema() == (112, 143)


def test_noise_plane_is_reproducible_with_seed():
    first = make_noise_plane((16, 16), random.Random(3)).tobytes()
    second = make_noise_plane((16, 16), random.Random(3)).tobytes()
    assert first == second


def test_sharpen_and_reencode_keep_size():
    img = decode_image(make_image_bytes((32, 24)))
    assert sharpen(img).size == (32, 24)
    again = reencode(img)
    assert again.size == (32, 24)
    assert again.mode == "RGB"


def test_modulate_brightens_gray():
    r, g, b = modulate(_flat()).getpixel((5, 5))
    for channel in (r, g, b):
        assert 101 <= channel <= 102


def test_overlay_with_neutral_noise_is_subtle():
    img = _flat(color=(90, 150, 200))
    neutral = Image.new("L", img.size, 128)
    out = overlay_noise(img, neutral)
    diff = ImageChops.difference(img, out)
    assert max(band[1] for band in diff.getextrema()) <= 2


def test_post_process_crops_and_encodes_jpeg():
    asset = post_process(make_image_bytes((64, 96)), 3 / 4, random.Random(1))
    assert (asset.width, asset.height) == (64, 85)
    assert asset.data[:2] == b"\xff\xd8"
    assert Image.open(BytesIO(asset.data)).size == (64, 85)
    assert asset.data_url.startswith("data:image/jpeg;base64,")


def test_post_process_without_ratio_keeps_size():
    asset = post_process(make_image_bytes((30, 20)), None)
    assert (asset.width, asset.height) == (30, 20)
