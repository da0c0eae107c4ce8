from datetime import date

import pytest

from shootdesk.services.metadata import (
    build_caption,
    build_exif,
    build_exif_block,
    build_filename,
    sanitize_name,
)
from shootdesk.services.shoot_plan import build_settings


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Kodak Portra 400", "KodakPortra400"),
        ("Soft Pearl Light", "SoftPearlLight"),
        ("¾ view — côté", "viewct"),
        ("A very long lighting preset name", "Averylonglightingpre"),
        ("!!! ---", "Generic"),
        ("", "Generic"),
        (None, "Generic"),
    ],
)
def test_sanitize_name(value, expected):
    assert sanitize_name(value) == expected


def test_sanitize_name_truncates_to_twenty():
    assert len(sanitize_name("x" * 50)) == 20


def test_build_filename():
    settings = build_settings({"skincareMode": True, "aspectRatio": "3:4 (Portrait)"})
    assert (
        build_filename(settings, date(2024, 3, 9))
        == "FASHION_FujifilmPro400H_SoftPearlLight_3Quarter_34_2024-03-09.jpg"
    )


def test_build_filename_defaults_to_today():
    filename = build_filename(build_settings({}))
    assert filename.endswith(f"_11_{date.today().isoformat()}.jpg")


def test_caption_known_presets():
    assert build_caption("Window Glow", "Ilford Delta 100") == (
        "cool window glow carves delicate shadows, in crisp monochrome with silken grain."
    )


def test_caption_falls_back_per_table():
    assert build_caption("Unknown", "Kodak Ektar 100") == (
        "balanced studio light reveals natural texture, "
        "with vivid Ektar color and fine grain."
    )
    assert build_caption("Golden Hour Fade", "Expired roll").endswith(
        "with a gentle filmic grain."
    )


def test_build_exif():
    settings = build_settings({})
    exif = build_exif(settings, "", "shot.jpg")
    assert exif["Camera"] == "Canon EOS R5"
    assert exif["Aperture"] == "f/2.0"
    assert exif["ISO"] == 200
    assert exif["AspectRatio"] == "1:1"
    assert exif["ColorProfile"] == "sRGB IEC61966-2.1"
    assert exif["Filename"] == "shot.jpg"


def test_exif_block_commands():
    settings = build_settings({"skincareMode": True})
    block = build_exif_block(settings, "shot.jpg", "a caption.")
    assert block.filename_hint == "shot.jpg"
    assert block.color_profile == "sRGB IEC61966-2.1"
    assert block.notes

    posix = block.posix_command.splitlines()
    assert posix[0] == "exiftool \\"
    assert '  -LensModel="100mm Macro f/2.8" \\' in posix
    assert "  -FNumber=4 \\" in posix
    assert '  -WhiteBalance="Daylight (5200K)" \\' in posix
    assert posix[-1] == '  "shot.jpg"'

    windows = block.windows_command.splitlines()
    assert windows[0] == "exiftool.exe ^"
    assert " -ISO=200 ^" in windows
    assert ' -ImageDescription="Fujifilm Pro 400H simulation | a caption." ^' in windows
    assert windows[-1] == ' "shot.jpg"'


def test_exif_block_serializes_camel_case():
    block = build_exif_block(build_settings({}), "shot.jpg", "c.")
    assert set(block.to_json()) == {
        "filenameHint",
        "colorProfile",
        "posixCommand",
        "windowsCommand",
        "notes",
    }
