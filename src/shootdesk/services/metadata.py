"""
Cosmetic metadata for a generated image: download filename, editorial
caption and a descriptive EXIF block with ready-to-run ``exiftool``
commands. Nothing here is embedded in the image itself.
"""

import re
from datetime import date
from typing import Optional

from shootdesk.schemas import ExifBlock, ShootSettings
from shootdesk.services.shoot_plan import f_number

COLOR_PROFILE = "sRGB IEC61966-2.1"
SHUTTER = "1/250"
ARTIST = "Photo Model Render"
EXIF_NOTES = "For PNG, EXIF is stored as XMP + ICC; use JPEG for native EXIF."
NAME_LIMIT = 20

LIGHTING_PHRASES = {
    "Soft Pearl Light": "soft pearl light wraps the face with gentle gradients",
    "Window Glow": "cool window glow carves delicate shadows",
    "Studio Edge Light": "rim-lit edges add a clean studio bite",
    "Golden Hour Fade": "warm dusk tones drift across the skin",
    "High-Key Clarity": "bright high-key sheen reveals honest texture",
    "Cinematic Contrast": "rich shadow depth sculpts an editorial profile",
}
DEFAULT_LIGHTING_PHRASE = "balanced studio light reveals natural texture"

FILM_PHRASES = {
    "Kodak Portra 400": "with a Portra warmth and pastel rolloff",
    "Fujifilm Pro 400H": "with cool, clean whites in a 400H palette",
    "Kodak Ektar 100": "with vivid Ektar color and fine grain",
    "Ilford Delta 100": "in crisp monochrome with silken grain",
    "CineStill 800T": "with cinematic tungsten balance and soft halation",
}
DEFAULT_FILM_PHRASE = "with a gentle filmic grain"

_NOT_ALNUM = re.compile(r"[^A-Za-z0-9]+")


def sanitize_name(value) -> str:
    cleaned = _NOT_ALNUM.sub("", str(value or ""))[:NAME_LIMIT]
    return cleaned or "Generic"


def build_filename(settings: ShootSettings, today: Optional[date] = None) -> str:
    today = today or date.today()
    parts = [
        "FASHION",
        sanitize_name(settings.film_stock),
        sanitize_name(settings.lighting_preset),
        sanitize_name(settings.angle),
        settings.aspect_code,
        today.isoformat(),
    ]
    return "_".join(parts) + ".jpg"


def build_caption(lighting: str, film: str) -> str:
    light_phrase = LIGHTING_PHRASES.get(lighting, DEFAULT_LIGHTING_PHRASE)
    film_phrase = FILM_PHRASES.get(film, DEFAULT_FILM_PHRASE)
    return f"{light_phrase}, {film_phrase}."


def build_exif(settings: ShootSettings, aspect_label: str, filename: str) -> dict:
    return {
        "Camera": settings.camera_model,
        "Lens": settings.lens,
        "Aperture": f"f/{f_number(settings.aperture)}",
        "ISO": settings.iso,
        "Lighting": settings.lighting_preset,
        "FilmStock": settings.film_stock,
        "WhiteBalance": settings.white_balance,
        "AspectRatio": aspect_label or "1:1",
        "Angle": settings.angle,
        "Filename": filename,
        "ColorProfile": COLOR_PROFILE,
        "Shutter": SHUTTER,
        "ExposureMode": "Manual",
    }


def _exiftool_args(settings: ShootSettings, caption: str, date_expr: str, year_expr: str):
    return [
        "-overwrite_original",
        '-Make="Canon"',
        '-Model="EOS R5"',
        f'-LensModel="{settings.lens}"',
        f"-FNumber={f_number(settings.aperture)}",
        f"-ExposureTime={SHUTTER}",
        f"-ISO={settings.iso}",
        '-ExposureProgram="Manual"',
        f'-WhiteBalance="Daylight ({settings.white_balance})"',
        '-ColorSpace="sRGB"',
        f'-ProfileDescription="{COLOR_PROFILE}"',
        f'-DateTimeOriginal="{date_expr}"',
        f'-Artist="{ARTIST}"',
        f'-Copyright="© {year_expr} {ARTIST}"',
        f'-ImageDescription="{settings.film_stock} simulation | {caption}"',
    ]


def posix_command(settings: ShootSettings, filename: str, caption: str) -> str:
    args = _exiftool_args(
        settings, caption, "$(date '+%Y:%m:%d %H:%M:%S')", "$(date +%Y)"
    )
    lines = ["exiftool \\"] + [f"  {arg} \\" for arg in args] + [f'  "{filename}"']
    return "\n".join(lines)


def windows_command(settings: ShootSettings, filename: str, caption: str) -> str:
    args = _exiftool_args(
        settings,
        caption,
        "%DATE:~10,4%:%DATE:~4,2%:%DATE:~7,2% %TIME:~0,8%",
        "%DATE:~10,4%",
    )
    lines = ["exiftool.exe ^"] + [f" {arg} ^" for arg in args] + [f' "{filename}"']
    return "\n".join(lines)


def build_exif_block(settings: ShootSettings, filename: str, caption: str) -> ExifBlock:
    return ExifBlock(
        filename_hint=filename,
        color_profile=COLOR_PROFILE,
        posix_command=posix_command(settings, filename, caption),
        windows_command=windows_command(settings, filename, caption),
        notes=EXIF_NOTES,
    )
