"""
Shoot plan services

Turns the flat selection map posted by the form into normalized
``ShootSettings`` plus the human readable "Shoot Sheet" the user reviews
before confirming a generation.

Responsibilities:
- Fill every camera/lighting/film setting with its documented default
- Parse aspect ratio labels into a numeric ratio and a short code
- Map aspect ratio labels to the sizes the image provider supports
"""

from typing import Any, Mapping, NamedTuple

from shootdesk.schemas import ReferenceFlags, ShootPlan, ShootSettings

DEFAULT_ISO = 200
DEFAULT_CAMERA = "Canon EOS R5"
DEFAULT_ANGLE = "3Quarter"

# (skincare, regular)
SKINCARE_DEFAULTS = {
    "film_stock": ("Fujifilm Pro 400H", "Kodak Portra 400"),
    "lens": ("100mm Macro f/2.8", "85mm f/1.4"),
    "aperture": ("f/4", "f/2.0"),
    "white_balance": ("5200K", "5300K"),
}

CALL_TO_ACTION = (
    "Upload one pose reference (for body orientation) and an optional wardrobe "
    "reference (for fabric/texture cues).\n"
    'Reply: "Looks good — generate image" to proceed.'
)


class AspectSpec(NamedTuple):
    ratio: float
    code: str


# Checked in order; the first substring found wins.
ASPECT_PATTERNS = (
    ("9:16", AspectSpec(9 / 16, "916")),
    ("16:9", AspectSpec(16 / 9, "169")),
    ("4:5", AspectSpec(4 / 5, "45")),
    ("3:4", AspectSpec(3 / 4, "34")),
    ("1:1", AspectSpec(1.0, "11")),
)
SQUARE = AspectSpec(1.0, "11")

PROVIDER_SIZES = (
    (("9:16", "vertical"), "auto"),
    (("16:9", "landscape"), "1536x1024"),
    (("3:4", "portrait"), "1024x1536"),
    (("4:5",), "auto"),
)
DEFAULT_PROVIDER_SIZE = "1024x1024"


def parse_aspect(label: Any) -> AspectSpec:
    """Return the ratio and aspect code for a label such as ``"3:4 (Portrait)"``."""
    text = str(label or "").lower()
    for pattern, spec in ASPECT_PATTERNS:
        if pattern in text:
            return spec
    return SQUARE


def map_provider_size(label: Any) -> str:
    """Nearest size the provider can render; ``auto`` sizes are cropped afterwards."""
    text = str(label or "").lower()
    for patterns, size in PROVIDER_SIZES:
        if any(p in text for p in patterns):
            return size
    return DEFAULT_PROVIDER_SIZE


def is_skincare(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return isinstance(value, str) and value.strip().lower() in ("on", "true")


def _parse_iso(value: Any) -> int:
    if isinstance(value, bool):
        return DEFAULT_ISO
    if isinstance(value, int) and value > 0:
        return value
    if isinstance(value, str) and value.strip().isdecimal():
        try:
            iso = int(value)
        except ValueError:
            return DEFAULT_ISO
        if iso > 0:
            return iso
    return DEFAULT_ISO


def f_number(aperture: str) -> str:
    """``"f/2.8"`` -> ``"2.8"``"""
    if aperture.lower().startswith("f/"):
        return aperture[2:]
    return aperture


def pick_text(selections: Mapping[str, Any], key: str, default: str) -> str:
    value = selections.get(key)
    return str(value) if value else default


def build_settings(selections: Mapping[str, Any]) -> ShootSettings:
    skincare = is_skincare(selections.get("skincareMode", False))
    branch = 0 if skincare else 1

    if selections.get("lightingPreset"):
        lighting = str(selections["lightingPreset"])
    elif skincare:
        lighting = "Soft Pearl Light"
    else:
        lighting = pick_text(selections, "lightingMood", "Studio Edge Light")

    return ShootSettings(
        skincare_mode=skincare,
        film_stock=pick_text(selections, "filmStock", SKINCARE_DEFAULTS["film_stock"][branch]),
        lighting_preset=lighting,
        camera_model=pick_text(selections, "cameras", DEFAULT_CAMERA),
        lens=pick_text(selections, "lenses", SKINCARE_DEFAULTS["lens"][branch]),
        aperture=pick_text(selections, "fStops", SKINCARE_DEFAULTS["aperture"][branch]),
        iso=_parse_iso(selections.get("iso")),
        white_balance=pick_text(
            selections, "whiteBalance", SKINCARE_DEFAULTS["white_balance"][branch]
        ),
        angle=pick_text(selections, "angle", DEFAULT_ANGLE),
        aspect_code=parse_aspect(selections.get("aspectRatio")).code,
    )


def _yes_no(flag: bool) -> str:
    return "YES" if flag else "NO"


def render_summary(
    settings: ShootSettings,
    selections: Mapping[str, Any],
    references: ReferenceFlags,
) -> str:
    s = selections
    hair = s.get("hair") if isinstance(s.get("hair"), Mapping) else {}
    lines = [
        "Shoot Sheet",
        f"- Models: {pick_text(s, 'models', '1 female')} — "
        f"Ethnicity: {pick_text(s, 'ethnicities', 'any')} — "
        f"Age: {pick_text(s, 'ageGroups', '25–30')}",
        f"- Makeup: face {pick_text(s, 'makeupFace', 'natural')}; "
        f"eyes {pick_text(s, 'makeupEyes', 'defined')}; "
        f"lips {pick_text(s, 'makeupLips', 'soft')}",
        f"- Hair: {pick_text(hair, 'colors', 'medium brown')}; "
        f"style {pick_text(s, 'hairStyles', 'loose waves')}; "
        f"motion {pick_text(s, 'hairMotion', 'subtle')}",
        f"- Camera: {settings.camera_model}; Lens: {settings.lens}; "
        f"Aperture: {settings.aperture}",
        f"- Backdrop: {pick_text(s, 'backdrop', 'soft gradient backdrop in neutral tones')}; "
        f"Framing: {pick_text(s, 'framing', 'beauty close-up')}; Angle: {settings.angle}",
        f"- Lighting: {settings.lighting_preset}; "
        f"Pose: {pick_text(s, 'pose', 'editorial relaxed')}",
        f"- Environment: {pick_text(s, 'environment', 'minimal studio set')}",
        f"- Skincare Focus Mode: {'ON' if settings.skincare_mode else 'OFF'}; "
        f"Film Stock: {settings.film_stock}",
        f"- Aspect Ratio: {pick_text(s, 'aspectRatio', '1:1')} (code {settings.aspect_code})",
        f"- References: Pose {_yes_no(references.pose_provided)}, "
        f"Wardrobe {_yes_no(references.wardrobe_provided)}",
    ]
    return "\n".join(lines) + "\n\n" + CALL_TO_ACTION


def build_shoot_plan(
    selections: Mapping[str, Any],
    references: ReferenceFlags = ReferenceFlags(),
) -> ShootPlan:
    settings = build_settings(selections)
    return ShootPlan(
        settings=settings,
        summary=render_summary(settings, selections, references),
    )
