"""
Prompt composition for the image provider.

The prompt is plain text assembled in a fixed order: studio standards,
realism directives, the reference document excerpt, the shoot settings, the
free-text selections and finally the guidance derived from the reference
attachments.
"""

from enum import Enum
from typing import Any, Mapping

from shootdesk.config import REFERENCE_EXCERPT_LIMIT
from shootdesk.schemas import ReferenceFlags, ShootSettings
from shootdesk.services.shoot_plan import f_number, pick_text

SYSTEM_STANDARDS = """\
You are a professional AI image-generation assistant specialized in ultra-realistic fashion/skincare portraits.
Render as high-end DSLR/medium-format photography with editorial realism and optical imperfections.
Follow the reference framework (Studio_Full_Instructions). Key sections: Skin realism, Eye behavior, Optical depth, Lighting presets, Skincare Focus Mode, Film Stock simulation, Pose and Wardrobe cue handling, Artifact correction."""

REALISM_DIRECTIVES = """\
Core Standards (from Studio_Full_Instructions):
- Preserve pores, subtle blemishes, and natural tone variation; avoid plastic smoothing.
- Eyes must be expressive, iris in sharp focus with catchlights matching key light.
- Lighting includes real imperfections: edge glare, slight color temp offsets, uneven shadows.
- Hair edges stay soft with realistic stray strands and gentle depth falloff.
- Never imitate real people; outputs must be brand-safe and human-realistic."""

CLOSING_LINE = (
    "The resulting image must maintain visible optical imperfections and "
    "realistic photographic texture."
)


class VisualGuidance(Enum):
    BOTH = (
        "Use the body composition and posture from the Pose Reference image, "
        "and adopt wardrobe texture and silhouette cues from the Wardrobe "
        "Reference image."
    )
    POSE = "Use the body posture and head orientation from the Pose Reference image."
    WARDROBE = (
        "Incorporate wardrobe silhouette, color, and fabric cues from the "
        "Wardrobe Reference image."
    )
    NONE = ""

    @classmethod
    def from_flags(cls, references: ReferenceFlags) -> "VisualGuidance":
        return {
            (True, True): cls.BOTH,
            (True, False): cls.POSE,
            (False, True): cls.WARDROBE,
            (False, False): cls.NONE,
        }[(references.pose_provided, references.wardrobe_provided)]

    @property
    def sentence(self) -> str:
        return self.value


def describe_hair(selections: Mapping[str, Any]) -> str:
    hair = selections.get("hair")
    if not isinstance(hair, Mapping):
        hair = {}
    streaks = hair.get("streaks")
    streak_text = f" with {str(streaks).lower()}" if streaks and streaks != "None" else ""
    return (
        f"Hair should appear as {pick_text(hair, 'colors', 'medium brown')}{streak_text}, "
        f"styled in a {pick_text(selections, 'hairStyles', 'loose waves')} look with "
        f"{pick_text(selections, 'hairFinish', 'natural texture')}.\n"
        f"Include realistic flyaways and {pick_text(selections, 'hairMotion', 'subtle movement')}.\n"
        "The hair color and streaks must match the exact tone description; "
        "do not reinterpret hue."
    )


def compose_prompt(
    settings: ShootSettings,
    selections: Mapping[str, Any],
    references: ReferenceFlags,
    reference_excerpt: str = "",
) -> str:
    s = selections

    sections = [
        SYSTEM_STANDARDS,
        REALISM_DIRECTIVES,
        "Reference framework excerpt:\n" + reference_excerpt[:REFERENCE_EXCERPT_LIMIT],
        f"Skincare Focus Mode: {'ON' if settings.skincare_mode else 'OFF'}.\n"
        f"Film Stock Simulation: {settings.film_stock}.",
        f"Model: {pick_text(s, 'models', 'female')} ({pick_text(s, 'ethnicities', 'any')}, "
        f"age {pick_text(s, 'ageGroups', '25–30')}).\n" + describe_hair(s),
        "\n".join(
            [
                f"Makeup: {pick_text(s, 'makeupFace', 'natural')}, "
                f"eyes: {pick_text(s, 'makeupEyes', 'defined')}, "
                f"lips: {pick_text(s, 'makeupLips', 'soft')}.",
                f"Wardrobe: {pick_text(s, 'wardrobeStyles', 'minimalist 90s')}, "
                f"{pick_text(s, 'wardrobeTextures', 'satin / silk sheen')}.",
                f"Lighting Preset: {settings.lighting_preset}, "
                f"tone: {pick_text(s, 'toneStyle', 'cinematic')}.",
                f"Camera: {settings.camera_model} with {settings.lens} at f/{f_number(settings.aperture)}.",
                f"White Balance: {settings.white_balance}; ISO: {settings.iso}.",
                f"Angle: {settings.angle}; "
                f"Backdrop: {pick_text(s, 'backdrop', 'soft gradient, neutral')}.",
                f"Aspect target: {pick_text(s, 'aspectRatio', '1:1')}.",
            ]
        ),
        VisualGuidance.from_flags(references).sentence,
        CLOSING_LINE,
    ]
    return "\n\n".join(sections)
