"""
Data models and validation

Defines the Pydantic models used to:
- Carry the normalized shoot settings through a request
- Describe what is sent to and received from the image provider
- Shape the JSON responses (camelCase keys on the wire)
"""

import base64
from enum import Enum
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

AspectCode = Literal["11", "34", "45", "169", "916"]
ProviderSize = Literal["1024x1024", "1024x1536", "1536x1024", "auto"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class Intent(str, Enum):
    PLAN = "plan"
    GENERATE = "generate"


class ShootSettings(CamelModel):
    model_config = ConfigDict(frozen=True)

    skincare_mode: bool = False
    film_stock: str
    lighting_preset: str
    camera_model: str
    lens: str
    aperture: str
    iso: int = 200
    white_balance: str
    angle: str
    aspect_code: AspectCode = "11"


class ReferenceFlags(CamelModel):
    model_config = ConfigDict(frozen=True)

    pose_provided: bool = False
    wardrobe_provided: bool = False


class ShootPlan(CamelModel):
    settings: ShootSettings
    summary: str


class Submission(CamelModel):
    selections: Dict[str, Any] = Field(default_factory=dict)
    action: Optional[str] = None
    confirm: bool = False
    references: ReferenceFlags = Field(default_factory=ReferenceFlags)


class GenerationRequest(CamelModel):
    settings: ShootSettings
    prompt: str
    provider_size_hint: ProviderSize = "1024x1024"
    reference_flags: ReferenceFlags = Field(default_factory=ReferenceFlags)


class ProviderImage(BaseModel):
    url: Optional[str] = None
    b64_data: Optional[str] = None


class ProcessedAsset(BaseModel):
    data: bytes
    width: int
    height: int

    @property
    def data_url(self) -> str:
        return "data:image/jpeg;base64," + base64.b64encode(self.data).decode("ascii")


class ExifBlock(CamelModel):
    filename_hint: str
    color_profile: str
    posix_command: str
    windows_command: str
    notes: str


class ShootSheetResponse(CamelModel):
    status: Literal["shoot-sheet"] = "shoot-sheet"
    shoot_sheet: str
    settings: ShootSettings
    message: str


class GenerationResult(CamelModel):
    image_url: str
    filename: str
    caption: str
    exif: Dict[str, Any]
    exif_block: ExifBlock
