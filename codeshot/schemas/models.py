"""Rendering and export settings as frozen pydantic models.

Each field declares its constraint next to its default. Wire names are
camelCase (``lineNumbers``, ``gradientStops``); attributes are snake_case.
Only absent fields fall back to the default: a present value that breaks a
constraint is a validation error.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from codeshot.registry.base import HighlightRegistry, RegistryError
from codeshot.schemas.defaults import (
    DEFAULT_EXPORT_SETTINGS,
    DEFAULT_SETTINGS,
    default_gradient_stops,
)

ALLOWED_SCALES = (2, 4, 6)

Percent = Annotated[StrictFloat, Field(ge=0, le=100, allow_inf_nan=False)]


class _ValueObject(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


def _registry_from(info: ValidationInfo) -> HighlightRegistry:
    registry = (info.context or {}).get("registry")
    if registry is None:
        raise RegistryError(
            "RenderingSettings must be validated with a registry in the context; "
            "use RenderingSettingsValidator"
        )
    return registry


class GradientStop(_ValueObject):
    """One color anchor of a gradient. ``id`` is a UI reconciliation key."""

    id: StrictStr
    color: StrictStr
    alpha: Percent
    position: Percent


class RenderingSettings(_ValueObject):
    """How a code snippet is drawn."""

    dark: StrictBool = DEFAULT_SETTINGS["dark"]
    padding: StrictInt = Field(
        default=DEFAULT_SETTINGS["padding"], ge=0, le=128, multiple_of=4
    )
    glass: StrictBool = DEFAULT_SETTINGS["glass"]
    line_numbers: StrictBool = DEFAULT_SETTINGS["lineNumbers"]
    # None means auto width
    width: Annotated[StrictInt, Field(ge=540, le=1080)] | None = DEFAULT_SETTINGS["width"]
    language: StrictStr = DEFAULT_SETTINGS["language"]
    theme: StrictStr = DEFAULT_SETTINGS["theme"]
    background: Literal["solid", "gradient", "none"] = DEFAULT_SETTINGS["background"]
    # Only drawn when background == "solid"
    background_color: StrictStr = DEFAULT_SETTINGS["backgroundColor"]
    background_opacity: StrictInt = Field(
        default=DEFAULT_SETTINGS["backgroundOpacity"], ge=0, le=100
    )
    # Only drawn when background == "gradient"
    gradient_type: Literal["linear", "radial"] = DEFAULT_SETTINGS["gradientType"]
    gradient_angle: StrictInt = Field(default=DEFAULT_SETTINGS["gradientAngle"], ge=0, le=360)
    gradient_stops: tuple[GradientStop, ...] = Field(
        default_factory=lambda: tuple(GradientStop(**s) for s in default_gradient_stops()),
        min_length=2,
    )

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str, info: ValidationInfo) -> str:
        if not _registry_from(info).has_language(v):
            raise PydanticCustomError(
                "not_in_registry", "Unknown language '{language}'", {"language": v}
            )
        return v

    @field_validator("theme")
    @classmethod
    def validate_theme(cls, v: str, info: ValidationInfo) -> str:
        if not _registry_from(info).has_theme(v):
            raise PydanticCustomError("not_in_registry", "Unknown theme '{theme}'", {"theme": v})
        return v

    @field_validator("gradient_stops")
    @classmethod
    def validate_unique_stop_ids(cls, v: tuple[GradientStop, ...]) -> tuple[GradientStop, ...]:
        seen: set[str] = set()
        dupes: list[str] = []
        for stop in v:
            if stop.id in seen and stop.id not in dupes:
                dupes.append(stop.id)
            seen.add(stop.id)
        if dupes:
            raise PydanticCustomError(
                "duplicate_id",
                "Gradient stop ids must be unique, repeated: {ids}",
                {"ids": ", ".join(dupes)},
            )
        return v


class ExportSettings(_ValueObject):
    """How the rendered image is produced and delivered."""

    format: Literal["png", "svg", "jpeg"] = DEFAULT_EXPORT_SETTINGS["format"]
    # Multiplier on the base render size
    scale: StrictInt = DEFAULT_EXPORT_SETTINGS["scale"]
    destination: Literal["download", "open", "both"] = DEFAULT_EXPORT_SETTINGS["destination"]
    # Only used when format == "jpeg"
    jpeg_quality: StrictFloat = Field(
        default=DEFAULT_EXPORT_SETTINGS["jpegQuality"], ge=0.1, le=1.0, allow_inf_nan=False
    )

    @field_validator("scale")
    @classmethod
    def validate_scale(cls, v: int) -> int:
        if v not in ALLOWED_SCALES:
            raise PydanticCustomError(
                "literal_error", "Input should be 2, 4 or 6", {"expected": "2, 4 or 6"}
            )
        return v
