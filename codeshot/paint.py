"""Turn validated rendering settings into drawable background paint.

This is the renderer-facing side of :mod:`codeshot.color`: it decides which
color fields matter for the current background mode and normalizes them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from codeshot.color import color_with_opacity
from codeshot.schemas.models import RenderingSettings

TRANSPARENT = "transparent"


@dataclass(frozen=True)
class PaintStop:
    color: str
    position: float


@dataclass(frozen=True)
class BackgroundPaint:
    """Resolved background: a flat color, a gradient, or nothing."""

    kind: Literal["solid", "gradient", "none"]
    color: str = TRANSPARENT
    gradient_type: Literal["linear", "radial"] | None = None
    angle: int | None = None
    stops: tuple[PaintStop, ...] = ()

    def css(self) -> str:
        """CSS ``background`` value for this paint."""
        if self.kind != "gradient":
            return self.color
        stops = ", ".join(f"{s.color} {_fmt_number(s.position)}%" for s in self.stops)
        if self.gradient_type == "radial":
            return f"radial-gradient(circle, {stops})"
        return f"linear-gradient({self.angle}deg, {stops})"


def _fmt_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def resolve_background(settings: RenderingSettings) -> BackgroundPaint:
    """Resolve the background of *settings* into normalized colors.

    Gradient stops are sorted by position here since the validator keeps
    them in input order.
    """
    if settings.background == "none":
        return BackgroundPaint(kind="none")

    if settings.background == "solid":
        return BackgroundPaint(
            kind="solid",
            color=color_with_opacity(settings.background_color, settings.background_opacity / 100),
        )

    stops = tuple(
        PaintStop(color=color_with_opacity(s.color, s.alpha / 100), position=s.position)
        for s in sorted(settings.gradient_stops, key=lambda s: s.position)
    )
    return BackgroundPaint(
        kind="gradient",
        gradient_type=settings.gradient_type,
        angle=settings.gradient_angle if settings.gradient_type == "linear" else None,
        stops=stops,
    )
