"""Canonical default values for rendering and export settings.

Keys use the wire (camelCase) names so the tables can be dumped straight into
a preset file or compared against ``model_dump(by_alias=True)``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

DEFAULT_SETTINGS: Mapping[str, Any] = MappingProxyType({
    "dark": True,
    "padding": 64,
    "glass": True,
    "lineNumbers": False,
    "width": None,
    "language": "typescript",
    "theme": "github-dark",
    "background": "gradient",
    "backgroundColor": "#020024",
    "backgroundOpacity": 100,
    "gradientType": "linear",
    "gradientAngle": 90,
    "gradientStops": (
        MappingProxyType({"id": "s1", "color": "#00C499", "alpha": 100, "position": 0}),
        MappingProxyType({"id": "s2", "color": "#00D4FF", "alpha": 100, "position": 100}),
    ),
})

DEFAULT_EXPORT_SETTINGS: Mapping[str, Any] = MappingProxyType({
    "format": "png",
    "scale": 2,
    "destination": "download",
    "jpegQuality": 0.92,
})


def default_gradient_stops() -> list[dict[str, Any]]:
    """Fresh, mutable copy of the default gradient stops."""
    return [dict(stop) for stop in DEFAULT_SETTINGS["gradientStops"]]


def plain_defaults(table: Mapping[str, Any]) -> dict[str, Any]:
    """Unfreeze a defaults table into plain dicts and lists (for YAML/JSON dumps)."""
    out: dict[str, Any] = {}
    for key, value in table.items():
        if isinstance(value, tuple):
            out[key] = [dict(item) for item in value]
        else:
            out[key] = value
    return out
