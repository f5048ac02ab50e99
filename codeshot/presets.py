"""Preset files and share tokens.

A preset bundles rendering and export settings. On disk it is YAML or JSON
with optional ``settings`` and ``export`` sections in wire (camelCase) form;
in a share link it is compact JSON encoded as URL-safe base64.
"""

from __future__ import annotations

import base64
import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

from codeshot.registry.base import HighlightRegistry
from codeshot.schemas.models import ExportSettings, RenderingSettings
from codeshot.schemas.validator import ExportSettingsValidator, RenderingSettingsValidator

logger = logging.getLogger(__name__)

_JSON_SUFFIXES = {".json"}
_SUFFIX_BY_FORMAT = {"yaml": ".yaml", "json": ".json"}
_PRESET_SUFFIXES = (".yaml", ".yml", ".json")


class Preset(BaseModel):
    """Validated rendering + export settings pair."""

    model_config = ConfigDict(frozen=True)

    settings: RenderingSettings = Field(default_factory=RenderingSettings)
    export: ExportSettings = Field(default_factory=ExportSettings)

    def to_wire(self) -> dict[str, Any]:
        return {
            "settings": self.settings.model_dump(mode="json", by_alias=True),
            "export": self.export.model_dump(mode="json", by_alias=True),
        }


def preset_section(data: dict[str, Any], key: str) -> Any:
    # A missing or empty (null) section means all defaults
    value = data.get(key)
    return {} if value is None else value


def preset_from_data(data: Any, registry: HighlightRegistry, source: str = "<input>") -> Preset:
    """Validate a decoded preset mapping.

    Raises ``ValueError`` if *data* is not a mapping and
    :class:`SettingsValidationError` if a section is invalid.
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Preset {source} must be a mapping, got {type(data).__name__}")

    settings = RenderingSettingsValidator(registry).parse(
        preset_section(data, "settings"), source=f"{source}:settings"
    )
    export = ExportSettingsValidator().parse(preset_section(data, "export"), source=f"{source}:export")
    return Preset(settings=settings, export=export)


def read_preset_data(path: str | Path) -> Any:
    """Parse a preset file without validating it."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix in _JSON_SUFFIXES:
            return json.loads(text)
        return yaml.safe_load(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e


def load_preset(path: str | Path, registry: HighlightRegistry) -> Preset:
    """Load and validate a preset file."""
    path = Path(path)
    preset = preset_from_data(read_preset_data(path), registry, source=str(path))
    logger.info("Loaded preset %s", path)
    return preset


def resolve_preset_path(name: str | Path, directory: str | Path, default_format: str = "yaml") -> Path:
    """Map a bare preset name to a file in the presets *directory*.

    Existing files and names with a suffix or a directory part are returned
    as given. For a bare name the *default_format* suffix is tried first,
    then the other preset suffixes; if none exists the result is the
    *default_format* file, so it can be used as a save target.
    """
    path = Path(name)
    if path.exists() or path.suffix or len(path.parts) > 1:
        return path

    preferred = _SUFFIX_BY_FORMAT[default_format]
    for suffix in (preferred, *(s for s in _PRESET_SUFFIXES if s != preferred)):
        candidate = Path(directory) / f"{path.name}{suffix}"
        if candidate.exists():
            return candidate
    return Path(directory) / f"{path.name}{preferred}"


def dump_preset(preset: Preset, path: str | Path, default_format: str = "yaml") -> Path:
    """Write *preset* as JSON or YAML depending on the file suffix.

    A path without a suffix gets the one for *default_format*.
    """
    path = Path(path)
    if not path.suffix:
        path = path.with_suffix(_SUFFIX_BY_FORMAT[default_format])
    path.parent.mkdir(parents=True, exist_ok=True)
    wire = preset.to_wire()
    if path.suffix in _JSON_SUFFIXES:
        path.write_text(json.dumps(wire, indent=2) + "\n", encoding="utf-8")
    else:
        path.write_text(yaml.safe_dump(wire, sort_keys=False), encoding="utf-8")
    return path


def encode_share_token(preset: Preset) -> str:
    """Encode *preset* for a share link (padding stripped)."""
    raw = json.dumps(preset.to_wire(), separators=(",", ":")).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def decode_share_token(token: str, registry: HighlightRegistry) -> Preset:
    """Decode and validate a share token produced by :func:`encode_share_token`."""
    padded = token.strip() + "=" * (-len(token.strip()) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded.encode("ascii"))
        data = json.loads(raw.decode("utf-8"))
    except ValueError as e:
        raise ValueError(f"Malformed share token: {e}") from e
    return preset_from_data(data, registry, source="share-token")
