"""codeshot - validation and normalization of code-screenshot settings."""

from codeshot.color import color_with_opacity, hex_to_rgba
from codeshot.config import CodeshotConfig, load_config
from codeshot.paint import BackgroundPaint, resolve_background
from codeshot.presets import Preset, decode_share_token, encode_share_token, load_preset
from codeshot.registry import HighlightRegistry, StaticRegistry, create_registry
from codeshot.schemas import (
    DEFAULT_EXPORT_SETTINGS,
    DEFAULT_SETTINGS,
    ExportSettings,
    ExportSettingsValidator,
    RenderingSettings,
    RenderingSettingsValidator,
    SettingsValidationError,
)

__version__ = "0.1.0"

__all__ = [
    "BackgroundPaint",
    "CodeshotConfig",
    "DEFAULT_EXPORT_SETTINGS",
    "DEFAULT_SETTINGS",
    "ExportSettings",
    "ExportSettingsValidator",
    "HighlightRegistry",
    "Preset",
    "RenderingSettings",
    "RenderingSettingsValidator",
    "SettingsValidationError",
    "StaticRegistry",
    "color_with_opacity",
    "create_registry",
    "decode_share_token",
    "encode_share_token",
    "hex_to_rgba",
    "load_config",
    "load_preset",
    "resolve_background",
]
