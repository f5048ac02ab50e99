"""Settings schemas: defaults, models, validators and their errors."""

from codeshot.schemas.defaults import DEFAULT_EXPORT_SETTINGS, DEFAULT_SETTINGS
from codeshot.schemas.errors import FieldIssue, IssueKind, SettingsValidationError
from codeshot.schemas.models import ExportSettings, GradientStop, RenderingSettings
from codeshot.schemas.validator import (
    ExportSettingsValidator,
    RenderingSettingsValidator,
    ValidationResult,
    check_defaults,
    validate_export_settings,
    validate_rendering_settings,
)

__all__ = [
    "DEFAULT_EXPORT_SETTINGS",
    "DEFAULT_SETTINGS",
    "ExportSettings",
    "ExportSettingsValidator",
    "FieldIssue",
    "GradientStop",
    "IssueKind",
    "RenderingSettings",
    "RenderingSettingsValidator",
    "SettingsValidationError",
    "ValidationResult",
    "check_defaults",
    "validate_export_settings",
    "validate_rendering_settings",
]
