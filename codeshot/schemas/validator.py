"""Validate candidate settings objects into frozen models.

Both validators share one routine: run the declared field constraints, turn
every pydantic error into a :class:`FieldIssue`, and report which fields
were absent and therefore defaulted.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, Mapping, TypeVar

from pydantic import BaseModel, Field, ValidationError

from codeshot.registry.base import HighlightRegistry
from codeshot.schemas.defaults import DEFAULT_EXPORT_SETTINGS, DEFAULT_SETTINGS, plain_defaults
from codeshot.schemas.errors import FieldIssue, SettingsValidationError
from codeshot.schemas.models import ExportSettings, RenderingSettings

logger = logging.getLogger(__name__)

SettingsT = TypeVar("SettingsT", RenderingSettings, ExportSettings)


class ValidationResult(BaseModel, Generic[SettingsT]):
    """Outcome of validating one candidate settings object."""

    valid: bool = True
    value: SettingsT | None = None
    issues: list[FieldIssue] = Field(default_factory=list)
    defaulted: list[str] = Field(default_factory=list)
    source: str = ""


class _SettingsValidator(Generic[SettingsT]):
    model: type[SettingsT]
    label: str

    def _context(self) -> dict[str, Any] | None:
        return None

    def validate(
        self, data: Mapping[str, Any] | SettingsT, source: str = "<input>"
    ) -> ValidationResult[SettingsT]:
        """Validate *data*; never raises for bad field values."""
        result_type = ValidationResult[self.model]
        if isinstance(data, BaseModel):
            # instances skip validation otherwise, registry membership included
            data = data.model_dump(by_alias=True, exclude_unset=True)

        try:
            value = self.model.model_validate(data, context=self._context())
        except ValidationError as exc:
            issues = [FieldIssue.from_error(err) for err in exc.errors(include_url=False)]
            logger.debug(
                "%s: rejected %s (%s)",
                source,
                self.label,
                ", ".join(i.field or "<root>" for i in issues),
            )
            return result_type(valid=False, issues=issues, source=source)

        defaulted = [
            field.alias or name
            for name, field in self.model.model_fields.items()
            if name not in value.model_fields_set
        ]
        if defaulted:
            logger.debug("%s: %s defaulted %s", source, self.label, ", ".join(defaulted))
        return result_type(value=value, defaulted=defaulted, source=source)

    def parse(self, data: Mapping[str, Any] | SettingsT, source: str = "<input>") -> SettingsT:
        """Validate *data* and return the model, raising on any issue."""
        result = self.validate(data, source=source)
        if not result.valid:
            raise SettingsValidationError(self.label, result.issues)
        return result.value


class RenderingSettingsValidator(_SettingsValidator[RenderingSettings]):
    """Validates rendering settings against static constraints and a registry.

    The registry is consulted on every call, so swapping the registry's
    contents (e.g. a newly bundled language) needs no code change here.
    """

    model = RenderingSettings
    label = "rendering settings"

    def __init__(self, registry: HighlightRegistry) -> None:
        self.registry = registry

    def _context(self) -> dict[str, Any]:
        return {"registry": self.registry}


class ExportSettingsValidator(_SettingsValidator[ExportSettings]):
    """Validates export settings."""

    model = ExportSettings
    label = "export settings"


def validate_rendering_settings(
    data: Mapping[str, Any] | RenderingSettings, registry: HighlightRegistry
) -> ValidationResult[RenderingSettings]:
    return RenderingSettingsValidator(registry).validate(data)


def validate_export_settings(
    data: Mapping[str, Any] | ExportSettings,
) -> ValidationResult[ExportSettings]:
    return ExportSettingsValidator().validate(data)


def check_defaults(registry: HighlightRegistry) -> list[str]:
    """Return problems with the default tables; an empty list means consistent.

    Checks that every model field has exactly one default entry (and no entry
    lacks a field), and that the defaults pass their own validator.
    """
    problems: list[str] = []
    pairs = (
        (DEFAULT_SETTINGS, RenderingSettingsValidator(registry)),
        (DEFAULT_EXPORT_SETTINGS, ExportSettingsValidator()),
    )
    for table, validator in pairs:
        aliases = {field.alias or name for name, field in validator.model.model_fields.items()}
        for missing in sorted(aliases - table.keys()):
            problems.append(f"{validator.label}: no default for {missing!r}")
        for extra in sorted(table.keys() - aliases):
            problems.append(f"{validator.label}: default {extra!r} has no field")

        result = validator.validate(plain_defaults(table), source="defaults")
        for issue in result.issues:
            problems.append(f"{validator.label}: default {issue.field} invalid: {issue.message}")
    return problems
