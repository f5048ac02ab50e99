"""Structured, field-addressable validation failures."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic_core import ErrorDetails


class IssueKind(str, Enum):
    """Nature of a field violation."""

    out_of_range = "out_of_range"
    wrong_step = "wrong_step"
    not_in_registry = "not_in_registry"
    wrong_enum_value = "wrong_enum_value"
    wrong_type = "wrong_type"
    too_short = "too_short"
    duplicate_id = "duplicate_id"
    invalid = "invalid"


# pydantic-core error types -> IssueKind. Anything ending in "_type" is a type mismatch.
_KIND_BY_ERROR_TYPE: dict[str, IssueKind] = {
    "greater_than": IssueKind.out_of_range,
    "greater_than_equal": IssueKind.out_of_range,
    "less_than": IssueKind.out_of_range,
    "less_than_equal": IssueKind.out_of_range,
    "multiple_of": IssueKind.wrong_step,
    "literal_error": IssueKind.wrong_enum_value,
    "enum": IssueKind.wrong_enum_value,
    "too_short": IssueKind.too_short,
    "not_in_registry": IssueKind.not_in_registry,
    "duplicate_id": IssueKind.duplicate_id,
    "finite_number": IssueKind.invalid,
}


class FieldIssue(BaseModel):
    """One offending field: where, what kind of violation, and the bad value."""

    model_config = ConfigDict(frozen=True)

    loc: tuple[str | int, ...]
    kind: IssueKind
    message: str
    value: Any = None

    @property
    def field(self) -> str:
        """Dotted path, e.g. ``gradientStops.0.alpha``."""
        return ".".join(str(part) for part in self.loc)

    @classmethod
    def from_error(cls, error: ErrorDetails) -> FieldIssue:
        error_type = error["type"]
        kind = _KIND_BY_ERROR_TYPE.get(error_type)
        if kind is None:
            kind = IssueKind.wrong_type if error_type.endswith("_type") else IssueKind.invalid
        return cls(
            loc=tuple(error["loc"]),
            kind=kind,
            message=error["msg"],
            value=error.get("input"),
        )


class SettingsValidationError(ValueError):
    """Raised when a candidate settings object has present-but-invalid fields."""

    def __init__(self, model: str, issues: list[FieldIssue]) -> None:
        self.model = model
        self.issues = issues
        details = "; ".join(f"{i.field or '<root>'}: {i.message}" for i in issues)
        super().__init__(f"Invalid {model} ({len(issues)} issue(s)): {details}")

    @property
    def fields(self) -> list[str]:
        return [issue.field for issue in self.issues]
