"""Highlighting registry interface and the in-memory implementation."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Protocol, runtime_checkable

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


class RegistryError(Exception):
    """Raised when a registry cannot be built or the provider is unknown."""


class LanguageInfo(BaseModel):
    """A highlightable language: canonical id plus accepted aliases."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = ""
    aliases: tuple[str, ...] = ()

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("id cannot be empty or whitespace")
        return v


class ThemeInfo(BaseModel):
    """A highlighting theme identified by id."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = ""
    type: str | None = None


@runtime_checkable
class HighlightRegistry(Protocol):
    """Read-only source of valid language and theme identifiers."""

    def languages(self) -> Iterable[LanguageInfo]: ...

    def themes(self) -> Iterable[ThemeInfo]: ...

    def has_language(self, identifier: str) -> bool: ...

    def has_theme(self, identifier: str) -> bool: ...


class StaticRegistry:
    """Registry over a fixed list of languages and themes.

    Identifier sets are computed once and frozen, so an instance can be shared
    freely between validators and threads.
    """

    def __init__(
        self,
        languages: Iterable[LanguageInfo],
        themes: Iterable[ThemeInfo],
    ) -> None:
        self._languages = tuple(languages)
        self._themes = tuple(themes)
        self._language_ids = frozenset(
            ident for lang in self._languages for ident in (lang.id, *lang.aliases)
        )
        self._theme_ids = frozenset(t.id for t in self._themes)

    @classmethod
    def from_ids(
        cls,
        languages: dict[str, Iterable[str]] | Iterable[str],
        themes: Iterable[str],
    ) -> StaticRegistry:
        """Build from bare ids; *languages* may map id -> aliases."""
        if isinstance(languages, dict):
            langs = [LanguageInfo(id=k, aliases=tuple(v)) for k, v in languages.items()]
        else:
            langs = [LanguageInfo(id=k) for k in languages]
        return cls(langs, [ThemeInfo(id=t) for t in themes])

    @classmethod
    def from_file(cls, path: str | Path) -> StaticRegistry:
        """Load a YAML or JSON catalog with ``languages`` and ``themes`` lists."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise RegistryError(f"Cannot read registry catalog {path}: {e}") from e

        try:
            raw = json.loads(text) if path.suffix == ".json" else yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise RegistryError(f"Invalid registry catalog {path}: {e}") from e

        if not isinstance(raw, dict):
            raise RegistryError(f"Registry catalog {path} must be a mapping")

        try:
            langs = [LanguageInfo(**item) for item in raw.get("languages") or []]
            themes = [ThemeInfo(**item) for item in raw.get("themes") or []]
        except (TypeError, ValidationError) as e:
            raise RegistryError(f"Invalid entry in registry catalog {path}: {e}") from e

        logger.info("Loaded %d languages and %d themes from %s", len(langs), len(themes), path)
        return cls(langs, themes)

    def languages(self) -> tuple[LanguageInfo, ...]:
        return self._languages

    def themes(self) -> tuple[ThemeInfo, ...]:
        return self._themes

    def has_language(self, identifier: str) -> bool:
        return identifier in self._language_ids

    def has_theme(self, identifier: str) -> bool:
        return identifier in self._theme_ids
