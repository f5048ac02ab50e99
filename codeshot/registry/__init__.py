"""Language/theme registries consulted by the settings validator."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codeshot.registry.base import (
    HighlightRegistry,
    LanguageInfo,
    RegistryError,
    StaticRegistry,
    ThemeInfo,
)

if TYPE_CHECKING:
    from codeshot.config.models import RegistryConfig


def create_registry(config: RegistryConfig) -> HighlightRegistry:
    """Build the registry selected by app config."""
    if config.provider == "pygments":
        from codeshot.registry.pygments_registry import load_pygments_registry

        return load_pygments_registry()

    if config.provider == "static":
        if not config.catalog:
            raise RegistryError("registry.catalog is required for the static provider")
        return StaticRegistry.from_file(config.catalog)

    raise RegistryError(
        f"Unsupported registry provider: {config.provider!r}. Supported: pygments, static"
    )


__all__ = [
    "HighlightRegistry",
    "LanguageInfo",
    "RegistryError",
    "StaticRegistry",
    "ThemeInfo",
    "create_registry",
]
