"""Shared test fixtures for codeshot."""

import pytest
import yaml

from codeshot.registry import StaticRegistry
from codeshot.schemas import ExportSettingsValidator, RenderingSettingsValidator


@pytest.fixture
def registry():
    return StaticRegistry.from_ids(
        {"python": ["py", "python3"], "typescript": ["ts"], "rust": ["rs"]},
        ["github-dark", "github-light", "nord"],
    )


@pytest.fixture
def settings_validator(registry):
    return RenderingSettingsValidator(registry)


@pytest.fixture
def export_validator():
    return ExportSettingsValidator()


@pytest.fixture
def full_settings_payload():
    """Every rendering field present, all valid, none equal to its default."""
    return {
        "dark": False,
        "padding": 32,
        "glass": False,
        "lineNumbers": True,
        "width": 720,
        "language": "py",
        "theme": "nord",
        "background": "solid",
        "backgroundColor": "#112233",
        "backgroundOpacity": 80,
        "gradientType": "radial",
        "gradientAngle": 45,
        "gradientStops": [
            {"id": "a", "color": "#ff0000", "alpha": 50.0, "position": 100.0},
            {"id": "b", "color": "hsl(200, 50%, 50%)", "alpha": 100.0, "position": 0.0},
        ],
    }


@pytest.fixture
def full_export_payload():
    return {"format": "jpeg", "scale": 4, "destination": "both", "jpegQuality": 0.8}


@pytest.fixture
def catalog_file(tmp_path):
    """A static registry catalog on disk that covers the default language and theme."""
    path = tmp_path / "catalog.yaml"
    path.write_text(yaml.safe_dump({
        "languages": [
            {"id": "typescript", "name": "TypeScript", "aliases": ["ts"]},
            {"id": "python", "name": "Python", "aliases": ["py"]},
        ],
        "themes": [
            {"id": "github-dark", "type": "dark"},
            {"id": "github-light", "type": "light"},
        ],
    }))
    return path


@pytest.fixture
def config_file(tmp_path, catalog_file):
    """codeshot.yaml pointing at the static catalog, quiet logging."""
    path = tmp_path / "codeshot.yaml"
    path.write_text(yaml.safe_dump({
        "registry": {"provider": "static", "catalog": str(catalog_file)},
        "log_level": "error",
    }))
    return path
