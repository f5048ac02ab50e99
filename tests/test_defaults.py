"""Tests for the default tables and their consistency with the models."""

import pytest

from codeshot.schemas import (
    DEFAULT_EXPORT_SETTINGS,
    DEFAULT_SETTINGS,
    ExportSettings,
    RenderingSettings,
    check_defaults,
)
from codeshot.schemas.defaults import default_gradient_stops, plain_defaults


class TestDefaultTables:
    def test_every_rendering_field_has_a_default(self):
        aliases = {f.alias for f in RenderingSettings.model_fields.values()}
        assert aliases == set(DEFAULT_SETTINGS)

    def test_every_export_field_has_a_default(self):
        aliases = {f.alias for f in ExportSettings.model_fields.values()}
        assert aliases == set(DEFAULT_EXPORT_SETTINGS)

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_SETTINGS["padding"] = 0  # type: ignore[index]
        with pytest.raises(TypeError):
            DEFAULT_EXPORT_SETTINGS["scale"] = 4  # type: ignore[index]

    def test_default_stops_copy_is_independent(self):
        stops = default_gradient_stops()
        stops[0]["color"] = "#ffffff"
        assert DEFAULT_SETTINGS["gradientStops"][0]["color"] == "#00C499"

    def test_plain_defaults_unfreezes(self):
        plain = plain_defaults(DEFAULT_SETTINGS)
        assert isinstance(plain["gradientStops"], list)
        assert isinstance(plain["gradientStops"][0], dict)


class TestDefaultsSelfConsistency:
    def test_defaults_pass_their_validators(self, catalog_file):
        from codeshot.registry import StaticRegistry

        assert check_defaults(StaticRegistry.from_file(catalog_file)) == []

    def test_defaults_need_registry_entries(self):
        from codeshot.registry import StaticRegistry

        empty = StaticRegistry.from_ids([], [])
        problems = check_defaults(empty)
        assert any("language" in p for p in problems)
        assert any("theme" in p for p in problems)

    def test_constructed_defaults_match_table(self):
        settings = RenderingSettings()
        dumped = settings.model_dump(mode="json", by_alias=True)
        assert dumped == plain_defaults(DEFAULT_SETTINGS)
        assert ExportSettings().model_dump(by_alias=True) == dict(DEFAULT_EXPORT_SETTINGS)
