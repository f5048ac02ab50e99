"""CLI entry point for codeshot."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from codeshot.color import color_with_opacity
from codeshot.config import CodeshotConfig, configure_logging, load_config
from codeshot.config.loader import DEFAULT_CONFIG_TEMPLATE
from codeshot.paint import resolve_background
from codeshot.presets import (
    Preset,
    decode_share_token,
    dump_preset,
    encode_share_token,
    preset_from_data,
    preset_section,
    read_preset_data,
    resolve_preset_path,
)
from codeshot.registry import HighlightRegistry, RegistryError, create_registry
from codeshot.schemas import (
    DEFAULT_EXPORT_SETTINGS,
    DEFAULT_SETTINGS,
    ExportSettingsValidator,
    FieldIssue,
    RenderingSettingsValidator,
    check_defaults,
)
from codeshot.schemas.defaults import plain_defaults

app = typer.Typer(
    name="codeshot",
    help="Validate and inspect code-screenshot rendering and export settings.",
)

config_app = typer.Typer(help="Manage codeshot configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: CodeshotConfig | None = None


def _get_config() -> CodeshotConfig:
    if _config is None:
        return load_config()
    return _config


def _get_registry() -> HighlightRegistry:
    try:
        return create_registry(_get_config().registry)
    except RegistryError as e:
        rprint(f"[red]Registry error:[/red] {e}")
        raise typer.Exit(1)


def _preset_path(name: str) -> Path:
    presets = _get_config().presets
    return resolve_preset_path(name, presets.directory, presets.default_format)


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to codeshot.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    _config = load_config(config)
    configure_logging(_config)


def _issues_table(title: str, issues: list[FieldIssue]) -> Table:
    table = Table(title=title)
    table.add_column("Field", style="cyan")
    table.add_column("Kind", style="yellow")
    table.add_column("Message")
    table.add_column("Value", style="dim")
    for issue in issues:
        table.add_row(issue.field or "<root>", issue.kind.value, issue.message, repr(issue.value))
    return table


def _display_preset(preset: Preset) -> None:
    s, e = preset.settings, preset.export
    paint = resolve_background(s)
    panel_text = (
        f"[dim]Language:[/dim]   {s.language}\n"
        f"[dim]Theme:[/dim]      {s.theme} ({'dark' if s.dark else 'light'})\n"
        f"[dim]Padding:[/dim]    {s.padding}px\n"
        f"[dim]Width:[/dim]      {s.width if s.width is not None else 'auto'}\n"
        f"[dim]Background:[/dim] {paint.css()}\n"
        f"[dim]Export:[/dim]     {e.format} @{e.scale}x -> {e.destination}"
    )
    rprint(Panel(panel_text, title="Preset", border_style="blue"))


@app.command()
def validate(
    name: str = typer.Argument(..., help="Preset file, or a preset name in the presets directory"),
    format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: table or json")
    ] = "table",
) -> None:
    """Validate a preset file's settings and export sections."""
    path = _preset_path(name)
    try:
        data = read_preset_data(path)
    except (OSError, ValueError) as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        rprint(f"[red]Error:[/red] {path} must contain a mapping")
        raise typer.Exit(1)

    registry = _get_registry()
    results = {
        "settings": RenderingSettingsValidator(registry).validate(
            preset_section(data, "settings"), source=f"{path}:settings"
        ),
        "export": ExportSettingsValidator().validate(
            preset_section(data, "export"), source=f"{path}:export"
        ),
    }
    any_invalid = any(not r.valid for r in results.values())

    if format == "json":
        payload = {
            section: {
                "valid": r.valid,
                "issues": [
                    {"field": i.field, "kind": i.kind.value, "message": i.message}
                    for i in r.issues
                ],
                "defaulted": r.defaulted,
            }
            for section, r in results.items()
        }
        typer.echo(json.dumps(payload, indent=2))
    else:
        for section, r in results.items():
            if r.valid:
                rprint(f"[green]PASS[/green] {section} ({len(r.defaulted)} defaulted)")
            else:
                rprint(_issues_table(f"{section}: {len(r.issues)} issue(s)", r.issues))
        if not any_invalid:
            _display_preset(
                Preset(settings=results["settings"].value, export=results["export"].value)
            )

    if any_invalid:
        raise typer.Exit(1)


@app.command()
def defaults(
    kind: Annotated[
        str, typer.Option("--kind", "-k", help="rendering, export or all")
    ] = "all",
) -> None:
    """Show the default settings tables."""
    tables = {"settings": DEFAULT_SETTINGS, "export": DEFAULT_EXPORT_SETTINGS}
    if kind == "rendering":
        tables.pop("export")
    elif kind == "export":
        tables.pop("settings")
    elif kind != "all":
        rprint(f"[red]Unknown kind:[/red] {kind}. Use rendering, export or all.")
        raise typer.Exit(1)

    dumped = {name: plain_defaults(table) for name, table in tables.items()}
    rprint(Syntax(yaml.safe_dump(dumped, sort_keys=False), "yaml"))


@app.command("check-defaults")
def check_defaults_cmd() -> None:
    """Verify the default tables satisfy their own constraints."""
    problems = check_defaults(_get_registry())
    if problems:
        for problem in problems:
            rprint(f"  [red]error:[/red] {problem}")
        raise typer.Exit(1)
    rprint("[green]Defaults are consistent.[/green]")


@app.command()
def color(
    value: str = typer.Argument(..., help="Hex or CSS color"),
    alpha: float = typer.Option(1.0, "--alpha", "-a", help="Opacity 0..1"),
) -> None:
    """Normalize a color with opacity for the renderer."""
    typer.echo(color_with_opacity(value, alpha))


@app.command()
def languages(
    filter: Annotated[
        str | None, typer.Option("--filter", help="Only ids containing this text")
    ] = None,
) -> None:
    """List language ids and aliases known to the registry."""
    registry = _get_registry()
    table = Table(title="Languages")
    table.add_column("Id", style="cyan")
    table.add_column("Aliases", style="green")
    for lang in sorted(registry.languages(), key=lambda lang: lang.id):
        idents = (lang.id, *lang.aliases)
        if filter and not any(filter in ident for ident in idents):
            continue
        table.add_row(lang.id, ", ".join(lang.aliases) or "-")
    rprint(table)


@app.command()
def themes() -> None:
    """List theme ids known to the registry."""
    registry = _get_registry()
    table = Table(title="Themes")
    table.add_column("Id", style="cyan")
    for theme in sorted(registry.themes(), key=lambda t: t.id):
        table.add_row(theme.id)
    rprint(table)


@app.command()
def share(
    name: str = typer.Argument(..., help="Preset file, or a preset name in the presets directory"),
) -> None:
    """Print a share token for a preset file."""
    path = _preset_path(name)
    try:
        preset = preset_from_data(read_preset_data(path), _get_registry(), source=str(path))
    except (OSError, ValueError) as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    typer.echo(encode_share_token(preset))


@app.command()
def unshare(
    token: str = typer.Argument(..., help="Share token"),
    save: Annotated[
        str | None,
        typer.Option("--save", "-s", help="Also save as a preset (bare names go to the presets directory)"),
    ] = None,
) -> None:
    """Decode a share token and print its settings as YAML."""
    try:
        preset = decode_share_token(token, _get_registry())
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    if save:
        saved = dump_preset(preset, _preset_path(save), _get_config().presets.default_format)
        rprint(f"[green]Saved[/green] {saved}")
    rprint(Syntax(yaml.safe_dump(preset.to_wire(), sort_keys=False), "yaml"))


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default codeshot.yaml in current directory."""
    target = Path("codeshot.yaml")
    if target.exists() and not force:
        rprint("[yellow]codeshot.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
