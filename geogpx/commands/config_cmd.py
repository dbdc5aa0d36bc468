"""Config command for geogpx CLI."""

from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console

from geogpx.core.config import ConfigError, export_template, find_config_file, load_config, options_to_dict
from geogpx.core.converter import DEFAULT_CREATOR

app = typer.Typer()
console = Console()


@app.command("show")
def show(config_file: Optional[Path] = typer.Argument(None, help="Config file (default: ./geogpx_config.yaml)")):
    """Show current configuration."""
    try:
        options = load_config(config_file)
    except ConfigError as e:
        console.print(f"[bold red]❌ Invalid configuration:[/] {e}")
        raise typer.Exit(1)

    path = find_config_file(config_file)
    console.print("\n[bold]Current Configuration:[/]")
    console.print(f"  Config file: [cyan]{path if path else '(none)'}[/]")
    console.print(f"  Creator: [cyan]{options.creator or DEFAULT_CREATOR}[/]")
    if options.metadata is None:
        console.print("  Metadata: [dim]not set[/]")
    else:
        console.print("  Metadata:")
        body = yaml.dump(options_to_dict(options)["metadata"], default_flow_style=False, sort_keys=False, allow_unicode=True)
        for line in body.splitlines():
            console.print(f"    {line}", markup=False)
    console.print()


@app.command("export")
def export(output_path: Path = typer.Argument(Path("geogpx_config.yaml"), help="Where to write the template")):
    """Export configuration template."""
    export_template(output_path)
    console.print(f"[bold green]✔[/] Configuration template exported to [underline]{output_path}[/]")
    console.print("[dim]Edit this file to set the creator and GPX metadata[/]")


@app.command("validate")
def validate(config_file: Path = typer.Argument(..., help="Config file to validate")):
    """Validate a configuration file."""
    try:
        options = load_config(config_file)
    except ConfigError as e:
        console.print(f"[bold red]❌ Invalid configuration:[/] {e}")
        raise typer.Exit(1)
    console.print(f"[bold green]✔[/] Configuration file is valid: [underline]{config_file}[/]")
    console.print(f"  Creator: {options.creator or DEFAULT_CREATOR}")
    console.print(f"  Metadata: {'set' if options.metadata is not None else 'not set'}")
