"""Configuration Commands - CLI settings management"""

import typer
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm

from ..utils.config_manager import config
from ..utils.formatting import print_error, print_info, print_success

console = Console()
app = typer.Typer(name="config", help="CLI configuration management")


@app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., 'api.base_url')"),
    value: str = typer.Argument(..., help="Configuration value"),
):
    """⚙️ Set a configuration value"""
    if key == "api.base_url" and not value.startswith(("http://", "https://")):
        print_error("API base URL must start with http:// or https://")
        raise typer.Exit(1)

    if key.endswith(".timeout") and not value.isdigit():
        print_error("Timeout values must be numeric (seconds)")
        raise typer.Exit(1)

    parsed: str | int | float = value
    if key.endswith(".timeout"):
        parsed = int(value)
    elif key.endswith(".poll_interval"):
        try:
            parsed = float(value)
        except ValueError:
            print_error("Poll interval must be a number (seconds)")
            raise typer.Exit(1) from None

    try:
        config.set(key, parsed)
    except OSError as e:
        print_error(f"Failed to set configuration: {e}")
        raise typer.Exit(1) from None

    print_success(f"Set {key} = {parsed}")
    if key == "api.base_url":
        print_info("Test connection with: cqueue status")


@app.command("get")
def get_config(
    key: str | None = typer.Argument(
        None, help="Configuration key (optional - shows all if omitted)"
    ),
):
    """📋 Get configuration value(s)"""
    if not key:
        show_all_config()
        return

    value = config.get(key)
    if value is None:
        console.print(f"[yellow]Key '{key}' not found[/yellow]")
        console.print("Use [cyan]cqueue config show[/cyan] to see all available keys")
    else:
        console.print(f"[cyan]{key}[/cyan] = [yellow]{value}[/yellow]")


@app.command("show")
def show_all_config():
    """📊 Show all configuration settings"""
    console.print(
        Panel(
            "[bold cyan]cqueue CLI Configuration[/bold cyan]\n\n"
            f"[dim]Configuration is stored in {config.config_file}[/dim]",
            title="Configuration",
            border_style="blue",
        )
    )
    _display_config_section(config.load_config(), "")


@app.command("reset")
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
):
    """🔄 Reset configuration to defaults"""
    if not yes and not Confirm.ask(
        "⚠️ This will reset ALL configuration to defaults. Continue?"
    ):
        console.print("Configuration reset cancelled.")
        return

    try:
        config.reset()
    except OSError as e:
        print_error(f"Failed to reset configuration: {e}")
        raise typer.Exit(1) from None

    print_success("Configuration reset to defaults")


@app.command("path")
def show_config_path():
    """📁 Show configuration file path"""
    console.print(f"Configuration file: [cyan]{config.config_file}[/cyan]")

    if not config.config_file.exists():
        console.print("[dim]Configuration file will be created on first change[/dim]")


def _display_config_section(data, prefix: str, indent: int = 0):
    """Recursively display configuration sections"""
    indent_str = "  " * indent

    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else key

        if isinstance(value, dict):
            console.print(f"{indent_str}[bold blue]{key}:[/bold blue]")
            _display_config_section(value, full_key, indent + 1)
            continue

        if isinstance(value, bool):
            color = "green" if value else "red"
            display_value = f"[{color}]{value}[/{color}]"
        elif isinstance(value, int | float):
            display_value = f"[cyan]{value}[/cyan]"
        elif isinstance(value, str) and value.startswith("http"):
            display_value = f"[blue]{value}[/blue]"
        else:
            display_value = f"[yellow]{value}[/yellow]"

        console.print(f"{indent_str}[cyan]{key}[/cyan]: {display_value}")
