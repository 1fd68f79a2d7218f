"""Configuration management commands."""

import typer
from rich.console import Console

from repeatrule_cli.services.config_service import get_config_service
from repeatrule_cli.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from repeatrule_cli.utils.ui.formatters import format_output, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management commands")
console = Console()


@app.command("view")
@command_wrapper
def view_config(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """View current configuration."""
    format_output(get_config_service().config.model_dump(), output)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., preview.limit)"),
) -> None:
    """Get a configuration value."""
    value = get_config_service().get(key)
    if value is None:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND)
    console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., output.format)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    try:
        get_config_service().set(key, value)
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND) from e
    except ValueError as e:
        raise AppError(str(e), ERROR_INVALID_ARGS) from e
    format_success(f"Configuration '{key}' set to '{value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        typer.confirm("Reset all configuration to defaults?", abort=True)
    get_config_service().reset_config()
    format_success("Configuration reset to defaults")
