"""CLI output utilities and formatting."""

import click
from colorama import Fore, Style

# Toggled off by ``color.ui = false`` or --no-color
_color_enabled = True


def set_color(enabled: bool) -> None:
    global _color_enabled
    _color_enabled = enabled


def colorize(text: str, color: str) -> str:
    """Wrap text in a colorama color, unless color output is disabled."""
    if not _color_enabled or not text:
        return text
    return f"{color}{text}{Style.RESET_ALL}"


def success(message: str) -> str:
    """Format success message in green."""
    return colorize(message, Fore.GREEN)


def info(message: str) -> str:
    """Format info message in cyan."""
    return colorize(message, Fore.CYAN)


def warning(message: str) -> str:
    """Format warning message in yellow."""
    return colorize(message, Fore.YELLOW)


def error(message: str) -> str:
    """Format error message in red."""
    return colorize(message, Fore.RED)


def echo_result(result, style=info):
    """
    Print a CommandResult.

    Refused commands are printed in red on stderr and abort with exit
    status 1. Empty output prints nothing.
    """
    if result.error:
        click.echo(error(result.output), err=True)
        click.get_current_context().exit(1)
    if result.output:
        click.echo(style(result.output))
