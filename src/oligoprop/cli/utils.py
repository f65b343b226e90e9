"""
CLI utility functions.

Common helpers for CLI commands including output formatting and
file validation.
"""

import click
from pathlib import Path

from oligoprop.core.models import BoundedQuantity


# Color definitions for consistent styling
COLORS = {
    "success": "green",
    "error": "red",
    "warning": "yellow",
}


def echo_success(message: str) -> None:
    """Print success message with green checkmark."""
    click.echo(click.style("✓ ", fg=COLORS["success"]) + message, err=True)


def echo_error(message: str) -> None:
    """Print error message with red X."""
    click.echo(click.style("✗ ", fg=COLORS["error"]) + message, err=True)


def echo_warning(message: str) -> None:
    """Print warning message with yellow exclamation."""
    click.echo(click.style("! ", fg=COLORS["warning"]) + message, err=True)


def format_bounded(quantity: BoundedQuantity, decimals: int = 2, unit: str = "") -> str:
    """Format a bounded quantity as 'value ± delta unit'."""
    text = f"{quantity.value:.{decimals}f}"
    if not quantity.is_exact:
        text += f" ± {quantity.delta:.{decimals}f}"
    return f"{text} {unit}".rstrip()


def validate_output_path(path: Path, overwrite: bool = False) -> bool:
    """
    Validate output path and create parent directories if needed.

    Args:
        path: Output path to validate
        overwrite: Whether to allow overwriting existing files

    Returns:
        True if path is valid for writing, False otherwise
    """
    if path.exists() and not overwrite:
        echo_error(f"Output file already exists: {path}")
        click.echo("→ Use --force to overwrite", err=True)
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    return True
