"""CLI argument parsers and validators."""

from __future__ import annotations

import typer

from ..core.models import check_index_name

OUTPUT_FORMATS = ("table", "json")


def parse_index_name(value: str) -> str:
    """Parse the filename used for directory-like slugs."""
    try:
        return check_index_name(value)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


def parse_output_format(value: str) -> str:
    """Parse the plan output format."""
    fmt = value.strip().lower()
    if fmt not in OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"Must be one of {', '.join(OUTPUT_FORMATS)}, got: {value!r}"
        )
    return fmt
