"""Main CLI application."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..build import planner
from ..content import loader
from ..core.exceptions import ContentConfigError, InvalidSlugError
from ..core.models import BuildConfig, OutputMapping
from ..core.settings import BuildSettings
from ..rendering import engine
from ..resolution import resolver
from .parsers import parse_index_name, parse_output_format

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="slugpath",
    help="Resolve content slugs to static site output paths.",
)

ContentOption = Annotated[
    Optional[str],
    typer.Option(
        "--content",
        help="YAML content list (default: $SLUGPATH_CONTENT_FILE or data.yaml).",
        metavar="FILE",
    ),
]
BuildDirOption = Annotated[
    Optional[str],
    typer.Option(
        "--build-dir",
        help="Output directory, relative to the content list (default: dist).",
        metavar="DIR",
    ),
]
IndexNameOption = Annotated[
    Optional[str],
    typer.Option(
        "--index-name",
        help="Filename written for directory-like slugs (default: index.html).",
        metavar="NAME",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose logging.",
    ),
]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


def _abort(exc: Exception) -> typer.Exit:
    logger.error(str(exc))
    return typer.Exit(code=1)


def _load_config(
    content: Optional[str], build_dir: Optional[str], index_name: Optional[str]
) -> BuildConfig:
    settings = BuildSettings()
    return loader.load_build_config(
        Path(content) if content else settings.content_file,
        Path(build_dir) if build_dir else settings.build_dir,
        parse_index_name(index_name or settings.index_name),
    )


def _mapping_record(mapping: OutputMapping) -> dict:
    return {
        "template": str(mapping.template_source),
        "destination": str(mapping.destination_path),
        "context": mapping.context,
    }


@app.command()
def resolve(
    slugs: Annotated[
        list[str],
        typer.Argument(help="Slugs to resolve.", metavar="SLUG..."),
    ],
    build_root: Annotated[
        Optional[str],
        typer.Option(
            "--build-root",
            help="Directory destinations are rooted under (default: $SLUGPATH_BUILD_DIR or dist).",
            metavar="DIR",
        ),
    ] = None,
    index_name: IndexNameOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the destination file for each slug."""
    _configure_logging(verbose)

    settings = BuildSettings()
    root = Path(build_root) if build_root else settings.build_dir
    name = parse_index_name(index_name or settings.index_name)

    # Resolve everything first so an invalid slug prints nothing.
    try:
        destinations = [resolver.resolve(slug, root, index_name=name) for slug in slugs]
    except InvalidSlugError as exc:
        raise _abort(exc) from exc

    for destination in destinations:
        typer.echo(str(destination))


@app.command()
def plan(
    content: ContentOption = None,
    build_dir: BuildDirOption = None,
    index_name: IndexNameOption = None,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            help="Output format: table or json (default: table).",
            metavar="FORMAT",
        ),
    ] = "table",
    verbose: VerboseOption = False,
) -> None:
    """Load the content list and print its output mappings."""
    _configure_logging(verbose)

    fmt = parse_output_format(output_format)

    try:
        config = _load_config(content, build_dir, index_name)
        mappings = planner.plan_build(config)
    except (ContentConfigError, InvalidSlugError) as exc:
        raise _abort(exc) from exc

    if fmt == "json":
        typer.echo(json.dumps([_mapping_record(m) for m in mappings], indent=2, default=str))
        return

    for mapping in mappings:
        typer.echo(f"{mapping.destination_path}\t{mapping.template_source}")


@app.command()
def preview(
    slug: Annotated[
        str,
        typer.Argument(help="Slug of the page to render.", metavar="SLUG"),
    ],
    content: ContentOption = None,
    build_dir: BuildDirOption = None,
    index_name: IndexNameOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Render the page a slug resolves to and print it."""
    _configure_logging(verbose)

    try:
        config = _load_config(content, build_dir, index_name)
        mappings = planner.plan_build(config)
        target = resolver.resolve(slug, config.build_root, index_name=config.index_name)
    except (ContentConfigError, InvalidSlugError) as exc:
        raise _abort(exc) from exc

    # The last mapping for a destination is the one that ends up on disk.
    matches = [m for m in mappings if m.destination_path == target]
    if not matches:
        logger.error(f"No content renders to {target}")
        raise typer.Exit(code=1)

    typer.echo(engine.render_mapping(matches[-1]), nl=False)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
