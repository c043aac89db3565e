"""Content list loading from YAML."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..core.exceptions import ContentConfigError
from ..core.models import DEFAULT_INDEX_NAME, BuildConfig, ContentDescriptor

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("slug", "template")


def _resolve_path(value: Path, base_dir: Path) -> Path:
    """Resolve ``value`` into an absolute path relative to ``base_dir``."""
    expanded = value.expanduser()
    if expanded.is_absolute():
        return expanded
    return (base_dir / expanded).absolute()


def _parse_record(record: Any, index: int, path: Path) -> ContentDescriptor:
    if not isinstance(record, dict):
        raise ContentConfigError(
            f"{path}: record {index} must be a mapping, got {type(record).__name__}"
        )

    missing = [field for field in _REQUIRED_FIELDS if field not in record]
    if missing:
        raise ContentConfigError(
            f"{path}: record {index} is missing required field(s): {', '.join(missing)}"
        )

    slug = record["slug"]
    template = record["template"]
    if not isinstance(slug, str):
        raise ContentConfigError(f"{path}: record {index} slug must be a string")
    if not isinstance(template, str) or not template:
        raise ContentConfigError(
            f"{path}: record {index} template must be a non-empty string"
        )

    context = record.get("context")
    try:
        return ContentDescriptor(
            slug=slug,
            template_source=_resolve_path(Path(template), path.parent),
            context={} if context is None else context,
        )
    except ValidationError as exc:
        raise ContentConfigError(f"{path}: record {index} is invalid: {exc}") from exc


def load_descriptors(path: Path) -> list[ContentDescriptor]:
    """Load content descriptors from a YAML content list.

    Args:
        path: YAML file holding a list of ``{slug, template, context}`` records

    Returns:
        Descriptors in file order, template paths relative to the file's directory
    """
    if not path.exists():
        raise ContentConfigError(f"Content list not found at {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ContentConfigError(f"{path}: invalid YAML: {exc}") from exc

    if data is None:
        data = []
    if not isinstance(data, list):
        raise ContentConfigError(
            f"{path}: content list must be a YAML sequence, got {type(data).__name__}"
        )

    descriptors = [_parse_record(record, index, path) for index, record in enumerate(data)]
    logger.debug(f"Loaded {len(descriptors)} descriptor(s) from {path}")
    return descriptors


def load_build_config(
    content_file: Path,
    build_dir: Path,
    index_name: str = DEFAULT_INDEX_NAME,
) -> BuildConfig:
    """Load the content list and root the build directory beside it.

    Args:
        content_file: YAML content list
        build_dir: Output directory; relative paths are taken from the content file's directory
        index_name: Filename used for directory-like slugs

    Returns:
        Build configuration for the planner
    """
    content_path = content_file.expanduser().absolute()
    descriptors = load_descriptors(content_path)

    try:
        return BuildConfig(
            descriptors=descriptors,
            build_root=_resolve_path(build_dir, content_path.parent),
            index_name=index_name,
        )
    except ValidationError as exc:
        raise ContentConfigError(f"Invalid build configuration: {exc}") from exc
