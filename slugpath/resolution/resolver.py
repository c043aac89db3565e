"""Slug to destination path resolution.

A slug carries no explicit type tag, so its final segment decides whether the
author meant a directory or a file:

- ``about`` or ``about/``: a directory, rendered to ``about/index.html``
- ``about/index.html``: already a destination, kept as is
- ``about/team.html``: a named file, promoted to ``about/team/index.html``

Every function here is pure. Failures are returned as ``InvalidSlugError``
values by the ``*_destination`` helpers; only :func:`resolve` raises.
"""

from __future__ import annotations

import enum
import logging
import re
from pathlib import Path, PurePosixPath

from pydantic import BaseModel, ConfigDict

from ..core.exceptions import InvalidSlugError
from ..core.models import DEFAULT_INDEX_NAME, check_index_name

logger = logging.getLogger(__name__)

SEPARATOR = "/"

# ASCII only: a slug ending in any other character has no trailing segment.
_SLUG_PATTERN = re.compile(r"(.*?)([A-Za-z0-9_][A-Za-z0-9_.\-]*/?)")


class SegmentKind(enum.Enum):
    DIRECTORY = "directory"
    INDEX = "index"
    NAMED_FILE = "named_file"


class SlugParts(BaseModel):
    """A slug split into everything before its last segment and the segment."""

    model_config = ConfigDict(frozen=True)

    parent_prefix: str
    last_segment: str


def split_slug(slug: str) -> SlugParts | InvalidSlugError:
    """Split a slug into its parent prefix and last segment.

    A non-empty slug made only of separators yields an empty segment, which
    resolves to the index file directly under the build root.

    Args:
        slug: Author-supplied slug

    Returns:
        The split slug, or the error describing why it has no segment
    """
    if slug and not slug.strip(SEPARATOR):
        return SlugParts(parent_prefix="", last_segment="")

    match = _SLUG_PATTERN.fullmatch(slug)
    if match is None:
        return InvalidSlugError(slug, "no trailing path segment")

    prefix, segment = match.groups()
    return SlugParts(parent_prefix=prefix, last_segment=segment)


def classify_segment(
    segment: str, index_name: str = DEFAULT_INDEX_NAME
) -> SegmentKind:
    """Decide whether a last segment names a directory or a file."""
    if not segment or segment.endswith(SEPARATOR) or "." not in segment:
        return SegmentKind.DIRECTORY
    if segment == index_name:
        return SegmentKind.INDEX
    return SegmentKind.NAMED_FILE


def relative_destination(
    slug: str, *, index_name: str = DEFAULT_INDEX_NAME
) -> PurePosixPath | InvalidSlugError:
    """Resolve a slug to a destination relative to the build root.

    Args:
        slug: Author-supplied slug
        index_name: Filename used for directory-like slugs; must have an extension

    Returns:
        Relative destination file path, or the error for an invalid slug
    """
    check_index_name(index_name)

    parts = split_slug(slug)
    if isinstance(parts, InvalidSlugError):
        return parts

    prefix = parts.parent_prefix
    segment = parts.last_segment

    kind = classify_segment(segment, index_name)
    if kind is SegmentKind.DIRECTORY:
        relative = f"{prefix}{segment.rstrip(SEPARATOR)}{SEPARATOR}{index_name}"
    elif kind is SegmentKind.INDEX:
        relative = f"{prefix}{index_name}"
    else:
        base, _extension = segment.rsplit(".", 1)
        relative = f"{prefix}{base}{SEPARATOR}{index_name}"

    # A leading separator only roots the slug under the build root.
    destination = PurePosixPath(relative.lstrip(SEPARATOR))
    if ".." in destination.parts:
        return InvalidSlugError(slug, "destination leaves the build root")

    logger.debug(f"Slug {slug!r} is {kind.value}-like → {destination}")
    return destination


def resolve_destination(
    slug: str, build_root: str | Path, *, index_name: str = DEFAULT_INDEX_NAME
) -> Path | InvalidSlugError:
    """Resolve a slug to its destination file under ``build_root``.

    Returns:
        Destination path, or the error for an invalid slug
    """
    relative = relative_destination(slug, index_name=index_name)
    if isinstance(relative, InvalidSlugError):
        return relative
    return Path(build_root) / relative


def resolve(
    slug: str, build_root: str | Path, *, index_name: str = DEFAULT_INDEX_NAME
) -> Path:
    """Resolve a slug to its destination file, raising on an invalid slug."""
    result = resolve_destination(slug, build_root, index_name=index_name)
    if isinstance(result, InvalidSlugError):
        raise result
    return result
