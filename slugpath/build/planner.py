"""Build planning: content descriptors to output mappings."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.exceptions import InvalidSlugError
from ..core.models import DEFAULT_INDEX_NAME, BuildConfig, ContentDescriptor, OutputMapping
from ..resolution.resolver import resolve_destination

logger = logging.getLogger(__name__)


def resolve_all(
    descriptors: list[ContentDescriptor],
    build_root: Path,
    index_name: str = DEFAULT_INDEX_NAME,
) -> list[OutputMapping | InvalidSlugError]:
    """Resolve every descriptor, keeping failures in place.

    Args:
        descriptors: Content records in authored order
        build_root: Absolute output directory
        index_name: Filename used for directory-like slugs

    Returns:
        One mapping or error per descriptor, in input order
    """
    results: list[OutputMapping | InvalidSlugError] = []
    for descriptor in descriptors:
        destination = resolve_destination(
            descriptor.slug, build_root, index_name=index_name
        )
        if isinstance(destination, InvalidSlugError):
            results.append(destination)
        else:
            results.append(OutputMapping.from_descriptor(descriptor, destination))
    return results


def _warn_on_shared_destinations(mappings: list[OutputMapping]) -> None:
    seen: dict[Path, Path] = {}
    for mapping in mappings:
        previous = seen.get(mapping.destination_path)
        if previous is not None:
            logger.warning(
                f"{mapping.template_source} and {previous} both render to "
                f"{mapping.destination_path}; the later one wins"
            )
        seen[mapping.destination_path] = mapping.template_source


def plan_build(config: BuildConfig) -> list[OutputMapping]:
    """Compute the output mappings for one build.

    Raises the first invalid slug, in descriptor order, before any mapping is
    returned.

    Args:
        config: Build configuration

    Returns:
        Output mappings in descriptor order
    """
    logger.info(
        f"Resolving {len(config.descriptors)} slug(s) under {config.build_root}"
    )

    mappings: list[OutputMapping] = []
    for result in resolve_all(config.descriptors, config.build_root, config.index_name):
        if isinstance(result, InvalidSlugError):
            raise result
        mappings.append(result)

    _warn_on_shared_destinations(mappings)

    logger.info(f"Planned {len(mappings)} output file(s)")
    return mappings
