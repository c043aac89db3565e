from .resolver import (
    SegmentKind,
    SlugParts,
    classify_segment,
    relative_destination,
    resolve,
    resolve_destination,
    split_slug,
)

__all__ = [
    "SegmentKind",
    "SlugParts",
    "classify_segment",
    "relative_destination",
    "resolve",
    "resolve_destination",
    "split_slug",
]
