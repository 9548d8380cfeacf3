"""JSON path expressions such as ``items[0].video_versions[0].url``.

Paths are parsed once into a `PathExpression`; `resolve` walks a decoded
JSON value and returns None instead of raising when anything is missing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Tuple

from reel_resolver.core.scraping.detector import looks_like_media

_SEGMENT_RE = re.compile(r"^([^.\[\]]+)(?:\[(\d+)\])?$")


@dataclass(frozen=True)
class PathSegment:
    key: str
    index: Optional[int] = None


@dataclass(frozen=True)
class PathExpression:
    segments: Tuple[PathSegment, ...]

    @classmethod
    def parse(cls, text: str) -> "PathExpression":
        """Parse ``a.b[0].c``; raises ValueError for malformed segments."""
        if not text:
            raise ValueError("empty path expression")
        segments = []
        for part in text.split("."):
            m = _SEGMENT_RE.match(part)
            if not m:
                raise ValueError(f"malformed path segment {part!r} in {text!r}")
            key, index = m.groups()
            segments.append(PathSegment(key, int(index) if index is not None else None))
        return cls(tuple(segments))

    def __str__(self) -> str:
        return ".".join(
            s.key if s.index is None else f"{s.key}[{s.index}]" for s in self.segments
        )


def resolve(value: Any, path: PathExpression) -> Optional[Any]:
    current = value
    for seg in path.segments:
        if not isinstance(current, dict) or seg.key not in current:
            return None
        current = current[seg.key]
        if seg.index is not None:
            if not isinstance(current, list) or seg.index >= len(current):
                return None
            current = current[seg.index]
    return current


DEFAULT_MEDIA_PATHS: Tuple[PathExpression, ...] = tuple(
    PathExpression.parse(p)
    for p in (
        "graphql.shortcode_media.video_url",
        "items[0].video_versions[0].url",
        "graphql.shortcode_media.display_url",
        "edge_sidecar_to_children.edges[0].node.video_url",
        "video_url",
        "contentUrl",
    )
)

THUMBNAIL_PATHS: Tuple[PathExpression, ...] = tuple(
    PathExpression.parse(p)
    for p in (
        "graphql.shortcode_media.display_url",
        "items[0].image_versions2.candidates[0].url",
        "thumbnail_url",
    )
)

DURATION_PATHS: Tuple[PathExpression, ...] = tuple(
    PathExpression.parse(p)
    for p in (
        "graphql.shortcode_media.video_duration",
        "items[0].video_duration",
        "video_duration",
    )
)


def resolve_first(
    value: Any,
    paths: Iterable[PathExpression] = DEFAULT_MEDIA_PATHS,
    predicate: Callable[[Any], bool] = looks_like_media,
) -> Optional[Any]:
    """First value found along `paths` that `predicate` accepts."""
    for path in paths:
        found = resolve(value, path)
        if found is not None and predicate(found):
            return found
    return None
