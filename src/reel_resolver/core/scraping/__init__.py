"""Core scraping primitives shared by the extraction strategies.

This package contains small, well-tested building blocks: Fetcher,
Normalizer, Parser, Path resolver and media Detector, plus Prefect task
wrappers.
"""

from .detector import MediaType, detect_media_type, looks_like_media
from .fetcher import Fetcher
from .normalizer import normalize
from .parser import HTML_RULES, parse_html, parse_mirror_html
from .paths import DEFAULT_MEDIA_PATHS, PathExpression, resolve, resolve_first

__all__ = [
    "Fetcher",
    "normalize",
    "parse_html",
    "parse_mirror_html",
    "HTML_RULES",
    "PathExpression",
    "resolve",
    "resolve_first",
    "DEFAULT_MEDIA_PATHS",
    "MediaType",
    "detect_media_type",
    "looks_like_media",
]
