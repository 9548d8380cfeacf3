"""Detect whether a value points at media and which kind.

Provides a small MediaType enum, `detect_media_type` and the default
`looks_like_media` predicate used against JSON API payloads.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional
from urllib.parse import urlparse


class MediaType(str, Enum):
    MP4 = "video/mp4"
    WEBM = "video/webm"
    HLS = "application/x-mpegURL"
    JPEG = "image/jpeg"
    PNG = "image/png"
    WEBP = "image/webp"
    VIDEO = "video"


def _ext_from_url(url: str) -> Optional[str]:
    path = urlparse(url).path.lower()
    for ext in (".mp4", ".webm", ".m3u8", ".jpg", ".jpeg", ".png", ".webp"):
        if path.endswith(ext):
            return ext
    # CDN urls often carry the extension mid-path (…/x.mp4/?efg=…)
    if ".mp4" in url.lower():
        return ".mp4"
    return None


def detect_media_type(url: str) -> MediaType:
    """Media type by URL extension; generic VIDEO when unknown."""
    ext = _ext_from_url(url)
    if ext == ".mp4":
        return MediaType.MP4
    if ext == ".webm":
        return MediaType.WEBM
    if ext == ".m3u8":
        return MediaType.HLS
    if ext in (".jpg", ".jpeg"):
        return MediaType.JPEG
    if ext == ".png":
        return MediaType.PNG
    if ext == ".webp":
        return MediaType.WEBP
    return MediaType.VIDEO


def looks_like_media(value: Any) -> bool:
    """Heuristic: a string mentioning an .mp4 file or the word "video"."""
    if not isinstance(value, str) or not value:
        return False
    return ".mp4" in value or "video" in value
