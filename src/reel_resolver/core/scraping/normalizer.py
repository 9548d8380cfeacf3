"""Post reference normalizer.

Canonicalizes a raw post URL and derives the embed, mirror-domain and
API-query variants the strategies fetch.
"""

from __future__ import annotations

from typing import Iterable, Optional
from urllib.parse import ParseResult, urlparse, urlunparse

from reel_resolver.core.config import DEFAULT_CONFIG, ResolverConfig
from reel_resolver.core.errors import InvalidReference
from reel_resolver.core.models import PostReference

POST_PATH_MARKERS = ("/reel/", "/p/", "/tv/")


def is_valid_reference(raw: str, markers: Iterable[str] = POST_PATH_MARKERS) -> bool:
    return any(m in (raw or "") for m in markers)


def canonicalize(url: str) -> str:
    """Drop query string and fragment, and end the path with exactly one slash."""
    p: ParseResult = urlparse(url.strip())
    path = (p.path or "").rstrip("/") + "/"
    return urlunparse((p.scheme, p.netloc, path, "", "", ""))


def embed_url(canonical: str, markers: Iterable[str] = POST_PATH_MARKERS) -> str:
    if any(m in canonical for m in markers):
        return canonical + "embed/"
    return canonical


def mirror_url(canonical: str, primary_domain: str, mirror_domain: str) -> str:
    if mirror_domain in canonical:
        return canonical
    return canonical.replace(primary_domain, mirror_domain, 1)


def normalize(raw: str, config: Optional[ResolverConfig] = None) -> PostReference:
    """Build a `PostReference` or raise `InvalidReference`.

    Only the path markers are checked, not the host, so mirrors and test
    hosts normalize the same way.
    """
    config = config or DEFAULT_CONFIG
    if not raw or not is_valid_reference(raw):
        raise InvalidReference(raw)

    canonical = canonicalize(raw)
    # the marker may only have lived in the query string
    if not is_valid_reference(canonical):
        raise InvalidReference(raw)

    return PostReference(
        raw=raw,
        canonical=canonical,
        embed_url=embed_url(canonical),
        mirror_url=mirror_url(canonical, config.primary_domain, config.mirror_domain),
        api_url=canonical + config.api_query,
    )
