"""Resolve direct media URLs from Instagram-style post references."""

from reel_resolver.core.config import DEFAULT_CONFIG, ResolverConfig
from reel_resolver.core.errors import (
    AllStrategiesExhausted,
    FetchExhausted,
    InvalidReference,
    ParseNotFound,
    ResolverError,
)
from reel_resolver.core.models import ExtractionResult, PostReference
from reel_resolver.resolver import resolve

__all__ = [
    "resolve",
    "ResolverConfig",
    "DEFAULT_CONFIG",
    "ExtractionResult",
    "PostReference",
    "ResolverError",
    "InvalidReference",
    "FetchExhausted",
    "ParseNotFound",
    "AllStrategiesExhausted",
]
