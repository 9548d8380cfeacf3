from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence

from reel_resolver.core.config import DEFAULT_CONFIG, ResolverConfig
from reel_resolver.core.errors import ParseNotFound
from reel_resolver.core.interfaces import BaseStrategy
from reel_resolver.core.models import ExtractionResult, PostReference
from reel_resolver.core.scraping.detector import detect_media_type, looks_like_media
from reel_resolver.core.scraping.fetcher import Fetcher
from reel_resolver.core.scraping.paths import (
    DEFAULT_MEDIA_PATHS,
    DURATION_PATHS,
    THUMBNAIL_PATHS,
    PathExpression,
    resolve_first,
)

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class InternalApiStrategy(BaseStrategy):
    """Query the post URL with the machine-readable query suffix.

    The JSON shape is not stable, so a fixed list of known paths is tried
    and only a value accepted by `predicate` counts as media.
    """

    name = "internal_api"

    def __init__(
        self,
        fetcher: Fetcher,
        config: Optional[ResolverConfig] = None,
        paths: Sequence[PathExpression] = DEFAULT_MEDIA_PATHS,
        predicate: Callable[[Any], bool] = looks_like_media,
    ):
        self.fetcher = fetcher
        self.config = config or DEFAULT_CONFIG
        self.paths = paths
        self.predicate = predicate

    def headers(self) -> dict:
        return {
            "Accept": "application/json",
            "X-IG-App-ID": self.config.app_id,
            "X-Requested-With": "XMLHttpRequest",
        }

    def run(self, ref: PostReference) -> ExtractionResult:
        logger.info("[%s] fetching %s", self.name, ref.api_url)
        resp = self.fetcher.fetch_with_retry(ref.api_url, headers=self.headers())
        data = resp.json()

        media_url = resolve_first(data, self.paths, self.predicate)
        if not media_url:
            raise ParseNotFound(f"No video in API response for {ref.canonical}")

        thumbnail = resolve_first(data, THUMBNAIL_PATHS, lambda v: isinstance(v, str))
        duration = resolve_first(data, DURATION_PATHS, _is_number)
        return ExtractionResult(
            media_url=str(media_url),
            media_type=detect_media_type(str(media_url)).value,
            strategy_name=self.name,
            thumbnail=thumbnail,
            duration=float(duration) if duration is not None else None,
        )
