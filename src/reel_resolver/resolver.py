"""Core entry point: raw post reference in, `ExtractionResult` out."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from reel_resolver.core.config import DEFAULT_CONFIG, ResolverConfig
from reel_resolver.core.interfaces import BaseStrategy
from reel_resolver.core.models import ExtractionResult
from reel_resolver.core.orchestrator import Orchestrator
from reel_resolver.core.scraping.fetcher import Fetcher
from reel_resolver.core.scraping.normalizer import normalize
from reel_resolver.strategies.factory import default_strategies

logger = logging.getLogger(__name__)


def resolve(
    reference: str,
    config: Optional[ResolverConfig] = None,
    strategies: Optional[Sequence[BaseStrategy]] = None,
    fetcher: Optional[Fetcher] = None,
) -> ExtractionResult:
    """Resolve `reference` to a direct media URL.

    Raises `InvalidReference` before any network call when the input is
    not a reel/post/tv URL, and `AllStrategiesExhausted` when every
    strategy failed.
    """
    config = config or DEFAULT_CONFIG
    ref = normalize(reference, config)
    logger.info("Starting extraction for %s", ref.canonical)

    if strategies is not None:
        return Orchestrator(strategies, deadline=config.deadline).run(ref)

    if fetcher is not None:
        return Orchestrator(
            default_strategies(fetcher, config), deadline=config.deadline
        ).run(ref)

    # the session belongs to this call only
    with Fetcher(config) as owned:
        return Orchestrator(
            default_strategies(owned, config), deadline=config.deadline
        ).run(ref)
