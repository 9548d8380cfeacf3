"""Runs extraction strategies in priority order until one succeeds."""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional, Sequence, Tuple

from reel_resolver.core.errors import AllStrategiesExhausted
from reel_resolver.core.interfaces import BaseStrategy
from reel_resolver.core.models import ExtractionResult, PostReference, Success

logger = logging.getLogger(__name__)


class Orchestrator:
    """Fold over `strategies`, stopping at the first success.

    Individual failures are logged and dropped. When `deadline` (seconds)
    is set, no new strategy is started once it has elapsed; an in-flight
    strategy is never interrupted.
    """

    def __init__(
        self,
        strategies: Sequence[BaseStrategy],
        deadline: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.strategies = list(strategies)
        self.deadline = deadline
        self.clock = clock

    def run(self, ref: PostReference) -> ExtractionResult:
        failures: List[Tuple[str, str]] = []
        started = self.clock()

        for i, strategy in enumerate(self.strategies, start=1):
            if self.deadline is not None and self.clock() - started >= self.deadline:
                logger.warning(
                    "Deadline of %.1fs reached before %s; skipping remaining strategies",
                    self.deadline,
                    strategy.name,
                )
                failures.append((strategy.name, "deadline exceeded"))
                break

            logger.info("Trying method %d (%s) for %s", i, strategy.name, ref.canonical)
            outcome = strategy.attempt(ref)
            if isinstance(outcome, Success) and outcome.result.media_url:
                logger.info("Success with method %d (%s)", i, strategy.name)
                return outcome.result

            reason = getattr(outcome, "reason", "empty result")
            logger.info("Method %d (%s) failed: %s", i, strategy.name, reason)
            failures.append((strategy.name, reason))

        raise AllStrategiesExhausted(failures)
