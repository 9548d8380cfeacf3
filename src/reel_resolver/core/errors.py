"""Error kinds raised by the resolver core.

Only `InvalidReference` and `AllStrategiesExhausted` leave `resolve()`;
the others are raised inside strategies and turned into failure outcomes.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple


class ResolverError(Exception):
    """Base class for every resolver failure."""


class InvalidReference(ResolverError):
    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(
            f"Invalid post reference: {raw!r}. Must be a reel, post or tv URL."
        )

    def __reduce__(self):
        return (type(self), (self.raw,))


class FetchExhausted(ResolverError):
    """All attempts of a fetch failed. `last_error` holds the last status or error."""

    def __init__(self, url: str, attempts: int, last_error: Optional[str] = None):
        self.url = url
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(f"Fetch failed after {attempts} attempt(s) for {url}: {last_error}")

    def __reduce__(self):
        return (type(self), (self.url, self.attempts, self.last_error))


class ParseNotFound(ResolverError):
    """The fetch worked but no rule or path found a media URL."""


class AllStrategiesExhausted(ResolverError):
    def __init__(self, failures: Sequence[Tuple[str, str]] = ()):
        self.failures = list(failures)
        detail = "; ".join(f"{name}: {reason}" for name, reason in self.failures)
        message = "All extraction methods failed"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

    def __reduce__(self):
        return (type(self), (self.failures,))
