"""HTTP fetcher with bounded retries, linear backoff and UA rotation.

Provides a small `Fetcher` object exposing `get` and `fetch_with_retry`.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Callable, Dict, Optional

import requests

from reel_resolver.core.config import DEFAULT_CONFIG, ResolverConfig
from reel_resolver.core.errors import FetchExhausted
from reel_resolver.core.models import FetchSpec

logger = logging.getLogger(__name__)

BROWSER_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "Accept-Encoding": "gzip, deflate, br",
    "DNT": "1",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Site": "none",
    "Sec-Fetch-User": "?1",
}


class Fetcher:
    """Small HTTP client that looks like a browser to the platform.

    Usage:
        f = Fetcher(config)
        resp = f.fetch_with_retry(url)

    `session`, `rng` and `sleep` can be injected so tests never touch the
    network or the wall clock.
    """

    def __init__(
        self,
        config: Optional[ResolverConfig] = None,
        session: Optional[requests.Session] = None,
        rng: Optional[random.Random] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.session = session or requests.Session()
        self.rng = rng or random.Random()
        self.sleep = sleep or time.sleep

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "Fetcher":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _headers(self, headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        base = {"User-Agent": self.rng.choice(self.config.user_agents)}
        base.update(BROWSER_HEADERS)
        base["Referer"] = self.config.referer
        if headers:
            base.update(headers)
        return base

    def build_spec(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        max_retries: Optional[int] = None,
    ) -> FetchSpec:
        return FetchSpec(
            url=url,
            headers=self._headers(headers),
            max_retries=self.config.max_retries if max_retries is None else max_retries,
            backoff_unit=self.config.backoff_unit,
            timeout=self.config.timeout,
        )

    def get(self, url: str, headers: Optional[Dict[str, str]] = None, **kwargs):
        """Single GET, no retries and no status check."""
        return self.session.get(
            url, headers=self._headers(headers), timeout=self.config.timeout, **kwargs
        )

    def execute(self, spec: FetchSpec) -> requests.Response:
        """Run `spec` with `max_retries + 1` attempts in total.

        A non-2xx response counts as a failed attempt, the same as a
        network error. Raises `FetchExhausted` when every attempt failed.
        """
        attempts = spec.max_retries + 1
        last_error: Optional[str] = None
        for i in range(attempts):
            try:
                resp = self.session.get(spec.url, headers=spec.headers, timeout=spec.timeout)
                if resp.ok:
                    return resp
                last_error = f"HTTP {resp.status_code}: {resp.reason}"
            except requests.RequestException as exc:
                last_error = str(exc)

            logger.info(
                "Attempt %d/%d failed for %s: %s", i + 1, attempts, spec.url, last_error
            )
            if i < attempts - 1:
                delay = spec.delay_before_retry(i)
                logger.debug("Retrying %s in %.1fs", spec.url, delay)
                self.sleep(delay)

        raise FetchExhausted(spec.url, attempts, last_error)

    def fetch_with_retry(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        max_retries: Optional[int] = None,
    ) -> requests.Response:
        return self.execute(self.build_spec(url, headers, max_retries))
