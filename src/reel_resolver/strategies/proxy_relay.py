from __future__ import annotations

import logging
from typing import Optional, Sequence
from urllib.parse import quote

import requests

from reel_resolver.core.config import DEFAULT_CONFIG, ResolverConfig
from reel_resolver.core.errors import ParseNotFound
from reel_resolver.core.interfaces import BaseStrategy
from reel_resolver.core.models import ExtractionResult, PostReference
from reel_resolver.core.scraping.fetcher import Fetcher
from reel_resolver.core.scraping.parser import (
    HtmlPage,
    extract_duration,
    extract_thumbnail,
    parse_html,
)

logger = logging.getLogger(__name__)


def relay_url(template: str, target: str) -> str:
    """Prefix `target`, percent-encoded, with a relay template ("" = no relay)."""
    if not template:
        return target
    return template + quote(target, safe="")


class ProxyRelayStrategy(BaseStrategy):
    """
    Último recurso: passa a URL canônica por uma lista de relays públicos.

    Cada relay recebe uma única tentativa (sem retry); erros de rede e
    status != 2xx só fazem pular para o próximo.
    """

    name = "proxy_fetch"

    def __init__(
        self,
        fetcher: Fetcher,
        config: Optional[ResolverConfig] = None,
        templates: Optional[Sequence[str]] = None,
    ):
        self.fetcher = fetcher
        config = config or DEFAULT_CONFIG
        self.templates = tuple(config.proxy_templates if templates is None else templates)

    def run(self, ref: PostReference) -> ExtractionResult:
        for template in self.templates:
            url = relay_url(template, ref.canonical)
            try:
                resp = self.fetcher.get(url)
            except requests.RequestException as e:
                logger.info("[%s] relay %s failed: %s", self.name, template or "direct", e)
                continue
            if not resp.ok:
                logger.info(
                    "[%s] relay %s answered HTTP %s",
                    self.name,
                    template or "direct",
                    resp.status_code,
                )
                continue

            page = HtmlPage(resp.text)
            found = parse_html(page)
            if found:
                return ExtractionResult(
                    media_url=found.url,
                    media_type=found.type,
                    strategy_name=self.name,
                    thumbnail=extract_thumbnail(page),
                    duration=extract_duration(page),
                )

        raise ParseNotFound("All proxies failed")
