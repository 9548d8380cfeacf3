import logging

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


class BaseHtmlStrategy(BaseStrategy):
    """
    Classe Pai para estratégias que baixam uma página HTML e rodam o
    Content Parser. Os filhos só dizem qual URL buscar (`target_url`).
    """

    def __init__(self, fetcher: Fetcher):
        self.fetcher = fetcher

    def target_url(self, ref: PostReference) -> str:
        raise NotImplementedError()

    def fetch_html(self, url: str) -> str:
        return self.fetcher.fetch_with_retry(url).text

    def parse(self, page: HtmlPage):
        return parse_html(page)

    def run(self, ref: PostReference) -> ExtractionResult:
        url = self.target_url(ref)
        logger.info("[%s] fetching %s", self.name, url)
        page = HtmlPage(self.fetch_html(url))

        found = self.parse(page)
        if not found:
            raise ParseNotFound(f"No video found via {self.name} at {url}")

        return ExtractionResult(
            media_url=found.url,
            media_type=found.type,
            strategy_name=self.name,
            thumbnail=extract_thumbnail(page),
            duration=extract_duration(page),
        )
