from reel_resolver.core.models import PostReference
from reel_resolver.core.scraping.parser import HtmlPage, parse_mirror_html

from .base_html import BaseHtmlStrategy


class MirrorDomainStrategy(BaseHtmlStrategy):
    """
    Especialista no domínio espelho (ddinstagram).
    Sabe que o vídeo vem num <source> ou <video> apontando para um .mp4.
    """

    name = "ddinstagram"

    def target_url(self, ref: PostReference) -> str:
        return ref.mirror_url

    def parse(self, page: HtmlPage):
        return parse_mirror_html(page)
