from reel_resolver.core.models import PostReference

from .base_html import BaseHtmlStrategy


class DirectFetchStrategy(BaseHtmlStrategy):
    """Busca a URL canônica do post diretamente."""

    name = "direct_fetch"

    def target_url(self, ref: PostReference) -> str:
        return ref.canonical
