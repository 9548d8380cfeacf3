from reel_resolver.core.models import PostReference

from .base_html import BaseHtmlStrategy


class EmbedPageStrategy(BaseHtmlStrategy):
    """
    Busca a página /embed/ do post. É a fonte mais confiável: o embed
    costuma trazer o og:video ou o JSON inline com `video_url`.
    """

    name = "embed_parsing"

    def target_url(self, ref: PostReference) -> str:
        return ref.embed_url
