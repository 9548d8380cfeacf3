"""HTML parsing helpers: ordered media-URL extraction rules.

Each rule is a pure function ``page -> ParsedMedia | None`` where ``page``
is the raw text or an `HtmlPage` wrapping it. `HTML_RULES` holds the
priority order; `parse_html` returns the first hit. The soup is built at
most once per `HtmlPage` and lives only as long as that page object.
"""

from __future__ import annotations

import re
from typing import Callable, Optional, Sequence, Union

from bs4 import BeautifulSoup

from reel_resolver.core.models import ParsedMedia

VIDEO_URL_RE = re.compile(r'"video_url"\s*:\s*"([^"]+)"')
VIDEO_VERSIONS_RE = re.compile(
    r'"video_versions"\s*:\s*\[\s*{\s*[^}]*"url"\s*:\s*"([^"]+)"'
)
CDN_MP4_RE = re.compile(
    r'(https://[^"\s]+\.(?:fbcdn|instagram)\.(?:net|com)[^"\s]*\.mp4[^"\s]*)'
)
CONTENT_URL_RE = re.compile(r'"contentUrl"\s*:\s*"([^"]+)"')
DISPLAY_URL_RE = re.compile(r'"display_url"\s*:\s*"([^"]+)"')
VIDEO_DURATION_RE = re.compile(r'"video_duration"\s*:\s*([0-9]+(?:\.[0-9]+)?)')


class HtmlPage:
    """One fetched page: its text plus a lazily built soup."""

    def __init__(self, text: str):
        self.text = text or ""
        self._soup: Optional[BeautifulSoup] = None

    @property
    def soup(self) -> BeautifulSoup:
        if self._soup is None:
            self._soup = BeautifulSoup(self.text, "html.parser")
        return self._soup


Page = Union[str, HtmlPage]
Rule = Callable[[Page], Optional[ParsedMedia]]


def as_page(page: Page) -> HtmlPage:
    return page if isinstance(page, HtmlPage) else HtmlPage(page)


def unescape_json_url(value: str) -> str:
    """Undo the escaping found in inline script JSON (``\\/`` and ``\\u0026``)."""
    return value.replace("\\/", "/").replace("\\u0026", "&")


def _first_src(page: HtmlPage, tag_name: str, marker: str = "") -> Optional[ParsedMedia]:
    for tag in page.soup.find_all(tag_name, src=True):
        src = str(tag["src"]).strip()
        if src and marker in src:
            return ParsedMedia(url=src)
    return None


def og_video_rule(page: Page) -> Optional[ParsedMedia]:
    tag = as_page(page).soup.find("meta", attrs={"property": "og:video"})
    content = tag.get("content") if tag else None
    if content:
        return ParsedMedia(url=str(content))
    return None


def video_tag_rule(page: Page) -> Optional[ParsedMedia]:
    # empty src="" tags are skipped, later ones still count
    return _first_src(as_page(page), "video")


def video_url_key_rule(page: Page) -> Optional[ParsedMedia]:
    m = VIDEO_URL_RE.search(as_page(page).text)
    if m:
        return ParsedMedia(url=unescape_json_url(m.group(1)))
    return None


def video_versions_rule(page: Page) -> Optional[ParsedMedia]:
    m = VIDEO_VERSIONS_RE.search(as_page(page).text)
    if m:
        return ParsedMedia(url=unescape_json_url(m.group(1)))
    return None


def cdn_mp4_rule(page: Page) -> Optional[ParsedMedia]:
    m = CDN_MP4_RE.search(as_page(page).text)
    if m:
        return ParsedMedia(url=m.group(1))
    return None


def content_url_rule(page: Page) -> Optional[ParsedMedia]:
    # JSON-LD
    m = CONTENT_URL_RE.search(as_page(page).text)
    if m:
        return ParsedMedia(url=m.group(1))
    return None


HTML_RULES: Sequence[Rule] = (
    og_video_rule,
    video_tag_rule,
    video_url_key_rule,
    video_versions_rule,
    cdn_mp4_rule,
    content_url_rule,
)


def parse_html(html: Page, rules: Sequence[Rule] = HTML_RULES) -> Optional[ParsedMedia]:
    """Return the first media URL found by `rules`, or None.

    Not finding anything is a normal outcome, so this never raises for
    odd input.
    """
    page = as_page(html)
    if not page.text:
        return None
    for rule in rules:
        found = rule(page)
        if found and found.url:
            return found
    return None


def source_tag_rule(page: Page) -> Optional[ParsedMedia]:
    return _first_src(as_page(page), "source", ".mp4")


def mp4_video_tag_rule(page: Page) -> Optional[ParsedMedia]:
    return _first_src(as_page(page), "video", ".mp4")


MIRROR_RULES: Sequence[Rule] = (source_tag_rule, mp4_video_tag_rule)


def parse_mirror_html(html: Page) -> Optional[ParsedMedia]:
    """Narrower variant for mirror pages: only ``.mp4`` sources count."""
    return parse_html(html, MIRROR_RULES)


def extract_thumbnail(html: Page) -> Optional[str]:
    page = as_page(html)
    if not page.text:
        return None
    tag = page.soup.find("meta", attrs={"property": "og:image"})
    if tag and tag.get("content"):
        return str(tag["content"])
    m = DISPLAY_URL_RE.search(page.text)
    if m:
        return unescape_json_url(m.group(1))
    return None


def extract_duration(html: Page) -> Optional[float]:
    page = as_page(html)
    m = VIDEO_DURATION_RE.search(page.text)
    return float(m.group(1)) if m else None
