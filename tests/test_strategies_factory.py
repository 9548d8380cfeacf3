from reel_resolver.core.scraping.fetcher import Fetcher
from reel_resolver.strategies.embed_page import EmbedPageStrategy
from reel_resolver.strategies.factory import build_strategy, get_strategy
from reel_resolver.strategies.proxy_relay import ProxyRelayStrategy


def test_get_strategy_known_names():
    cls = get_strategy("embed_parsing")
    assert cls is EmbedPageStrategy

    cls2 = get_strategy("proxy_fetch")
    assert cls2 is ProxyRelayStrategy


def test_get_strategy_unknown_name_raises():
    try:
        get_strategy("unknown_strategy")
        raised = False
    except ValueError:
        raised = True

    assert raised


def test_build_strategy_passes_config_through():
    strategy = build_strategy("proxy_fetch", Fetcher())
    assert strategy.templates[-1] == ""
