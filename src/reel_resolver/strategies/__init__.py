"""Extraction strategies, one per access pattern, plus the factory that
lists them in priority order.
"""

from .direct_fetch import DirectFetchStrategy
from .embed_page import EmbedPageStrategy
from .factory import STRATEGY_ORDER, build_strategy, default_strategies, get_strategy
from .internal_api import InternalApiStrategy
from .mirror_domain import MirrorDomainStrategy
from .proxy_relay import ProxyRelayStrategy

__all__ = [
    "EmbedPageStrategy",
    "MirrorDomainStrategy",
    "InternalApiStrategy",
    "DirectFetchStrategy",
    "ProxyRelayStrategy",
    "STRATEGY_ORDER",
    "get_strategy",
    "build_strategy",
    "default_strategies",
]
