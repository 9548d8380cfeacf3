from typing import List, Optional

from reel_resolver.core.config import DEFAULT_CONFIG, ResolverConfig
from reel_resolver.core.interfaces import BaseStrategy
from reel_resolver.core.scraping.fetcher import Fetcher
from reel_resolver.strategies.direct_fetch import DirectFetchStrategy
from reel_resolver.strategies.embed_page import EmbedPageStrategy
from reel_resolver.strategies.internal_api import InternalApiStrategy
from reel_resolver.strategies.mirror_domain import MirrorDomainStrategy
from reel_resolver.strategies.proxy_relay import ProxyRelayStrategy

# Ordem de prioridade fixa: o Orchestrator tenta nesta sequência.
STRATEGY_ORDER = (
    EmbedPageStrategy.name,
    MirrorDomainStrategy.name,
    InternalApiStrategy.name,
    DirectFetchStrategy.name,
    ProxyRelayStrategy.name,
)


def get_strategy(name: str):
    """
    Factory Pattern: devolve a classe da estratégia pelo nome.
    """
    strategies_map = {
        EmbedPageStrategy.name: EmbedPageStrategy,
        MirrorDomainStrategy.name: MirrorDomainStrategy,
        InternalApiStrategy.name: InternalApiStrategy,
        DirectFetchStrategy.name: DirectFetchStrategy,
        ProxyRelayStrategy.name: ProxyRelayStrategy,
    }

    strategy_class = strategies_map.get(name)

    if not strategy_class:
        raise ValueError(f"Strategy '{name}' is not registered in the factory.")

    return strategy_class


def build_strategy(
    name: str, fetcher: Fetcher, config: Optional[ResolverConfig] = None
) -> BaseStrategy:
    config = config or DEFAULT_CONFIG
    cls = get_strategy(name)
    if cls in (InternalApiStrategy, ProxyRelayStrategy):
        return cls(fetcher, config=config)
    return cls(fetcher)


def default_strategies(
    fetcher: Optional[Fetcher] = None, config: Optional[ResolverConfig] = None
) -> List[BaseStrategy]:
    config = config or DEFAULT_CONFIG
    fetcher = fetcher or Fetcher(config)
    return [build_strategy(name, fetcher, config) for name in STRATEGY_ORDER]
