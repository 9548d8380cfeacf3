"""Tarefas Prefect que usam os componentes de resolução.

Estas funções adaptam o núcleo (normalizer, resolver) para o modelo de
execução do Prefect, adicionando logs. Não há retry no nível do Prefect:
os retries já acontecem dentro do Fetcher e a ordem de fallback é do
Orchestrator.
"""

from __future__ import annotations

from typing import Optional

from prefect import get_run_logger, task

from reel_resolver.core.config import ResolverConfig
from reel_resolver.core.models import ExtractionResult, PostReference
from reel_resolver.core.scraping.normalizer import normalize
from reel_resolver.resolver import resolve


@task(name="normalize_reference", retries=0)
def normalize_reference_task(
    url: str, config: Optional[ResolverConfig] = None
) -> PostReference:
    logger = get_run_logger()
    ref = normalize(url, config)
    logger.info("Normalized %s -> %s", url, ref.canonical)
    return ref


@task(name="resolve_media", retries=0)
def resolve_media_task(
    url: str, config: Optional[ResolverConfig] = None
) -> ExtractionResult:
    logger = get_run_logger()
    logger.info("Processing: %s", url)
    result = resolve(url, config)
    logger.info("Resolved %s via %s", result.media_url, result.strategy_name)
    return result
