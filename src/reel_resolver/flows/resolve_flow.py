"""
Fluxo de resolução de mídia (explicado para leigos)

Este arquivo define um "flow" do Prefect que recebe a URL de um post,
valida, chama o núcleo de extração e devolve um envelope JSON no mesmo
formato que a API HTTP original devolvia:

- sucesso: ``{"status": "success", "source": <url>, "details": {...}, "timestamp": ...}``
- erro: ``{"status": "error", "message": ..., "code": 400|500}``

O flow não sabe nada de estratégias: toda a lógica de fallback fica no
Orchestrator. Aqui só existe a "cola" entre o mundo externo e o núcleo.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from prefect import flow, get_run_logger

from reel_resolver.core.config import ResolverConfig
from reel_resolver.core.errors import AllStrategiesExhausted, InvalidReference
from reel_resolver.core.models import ExtractionResult
from reel_resolver.core.scraping.prefect_tasks import (
    normalize_reference_task,
    resolve_media_task,
)

DEFAULT_DETAILS = {
    "type": "video/mp4",
    "method": "direct",
    "quality": "hd",
}


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def build_success_envelope(result: ExtractionResult) -> Dict[str, Any]:
    # o tipo genérico "video" vira o default "video/mp4" do envelope
    media_type = result.media_type
    if not media_type or media_type == "video":
        media_type = DEFAULT_DETAILS["type"]
    return {
        "status": "success",
        "source": result.media_url,
        "details": {
            "type": media_type,
            "method": result.strategy_name or DEFAULT_DETAILS["method"],
            "quality": result.quality or DEFAULT_DETAILS["quality"],
            "thumbnail": result.thumbnail,
            "duration": result.duration,
        },
        "timestamp": _now(),
    }


def build_error_envelope(
    message: str, code: int, error: Optional[str] = None
) -> Dict[str, Any]:
    envelope: Dict[str, Any] = {"status": "error", "message": message, "code": code}
    if error:
        envelope["error"] = error
    return envelope


@flow(name="Resolve Media", log_prints=True)
def resolve_media_flow(
    url: Optional[str], config_dict: Optional[dict] = None
) -> Dict[str, Any]:
    """Valida a entrada, resolve a mídia e devolve o envelope.

    config_dict: opcional, deve seguir `ResolverConfig`.
    """
    logger = get_run_logger()

    if not url:
        return build_error_envelope(
            "Missing URL parameter. Use: ?url=INSTAGRAM_URL", 400
        )

    try:
        config = ResolverConfig(**(config_dict or {}))
    except Exception as e:
        logger.error("Invalid config: %s", e)
        raise

    try:
        normalize_reference_task(url, config)
    except InvalidReference:
        return build_error_envelope(
            "Invalid Instagram URL. Must be a reel or post URL.", 400
        )

    try:
        result = resolve_media_task(url, config)
    except AllStrategiesExhausted as e:
        logger.error("Extraction error: %s", e)
        return build_error_envelope(
            "Video URL not found. The content might be private or unavailable.",
            500,
            error=str(e),
        )

    return build_success_envelope(result)


# ==========================================
# EXECUÇÃO LOCAL (Para testes)
# ==========================================
if __name__ == "__main__":
    import json
    import sys

    target = sys.argv[1] if len(sys.argv) > 1 else (
        "https://www.instagram.com/reel/CzR4YJNIr1G/"
    )
    print(json.dumps(resolve_media_flow(target), indent=2))
