import logging
from abc import ABC, abstractmethod

import requests

from reel_resolver.core.errors import FetchExhausted, ParseNotFound
from reel_resolver.core.models import (
    ExtractionResult,
    Failure,
    PostReference,
    StrategyOutcome,
    Success,
)

logger = logging.getLogger(__name__)


class BaseStrategy(ABC):
    """
    Contrato que toda estratégia de extração deve seguir.

    O Orchestrator só conhece `attempt()`, que nunca levanta exceção:
    devolve `Success` ou `Failure`. As subclasses implementam `run()`, que
    pode levantar `FetchExhausted`, `ParseNotFound` ou erros de rede.
    """

    name: str = "base"

    @abstractmethod
    def run(self, ref: PostReference) -> ExtractionResult:
        """
        Executa a técnica de extração e devolve o resultado.
        Se não encontrar mídia, levanta `ParseNotFound`.
        """
        raise NotImplementedError()

    def attempt(self, ref: PostReference) -> StrategyOutcome:
        try:
            return Success(self.run(ref))
        except (FetchExhausted, ParseNotFound) as e:
            return Failure(str(e))
        except requests.RequestException as e:
            return Failure(f"network error: {e}")
        except ValueError as e:
            # invalid JSON bodies and rejected results
            return Failure(f"invalid payload: {e}")
        except Exception as e:
            logger.exception("[%s] unexpected error", self.name)
            return Failure(f"unexpected error: {e!r}")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"
