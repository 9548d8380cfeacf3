"""Value objects that travel through the extraction pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_MEDIA_TYPE = "video"


@dataclass(frozen=True)
class PostReference:
    """Normalized post URL plus the variants used by the strategies."""

    raw: str
    canonical: str
    embed_url: str
    mirror_url: str
    api_url: str


@dataclass(frozen=True)
class FetchSpec:
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    max_retries: int = 2
    backoff_unit: float = 1.0
    timeout: float = 15

    def delay_before_retry(self, attempt: int) -> float:
        # linear: 1x, 2x, 3x ...
        return self.backoff_unit * (attempt + 1)


@dataclass(frozen=True)
class ParsedMedia:
    url: str
    type: str = DEFAULT_MEDIA_TYPE


class ExtractionResult(BaseModel):
    """Resolved media address returned to the caller."""

    model_config = ConfigDict(frozen=True)

    media_url: str
    media_type: str = DEFAULT_MEDIA_TYPE
    strategy_name: str
    quality: Optional[str] = None
    thumbnail: Optional[str] = None
    duration: Optional[float] = None

    @field_validator("media_url")
    def media_url_not_empty(cls, v):
        if not v or not v.strip():
            raise ValueError("media_url must not be empty")
        return v

    @field_validator("media_type")
    def media_type_default(cls, v):
        return v or DEFAULT_MEDIA_TYPE


@dataclass(frozen=True)
class Success:
    result: ExtractionResult

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    reason: str

    @property
    def ok(self) -> bool:
        return False


StrategyOutcome = Union[Success, Failure]
