from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_USER_AGENTS = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:109.0) Gecko/20100101 "
    "Firefox/121.0",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/119.0.0.0 Safari/537.36 Edg/119.0.0.0",
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_1 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.1 Mobile/15E148 Safari/604.1",
)

# Relay prefixes; the target URL is percent-encoded and appended.
# The trailing empty template means "no relay".
DEFAULT_PROXY_TEMPLATES = (
    "https://api.allorigins.win/raw?url=",
    "https://corsproxy.io/?",
    "https://thingproxy.freeboard.io/fetch/",
    "https://api.codetabs.com/v1/proxy?quest=",
    "https://proxy.cors.sh/",
    "",
)


class ResolverConfig(BaseModel):
    """
    Configuração imutável do resolvedor.

    Tudo que o pipeline precisa saber sobre a plataforma (domínios, pools de
    User-Agent, relays, política de retry) fica aqui e é injetado no Fetcher
    e nas estratégias. Nada disso é estado global mutável.
    """

    model_config = ConfigDict(frozen=True)

    user_agents: Tuple[str, ...] = DEFAULT_USER_AGENTS
    proxy_templates: Tuple[str, ...] = DEFAULT_PROXY_TEMPLATES

    # Política de retry do Fetch Executor
    max_retries: int = Field(default=2, ge=0)
    backoff_unit: float = Field(default=1.0, ge=0)
    timeout: float = Field(default=15, gt=0)

    # Prazo total (segundos) para todas as estratégias; None = sem limite
    deadline: Optional[float] = Field(default=None, gt=0)

    # Plataforma
    primary_domain: str = "instagram.com"
    mirror_domain: str = "ddinstagram.com"
    referer: str = "https://www.instagram.com/"
    api_query: str = "?__a=1&__d=dis"
    app_id: str = "936619743392459"

    @field_validator("user_agents")
    def user_agents_not_empty(cls, v):
        if not v:
            raise ValueError("user_agents must contain at least one entry")
        return v

    @field_validator("api_query")
    def api_query_starts_with_question_mark(cls, v):
        if not v.startswith("?"):
            raise ValueError("api_query must start with '?'")
        return v


DEFAULT_CONFIG = ResolverConfig()
