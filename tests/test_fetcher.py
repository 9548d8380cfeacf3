import random

import pytest
import requests

from reel_resolver.core.config import ResolverConfig
from reel_resolver.core.errors import FetchExhausted
from reel_resolver.core.scraping.fetcher import BROWSER_HEADERS, Fetcher


class DummyResponse:
    def __init__(self, status_code: int = 200, text: str = ""):
        self.status_code = status_code
        self.text = text
        self.reason = "OK" if status_code < 400 else "Error"

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400


class ScriptedSession:
    """Replays a list of responses/exceptions, one per call."""

    def __init__(self, script):
        self.script = list(script)
        self.calls = []

    def get(self, url, headers=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        item = self.script.pop(0) if self.script else DummyResponse(500)
        if isinstance(item, Exception):
            raise item
        return item


def make_fetcher(script, **config):
    sleeps = []
    session = ScriptedSession(script)
    fetcher = Fetcher(
        ResolverConfig(**config),
        session=session,
        rng=random.Random(1234),
        sleep=sleeps.append,
    )
    return fetcher, session, sleeps


def test_retries_exactly_max_retries_plus_one_with_linear_backoff():
    fetcher, session, sleeps = make_fetcher(
        [DummyResponse(500)] * 10, max_retries=3, backoff_unit=0.5
    )

    with pytest.raises(FetchExhausted) as exc_info:
        fetcher.fetch_with_retry("https://platform.example/p/A/")

    assert len(session.calls) == 4
    assert sleeps == [0.5, 1.0, 1.5]
    assert all(a < b for a, b in zip(sleeps, sleeps[1:]))
    assert exc_info.value.attempts == 4
    assert "HTTP 500" in exc_info.value.last_error


def test_network_errors_are_retried_like_bad_status():
    fetcher, session, sleeps = make_fetcher(
        [
            requests.ConnectionError("boom"),
            DummyResponse(403),
            DummyResponse(200, "<html>ok</html>"),
        ],
        max_retries=2,
    )

    resp = fetcher.fetch_with_retry("https://platform.example/p/A/")

    assert resp.text == "<html>ok</html>"
    assert len(session.calls) == 3
    assert sleeps == [1.0, 2.0]


def test_last_error_reports_network_failure():
    fetcher, _, _ = make_fetcher([requests.Timeout("slow")] * 3, max_retries=0)
    with pytest.raises(FetchExhausted) as exc_info:
        fetcher.fetch_with_retry("https://platform.example/p/A/")
    assert "slow" in exc_info.value.last_error


def test_no_sleep_after_first_success():
    fetcher, session, sleeps = make_fetcher([DummyResponse(200, "x")])
    fetcher.fetch_with_retry("https://platform.example/p/A/")
    assert len(session.calls) == 1
    assert sleeps == []


def test_browser_headers_and_user_agent_rotation():
    pool = ("UA-1", "UA-2", "UA-3")
    fetcher, session, _ = make_fetcher(
        [DummyResponse(200)] * 20, user_agents=pool, referer="https://platform.example/"
    )

    for _ in range(20):
        fetcher.get("https://platform.example/p/A/")

    agents = {c["headers"]["User-Agent"] for c in session.calls}
    assert agents <= set(pool)
    assert len(agents) > 1

    headers = session.calls[0]["headers"]
    assert headers["Referer"] == "https://platform.example/"
    for key in BROWSER_HEADERS:
        assert key in headers


def test_extra_headers_override_defaults():
    fetcher, session, _ = make_fetcher([DummyResponse(200)])
    fetcher.fetch_with_retry(
        "https://platform.example/p/A/?__a=1", headers={"Accept": "application/json"}
    )
    assert session.calls[0]["headers"]["Accept"] == "application/json"


def test_seeded_rng_makes_selection_deterministic():
    first, s1, _ = make_fetcher([DummyResponse(200)] * 5)
    second, s2, _ = make_fetcher([DummyResponse(200)] * 5)
    for _ in range(5):
        first.get("https://platform.example/p/A/")
        second.get("https://platform.example/p/A/")
    assert [c["headers"]["User-Agent"] for c in s1.calls] == [
        c["headers"]["User-Agent"] for c in s2.calls
    ]


def test_build_spec_uses_config_values():
    fetcher, _, _ = make_fetcher([], max_retries=5, backoff_unit=2.0, timeout=3)
    spec = fetcher.build_spec("https://platform.example/p/A/")
    assert spec.max_retries == 5
    assert spec.timeout == 3
    assert [spec.delay_before_retry(i) for i in range(3)] == [2.0, 4.0, 6.0]
