from __future__ import annotations

import pytest

from bootdiag.config import get_settings
from bootdiag.services import statsig_client


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate each test from cached settings and the telemetry singleton."""
    monkeypatch.delenv("STATSIG_SERVER_SECRET", raising=False)
    monkeypatch.delenv("REPORT_STARTUP_FAILURES", raising=False)
    monkeypatch.delenv("FAILURE_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    monkeypatch.setattr(statsig_client, "_statsig_client", None)
    yield
    get_settings.cache_clear()


@pytest.fixture
def captured_events(monkeypatch):
    """Record telemetry calls made by the reporter instead of sending them."""
    from bootdiag.services.reports import reporter

    events: list[dict] = []
    monkeypatch.setattr(
        reporter,
        "log_startup_event",
        lambda name, **kwargs: events.append({"event_name": name, **kwargs}),
    )
    monkeypatch.setattr(reporter, "shutdown_statsig", lambda: None)
    return events
