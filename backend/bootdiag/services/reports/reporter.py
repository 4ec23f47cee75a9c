# backend/bootdiag/services/reports/reporter.py
from __future__ import annotations

"""
Reporting of startup failures.

This module depends on:
- bootdiag.services.diagnostics for turning exceptions into diagnoses
- bootdiag.services.statsig_client for telemetry events
- bootdiag.config.get_settings for the reporting switches

It is used by:
- startup_guard (plain scripts / workers)
- bootdiag.integrations.fastapi_lifespan (FastAPI applications)
"""

import logging
from contextlib import contextmanager
from typing import Callable, Iterator

from bootdiag.config import get_settings
from bootdiag.models import Diagnosis
from bootdiag.schemas import DiagnosisRead
from bootdiag.services.diagnostics import analyze_exception
from bootdiag.services.reports.failure_report import build_failure_report
from bootdiag.services.statsig_client import log_startup_event, shutdown_statsig

logger = logging.getLogger(__name__)

Reporter = Callable[[Diagnosis], None]

STARTUP_FAILURE_EVENT = "startup_failure_analyzed"


def _log_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.ERROR


def report_diagnosis(diagnosis: Diagnosis) -> None:
    """Log the failure banner and emit a telemetry event.

    The process is about to exit, so telemetry is flushed right away.
    """
    settings = get_settings()
    if not settings.report_startup_failures:
        return

    structured = DiagnosisRead.model_validate(diagnosis)
    logger.log(
        _log_level(settings.failure_log_level),
        build_failure_report(diagnosis),
        extra={"diagnosis": structured.model_dump(mode="json")},
    )

    log_startup_event(
        STARTUP_FAILURE_EVENT,
        value=diagnosis.source.category.value,
        metadata={
            "app_name": settings.app_name,
            "description": diagnosis.description,
            "action": diagnosis.action,
        },
    )
    shutdown_statsig()


def report_exception(exc: BaseException, reporter: Reporter | None = None) -> Diagnosis:
    diagnosis = analyze_exception(exc)
    (reporter or report_diagnosis)(diagnosis)
    return diagnosis


def report_startup_failure(exc: BaseException, reporter: Reporter | None = None) -> None:
    """Report `exc` without letting a reporting error replace it.

    Callers re-raise `exc` afterwards, so reporting must not raise.
    """
    try:
        report_exception(exc, reporter)
    except Exception:  # noqa: BLE001
        logger.exception("Startup failure reporting failed")


@contextmanager
def startup_guard(reporter: Reporter | None = None) -> Iterator[None]:
    """
    Analyze and report any exception raised inside the block, then re-raise.

    Example usage:
        with startup_guard():
            container.refresh()
            server.start()
    """
    try:
        yield
    except Exception as exc:
        report_startup_failure(exc, reporter)
        raise
