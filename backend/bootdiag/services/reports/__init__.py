# backend/bootdiag/services/reports/__init__.py
from __future__ import annotations

"""
Reporting utilities for startup failures.

This package provides:
- Text rendering of a diagnosis (the "APPLICATION FAILED TO START" banner)
- Logging + telemetry of a diagnosis
- A context manager that reports failures raised while starting up

High-level helpers exposed:

- build_failure_report(diagnosis) -> str
- report_diagnosis(diagnosis) -> None
- report_exception(exc, reporter=None) -> Diagnosis
- report_startup_failure(exc, reporter=None) -> None (never raises)
- startup_guard(reporter=None)
"""

from .failure_report import build_failure_report  # noqa: F401
from .reporter import (  # noqa: F401
    Reporter,
    report_diagnosis,
    report_exception,
    report_startup_failure,
    startup_guard,
)
