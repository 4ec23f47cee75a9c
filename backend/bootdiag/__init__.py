# backend/bootdiag/__init__.py
from __future__ import annotations

"""
Startup-failure analysis.

Diagnostics live in bootdiag.services.diagnostics, reporting in
bootdiag.services.reports, framework hooks in bootdiag.integrations.
"""

from bootdiag.models import Diagnosis, Failure, FailureCategory  # noqa: F401
from bootdiag.services.diagnostics import (  # noqa: F401
    analyze_exception,
    classify,
    decode_failure,
)
from bootdiag.services.reports import startup_guard  # noqa: F401
