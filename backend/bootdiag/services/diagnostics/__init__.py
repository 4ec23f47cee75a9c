from __future__ import annotations

"""
Diagnostics for startup failures.

This package currently provides:
- failure_decoder: turn a caught exception chain into a Failure
- failure_analyzer: classify a Failure into a Diagnosis (description +
  suggested action) that can be shown to whoever is starting the app.

The goal is to keep failure analysis centralized and deterministic.
"""

from .failure_analyzer import (  # noqa: F401
    UNKNOWN_ACTION,
    UNKNOWN_DESCRIPTION,
    analyze_exception,
    classify,
)
from .failure_decoder import MAX_CAUSE_DEPTH, categorize, decode_failure  # noqa: F401
