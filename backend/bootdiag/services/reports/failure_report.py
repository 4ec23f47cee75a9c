# backend/bootdiag/services/reports/failure_report.py
from __future__ import annotations

"""
Text rendering of a startup-failure Diagnosis.

This module is deliberately pure and side-effect free: it takes a
Diagnosis and returns the banner shown to whoever started the process.

It does **not** log or talk to external services.
"""

from bootdiag.models import Diagnosis

BANNER_RULE = "*" * 27
BANNER_TITLE = "APPLICATION FAILED TO START"


def build_failure_report(diagnosis: Diagnosis) -> str:
    """
    Build the failure banner for a diagnosis.

    Layout::

        ***************************
        APPLICATION FAILED TO START
        ***************************

        Description:

        <description>

        Action:

        <action>
    """
    lines: list[str] = [
        "",
        "",
        BANNER_RULE,
        BANNER_TITLE,
        BANNER_RULE,
        "",
        "Description:",
        "",
        diagnosis.description,
        "",
    ]
    if diagnosis.action:
        lines.extend(["Action:", "", diagnosis.action, ""])
    return "\n".join(lines)
