# backend/bootdiag/services/__init__.py
from __future__ import annotations

"""
Service layer: failure diagnostics, reporting and telemetry.
"""
