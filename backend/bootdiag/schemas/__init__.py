# backend/bootdiag/schemas/__init__.py
from __future__ import annotations

"""
Pydantic views of diagnostics.

This module depends on:
- bootdiag.models.FailureCategory

It is used by:
- bootdiag.services.reports (structured log records and telemetry metadata)
"""

from typing import Optional

from pydantic import BaseModel

from bootdiag.models import FailureCategory


class FailureRead(BaseModel):
    category: FailureCategory
    message: Optional[str]
    cause: Optional[FailureRead] = None

    class Config:
        from_attributes = True


class DiagnosisRead(BaseModel):
    description: str
    action: str
    source: FailureRead

    class Config:
        from_attributes = True
