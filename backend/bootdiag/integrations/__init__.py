# backend/bootdiag/integrations/__init__.py
from __future__ import annotations

"""
Hooks that attach startup-failure reporting to application frameworks.
"""

from .fastapi_lifespan import guard_startup  # noqa: F401
