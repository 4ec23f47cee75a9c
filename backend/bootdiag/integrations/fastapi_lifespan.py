# backend/bootdiag/integrations/fastapi_lifespan.py
from __future__ import annotations

"""
FastAPI startup guard.

Wraps an application's lifespan so that anything raised before the app
starts serving (startup handlers, the ``lifespan`` body up to ``yield``)
is analyzed and reported, then re-raised so the server still exits.

Failures after startup (request handling, shutdown) are left alone.

Example usage:
    app = FastAPI(lifespan=lifespan)
    guard_startup(app)
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastapi import FastAPI

from bootdiag.services.reports import Reporter, report_startup_failure


def guard_startup(app: FastAPI, reporter: Reporter | None = None) -> FastAPI:
    original = app.router.lifespan_context

    @asynccontextmanager
    async def guarded_lifespan(app_: Any) -> AsyncIterator[Any]:
        started = False
        try:
            async with original(app_) as state:
                started = True
                yield state
        except Exception as exc:
            if not started:
                report_startup_failure(exc, reporter)
            raise

    app.router.lifespan_context = guarded_lifespan
    return app
