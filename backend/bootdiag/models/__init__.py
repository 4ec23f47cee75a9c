# backend/bootdiag/models/__init__.py
from __future__ import annotations

"""
Core value objects for startup-failure analysis.

It is used by:
- bootdiag.services.diagnostics (decoding and classification)
- bootdiag.services.reports (rendering and logging)
- bootdiag.schemas (structured views for logs / telemetry)

Models:
- FailureCategory: closed set of known startup failure kinds
- Failure: a decoded exception with its category, message and cause
- Diagnosis: description + suggested action for a Failure
"""

import enum
from dataclasses import dataclass
from typing import Optional


class FailureCategory(str, enum.Enum):
    CONTEXT_INITIALIZATION = "context-initialization-error"
    PORT_IN_USE = "port-in-use"
    SOCKET = "socket-error"
    UNSATISFIED_DEPENDENCY = "unsatisfied-dependency"
    BEAN_NOT_FOUND = "bean-not-found"
    BINDING = "binding-error"
    BEAN_CREATION = "bean-creation-error"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Failure:
    """A startup failure, decoded once from the raised exception.

    ``cause`` is the failure that triggered this one, if any. Chains are
    shallow in practice; the decoder bounds their depth.
    """

    category: FailureCategory
    message: Optional[str] = None
    cause: Optional["Failure"] = None

    def __post_init__(self) -> None:
        # Accept raw category codes such as "socket-error"
        object.__setattr__(self, "category", FailureCategory(self.category))

    def cause_is(self, category: FailureCategory) -> bool:
        return self.cause is not None and self.cause.category is category


@dataclass(frozen=True)
class Diagnosis:
    """Result of analyzing a Failure."""

    description: str
    action: str
    # Kept for traceability only; never interpreted further.
    source: Failure
