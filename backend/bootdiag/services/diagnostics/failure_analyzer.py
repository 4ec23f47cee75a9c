from __future__ import annotations

"""backend/bootdiag/services/diagnostics/failure_analyzer.py

Centralized analysis of startup failures.

This module looks at a decoded Failure (category, message, cause) and
produces a Diagnosis: a human-readable description plus a suggested action.

The analysis is:
- deterministic (first matching rule wins, rules are checked in order)
- total (unrecognised failures get a generic diagnosis, nothing is raised)
- side-effect free (reporting lives in bootdiag.services.reports)

Recognised categories:
- context-initialization-error (optionally wrapping port-in-use / binding-error)
- socket-error
- unsatisfied-dependency
- bean-not-found
- binding-error
- bean-creation-error
"""

from typing import Optional

from bootdiag.models import Diagnosis, Failure, FailureCategory
from bootdiag.services.diagnostics.failure_decoder import MAX_CAUSE_DEPTH, decode_failure

UNKNOWN_DESCRIPTION = "Unknown failure"
UNKNOWN_ACTION = "No specific action available"


def _text(value: Optional[str]) -> str:
    return value or ""


def _analyze_port_in_use(failure: Failure) -> Diagnosis:
    return Diagnosis(
        description=f"Port issue: {_text(failure.message)}",
        action="Configure a new port",
        source=failure,
    )


# Covers every bean creation failure without a more specific rule.
def _analyze_bean_creation(failure: Failure) -> Diagnosis:
    return Diagnosis(
        description=f"Bean creation failed: {_text(failure.message)}",
        action="Check bean configuration, dependencies, or type mismatches",
        source=failure,
    )


def _analyze_bean_not_found(failure: Failure) -> Diagnosis:
    return Diagnosis(
        description=f"Bean not found: {_text(failure.message)}",
        action="Ensure that the bean is correctly defined in the application context",
        source=failure,
    )


def _analyze_unsatisfied_dependency(failure: Failure) -> Diagnosis:
    return Diagnosis(
        description=f"Unsatisfied dependency: {_text(failure.message)}",
        action="Ensure that all required dependencies are available and properly configured",
        source=failure,
    )


# Socket errors are sometimes port problems and sometimes plain networking.
def _analyze_socket(failure: Failure) -> Diagnosis:
    return Diagnosis(
        description=f"Network error occurred: {_text(failure.message)}",
        action=(
            "This could be caused by network issues or unavailable resources. "
            "Check if the port is being used by another process."
        ),
        source=failure,
    )


def _analyze_context(failure: Failure) -> Diagnosis:
    # A binding failure underneath is the real problem
    if failure.cause is not None and failure.cause_is(FailureCategory.BINDING):
        return _analyze_port_binding(failure.cause)

    return Diagnosis(
        description=f"Application context initialization failed: {_text(failure.message)}",
        action="Check the application context initialization logs for further details",
        source=failure,
    )


def _analyze_port_binding(failure: Failure) -> Diagnosis:
    return Diagnosis(
        description=f"Port binding failed: {_text(failure.message)}",
        action=(
            "The port might already be in use. Try changing the port by updating "
            "the configured port setting or inspecting which process holds that port."
        ),
        source=failure,
    )


def classify(failure: Failure) -> Diagnosis:
    """Produce a Diagnosis for a startup failure.

    Never raises; unknown failures get a generic diagnosis.
    """
    category = failure.category

    # 1) Port already taken while the context was starting the server
    if (
        category is FailureCategory.CONTEXT_INITIALIZATION
        and failure.cause is not None
        and failure.cause_is(FailureCategory.PORT_IN_USE)
    ):
        return _analyze_port_in_use(failure.cause)

    # 2) Direct failures
    if category is FailureCategory.SOCKET:
        return _analyze_socket(failure)
    if category is FailureCategory.UNSATISFIED_DEPENDENCY:
        return _analyze_unsatisfied_dependency(failure)
    if category is FailureCategory.BEAN_NOT_FOUND:
        return _analyze_bean_not_found(failure)
    if category is FailureCategory.BINDING:
        return _analyze_port_binding(failure)

    # 3) Context failures (may still point at a binding problem)
    if category is FailureCategory.CONTEXT_INITIALIZATION:
        return _analyze_context(failure)

    # 4) Generic bean creation, after its more specific subtypes
    if category is FailureCategory.BEAN_CREATION:
        return _analyze_bean_creation(failure)

    # 5) Fallback
    return Diagnosis(description=UNKNOWN_DESCRIPTION, action=UNKNOWN_ACTION, source=failure)


def analyze_exception(exc: BaseException, *, max_depth: int = MAX_CAUSE_DEPTH) -> Diagnosis:
    """Decode ``exc`` and classify it."""
    return classify(decode_failure(exc, max_depth=max_depth))
