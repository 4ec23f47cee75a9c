from __future__ import annotations

"""backend/bootdiag/services/diagnostics/failure_decoder.py

Turn a caught exception into a Failure.

The category is decided once, here, by ordered isinstance checks against
known exception types (most specific first). The cause chain is followed
through ``__cause__`` and, when not suppressed, ``__context__``, the same
links the interpreter prints in a traceback.

Decoding never raises: it runs inside error reporting.
"""

import errno
import socket
from typing import Callable, Optional

from bootdiag.exceptions import (
    ApplicationContextError,
    BeanCreationError,
    BindError,
    NoSuchBeanDefinitionError,
    PortInUseError,
    SocketError,
    UnsatisfiedDependencyError,
)
from bootdiag.models import Failure, FailureCategory

MAX_CAUSE_DEPTH = 8


def _is_address_in_use(exc: BaseException) -> bool:
    return isinstance(exc, OSError) and exc.errno == errno.EADDRINUSE


def _is_type(*types: type) -> Callable[[BaseException], bool]:
    return lambda exc: isinstance(exc, types)


# Order matters: UnsatisfiedDependencyError is a BeanCreationError, and an
# EADDRINUSE OSError must not be reported as a plain socket error.
_CATEGORY_RULES: list[tuple[Callable[[BaseException], bool], FailureCategory]] = [
    (_is_type(ApplicationContextError), FailureCategory.CONTEXT_INITIALIZATION),
    (_is_type(PortInUseError), FailureCategory.PORT_IN_USE),
    (_is_type(UnsatisfiedDependencyError), FailureCategory.UNSATISFIED_DEPENDENCY),
    (_is_type(NoSuchBeanDefinitionError), FailureCategory.BEAN_NOT_FOUND),
    (_is_type(BeanCreationError), FailureCategory.BEAN_CREATION),
    (_is_type(BindError), FailureCategory.BINDING),
    (_is_address_in_use, FailureCategory.BINDING),
    (
        _is_type(SocketError, ConnectionError, socket.gaierror, socket.herror),
        FailureCategory.SOCKET,
    ),
]


def categorize(exc: BaseException) -> FailureCategory:
    for matches, category in _CATEGORY_RULES:
        if matches(exc):
            return category
    return FailureCategory.UNKNOWN


def _message(exc: BaseException) -> Optional[str]:
    try:
        text = str(exc)
    except Exception:  # noqa: BLE001
        return None
    return text or None


def _underlying(exc: BaseException) -> Optional[BaseException]:
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__


def decode_failure(exc: BaseException, *, max_depth: int = MAX_CAUSE_DEPTH) -> Failure:
    """Decode ``exc`` and up to ``max_depth`` levels of its causes.

    Links beyond the limit, and links that point back into the chain, are
    dropped.
    """
    chain: list[BaseException] = [exc]
    seen = {id(exc)}
    current = _underlying(exc)
    while current is not None and id(current) not in seen and len(chain) <= max_depth:
        chain.append(current)
        seen.add(id(current))
        current = _underlying(current)

    failure: Optional[Failure] = None
    for link in reversed(chain):
        failure = Failure(
            category=categorize(link),
            message=_message(link),
            cause=failure,
        )
    return failure  # type: ignore[return-value]
