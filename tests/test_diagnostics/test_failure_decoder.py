from __future__ import annotations

import errno
import socket

import pytest

from bootdiag.exceptions import (
    ApplicationContextError,
    BeanCreationError,
    BindError,
    NoSuchBeanDefinitionError,
    PortInUseError,
    SocketError,
    UnsatisfiedDependencyError,
)
from bootdiag.models import FailureCategory
from bootdiag.services.diagnostics import categorize, decode_failure


class _UnprintableError(Exception):
    def __str__(self) -> str:
        raise RuntimeError("cannot render")


class TestCategorize:
    @pytest.mark.parametrize(
        ("exc", "category"),
        [
            (ApplicationContextError("ctx"), FailureCategory.CONTEXT_INITIALIZATION),
            (PortInUseError(8080), FailureCategory.PORT_IN_USE),
            (UnsatisfiedDependencyError("a", "b"), FailureCategory.UNSATISFIED_DEPENDENCY),
            (NoSuchBeanDefinitionError("repo"), FailureCategory.BEAN_NOT_FOUND),
            (BeanCreationError("repo", "init failed"), FailureCategory.BEAN_CREATION),
            (BindError("bind"), FailureCategory.BINDING),
            (OSError(errno.EADDRINUSE, "Address already in use"), FailureCategory.BINDING),
            (SocketError("reset"), FailureCategory.SOCKET),
            (ConnectionRefusedError(errno.ECONNREFUSED, "Connection refused"), FailureCategory.SOCKET),
            (socket.gaierror(-2, "Name or service not known"), FailureCategory.SOCKET),
            (OSError(errno.ENOENT, "No such file"), FailureCategory.UNKNOWN),
            (RuntimeError("other"), FailureCategory.UNKNOWN),
        ],
    )
    def test_known_exceptions(self, exc, category) -> None:
        assert categorize(exc) is category

    def test_no_such_bean_is_a_lookup_error(self) -> None:
        assert isinstance(NoSuchBeanDefinitionError("repo"), LookupError)


class TestDecodeFailure:
    def test_message_and_no_cause(self) -> None:
        failure = decode_failure(SocketError("connection refused"))
        assert failure.category is FailureCategory.SOCKET
        assert failure.message == "connection refused"
        assert failure.cause is None

    def test_empty_message_is_absent(self) -> None:
        assert decode_failure(RuntimeError()).message is None

    def test_unprintable_exception_has_no_message(self) -> None:
        failure = decode_failure(_UnprintableError())
        assert failure.category is FailureCategory.UNKNOWN
        assert failure.message is None

    def test_explicit_cause_is_followed(self) -> None:
        try:
            try:
                raise PortInUseError(9000)
            except PortInUseError as exc:
                raise ApplicationContextError("server failed") from exc
        except ApplicationContextError as exc:
            failure = decode_failure(exc)

        assert failure.category is FailureCategory.CONTEXT_INITIALIZATION
        assert failure.cause is not None
        assert failure.cause.category is FailureCategory.PORT_IN_USE
        assert failure.cause.message == "Port 9000 is already in use"

    def test_implicit_context_is_followed(self) -> None:
        try:
            try:
                raise BindError("cannot bind")
            except BindError:
                raise ApplicationContextError("server failed")
        except ApplicationContextError as exc:
            failure = decode_failure(exc)

        assert failure.cause_is(FailureCategory.BINDING)

    def test_explicit_cause_wins_over_context(self) -> None:
        error = ApplicationContextError("server failed")
        error.__context__ = BindError("cannot bind")
        error.__cause__ = PortInUseError(8080)
        # Assigning __cause__ suppresses the context; keep both links live
        error.__suppress_context__ = False

        failure = decode_failure(error)

        assert failure.cause.category is FailureCategory.PORT_IN_USE
        assert failure.cause.message == "Port 8080 is already in use"

    def test_suppressed_context_is_ignored(self) -> None:
        try:
            try:
                raise BindError("cannot bind")
            except BindError:
                raise ApplicationContextError("server failed") from None
        except ApplicationContextError as exc:
            failure = decode_failure(exc)

        assert failure.cause is None

    def test_depth_is_limited(self) -> None:
        root = RuntimeError("level 0")
        current = root
        for level in range(1, 6):
            nxt = RuntimeError(f"level {level}")
            current.__cause__ = nxt
            current = nxt

        failure = decode_failure(root, max_depth=2)

        assert failure.message == "level 0"
        assert failure.cause.message == "level 1"
        assert failure.cause.cause.message == "level 2"
        assert failure.cause.cause.cause is None

    def test_cycles_terminate(self) -> None:
        first = ApplicationContextError("first")
        second = BindError("second")
        first.__cause__ = second
        second.__cause__ = first

        failure = decode_failure(first)

        assert failure.cause.category is FailureCategory.BINDING
        assert failure.cause.cause is None

    def test_source_exception_is_not_modified(self) -> None:
        exc = ApplicationContextError("ctx")
        decode_failure(exc)
        assert exc.__cause__ is None
        assert str(exc) == "ctx"
