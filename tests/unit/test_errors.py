"""Tests for errors.py: codes, context and the inheritance tree."""

from __future__ import annotations

import pytest

from buildinify.errors import (
    BuildinifyAuthError,
    BuildinifyConfigError,
    BuildinifyError,
    BuildinifyNetworkError,
    BuildinifyNotFoundError,
    BuildinifyPermissionError,
    BuildinifyRetryExhaustedError,
    BuildinifyTransportError,
    BuildinifyValidationError,
    ErrorCode,
)

TRANSPORT_SUBCLASSES = [
    (BuildinifyValidationError, ErrorCode.VALIDATION_ERROR),
    (BuildinifyAuthError, ErrorCode.AUTH_ERROR),
    (BuildinifyPermissionError, ErrorCode.PERMISSION_ERROR),
    (BuildinifyNotFoundError, ErrorCode.NOT_FOUND),
    (BuildinifyRetryExhaustedError, ErrorCode.RETRY_EXHAUSTED),
    (BuildinifyNetworkError, ErrorCode.NETWORK_ERROR),
]


class TestHierarchy:
    @pytest.mark.parametrize("cls,code", TRANSPORT_SUBCLASSES)
    def test_transport_subclasses(self, cls, code):
        err = cls("failed", context={"path": "/x"})
        assert isinstance(err, BuildinifyTransportError)
        assert isinstance(err, BuildinifyError)
        assert err.code == code
        assert err.context == {"path": "/x"}

    def test_bare_transport_error(self):
        err = BuildinifyTransportError()
        assert err.code == ErrorCode.TRANSPORT_ERROR
        assert err.message == "Transport error"

    def test_config_error_is_not_transport(self):
        err = BuildinifyConfigError("no key")
        assert not isinstance(err, BuildinifyTransportError)
        assert err.code == ErrorCode.CONFIG_ERROR


class TestErrorBehaviour:
    def test_str_is_message(self):
        assert str(BuildinifyNotFoundError("page gone")) == "page gone"

    def test_context_defaults_to_empty_dict(self):
        assert BuildinifyAuthError("x").context == {}

    def test_cause_is_chained(self):
        root = OSError("reset")
        err = BuildinifyNetworkError("network", cause=root)
        assert err.cause is root
        assert err.__cause__ is root

    def test_repr(self):
        err = BuildinifyNotFoundError("gone", context={"path": "/pages/p"})
        text = repr(err)
        assert text.startswith("BuildinifyNotFoundError(")
        assert "'/pages/p'" in text

    def test_error_code_is_str(self):
        assert ErrorCode.NOT_FOUND == "NOT_FOUND"
