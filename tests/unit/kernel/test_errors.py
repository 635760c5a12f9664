"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from mp_mediator.kernel.errors import (
    AmbiguousHandlerError,
    ApplicationError,
    BaseError,
    HandlerMismatchError,
    HandlerNotFoundError,
    HandlerTimeoutError,
)


class _Msg:
    pass


class TestBaseError:
    def test_defaults(self) -> None:
        err = BaseError("oops")
        assert err.message == "oops"
        assert err.code == "base_error"
        assert err.detail == {}
        assert err.cause is None

    def test_cause_chained(self) -> None:
        cause = ValueError("root")
        err = BaseError("wrapped", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == repr(cause)

    def test_str_is_json(self) -> None:
        err = BaseError("oops", code="custom", detail={"k": 1})
        payload = json.loads(str(err))
        assert payload == {"code": "custom", "message": "oops", "detail": {"k": 1}}

    def test_repr(self) -> None:
        assert repr(BaseError("oops")) == "BaseError(code='base_error', message='oops')"

    def test_log_fields_flatten_detail(self) -> None:
        err = BaseError("oops", code="custom", detail={"k": 1})
        assert err.log_fields() == {"error_code": "custom", "k": 1}

    def test_log_fields_include_cause(self) -> None:
        err = BaseError("wrapped", cause=ValueError("root"))
        assert err.log_fields()["error"] == repr(ValueError("root"))

    def test_detail_is_copied(self) -> None:
        detail = {"k": 1}
        BaseError("oops", detail=detail).detail["k"] = 2
        assert detail == {"k": 1}


class TestHandlerNotFoundError:
    def test_is_application_error(self) -> None:
        assert isinstance(HandlerNotFoundError(_Msg), ApplicationError)

    def test_names_message_type(self) -> None:
        err = HandlerNotFoundError(_Msg)
        assert err.code == "handler_not_found"
        assert err.message_type is _Msg
        assert "_Msg" in err.message
        assert err.detail["message_type"].endswith("_Msg")

    def test_keeps_cause(self) -> None:
        cause = KeyError("missing")
        err = HandlerNotFoundError(_Msg, contract="C", cause=cause)
        assert err.cause is cause
        assert err.__cause__ is cause
        assert err.contract == "C"


class TestOtherErrors:
    def test_ambiguous(self) -> None:
        err = AmbiguousHandlerError("Contract", 3)
        assert err.code == "ambiguous_handler"
        assert err.count == 3
        assert "3" in err.message

    def test_mismatch(self) -> None:
        err = HandlerMismatchError("bad handler")
        assert err.code == "handler_mismatch"

    def test_timeout(self) -> None:
        err = HandlerTimeoutError(_Msg, 2.5)
        assert err.code == "handler_timeout"
        assert err.timeout_seconds == 2.5
        assert err.detail["timeout_seconds"] == 2.5

    @pytest.mark.parametrize(
        "err",
        [
            AmbiguousHandlerError("C", 2),
            HandlerMismatchError("m"),
            HandlerTimeoutError(_Msg, 1.0),
        ],
    )
    def test_all_are_application_errors(self, err: BaseError) -> None:
        assert isinstance(err, ApplicationError)
