"""Precise unit tests for exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

from laakhay.telephony.core import (
    APIError,
    DecodeError,
    QueryError,
    TelephonyError,
    TransportError,
    check_json,
    coerce_code,
)


def test_api_error_message_with_code():
    error = APIError.from_payload(
        {"code": 20404, "message": "The requested resource was not found", "status": 404},
        status_code=404,
    )
    assert str(error) == "Code 20404: The requested resource was not found"
    assert error.code == 20404
    assert error.status == 404
    assert error.status_code == 404
    assert isinstance(error, TelephonyError)


def test_api_error_message_with_status_only():
    error = APIError.from_payload({"message": "Unavailable", "status": 503})
    assert error.code is None
    assert str(error) == "Status 503: Unavailable"


def test_api_error_message_only():
    assert str(APIError("plain")) == "plain"


def test_api_error_from_non_json_body():
    error = APIError.from_payload(None, status_code=502)
    assert error.status_code == 502
    assert str(error) == "Status 502: "


def test_check_json_detects_error_payload():
    error = check_json({"code": 21211, "message": "Invalid 'To' Phone Number"})
    assert isinstance(error, APIError)
    assert error.code == 21211


def test_check_json_ignores_resources():
    assert check_json({"sid": "CA1", "status": "queued"}) is None
    assert check_json({"code": 0, "message": ""}) is None
    assert check_json([1, 2]) is None


def test_other_errors_share_base():
    for error in (TransportError("down", url="https://x"), DecodeError("bad json"), QueryError("empty")):
        assert isinstance(error, TelephonyError)
    assert TransportError("down", url="https://x").url == "https://x"


def test_api_error_with_non_numeric_code_keeps_raw_value():
    error = APIError.from_payload({"code": "not-found", "message": "Missing"}, status_code=404)
    assert error.code is None
    assert error.status_code == 404
    assert str(error) == "Missing (code 'not-found')"


def test_api_error_with_digit_string_code():
    error = APIError.from_payload({"code": "20003", "message": "Authenticate"})
    assert error.code == 20003
    assert str(error) == "Code 20003: Authenticate"


def test_check_json_accepts_digit_string_code():
    error = check_json({"code": "20003", "message": "Authenticate", "status": 401})
    assert isinstance(error, APIError)
    assert error.code == 20003
    assert check_json({"code": "0"}) is None
    assert check_json({"code": "n/a"}) is None


def test_coerce_code():
    assert coerce_code(21211) == 21211
    assert coerce_code(" 42 ") == 42
    for value in (None, True, 1.5, "", "abc", "²", [1]):
        assert coerce_code(value) is None
