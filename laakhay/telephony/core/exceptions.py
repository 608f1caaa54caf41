"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class TelephonyError(Exception):
    """Base exception for all library errors."""

    pass


class APIError(TelephonyError):
    """Error payload returned by the telephony API.

    The API reports failures as JSON with an optional numeric ``code``, a
    ``message``, a ``more_info`` documentation link and an optional
    ``status``. ``status_code`` is the HTTP status of the response, when known.

    Details:
        https://www.twilio.com/docs/errors
    """

    def __init__(
        self,
        message: str,
        code: int | None = None,
        more_info: str = "",
        status: Any = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.more_info = more_info
        self.status = status
        self.status_code = status_code

    @classmethod
    def from_payload(cls, payload: Any, status_code: int | None = None) -> APIError:
        """Build an APIError from a decoded error body.

        Non-dict bodies (empty, HTML error pages, etc.) still produce an
        error carrying the HTTP status.
        """
        if not isinstance(payload, dict):
            return cls("", status=status_code, status_code=status_code)
        raw_code = payload.get("code")
        code = coerce_code(raw_code)
        message = str(payload.get("message") or "")
        if code is None and raw_code not in (None, ""):
            # Unparseable code stays visible in the message
            message = f"{message} (code {raw_code!r})".lstrip()
        return cls(
            message,
            code=code,
            more_info=str(payload.get("more_info") or ""),
            status=payload.get("status"),
            status_code=status_code,
        )

    def __str__(self) -> str:
        if self.code is not None:
            return f"Code {self.code}: {self.message}"
        if self.status is not None:
            return f"Status {self.status}: {self.message}"
        return self.message


class TransportError(TelephonyError):
    """Network failure while talking to the API."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class DecodeError(TelephonyError):
    """Response body is not valid JSON or does not match the expected shape."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class QueryError(TelephonyError):
    """List query cannot be executed."""

    pass


def check_json(payload: Any) -> APIError | None:
    """Return the APIError carried by a decoded payload, if any.

    A payload is an error when it has a non-zero numeric ``code``, given
    either as a number or as a string of digits.
    """
    if not isinstance(payload, dict):
        return None
    code = coerce_code(payload.get("code"))
    if code is not None and code != 0:
        return APIError.from_payload(payload)
    return None


def coerce_code(value: Any) -> int | None:
    """Read an API error code as an int.

    Integers and digit strings parse; anything else (booleans, floats,
    words) gives None.

    Examples:
        >>> coerce_code("20003")
        20003
        >>> coerce_code("not-found") is None
        True
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        digits = value.strip()
        if digits.isascii() and digits.isdigit():
            return int(digits)
    return None
