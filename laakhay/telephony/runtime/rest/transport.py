"""REST transport bound to one API host and one set of credentials."""

from __future__ import annotations

from typing import Any

from ...core.exceptions import check_json
from ...utils.http import HTTPClient


class RESTTransport:
    """Authenticated JSON transport.

    Relative URIs (for example the ``next_page_uri`` links embedded in list
    responses) are resolved against ``base_url``; absolute URIs are used as
    given. Failures raise ``APIError``, ``TransportError`` or ``DecodeError``.
    """

    def __init__(
        self,
        base_url: str,
        *,
        auth: tuple[str, str] | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._http = HTTPClient(base_url=base_url, auth=auth, timeout=timeout)

    @property
    def base_url(self) -> str | None:
        return self._http.base_url

    async def get_json(self, uri: str, params: dict[str, Any] | None = None) -> Any:
        data = await self._http.get(uri, params=params)
        error = check_json(data)
        if error is not None:
            raise error
        return data

    async def post_form(self, uri: str, form: dict[str, str]) -> Any:
        data = await self._http.post(uri, data=form)
        error = check_json(data)
        if error is not None:
            raise error
        return data

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> RESTTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
