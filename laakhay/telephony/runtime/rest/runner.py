"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import BaseModel, ValidationError

from ...core.exceptions import DecodeError
from .transport import RESTTransport


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "POST"
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_form: Callable[[dict[str, Any]], dict[str, str]] | None = None


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class ModelAdapter(ResponseAdapter):
    """Adapter that validates the whole response into one model."""

    model: ClassVar[type[BaseModel]]

    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        try:
            return self.model.model_validate(response)
        except ValidationError as e:
            raise DecodeError(
                f"Invalid {self.model.__name__} payload: {e.error_count()} error(s)"
            ) from e


class RestRunner:
    def __init__(self, transport: RESTTransport) -> None:
        self._t = transport

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        path = spec.build_path(params)

        if spec.method.upper() == "GET":
            query = spec.build_query(params) if spec.build_query else None
            data = await self._t.get_json(path, params=query or None)
        else:
            form = spec.build_form(params) if spec.build_form else {}
            data = await self._t.post_form(path, form)

        # Single-resource endpoints only; list endpoints go through PageIterator
        return adapter.parse(data, params)
