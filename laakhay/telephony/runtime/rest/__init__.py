"""REST runtime abstractions."""

from .runner import ModelAdapter, ResponseAdapter, RestEndpointSpec, RestRunner
from .transport import RESTTransport

__all__ = [
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "ModelAdapter",
]
