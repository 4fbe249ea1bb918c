from ._endpoint import Endpoint, quote_segment
from ._httpx import build_httpx_request
from ._logs import setup_logging
from ._request_spec import HttpMethod, RequestSpec, normalize_params

__all__ = [
    "Endpoint",
    "HttpMethod",
    "RequestSpec",
    "build_httpx_request",
    "normalize_params",
    "quote_segment",
    "setup_logging",
]
