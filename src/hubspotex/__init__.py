"""Request builders for the HubSpot CRM REST API.

Every builder returns a :class:`RequestSpec`; sending it is left to the
caller's HTTP client.
"""

from ._config import Config
from ._hubspot import HubSpot
from ._services import CompaniesService, ContactsService
from ._utils import HttpMethod, RequestSpec, build_httpx_request
from .models.errors import ConfigurationError, HubSpotError, InvalidArgumentError

__all__ = [
    "HubSpot",
    "Config",
    "CompaniesService",
    "ContactsService",
    "HttpMethod",
    "RequestSpec",
    "build_httpx_request",
    "HubSpotError",
    "ConfigurationError",
    "InvalidArgumentError",
]
