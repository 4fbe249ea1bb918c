from logging import getLogger
from typing import Any, Optional, Union

from .._config import Config
from .._utils import Endpoint, HttpMethod, RequestSpec, quote_segment
from .._utils._request_spec import QueryParams
from ..models.errors import ConfigurationError, InvalidArgumentError

Identifier = Union[str, int]


class BaseService:
    """
    Base class for the HubSpot request builders.

    Services never talk to the network. Each public method returns a
    :class:`RequestSpec` describing the call, built against the base URL held
    by the service's :class:`Config`.
    """

    def __init__(self, config: Config) -> None:
        self._logger = getLogger("hubspotex")
        self._config = config

    def _url(self, path: str) -> str:
        if self._config.base_url is None:
            raise ConfigurationError()
        return Endpoint(path).resolve(self._config.base_url)

    def _segment(self, name: str, value: Identifier) -> str:
        """Validate an identifier and escape it for use as one path segment."""
        if value is None:
            raise InvalidArgumentError(name, "is required")
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            raise InvalidArgumentError(name, "must be a string or an integer")
        if isinstance(value, str) and not value.strip():
            raise InvalidArgumentError(name)
        # quoting leaves dots alone and URL normalisation collapses these
        if value in (".", ".."):
            raise InvalidArgumentError(name, "must not be a relative path segment")
        return quote_segment(value)

    def _email_segment(self, name: str, value: str) -> str:
        segment = self._segment(name, value)
        if not isinstance(value, str) or "@" not in value:
            raise InvalidArgumentError(name, "must be an email address")
        return segment

    def _spec(
        self,
        method: HttpMethod,
        path: str,
        *,
        params: Optional[QueryParams] = None,
        json: Optional[Any] = None,
    ) -> RequestSpec:
        spec = RequestSpec(
            method=method,
            endpoint=self._url(path),
            params=params,
            json=json,
        )
        self._logger.debug(f"Request spec: {spec.method.value} {spec.endpoint}")
        return spec
