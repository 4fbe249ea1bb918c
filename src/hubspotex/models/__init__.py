from .errors import ConfigurationError, HubSpotError, InvalidArgumentError

__all__ = [
    "HubSpotError",
    "ConfigurationError",
    "InvalidArgumentError",
]
