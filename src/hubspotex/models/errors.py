class HubSpotError(Exception):
    """Base class for every error raised by the request builders."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ConfigurationError(HubSpotError):
    def __init__(
        self,
        message=(
            "Base URL is not configured. Pass base_url explicitly or set the "
            "HUBSPOT_BASE_URL environment variable."
        ),
    ):
        super().__init__(message)


class InvalidArgumentError(HubSpotError, ValueError):
    """Raised when a required identifier is missing, blank or malformed.

    Subclasses ``ValueError`` so callers catching the builtin keep working.
    """

    def __init__(self, argument: str, reason: str = "must not be empty") -> None:
        self.argument = argument
        super().__init__(f"Argument '{argument}' {reason}.")
