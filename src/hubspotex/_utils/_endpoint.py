from typing import Union
from urllib.parse import quote

# RFC 3986 allows "@" unescaped inside a path segment; HubSpot's
# email-based endpoints are documented with it left literal.
_SEGMENT_SAFE = "@"


def quote_segment(value: Union[str, int]) -> str:
    """Percent-encode a value so it occupies exactly one path segment.

    Examples:
        >>> quote_segment(1234)
        '1234'
        >>> quote_segment("test@hubspot.com")
        'test@hubspot.com'
        >>> quote_segment("a/b c")
        'a%2Fb%20c'
    """
    return quote(str(value), safe=_SEGMENT_SAFE)


class Endpoint(str):
    """An API path such as ``/contacts/v1/contact``.

    Paths always start with a slash so that prefixing them with a base URL
    is a plain concatenation.
    """

    def __new__(cls, endpoint: str) -> "Endpoint":
        if not endpoint.startswith("/"):
            raise ValueError(f"Endpoint path must start with '/': {endpoint!r}")
        return super().__new__(cls, endpoint)

    def resolve(self, base_url: str) -> str:
        """Prefix the path with ``base_url`` (which carries no trailing slash)."""
        return f"{base_url}{self}"
