from os import environ as env
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, HttpUrl, ValidationError, field_validator

from ._utils.constants import ENV_BASE_URL


class Config(BaseModel):
    """Settings shared by every service.

    ``base_url`` may be left unset so a config can be created before the
    URL is known; services refuse to build requests until it is set.
    """

    model_config = ConfigDict(frozen=True)

    base_url: Optional[str] = None

    @field_validator("base_url", mode="before")
    @classmethod
    def validate_url(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValueError("Base URL must be a string")
        try:
            HttpUrl(value)
        except ValidationError as e:
            raise ValueError(f"Invalid base URL: {value!r}") from e
        # endpoint paths start with "/", so joining is plain concatenation
        return value.rstrip("/")

    @classmethod
    def from_env(cls) -> "Config":
        """Read the base URL from ``HUBSPOT_BASE_URL`` (a ``.env`` file is honoured)."""
        load_dotenv()
        return cls(base_url=env.get(ENV_BASE_URL) or None)
