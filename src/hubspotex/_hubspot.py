from os import environ as env
from typing import Optional

from dotenv import load_dotenv

from ._config import Config
from ._services import CompaniesService, ContactsService
from ._utils import setup_logging
from ._utils.constants import ENV_BASE_URL


class HubSpot:
    """
    Entry point giving access to the HubSpot request builders.
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        config: Optional[Config] = None,
        debug: bool = False,
    ) -> None:
        """
        Initialize the builders.

        Args:
            base_url (Optional[str]): The base URL of the HubSpot API, e.g.
                ``https://api.hubapi.com``. If not provided, it will be read from
                the `HUBSPOT_BASE_URL` environment variable.
            config (Optional[Config]): A ready-made configuration. Takes
                precedence over ``base_url`` and the environment.
            debug (bool): Enable debug logging if set to True. Defaults to False.
        """
        if config is None:
            load_dotenv()
            config = Config(base_url=base_url or env.get(ENV_BASE_URL) or None)

        self._config = config

        setup_logging(debug)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def companies(self) -> CompaniesService:
        """
        Companies are the organisations contacts work for.
        """
        return CompaniesService(self._config)

    @property
    def contacts(self) -> ContactsService:
        """
        Contacts are the people stored in the CRM, identified by visitor ID,
        email address or user token.
        """
        return ContactsService(self._config)
