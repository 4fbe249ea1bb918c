import logging

import pytest

from hubspotex import Config, ConfigurationError, HttpMethod, InvalidArgumentError
from hubspotex._services._base_service import BaseService


@pytest.fixture
def service(config: Config) -> BaseService:
    return BaseService(config=config)


class TestBaseService:
    def test_url(self, service: BaseService, base_url: str):
        assert service._url("/contacts/v1/contact") == f"{base_url}/contacts/v1/contact"

    def test_url_without_base(self, unconfigured: Config):
        with pytest.raises(ConfigurationError):
            BaseService(config=unconfigured)._url("/contacts/v1/contact")

    def test_url_requires_absolute_path(self, service: BaseService):
        with pytest.raises(ValueError):
            service._url("contacts/v1/contact")

    def test_segment_escapes(self, service: BaseService):
        assert service._segment("utk", "a/b") == "a%2Fb"

    def test_segment_zero_is_valid(self, service: BaseService):
        assert service._segment("vid", 0) == "0"

    def test_email_segment_requires_at_sign(self, service: BaseService):
        with pytest.raises(InvalidArgumentError) as exc_info:
            service._email_segment("email", "not-an-email")

        assert "email address" in str(exc_info.value)

    def test_invalid_argument_is_value_error(self, service: BaseService):
        with pytest.raises(ValueError):
            service._segment("vid", "")

    def test_spec_is_logged(self, service: BaseService, base_url: str, caplog):
        caplog.set_level(logging.DEBUG, logger="hubspotex")

        service._spec(HttpMethod.GET, "/contacts/v1/contacts/statistics")

        assert (
            f"Request spec: GET {base_url}/contacts/v1/contacts/statistics"
            in caplog.text
        )
