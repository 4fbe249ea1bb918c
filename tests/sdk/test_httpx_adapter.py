import json

import pytest
from httpx import Client

from hubspotex import Config, ContactsService, build_httpx_request


@pytest.fixture
def client():
    with Client(headers={"Authorization": "Bearer secret"}) as client:
        yield client


@pytest.fixture
def contacts(config: Config) -> ContactsService:
    return ContactsService(config=config)


class TestBuildHttpxRequest:
    def test_get_with_ordered_params(self, client: Client, contacts: ContactsService, base_url: str):
        request = build_httpx_request(client, contacts.all({"count": 10, "vidOffset": 100}))

        assert request.method == "GET"
        assert str(request.url) == (
            f"{base_url}/contacts/v1/lists/all/contacts/all?count=10&vidOffset=100"
        )
        assert request.headers["Authorization"] == "Bearer secret"
        assert request.content == b""

    def test_list_values_expand_to_repeated_keys(self, client: Client, contacts: ContactsService):
        request = build_httpx_request(client, contacts.get_batch_by_ids({"vid": [1234, 1235]}))

        assert request.url.params.get_list("vid") == ["1234", "1235"]

    def test_repeated_pairs(self, client: Client, contacts: ContactsService):
        spec = contacts.get_batch_by_emails(
            [("email", "a@hubspot.com"), ("email", "b@hubspot.com")]
        )

        request = build_httpx_request(client, spec)

        assert request.url.params.get_list("email") == ["a@hubspot.com", "b@hubspot.com"]

    def test_no_query(self, client: Client, contacts: ContactsService, base_url: str):
        request = build_httpx_request(client, contacts.statistics())

        assert str(request.url) == f"{base_url}/contacts/v1/contacts/statistics"

    def test_post_body(self, client: Client, contacts: ContactsService):
        properties = {"properties": [{"property": "firstname", "value": "Fred"}]}

        request = build_httpx_request(client, contacts.create(properties))

        assert request.method == "POST"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == properties

    def test_delete(self, client: Client, contacts: ContactsService, base_url: str):
        request = build_httpx_request(client, contacts.delete(1234))

        assert request.method == "DELETE"
        assert str(request.url) == f"{base_url}/contacts/v1/contact/vid/1234"
        assert request.content == b""
