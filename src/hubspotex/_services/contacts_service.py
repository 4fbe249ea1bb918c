from typing import Any, Dict, List, Optional

from .._utils import HttpMethod, RequestSpec, normalize_params
from .._utils._request_spec import QueryParams
from ..models.errors import InvalidArgumentError
from ._base_service import BaseService, Identifier


class ContactsService(BaseService):
    """Request builders for the HubSpot Contacts API (v1).

    Contacts are identified by their ``vid`` (visitor ID), by email address
    or by the ``hubspotutk`` user token set by the tracking code.
    """

    def all(self, params: Optional[QueryParams] = None) -> RequestSpec:
        """Build a request for one page of all contacts in the portal.

        Args:
            params (Optional[QueryParams]): Query parameters passed through
                unchanged, e.g. ``{"count": 10, "vidOffset": 100}``.

        Returns:
            RequestSpec: A ``GET /contacts/v1/lists/all/contacts/all`` request.

        Examples:
            ```python
            from hubspotex import HubSpot

            hubspot = HubSpot(base_url="https://api.hubapi.com")

            hubspot.contacts.all({"count": 10, "vidOffset": 100})
            ```
        """
        return self._spec(
            HttpMethod.GET, "/contacts/v1/lists/all/contacts/all", params=params
        )

    def get_by_email(self, email: str) -> RequestSpec:
        """Build a request for the contact matching ``email``.

        Examples:
            ```python
            hubspot.contacts.get_by_email("test@hubspot.com")
            ```
        """
        segment = self._email_segment("email", email)
        return self._spec(
            HttpMethod.GET, f"/contacts/v1/contact/email/{segment}/profile"
        )

    def get_by_id(self, vid: Identifier) -> RequestSpec:
        """Build a request for the contact with the given ``vid``."""
        segment = self._segment("vid", vid)
        return self._spec(
            HttpMethod.GET, f"/contacts/v1/contact/vid/{segment}/profile"
        )

    def get_by_token(self, utk: str) -> RequestSpec:
        """Build a request for the contact tied to a ``hubspotutk`` user token.

        The endpoint does not allow CORS; browser code needs a proxy.
        """
        segment = self._segment("utk", utk)
        return self._spec(
            HttpMethod.GET, f"/contacts/v1/contact/utk/{segment}/profile"
        )

    def create(self, properties: Dict[str, Any]) -> RequestSpec:
        """Build a request creating a contact.

        Args:
            properties (Dict[str, Any]): The body sent as is, usually
                ``{"properties": [{"property": "email", "value": "..."}]}``.

        Returns:
            RequestSpec: A ``POST /contacts/v1/contact`` request.

        Examples:
            ```python
            hubspot.contacts.create(
                {"properties": [{"property": "firstname", "value": "Fred"}]}
            )
            ```
        """
        return self._spec(HttpMethod.POST, "/contacts/v1/contact", json=properties)

    def update(self, vid: Identifier, properties: Dict[str, Any]) -> RequestSpec:
        """Build a request updating the contact with the given ``vid``.

        Args:
            vid (Identifier): The contact's visitor ID.
            properties (Dict[str, Any]): The body sent as is.

        Returns:
            RequestSpec: A ``POST /contacts/v1/contact/vid/{vid}/profile`` request.

        Raises:
            InvalidArgumentError: If ``vid`` is missing or blank.
        """
        segment = self._segment("vid", vid)
        return self._spec(
            HttpMethod.POST,
            f"/contacts/v1/contact/vid/{segment}/profile",
            json=properties,
        )

    def create_or_update(
        self, email: str, properties: Optional[Dict[str, Any]] = None
    ) -> RequestSpec:
        """Build a request that creates the contact for ``email`` or updates it.

        Args:
            email (str): The contact's email address.
            properties (Optional[Dict[str, Any]]): The body sent as is.

        Returns:
            RequestSpec: A
            ``POST /contacts/v1/contact/createOrUpdate/email/{email}`` request.

        Examples:
            ```python
            hubspot.contacts.create_or_update(
                "test@hubspot.com",
                {"properties": [{"property": "firstname", "value": "Fred"}]},
            )
            ```
        """
        segment = self._email_segment("email", email)
        return self._spec(
            HttpMethod.POST,
            f"/contacts/v1/contact/createOrUpdate/email/{segment}",
            json=properties,
        )

    def create_or_update_batch(self, contacts: List[Dict[str, Any]]) -> RequestSpec:
        """Build a request that creates or updates a group of contacts at once.

        Each item identifies its contact by ``vid`` or ``email`` and carries
        its own ``properties`` list.
        """
        return self._spec(HttpMethod.POST, "/contacts/v1/contact/batch", json=contacts)

    def delete(self, vid: Identifier) -> RequestSpec:
        """Build a request deleting the contact with the given ``vid``."""
        segment = self._segment("vid", vid)
        return self._spec(HttpMethod.DELETE, f"/contacts/v1/contact/vid/{segment}")

    def recent(self, params: Optional[QueryParams] = None) -> RequestSpec:
        """Build a request for recently updated or created contacts.

        Pages hold at most 100 contacts (see ``count``) and only go back 30
        days. Continue with ``vidOffset`` and ``timeOffset`` from the
        previous page.
        """
        return self._spec(
            HttpMethod.GET,
            "/contacts/v1/lists/recently_updated/contacts/recent",
            params=params,
        )

    def get_batch_by_ids(self, params: Optional[QueryParams] = None) -> RequestSpec:
        """Build a request for a group of contacts by visitor ID.

        Pass the IDs as repeated ``vid`` parameters, e.g.
        ``[("vid", 1234), ("vid", 1235)]`` or ``{"vid": [1234, 1235]}``.
        """
        return self._spec(
            HttpMethod.GET, "/contacts/v1/contact/vids/batch/", params=params
        )

    def get_batch_by_emails(self, params: Optional[QueryParams] = None) -> RequestSpec:
        """Build a request for a group of contacts by ``email`` parameters."""
        return self._spec(
            HttpMethod.GET, "/contacts/v1/contact/emails/batch/", params=params
        )

    def get_batch_by_tokens(self, params: Optional[QueryParams] = None) -> RequestSpec:
        """Build a request for a group of contacts by ``utk`` user tokens.

        Like :meth:`get_by_token`, the endpoint does not allow CORS.
        """
        return self._spec(
            HttpMethod.GET, "/contacts/v1/contact/utks/batch/", params=params
        )

    def search(self, query: str, params: Optional[QueryParams] = None) -> RequestSpec:
        """Build a request searching contacts by email address or name.

        Results only hold a small subset of each contact, including its
        ``vid`` for a follow-up :meth:`get_by_id`.

        Args:
            query (str): The search term, sent as the ``q`` parameter.
            params (Optional[QueryParams]): Extra query parameters such as
                ``count`` and ``offset``, appended after ``q``.

        Returns:
            RequestSpec: A ``GET /contacts/v1/search/query`` request.

        Raises:
            InvalidArgumentError: If ``query`` is missing or blank.
        """
        if not isinstance(query, str) or not query.strip():
            raise InvalidArgumentError("query")

        return self._spec(
            HttpMethod.GET,
            "/contacts/v1/search/query",
            params=(("q", query), *(normalize_params(params) or ())),
        )

    def statistics(self) -> RequestSpec:
        """Build a request for the portal's contact statistics."""
        return self._spec(HttpMethod.GET, "/contacts/v1/contacts/statistics")
