from typing import Optional

from .._utils import HttpMethod, RequestSpec
from .._utils._request_spec import QueryParams
from ._base_service import BaseService, Identifier


class CompaniesService(BaseService):
    """Request builders for the HubSpot Companies API (v2).

    Companies are the organisations contacts belong to.
    """

    def all(self, params: Optional[QueryParams] = None) -> RequestSpec:
        """Build a request for one page of the portal's companies.

        Each response carries ``offset`` and ``has-more``. While ``has-more``
        is true, call this again with the returned ``offset`` to get the next
        page.

        Args:
            params (Optional[QueryParams]): Query parameters passed through
                unchanged, e.g. ``{"limit": 250, "offset": 100}``. When omitted
                no query string is sent.

        Returns:
            RequestSpec: A ``GET /companies/v2/companies/paged`` request.

        Examples:
            ```python
            from hubspotex import HubSpot

            hubspot = HubSpot(base_url="https://api.hubapi.com")

            hubspot.companies.all()
            hubspot.companies.all({"limit": 10, "offset": 100})
            ```
        """
        return self._spec(
            HttpMethod.GET, "/companies/v2/companies/paged", params=params
        )

    def get_by_id(self, company_id: Identifier) -> RequestSpec:
        """Build a request for the company with the given ``company_id``.

        Args:
            company_id (Identifier): The company's id.

        Returns:
            RequestSpec: A ``GET /companies/v2/companies/{company_id}`` request.

        Raises:
            InvalidArgumentError: If ``company_id`` is missing or blank.
        """
        company = self._segment("company_id", company_id)
        return self._spec(HttpMethod.GET, f"/companies/v2/companies/{company}")
