from typing import Any, Dict, List, Tuple, Union

from httpx import AsyncClient, Client, Request

from ._frozen import thaw
from ._request_spec import RequestSpec


def _expand_params(spec: RequestSpec) -> List[Tuple[str, Any]]:
    # httpx only expands list values when given a mapping, so repeated keys
    # are spelled out here to keep the caller's order.
    expanded: List[Tuple[str, Any]] = []
    for key, value in spec.params or ():
        if isinstance(value, (list, tuple)):
            expanded.extend((key, item) for item in value)
        else:
            expanded.append((key, value))
    return expanded


def build_httpx_request(
    client: Union[Client, AsyncClient], spec: RequestSpec
) -> Request:
    """Turn a spec into an unsent ``httpx.Request`` using ``client``'s defaults.

    Nothing goes over the wire; sending the request, authenticating it and
    handling the response stay with the caller.

    Args:
        client: The client whose headers, cookies and auth defaults apply.
        spec: The request description to convert.

    Returns:
        Request: A request ready for ``client.send``.

    Examples:
        ```python
        from httpx import Client

        from hubspotex import HubSpot, build_httpx_request

        hubspot = HubSpot(base_url="https://api.hubapi.com")
        with Client(headers={"Authorization": "Bearer <token>"}) as client:
            request = build_httpx_request(client, hubspot.contacts.get_by_id(1234))
            response = client.send(request)
        ```
    """
    kwargs: Dict[str, Any] = {}
    if spec.has_query:
        kwargs["params"] = _expand_params(spec)
    if spec.json is not None:
        kwargs["json"] = thaw(spec.json)

    return client.build_request(spec.method.value, spec.endpoint, **kwargs)
