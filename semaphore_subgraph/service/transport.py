"""
Execution of query documents against a subgraph endpoint.
"""

from json import JSONDecodeError
from typing import Any

import httpx
from structlog.typing import FilteringBoundLogger


class TransportError(Exception):
    status_code: int | None

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


async def _post(
    url: str, query: str, client: httpx.AsyncClient | None, timeout: float
) -> httpx.Response:
    if client is not None:
        return await client.post(url, json={"query": query}, timeout=timeout)

    async with httpx.AsyncClient(timeout=timeout) as client:
        return await client.post(url, json={"query": query})


async def execute(
    url: str,
    query: str,
    log: FilteringBoundLogger,
    client: httpx.AsyncClient | None = None,
    timeout: float = 10.0,
) -> dict[str, Any]:
    """
    POST a query document to the subgraph and return the `data` member of
    the response.

    Parameters
    ----------
    url: str
        The subgraph endpoint.
    query: str
        The GraphQL query document.
    log: FilteringBoundLogger
        Logger
    client: httpx.AsyncClient | None, optional
        Client to send the request with. If not provided, a new one is
        created (and closed) for this request.
    timeout: float, optional
        Request timeout in seconds.

    Raises
    ------
    TransportError
        If the endpoint cannot be reached, answers with a non-success status,
        does not return JSON, or reports GraphQL errors. No retries are made.
    """

    log = log.bind(url=url)

    try:
        response = await _post(url=url, query=query, client=client, timeout=timeout)
    except httpx.HTTPError as e:
        log = log.bind(error=str(e))
        await log.aerror("subgraph.request.failed")
        raise TransportError(f"Error contacting {url}: {e}") from e

    log = log.bind(status_code=response.status_code)

    if not response.is_success:
        await log.aerror("subgraph.request.bad_status")
        raise TransportError(
            f"Subgraph returned {response.status_code}: {response.text}",
            status_code=response.status_code,
        )

    try:
        body = response.json()
    except (JSONDecodeError, UnicodeDecodeError) as e:
        await log.aerror("subgraph.request.invalid_json")
        raise TransportError(
            f"Subgraph response is not valid JSON: {e}",
            status_code=response.status_code,
        ) from e

    if not isinstance(body, dict):
        await log.aerror("subgraph.request.invalid_body")
        raise TransportError(
            "Subgraph response is not a JSON object", status_code=response.status_code
        )

    if body.get("errors"):
        log = log.bind(errors=body["errors"])
        await log.aerror("subgraph.request.query_errors")
        messages = "; ".join(
            str(error.get("message", error)) if isinstance(error, dict) else str(error)
            for error in body["errors"]
        )
        raise TransportError(
            f"Subgraph query failed: {messages}", status_code=response.status_code
        )

    data = body.get("data")

    if not isinstance(data, dict):
        await log.aerror("subgraph.request.no_data")
        raise TransportError(
            "Subgraph response carries no data", status_code=response.status_code
        )

    await log.adebug("subgraph.request.success")

    return data
