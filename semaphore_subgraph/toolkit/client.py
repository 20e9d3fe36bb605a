"""
An asynchronous client for the Semaphore subgraph, wraps around httpx.
"""

from typing import Any, Mapping

import httpx
from structlog import get_logger
from structlog.typing import FilteringBoundLogger

from semaphore_subgraph.config.settings import Settings
from semaphore_subgraph.core.group import GroupData
from semaphore_subgraph.core.networks import get_url
from semaphore_subgraph.core.options import GroupOptions, parse_options
from semaphore_subgraph.core.parameters import check_non_empty_string, check_parameter
from semaphore_subgraph.service import groups as groups_service

OptionsType = GroupOptions | Mapping[str, Any] | None


class Subgraph:
    """
    Read-only access to the groups indexed by the Semaphore subgraph of one
    network. Every call is a single, fresh request; nothing is cached.
    """

    settings: Settings
    network: str
    log: FilteringBoundLogger

    def __init__(
        self,
        network: str | None = None,
        *,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
        log: FilteringBoundLogger | None = None,
    ):
        """
        Create the subgraph client.

        Parameters
        ----------
        network: str | None, optional
            One of the supported networks (e.g. `arbitrum`, `sepolia`). If not
            provided, we use the network from the settings.
        settings: Settings | None, optional
            Client settings. If not provided, they are read from the
            environment (`SUBGRAPH_*` variables).
        client: httpx.AsyncClient | None, optional
            An httpx client to send requests with. If not provided, each
            request uses its own short-lived client.
        log: FilteringBoundLogger | None, optional
            Logger; defaults to `structlog.get_logger()`.

        Raises
        ------
        InvalidParameterError
            If `network` is not a string.
        UnsupportedNetworkError
            If `network` is not a supported network.

        Example
        -------
        ```python
        from semaphore_subgraph.toolkit.client import Subgraph

        subgraph = Subgraph("sepolia")

        groups = await subgraph.get_groups({"members": True})
        group = await subgraph.get_group("42", {"verified_proofs": True})
        ```
        """

        if settings is None:
            settings = Settings()

        if network is None:
            network = settings.network

        check_parameter(network, "network", "string")

        self.settings = settings
        self.network = network
        self._url = get_url(network, settings=settings)
        self._client = client
        self.log = (log if log is not None else get_logger()).bind(network=network)

    @property
    def url(self) -> str:
        return self._url

    async def get_groups(self, options: OptionsType = None) -> list[GroupData]:
        """
        Get the list of groups.

        Parameters
        ----------
        options: GroupOptions | Mapping | None, optional
            Whether to include `members` and `verified_proofs`, and `filters`
            restricting the groups by `admin` or creation `timestamp`
            (`timestamp`, `timestamp_gte` or `timestamp_lte`).

        Raises
        ------
        InvalidParameterError
            If any of the options has the wrong kind.
        TransportError
            If the subgraph could not be queried.
        """
        options = parse_options(options)

        return await groups_service.get_groups(
            url=self._url,
            options=options,
            log=self.log,
            client=self._client,
            timeout=self.settings.request_timeout,
        )

    async def get_group(
        self, group_id: str, options: OptionsType = None
    ) -> GroupData | None:
        """
        Get a specific group, or `None` if the subgraph does not know it.
        Filters in `options` are not used.

        Raises
        ------
        InvalidParameterError
            If `group_id` is not a non-empty string or any of the options has
            the wrong kind.
        TransportError
            If the subgraph could not be queried.
        """
        check_non_empty_string(group_id, "group_id")
        options = parse_options(options)

        return await groups_service.get_group(
            url=self._url,
            group_id=group_id,
            options=options,
            log=self.log,
            client=self._client,
            timeout=self.settings.request_timeout,
        )
