"""
Supported networks and their subgraph endpoints.
"""

from typing import TYPE_CHECKING, Literal, get_args

if TYPE_CHECKING:
    from semaphore_subgraph.config.settings import Settings

Network = Literal[
    "sepolia",
    "goerli",
    "mumbai",
    "optimism-goerli",
    "arbitrum",
    "arbitrum-goerli",
]

SUPPORTED_NETWORKS: tuple[str, ...] = get_args(Network)


class UnsupportedNetworkError(Exception):
    pass


def get_url(network: str, settings: "Settings | None" = None) -> str:
    """
    Resolve the subgraph URL for a network.

    Parameters
    ----------
    network: str
        One of the supported network names, e.g. `arbitrum`.
    settings: Settings | None, optional
        Settings carrying the URL template. If not provided, they are read
        from the environment.

    Raises
    ------
    UnsupportedNetworkError
        If the network is not one we know a subgraph for.
    """

    if network not in SUPPORTED_NETWORKS:
        raise UnsupportedNetworkError(f"Network '{network}' is not supported")

    if settings is None:
        from semaphore_subgraph.config.settings import Settings

        settings = Settings()

    return settings.url_template.format(network=network)
