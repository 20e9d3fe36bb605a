"""
Main settings object.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from semaphore_subgraph.core.networks import Network


class Settings(BaseSettings):
    network: Network = "arbitrum"

    # The {network} placeholder is substituted with the network name.
    url_template: str = (
        "https://api.studio.thegraph.com/query/14377/semaphore-{network}/v3.6.1"
    )

    request_timeout: float = 10.0

    model_config = SettingsConfigDict(env_prefix="SUBGRAPH_", env_file=".env")
