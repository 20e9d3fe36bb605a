"""
Core configuration
"""

import json

import httpx
import pytest_asyncio
import structlog

from semaphore_subgraph.config.settings import Settings


def merkle_tree(root: str = "1234") -> dict:
    return {
        "root": root,
        "depth": 20,
        "zeroValue": "0",
        "numberOfLeaves": 2,
    }


def raw_group(group_id: str, members: list[str] | None = None, **extra) -> dict:
    group = {"id": group_id, "merkleTree": merkle_tree(), "admin": "0xabc", **extra}

    if members is not None:
        group["members"] = [{"identityCommitment": member} for member in members]

    return group


class RecordingHandler:
    """
    An httpx.MockTransport handler that answers every request with the same
    response and records the queries it was sent.
    """

    def __init__(self, response: httpx.Response):
        self.response = response
        self.queries: list[str] = []
        self.urls: list[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.urls.append(str(request.url))
        self.queries.append(json.loads(request.content)["query"])
        return self.response


@pytest_asyncio.fixture(scope="session")
def settings():
    yield Settings(
        network="sepolia",
        url_template="https://subgraph.test/semaphore-{network}",
        request_timeout=1.0,
    )


@pytest_asyncio.fixture(scope="session")
def logger():
    yield structlog.get_logger()
