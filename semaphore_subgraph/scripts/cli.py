"""
A simple CLI for reading groups from the subgraph.
"""

import asyncio
import json
import sys

from semaphore_subgraph.core.networks import UnsupportedNetworkError, get_url
from semaphore_subgraph.core.options import GroupFilters, GroupOptions
from semaphore_subgraph.core.parameters import InvalidParameterError
from semaphore_subgraph.service.groups import UnexpectedResponseError
from semaphore_subgraph.service.transport import TransportError
from semaphore_subgraph.toolkit.client import Subgraph

USAGE = (
    "Supported commands are semaphore-subgraph url {network}, "
    "semaphore-subgraph groups [network] [--members] [--verified-proofs] "
    "[--admin=ADDRESS], or semaphore-subgraph group {group_id} [network] "
    "[--members] [--verified-proofs]"
)


def options_from_flags(flags: list[str]) -> GroupOptions:
    admin = None

    for flag in flags:
        if flag.startswith("--admin="):
            admin = flag.removeprefix("--admin=")

    return GroupOptions(
        members="--members" in flags,
        verified_proofs="--verified-proofs" in flags,
        filters=GroupFilters(admin=admin) if admin else None,
    )


async def list_groups(network: str | None, options: GroupOptions) -> list[dict]:
    groups = await Subgraph(network).get_groups(options)
    return [group.to_response() for group in groups]


async def read_group(
    group_id: str, network: str | None, options: GroupOptions
) -> dict | None:
    group = await Subgraph(network).get_group(group_id, options)
    return group.to_response() if group is not None else None


def run(argv: list[str]) -> int:
    arguments = [x for x in argv if not x.startswith("--")]
    flags = [x for x in argv if x.startswith("--")]

    if not arguments:
        print(USAGE)
        return 1

    command = arguments[0]

    if command == "group" and any(x.startswith("--admin=") for x in flags):
        print("Filters do not apply to a single group; --admin is only for groups")
        return 1

    try:
        options = options_from_flags(flags)

        if command == "url" and len(arguments) == 2:
            print(get_url(arguments[1]))
        elif command == "groups" and len(arguments) <= 2:
            network = arguments[1] if len(arguments) == 2 else None
            print(json.dumps(asyncio.run(list_groups(network, options)), indent=2))
        elif command == "group" and len(arguments) in (2, 3):
            network = arguments[2] if len(arguments) == 3 else None
            group = asyncio.run(read_group(arguments[1], network, options))

            if group is None:
                print(f"Group {arguments[1]} not found")
                return 1

            print(json.dumps(group, indent=2))
        else:
            print(USAGE)
            return 1
    except (
        InvalidParameterError,
        UnsupportedNetworkError,
        TransportError,
        UnexpectedResponseError,
    ) as e:
        print(f"Error: {e}")
        return 1

    return 0


def main():
    exit(run(sys.argv[1:]))
