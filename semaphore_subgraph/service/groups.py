"""
Service layer for groups: query, execute, and reshape the response.
"""

from typing import Any

import httpx
from pydantic import ValidationError
from structlog.typing import FilteringBoundLogger

from semaphore_subgraph.core.group import GroupData
from semaphore_subgraph.core.options import GroupOptions
from semaphore_subgraph.core.response import GroupsResponse, RawGroup
from semaphore_subgraph.query.groups import group_query, groups_query

from .transport import execute


class UnexpectedResponseError(Exception):
    pass


def _parse(body: Any) -> GroupsResponse:
    try:
        return GroupsResponse.model_validate(body)
    except ValidationError as e:
        raise UnexpectedResponseError(f"Unexpected groups response: {e}") from e


def normalize(group: RawGroup, options: GroupOptions) -> GroupData:
    """
    Reshape a raw group. With `options.members`, the member wrapper records
    are replaced by their identity commitments, in order. Nothing else is
    touched, and fields the response does not carry stay unset.
    """
    fields = {name: getattr(group, name) for name in group.model_fields_set}

    if options.members:
        if group.members is None:
            raise UnexpectedResponseError(
                f"Members were requested but group {group.id} has none listed"
            )

        fields["members"] = [member.identity_commitment for member in group.members]

    try:
        return GroupData.model_validate(fields)
    except ValidationError as e:
        raise UnexpectedResponseError(f"Unexpected group {group.id}: {e}") from e


def normalize_groups(body: Any, options: GroupOptions) -> list[GroupData]:
    """
    Normalize every group in a decoded `groups` response, keeping the order
    the subgraph returned them in.

    Raises
    ------
    UnexpectedResponseError
        If the body does not have the shape of a groups response.
    """
    return [normalize(group, options) for group in _parse(body).groups]


def normalize_group(body: Any, options: GroupOptions) -> GroupData | None:
    """
    Normalize the single group of a by-id response. Returns `None` when the
    subgraph has no such group.

    Raises
    ------
    UnexpectedResponseError
        If the body does not have the shape of a groups response.
    """
    groups = _parse(body).groups

    if not groups:
        return None

    return normalize(groups[0], options)


async def get_groups(
    url: str,
    options: GroupOptions,
    log: FilteringBoundLogger,
    client: httpx.AsyncClient | None = None,
    timeout: float = 10.0,
) -> list[GroupData]:
    """
    Get the list of groups matching `options.filters`.

    Parameters
    ----------
    url: str
        The subgraph endpoint.
    options: GroupOptions
        Which optional fields to include, and filters for the list.
    log: FilteringBoundLogger
        Logger
    client: httpx.AsyncClient | None, optional
        The client to use for the request.
    timeout: float, optional
        Request timeout in seconds.

    Raises
    ------
    TransportError
        If the request fails.
    UnexpectedResponseError
        If the subgraph answers with something other than a list of groups.
    """
    log = log.bind(
        members=options.members,
        verified_proofs=options.verified_proofs,
        filtered=options.filters is not None,
    )

    data = await execute(
        url=url, query=groups_query(options), log=log, client=client, timeout=timeout
    )
    groups = normalize_groups(data, options)

    await log.adebug("subgraph.groups.listed", number_of_groups=len(groups))

    return groups


async def get_group(
    url: str,
    group_id: str,
    options: GroupOptions,
    log: FilteringBoundLogger,
    client: httpx.AsyncClient | None = None,
    timeout: float = 10.0,
) -> GroupData | None:
    """
    Get a single group by its id. A group that does not exist is not an
    error: `None` is returned.

    Raises
    ------
    TransportError
        If the request fails.
    UnexpectedResponseError
        If the subgraph answers with something other than a list of groups.
    """
    log = log.bind(
        group_id=group_id,
        members=options.members,
        verified_proofs=options.verified_proofs,
    )

    data = await execute(
        url=url,
        query=group_query(group_id, options),
        log=log,
        client=client,
        timeout=timeout,
    )
    group = normalize_group(data, options)

    if group is None:
        await log.ainfo("subgraph.group.not_found")
    else:
        await log.adebug("subgraph.group.found")

    return group
