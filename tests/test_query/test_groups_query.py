"""
Tests the groups query builder.
"""

from datetime import datetime, timezone
from itertools import product

import pytest
from graphql import parse

from semaphore_subgraph.core.options import GroupFilters, GroupOptions
from semaphore_subgraph.query.groups import group_query, groups_query

BASE_FIELDS = [
    "id",
    "merkleTree {",
    "root",
    "depth",
    "zeroValue",
    "numberOfLeaves",
    "}",
    "admin",
]

MEMBER_FIELDS = ["members(orderBy: index) {", "identityCommitment", "}"]

PROOF_FIELDS = [
    "verifiedProofs(orderBy: timestamp) {",
    "signal",
    "merkleTreeRoot",
    "externalNullifier",
    "nullifierHash",
    "timestamp",
    "}",
]

FIRST = datetime(2023, 1, 1, tzinfo=timezone.utc)
SECOND = datetime(2023, 6, 1, tzinfo=timezone.utc)
THIRD = datetime(2023, 12, 31, tzinfo=timezone.utc)


def selected_fields(document: str) -> list[str]:
    """
    The stripped lines between the `groups` line and its closing brace.
    """
    lines = [line.strip() for line in document.splitlines()]
    return lines[2:-2]


@pytest.mark.parametrize(
    "members, verified_proofs", list(product([False, True], repeat=2))
)
def test_selection_set(members, verified_proofs):
    options = GroupOptions(members=members, verified_proofs=verified_proofs)

    expected = (
        BASE_FIELDS
        + (MEMBER_FIELDS if members else [])
        + (PROOF_FIELDS if verified_proofs else [])
    )

    assert selected_fields(groups_query(options)) == expected
    assert selected_fields(group_query("1", options)) == expected


def test_full_document():
    options = GroupOptions(members=True, filters=GroupFilters(admin="0xabc"))

    assert groups_query(options) == (
        "{\n"
        '  groups(where: {admin: "0xabc"}) {\n'
        "    id\n"
        "    merkleTree {\n"
        "      root\n"
        "      depth\n"
        "      zeroValue\n"
        "      numberOfLeaves\n"
        "    }\n"
        "    admin\n"
        "    members(orderBy: index) {\n"
        "      identityCommitment\n"
        "    }\n"
        "  }\n"
        "}"
    )


@pytest.mark.parametrize("filters", [None, GroupFilters(), GroupFilters(admin="")])
def test_no_filter_clause(filters):
    document = groups_query(GroupOptions(filters=filters))

    assert "where" not in document
    assert document.splitlines()[1] == "  groups {"


def test_timestamp_dominates():
    document = groups_query(
        GroupOptions(
            filters=GroupFilters(timestamp=FIRST, timestamp_gte=SECOND, timestamp_lte=THIRD)
        )
    )

    assert document.splitlines()[1] == '  groups(where: {timestamp: "1672531200"}) {'
    assert "1685577600" not in document
    assert "1703980800" not in document


def test_timestamp_gte_dominates_lte():
    document = groups_query(
        GroupOptions(filters=GroupFilters(timestamp_gte=SECOND, timestamp_lte=THIRD))
    )

    assert document.splitlines()[1] == (
        '  groups(where: {timestamp_gte: "1685577600"}) {'
    )


def test_timestamp_lte():
    document = groups_query(GroupOptions(filters=GroupFilters(timestamp_lte=THIRD)))

    assert document.splitlines()[1] == (
        '  groups(where: {timestamp_lte: "1703980800"}) {'
    )


def test_admin_and_time():
    document = groups_query(
        GroupOptions(filters=GroupFilters(admin="0xabc", timestamp_gte=SECOND))
    )

    assert document.splitlines()[1] == (
        '  groups(where: {admin: "0xabc", timestamp_gte: "1685577600"}) {'
    )


def test_single_group_ignores_filters():
    document = group_query(
        "42", GroupOptions(filters=GroupFilters(admin="0xabc", timestamp=FIRST))
    )

    assert document.splitlines()[1] == '  groups(where: {id: "42"}) {'
    assert "admin:" not in document


def test_idempotent():
    options = GroupOptions(
        members=True,
        verified_proofs=True,
        filters=GroupFilters(admin="0xabc", timestamp_lte=THIRD),
    )

    assert groups_query(options) == groups_query(options)
    assert group_query("7", options) == group_query("7", options)


def test_long_filter_is_valid_graphql():
    address = "0x" + "ab" * 20
    document = groups_query(
        GroupOptions(filters=GroupFilters(admin=address, timestamp_gte=SECOND))
    )

    (operation,) = parse(document).definitions
    (groups,) = operation.selection_set.selections
    (where,) = groups.arguments

    assert groups.name.value == "groups"
    assert [(x.name.value, x.value.value) for x in where.value.fields] == [
        ("admin", address),
        ("timestamp_gte", "1685577600"),
    ]
