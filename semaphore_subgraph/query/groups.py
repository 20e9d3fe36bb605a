"""
Query documents for the `groups` entity.
"""

from graphql.language import ast

from semaphore_subgraph.core.options import GroupFilters, GroupOptions

from .document import Predicate, field, graphql_date, leaves, render

MEMBERS = leaves("members", "identityCommitment", order_by="index")

VERIFIED_PROOFS = leaves(
    "verifiedProofs",
    "signal",
    "merkleTreeRoot",
    "externalNullifier",
    "nullifierHash",
    "timestamp",
    order_by="timestamp",
)


def group_fields(options: GroupOptions) -> list[ast.FieldNode]:
    """
    The fields selected on every group, plus the optional sub-selections.
    """
    fields = [
        field("id"),
        leaves("merkleTree", "root", "depth", "zeroValue", "numberOfLeaves"),
        field("admin"),
    ]

    if options.members:
        fields.append(MEMBERS)

    if options.verified_proofs:
        fields.append(VERIFIED_PROOFS)

    return fields


def filter_predicates(filters: GroupFilters | None) -> list[Predicate]:
    """
    Build the `where` predicates for the group list. An empty list means no
    `where` argument at all.
    """
    if filters is None:
        return []

    predicates = []

    if filters.admin:
        predicates.append(Predicate(field="admin", value=filters.admin))

    time_predicate = filters.time_predicate()

    if time_predicate is not None:
        operator, value = time_predicate
        predicates.append(Predicate(field=operator, value=graphql_date(value)))

    return predicates


def groups_query(options: GroupOptions) -> str:
    return render(
        field(
            "groups",
            *group_fields(options),
            where=filter_predicates(options.filters),
        )
    )


def group_query(group_id: str, options: GroupOptions) -> str:
    """
    Query for a single group. Filters in `options` do not apply here.
    """
    return render(
        field(
            "groups",
            *group_fields(options),
            where=[Predicate(field="id", value=group_id)],
        )
    )
