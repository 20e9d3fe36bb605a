"""
Construction of GraphQL query documents.

Queries are built as graphql-core AST nodes and only turned into text by
`render`, so an empty `where` never makes it into the document.
"""

from datetime import datetime, timezone

from graphql import print_ast
from graphql.language import ast
from pydantic import BaseModel


class Predicate(BaseModel):
    """
    An equality (or `_gte`/`_lte` suffixed) test inside a `where` argument.
    Values are always sent as GraphQL string literals.
    """

    field: str
    value: str


def _name(value: str) -> ast.NameNode:
    return ast.NameNode(value=value)


def where_argument(predicates: list[Predicate]) -> ast.ArgumentNode:
    return ast.ArgumentNode(
        name=_name("where"),
        value=ast.ObjectValueNode(
            fields=tuple(
                ast.ObjectFieldNode(
                    name=_name(predicate.field),
                    value=ast.StringValueNode(value=predicate.value, block=False),
                )
                for predicate in predicates
            )
        ),
    )


def field(
    name: str,
    *selections: ast.FieldNode,
    where: list[Predicate] | None = None,
    order_by: str | None = None,
) -> ast.FieldNode:
    """
    A field node, with a selection set when `selections` are given. The
    `where` argument is only added for a non-empty predicate list.
    """
    arguments = []

    if where:
        arguments.append(where_argument(where))

    if order_by is not None:
        arguments.append(
            ast.ArgumentNode(
                name=_name("orderBy"), value=ast.EnumValueNode(value=order_by)
            )
        )

    return ast.FieldNode(
        alias=None,
        name=_name(name),
        arguments=tuple(arguments),
        directives=(),
        selection_set=(
            ast.SelectionSetNode(selections=selections) if selections else None
        ),
    )


def leaves(name: str, *fields: str, order_by: str | None = None) -> ast.FieldNode:
    """
    Shorthand for a field selecting only leaf fields.
    """
    return field(name, *(field(x) for x in fields), order_by=order_by)


def graphql_date(value: datetime) -> str:
    """
    The subgraph stores timestamps as integer seconds since the epoch. Naive
    datetimes are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)

    return str(round(value.timestamp()))


def render(*fields: ast.FieldNode) -> str:
    """
    Serialize top-level fields into an anonymous query document.
    """
    document = ast.DocumentNode(
        definitions=(
            ast.OperationDefinitionNode(
                operation=ast.OperationType.QUERY,
                name=None,
                variable_definitions=(),
                directives=(),
                selection_set=ast.SelectionSetNode(selections=fields),
            ),
        )
    )

    return print_ast(document)
