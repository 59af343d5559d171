"""Apply a StoreQuery's ordering and position to a select.

Keyset pages start at the anchor row named by ``query.cursor`` and skip it;
offset pages skip ``query.skip`` rows from the top.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

from sqlalchemy import Select, and_, or_, select
from sqlalchemy.orm import aliased
from sqlalchemy.sql.elements import ColumnElement

from commerce_service.application.pagination import SortKey, StoreQuery

VisibleFn = Callable[[Any], ColumnElement[bool]]


def _order_clause(column: Any, key: SortKey) -> ColumnElement[Any]:
    clause = column.desc() if key.descending else column.asc()
    return clause.nulls_first() if key.nulls_first else clause.nulls_last()


def _after(column: Any, anchor: Any, key: SortKey) -> ColumnElement[bool]:
    beyond = column < anchor if key.descending else column > anchor
    if key.nulls_first:
        return or_(beyond, and_(anchor.is_(None), column.is_not(None)))
    return or_(beyond, and_(column.is_(None), anchor.is_not(None)))


def _at_or_after_anchor(
    model: type,
    query: StoreQuery,
    id_field: str,
    visible: VisibleFn | None,
) -> ColumnElement[bool]:
    # The anchor is read through an alias so the subqueries never correlate
    # with the outer row. A vanished (or hidden) anchor yields NULLs and the
    # page comes back empty. NULL sort values follow the key's null ordering.
    anchor = aliased(model)
    anchor_where = [getattr(anchor, id_field) == query.cursor]
    if visible is not None:
        anchor_where.append(visible(anchor))

    columns = [getattr(model, key.field) for key in query.sort]
    anchors = [
        select(getattr(anchor, key.field)).where(*anchor_where).scalar_subquery()
        for key in query.sort
    ]

    branches: list[ColumnElement[bool]] = [getattr(model, id_field) == query.cursor]
    for i, key in enumerate(query.sort):
        equal_prefix = [columns[j].is_not_distinct_from(anchors[j]) for j in range(i)]
        branches.append(and_(*equal_prefix, _after(columns[i], anchors[i], key)))
    # The last sort key is the id, which is only NULL when the anchor is gone.
    return and_(anchors[-1].is_not(None), or_(*branches))


def apply_store_query(
    stmt: Select,
    model: type,
    query: StoreQuery,
    *,
    id_field: str = "id",
    visible: VisibleFn | None = None,
) -> Select:
    """Order ``stmt`` by the query's sort keys and cut out the requested page.

    ``visible`` restricts which rows may serve as the keyset anchor; pass the
    same condition the listing filters on (e.g. not soft-deleted).
    """
    if query.cursor is not None:
        stmt = stmt.where(_at_or_after_anchor(model, query, id_field, visible))
    stmt = stmt.order_by(*(_order_clause(getattr(model, key.field), key) for key in query.sort))
    if query.skip:
        stmt = stmt.offset(query.skip)
    return stmt.limit(query.limit)
