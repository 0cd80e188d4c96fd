"""Query-string construction for list-style requests.

Services expect bracketed JSON:API-style keys::

    page[number]=2&page[size]=25&filter[status]=open&sort=-created_at
    filter[id]=in:1,2,3
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import httpx

from ra_data_microservices.schemas.jsonapi import Identifier
from ra_data_microservices.schemas.params import Pagination, SortPayload

ASCENDING = "ASC"


def sort_param(sort: SortPayload) -> str:
    """Encode a sort descriptor as ``field`` (ascending) or ``-field``."""
    prefix = "" if sort.order == ASCENDING else "-"
    return f"{prefix}{sort.field}"


def build_query(
    pagination: Pagination,
    filter: Mapping[str, Any] | None = None,
    sort: SortPayload | None = None,
) -> dict[str, Any]:
    """Build the flat query mapping for a paginated, filtered, sorted list.

    Pagination keys come first, then one ``filter[key]`` per filter entry in
    order, then ``sort`` when a sort field is given.
    """
    query: dict[str, Any] = {
        "page[number]": pagination.page,
        "page[size]": pagination.per_page,
    }

    for key, value in (filter or {}).items():
        query[f"filter[{key}]"] = value

    if sort is not None and sort.field:
        query["sort"] = sort_param(sort)

    return query


def build_many_query(ids: Iterable[Identifier]) -> dict[str, str]:
    """Build the ``filter[id]=in:<ids>`` query used to fetch records by id."""
    return {"filter[id]": "in:" + ",".join(str(id) for id in ids)}


def stringify(query: Mapping[str, Any]) -> str:
    """Encode a flat query mapping into a URL query string.

    Keys are sorted, ``None`` values are dropped, sequences repeat their key
    and booleans are lowercased.
    """
    params = {key: query[key] for key in sorted(query) if query[key] is not None}
    return str(httpx.QueryParams(params))


def with_query(base_url: str, query: Mapping[str, Any]) -> str:
    """Append the encoded ``query`` to ``base_url``."""
    return f"{base_url}?{stringify(query)}"
