"""JSON:API envelope models and response flattening.

Request bodies for ``create`` and ``update`` follow the JSON:API
``{ data: { type, attributes } }`` structure; responses are flattened
from ``{ id, attributes }`` into a single record for the caller.

Reference: https://jsonapi.org/format/
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, TypeAdapter

Identifier = str | int

_record_adapter = TypeAdapter(dict[str, Any])


# ---------------------------------------------------------------------------
# Request wrappers
# ---------------------------------------------------------------------------


class JSONAPIRequestData(BaseModel):
    """The ``data`` object inside a JSON:API create request body."""

    type: str
    attributes: dict[str, Any]


class JSONAPIRequest(BaseModel):
    """JSON:API request envelope wrapping ``{ data: { type, attributes } }``."""

    data: JSONAPIRequestData


class JSONAPIUpdateRequestData(BaseModel):
    """The ``data`` object inside a JSON:API update request body."""

    id: Identifier
    type: str
    attributes: dict[str, Any]


class JSONAPIUpdateRequest(BaseModel):
    """JSON:API request envelope wrapping ``{ data: { id, type, attributes } }``."""

    data: JSONAPIUpdateRequestData


def create_body(resource: str, attributes: Mapping[str, Any]) -> str:
    """Serialize a create request body for ``resource``."""
    envelope = JSONAPIRequest(
        data=JSONAPIRequestData(type=resource, attributes=dict(attributes))
    )
    return envelope.model_dump_json()


def update_body(resource: str, id: Identifier, attributes: Mapping[str, Any]) -> str:
    """Serialize an update request body for record ``id`` of ``resource``."""
    envelope = JSONAPIUpdateRequest(
        data=JSONAPIUpdateRequestData(id=id, type=resource, attributes=dict(attributes))
    )
    return envelope.model_dump_json()


def record_body(attributes: Mapping[str, Any]) -> str:
    """Serialize a bare record, without envelope, as sent by batched updates."""
    return _record_adapter.dump_json(dict(attributes)).decode()


# ---------------------------------------------------------------------------
# Response mapping
# ---------------------------------------------------------------------------


def map_response(item: Mapping[str, Any]) -> dict[str, Any]:
    """Flatten a JSON:API resource object into ``{id, **attributes}``.

    ``attributes`` may be absent or null. The resource ``id`` wins over an
    attribute of the same name.
    """
    attributes = item.get("attributes") or {}
    return {"id": item["id"], **{k: v for k, v in attributes.items() if k != "id"}}


def map_collection(payload: Mapping[str, Any]) -> tuple[int, list[dict[str, Any]]]:
    """Return ``(meta.count, flattened records)`` from a collection response."""
    return payload["meta"]["count"], [map_response(item) for item in payload["data"]]
