"""Result envelopes returned by the provider operations."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from ra_data_microservices.schemas.jsonapi import Identifier


class ListResult(BaseModel):
    """A page of flattened records plus the server-reported total count.

    ``total`` is independent of ``len(data)``.
    """

    total: int
    data: list[dict[str, Any]]


class RecordResult(BaseModel):
    """A single flattened record."""

    data: dict[str, Any]


class IdsResult(BaseModel):
    """Ids affected by a batched operation, in request order."""

    data: list[Identifier]


class DeleteResult(BaseModel):
    """``{"id": ...}`` of the deleted record, as reported by the service."""

    data: dict[str, Any]
