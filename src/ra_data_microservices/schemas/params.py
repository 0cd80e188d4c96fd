"""Pydantic v2 schemas for provider operation parameters.

Every operation accepts either one of these models or a plain mapping that
validates into it. Field aliases accept the camelCase keys used by the
consuming UI framework (``perPage``, ``previousData``).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ra_data_microservices.schemas.jsonapi import Identifier


class _Params(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Pagination(_Params):
    """1-based page number and page size."""

    page: int
    per_page: int = Field(alias="perPage")


class SortPayload(_Params):
    """Sort descriptor. Any ``order`` other than ``ASC`` sorts descending."""

    field: str | None = None
    order: str = "ASC"


class GetListParams(_Params):
    pagination: Pagination
    filter: dict[str, Any] = Field(default_factory=dict)
    sort: SortPayload | None = None


class GetOneParams(_Params):
    id: Identifier


class GetManyParams(_Params):
    ids: list[Identifier]


class GetManyReferenceParams(GetListParams):
    """List parameters restricted to records whose ``target`` equals ``id``."""

    target: str
    id: Identifier


class UpdateParams(_Params):
    id: Identifier
    data: dict[str, Any]
    previous_data: dict[str, Any] | None = Field(default=None, alias="previousData")


class UpdateManyParams(_Params):
    ids: list[Identifier]
    data: dict[str, Any]


class CreateParams(_Params):
    data: dict[str, Any]


class DeleteParams(_Params):
    id: Identifier
    previous_data: dict[str, Any] | None = Field(default=None, alias="previousData")


class DeleteManyParams(_Params):
    ids: list[Identifier]
