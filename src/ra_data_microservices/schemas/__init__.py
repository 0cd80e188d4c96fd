"""Pydantic schemas: JSON:API envelopes, operation parameters and results."""

from ra_data_microservices.schemas.jsonapi import (
    Identifier,
    JSONAPIRequest,
    JSONAPIUpdateRequest,
    map_response,
)
from ra_data_microservices.schemas.params import (
    CreateParams,
    DeleteManyParams,
    DeleteParams,
    GetListParams,
    GetManyParams,
    GetManyReferenceParams,
    GetOneParams,
    Pagination,
    SortPayload,
    UpdateManyParams,
    UpdateParams,
)
from ra_data_microservices.schemas.results import (
    DeleteResult,
    IdsResult,
    ListResult,
    RecordResult,
)

__all__ = [
    "CreateParams",
    "DeleteManyParams",
    "DeleteParams",
    "DeleteResult",
    "GetListParams",
    "GetManyParams",
    "GetManyReferenceParams",
    "GetOneParams",
    "Identifier",
    "IdsResult",
    "JSONAPIRequest",
    "JSONAPIUpdateRequest",
    "ListResult",
    "Pagination",
    "RecordResult",
    "SortPayload",
    "UpdateManyParams",
    "UpdateParams",
    "map_response",
]
