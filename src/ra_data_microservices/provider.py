"""CRUD data provider over independently addressed JSON:API microservices.

Maps UI data-provider calls onto one microservice per resource::

    get_list     => GET    http://posts.api?page[number]=1&page[size]=25&sort=-title
    get_one      => GET    http://posts.api/123
    get_many     => GET    http://posts.api?filter[id]=in:123,456,789
    update       => PATCH  http://posts.api/123
    create       => POST   http://posts.api
    delete       => DELETE http://posts.api/123

Usage::

    provider = micro_services_json_api_provider({"posts": "http://posts.api"})
    result = await provider.get_list(
        "posts", {"pagination": {"page": 1, "perPage": 25}}
    )

The provider holds nothing but the resource mapping, the HTTP client and
the update_many body style. HTTP failures from the client propagate
unchanged.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, TypeVar

from pydantic import BaseModel

from ra_data_microservices.client import (
    HttpClient,
    HttpMethod,
    HttpResponse,
    RequestOptions,
    fetch_json,
)
from ra_data_microservices.config import MicroServiceConfig, ProviderSettings, get_settings
from ra_data_microservices.query import build_many_query, build_query, with_query
from ra_data_microservices.schemas.jsonapi import (
    Identifier,
    create_body,
    map_collection,
    map_response,
    record_body,
    update_body,
)
from ra_data_microservices.schemas.params import (
    CreateParams,
    DeleteManyParams,
    DeleteParams,
    GetListParams,
    GetManyParams,
    GetManyReferenceParams,
    GetOneParams,
    UpdateManyParams,
    UpdateParams,
)
from ra_data_microservices.schemas.results import (
    DeleteResult,
    IdsResult,
    ListResult,
    RecordResult,
)

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=BaseModel)


def _coerce(model: type[P], params: P | Mapping[str, Any]) -> P:
    """Accept either a parameter model or a mapping that validates into one."""
    if isinstance(params, model):
        return params
    return model.model_validate(params)


class MicroServicesJsonApiProvider:
    """Data provider issuing one HTTP call (or one per id) per operation.

    Args:
        config: Resource name -> microservice base URL.
        http_client: Awaitable performing the request. Defaults to
            ``fetch_json``.
        envelope_update_many: Send ``update_many`` bodies in the JSON:API
            envelope used by ``update`` instead of the raw record.
    """

    def __init__(
        self,
        config: MicroServiceConfig,
        http_client: HttpClient | None = None,
        envelope_update_many: bool = False,
    ) -> None:
        self.config = MappingProxyType(dict(config))
        self.http_client = http_client or fetch_json
        self.envelope_update_many = envelope_update_many

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _base_url(self, resource: str) -> str:
        try:
            return self.config[resource]
        except KeyError:
            raise ValueError(
                f"Unknown resource '{resource}': no microservice URL configured"
            ) from None

    def _record_url(self, resource: str, id: Identifier) -> str:
        return f"{self._base_url(resource)}/{id}"

    async def _request(
        self, url: str, options: RequestOptions | None = None
    ) -> HttpResponse:
        method = (options or {}).get("method", HttpMethod.GET)
        logger.debug("%s %s", method, url)
        return await self.http_client(url, options)

    async def _fetch_list(self, url: str) -> ListResult:
        response = await self._request(url)
        total, data = map_collection(response.json)
        return ListResult(total=total, data=data)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get_list(
        self, resource: str, params: GetListParams | Mapping[str, Any]
    ) -> ListResult:
        """Fetch one page of ``resource`` with filters and sort applied."""
        params = _coerce(GetListParams, params)
        query = build_query(params.pagination, params.filter, params.sort)
        return await self._fetch_list(with_query(self._base_url(resource), query))

    async def get_one(
        self, resource: str, params: GetOneParams | Mapping[str, Any]
    ) -> RecordResult:
        """Fetch a single record by id."""
        params = _coerce(GetOneParams, params)
        response = await self._request(self._record_url(resource, params.id))
        return RecordResult(data=map_response(response.json["data"]))

    async def get_many(
        self, resource: str, params: GetManyParams | Mapping[str, Any]
    ) -> ListResult:
        """Fetch several records by id with a single ``filter[id]=in:`` query."""
        params = _coerce(GetManyParams, params)
        query = build_many_query(params.ids)
        return await self._fetch_list(with_query(self._base_url(resource), query))

    async def get_many_reference(
        self, resource: str, params: GetManyReferenceParams | Mapping[str, Any]
    ) -> ListResult:
        """Fetch one page of records whose ``target`` field references ``id``.

        The reference filter is applied after the caller's filters and wins
        over a filter on the same field.
        """
        params = _coerce(GetManyReferenceParams, params)
        query = build_query(params.pagination, params.filter, params.sort)
        query[f"filter[{params.target}]"] = params.id
        return await self._fetch_list(with_query(self._base_url(resource), query))

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def update(
        self, resource: str, params: UpdateParams | Mapping[str, Any]
    ) -> RecordResult:
        """Partially update one record."""
        params = _coerce(UpdateParams, params)
        response = await self._request(
            self._record_url(resource, params.id),
            {
                "method": HttpMethod.PATCH,
                "body": update_body(resource, params.id, params.data),
            },
        )
        return RecordResult(data=map_response(response.json["data"]))

    async def update_many(
        self, resource: str, params: UpdateManyParams | Mapping[str, Any]
    ) -> IdsResult:
        """Apply the same partial update to every id, one request per id.

        Requests run concurrently. The first failure is raised; requests
        already sent are neither cancelled nor reverted.
        """
        params = _coerce(UpdateManyParams, params)
        logger.info("Updating %d %s records", len(params.ids), resource)
        base_url = self._base_url(resource)

        def body(id: Identifier) -> str:
            if self.envelope_update_many:
                return update_body(resource, id, params.data)
            return record_body(params.data)

        responses = await asyncio.gather(
            *(
                self._request(
                    f"{base_url}/{id}",
                    {"method": HttpMethod.PATCH, "body": body(id)},
                )
                for id in params.ids
            )
        )
        return IdsResult(data=[response.json["data"]["id"] for response in responses])

    async def create(
        self, resource: str, params: CreateParams | Mapping[str, Any]
    ) -> RecordResult:
        """Create a record. The service assigns the id."""
        params = _coerce(CreateParams, params)
        response = await self._request(
            self._base_url(resource),
            {"method": HttpMethod.POST, "body": create_body(resource, params.data)},
        )
        return RecordResult(data=map_response(response.json["data"]))

    async def delete(
        self, resource: str, params: DeleteParams | Mapping[str, Any]
    ) -> DeleteResult:
        """Delete one record; the returned id comes from the response body."""
        params = _coerce(DeleteParams, params)
        response = await self._request(
            self._record_url(resource, params.id), {"method": HttpMethod.DELETE}
        )
        return DeleteResult(data={"id": response.json["data"]["id"]})

    async def delete_many(
        self, resource: str, params: DeleteManyParams | Mapping[str, Any]
    ) -> IdsResult:
        """Delete every id, one concurrent request per id.

        Same failure semantics as ``update_many``.
        """
        params = _coerce(DeleteManyParams, params)
        logger.info("Deleting %d %s records", len(params.ids), resource)
        base_url = self._base_url(resource)
        responses = await asyncio.gather(
            *(
                self._request(
                    f"{base_url}/{id}", {"method": HttpMethod.DELETE}
                )
                for id in params.ids
            )
        )
        return IdsResult(data=[response.json["data"]["id"] for response in responses])


def micro_services_json_api_provider(
    config: MicroServiceConfig,
    http_client: HttpClient | None = None,
    envelope_update_many: bool = False,
) -> MicroServicesJsonApiProvider:
    """Build a provider for ``config`` using ``http_client`` for every request."""
    return MicroServicesJsonApiProvider(
        config, http_client, envelope_update_many=envelope_update_many
    )


def provider_from_settings(
    settings: ProviderSettings | None = None,
    http_client: HttpClient | None = None,
) -> MicroServicesJsonApiProvider:
    """Build a provider from environment settings.

    Without an explicit ``http_client`` requests go through ``fetch_json``
    with the configured timeout.
    """
    settings = settings or get_settings()
    if http_client is None:
        http_client = functools.partial(fetch_json, timeout=settings.timeout)
    return MicroServicesJsonApiProvider(
        settings.resources,
        http_client,
        envelope_update_many=settings.envelope_update_many,
    )
