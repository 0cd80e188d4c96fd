"""CRUD data provider for UIs backed by independent JSON:API microservices."""

from ra_data_microservices.client import (
    HttpClient,
    HttpMethod,
    HttpResponse,
    HttpxJsonClient,
    RequestOptions,
    fetch_json,
)
from ra_data_microservices.config import MicroServiceConfig, ProviderSettings, get_settings
from ra_data_microservices.provider import (
    MicroServicesJsonApiProvider,
    micro_services_json_api_provider,
    provider_from_settings,
)
from ra_data_microservices.schemas.jsonapi import map_response

__version__ = "0.1.0"
__all__ = [
    "HttpClient",
    "HttpMethod",
    "HttpResponse",
    "HttpxJsonClient",
    "MicroServiceConfig",
    "MicroServicesJsonApiProvider",
    "ProviderSettings",
    "RequestOptions",
    "fetch_json",
    "get_settings",
    "map_response",
    "micro_services_json_api_provider",
    "provider_from_settings",
]
