"""Provider configuration.

Resource-to-URL mapping and HTTP settings loaded from environment variables
with the ``RA_MICROSERVICES_`` prefix (``resources`` is a JSON object).
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

# key/value pairs of resource name -> microservice base URL
MicroServiceConfig = Mapping[str, str]


class ProviderSettings(BaseSettings):
    """Provider settings loaded from environment variables with RA_MICROSERVICES_ prefix."""

    # Resource name -> base URL, e.g. {"posts": "http://posts.api"}
    resources: dict[str, str] = {}
    # Default HTTP client
    timeout: float = 10.0
    # Send update_many bodies in the same JSON:API envelope as update
    envelope_update_many: bool = False

    model_config = SettingsConfigDict(env_prefix="RA_MICROSERVICES_", env_file=".env")


@lru_cache
def get_settings() -> ProviderSettings:
    """Return cached provider settings instance."""
    return ProviderSettings()
