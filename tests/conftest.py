"""
Shared pytest fixtures for the provider test suite.
"""
import pytest

from ra_data_microservices.provider import MicroServicesJsonApiProvider
from tests.fakes import COMMENTS_URL, POSTS_URL, FakeHttpClient


@pytest.fixture
def http_client():
    return FakeHttpClient()


@pytest.fixture
def provider(http_client):
    return MicroServicesJsonApiProvider(
        {"posts": POSTS_URL, "comments": COMMENTS_URL}, http_client
    )
