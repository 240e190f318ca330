import os

import pytest
from pydantic import SecretStr

from rest_client import (
    BasicAuthCredentials,
    MemoryCache,
    OAuthCredentials,
    OAuthParameterHandling,
    OAuthSignatureMethod,
    OAuthType,
)
from rest_client.settings import load_env_file

# Live tests read their credentials from the environment or a local .env
load_env_file(os.path.join(os.path.dirname(__file__), ".env"))


class FakeTimer:
    """Manually advanced clock for cache expiry tests."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def memory_cache(timer):
    return MemoryCache(maxsize=16, timer=timer)


@pytest.fixture
def basic_auth():
    return BasicAuthCredentials(username="hammer", password=SecretStr("time"))


@pytest.fixture
def oauth_request_token():
    return OAuthCredentials(
        type=OAuthType.REQUEST_TOKEN,
        signature_method=OAuthSignatureMethod.HMAC_SHA1,
        parameter_handling=OAuthParameterHandling.HTTP_AUTHORIZATION_HEADER,
        consumer_key="consumer-key",
        consumer_secret=SecretStr("consumer-secret"),
        nonce="kllo9940pd9333jh",
        timestamp="1191242096",
    )
