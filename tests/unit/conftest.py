import pytest
from botocore.credentials import Credentials

from clientstack.aws.configuration import ClientConfiguration
from clientstack.testing.config import (
    TEST_AWS_ACCESS_KEY_ID,
    TEST_AWS_REGION_NAME,
    TEST_AWS_SECRET_ACCESS_KEY,
)
from clientstack.testing.http import RecordingHttpClient


@pytest.fixture(autouse=True)
def set_boto_test_credentials_and_region(monkeypatch):
    """
    Automatically sets the default credentials and region for all unit tests.
    """
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", TEST_AWS_ACCESS_KEY_ID)
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", TEST_AWS_SECRET_ACCESS_KEY)
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_AWS_REGION_NAME)
    monkeypatch.delenv("AWS_PROFILE", raising=False)


@pytest.fixture
def test_credentials() -> Credentials:
    return Credentials(TEST_AWS_ACCESS_KEY_ID, TEST_AWS_SECRET_ACCESS_KEY)


@pytest.fixture
def client_config() -> ClientConfiguration:
    return ClientConfiguration(region=TEST_AWS_REGION_NAME)


@pytest.fixture
def http_client() -> RecordingHttpClient:
    return RecordingHttpClient()


@pytest.fixture
def create_client(client_config, test_credentials, http_client):
    """
    Factory for service clients which send their requests to the recording ``http_client`` fixture. All created
    clients are closed after the test.
    """
    clients = []

    def _create(client_class, **kwargs):
        kwargs.setdefault("config", client_config)
        kwargs.setdefault("credentials", test_credentials)
        kwargs.setdefault("http_client", http_client)
        client = client_class(**kwargs)
        clients.append(client)
        return client

    yield _create

    for client in clients:
        client.close()
