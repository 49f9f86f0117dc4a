"""Global pytest configuration and fixtures for all tests."""

import os

import pytest
from loguru import logger

from certstore_client.config import get_settings
from certstore_client.infrastructure.transport import KeyfactorTransport

BASE_URL = "https://keyfactor.example.com/KeyfactorAPI/"


@pytest.fixture(scope="session", autouse=True)
def set_test_env_vars():
    """
    Set environment variables for testing.

    This fixture runs automatically before any tests and provides
    dummy service credentials so tests don't depend on local configuration.

    These are NOT real credentials - just placeholders for testing.
    """
    # Store original values to restore after tests
    original_env = {}

    test_env_vars = {
        "KEYFACTOR_HOSTNAME": "keyfactor.example.com",
        "KEYFACTOR_USERNAME": "svc-certstores",
        "KEYFACTOR_PASSWORD": "test-password-for-testing-only",
        "KEYFACTOR_DOMAIN": "EXAMPLE",
        "LOG_LEVEL": "DEBUG",
    }

    for key, value in test_env_vars.items():
        original_env[key] = os.environ.get(key)
        os.environ[key] = value
    get_settings.cache_clear()

    yield

    # Restore original environment after all tests
    for key, original_value in original_env.items():
        if original_value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = original_value
    get_settings.cache_clear()


@pytest.fixture
def transport():
    """Create a transport pointed at the test service."""
    transport = KeyfactorTransport(
        base_url=BASE_URL,
        username="EXAMPLE\\svc-certstores",
        password="test-password",
    )
    yield transport
    transport.close()


@pytest.fixture
def log_messages():
    """Collect loguru messages of level WARNING and above."""
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="WARNING", format="{message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def sample_certificate() -> dict:
    """One inventoried certificate as returned by the service."""
    return {
        "Id": 4211,
        "IssuedDN": "CN=web01.example.com",
        "SerialNumber": "6D00000A1B2C3D4E5F",
        "NotBefore": "2026-01-10T00:00:00Z",
        "NotAfter": "2027-01-10T00:00:00Z",
        "SigningAlgorithm": "sha256RSA",
        "IssuerDN": "CN=Example Issuing CA, DC=example, DC=com",
        "Thumbprint": "A1B2C3D4E5F60718293A4B5C6D7E8F9012345678",
        "CertStoreInventoryItemId": 77,
    }


@pytest.fixture
def sample_slot(sample_certificate) -> dict:
    """One inventory slot holding the sample certificate."""
    return {
        "Name": "web01",
        "CertStoreInventoryItemId": 77,
        "Parameters": {"ProviderName": "Microsoft Enhanced Cryptographic Provider"},
        "Certificates": [sample_certificate],
    }
