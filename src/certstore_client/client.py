"""
Client entry point.

Usage:
    from certstore_client import KeyfactorClient
    from certstore_client.config import get_settings

    # Option 1: From settings
    with KeyfactorClient.from_settings(get_settings()) as client:
        stores = client.stores.list_stores()

    # Option 2: Manual configuration
    transport = KeyfactorTransport(
        base_url="https://keyfactor.example.com/KeyfactorAPI/",
        username="EXAMPLE\\\\svc-certstores",
        password="...",
    )
    client = KeyfactorClient(transport)
"""

from typing import TYPE_CHECKING

from certstore_client.infrastructure.transport import KeyfactorTransport
from certstore_client.services.store_types import StoreTypeService
from certstore_client.services.stores import StoreService

if TYPE_CHECKING:
    from certstore_client.config import Settings


class KeyfactorClient:
    """
    Groups the store and store type services over one shared transport.

    Attributes:
        stores: Certificate store operations
        store_types: Certificate store type operations
    """

    def __init__(self, transport: KeyfactorTransport):
        self.transport = transport
        self.stores = StoreService(transport)
        self.store_types = StoreTypeService(transport)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "KeyfactorClient":
        """
        Create a client from Settings.

        Args:
            settings: Client settings from config.py

        Returns:
            KeyfactorClient configured from settings
        """
        return cls(KeyfactorTransport.from_settings(settings))

    def close(self) -> None:
        """Close the underlying transport."""
        self.transport.close()

    def __enter__(self) -> "KeyfactorClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
