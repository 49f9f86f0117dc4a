"""Certificate store and store type operations."""

from certstore_client.services.store_types import StoreTypeService
from certstore_client.services.stores import StoreService

__all__ = ["StoreService", "StoreTypeService"]
