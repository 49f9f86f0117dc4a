"""
Models package.

Contains the pydantic models exchanged with the certificate-management
service and the decoded inventory records.
"""

from certstore_client.models.errors import ServiceErrorBody
from certstore_client.models.inventory import InventoriedCertificate, InventoryItem
from certstore_client.models.store import (
    AddCertificateToStore,
    CertificateStore,
    CertificateStoreTarget,
    CreateStoreArgs,
    CreateStoreResponse,
    InventorySchedule,
    RemoveCertificateFromStore,
    UpdateStoreArgs,
    UpdateStoreResponse,
)
from certstore_client.models.store_type import (
    CertificateStoreType,
    DeleteStoreTypeResponse,
)

__all__ = [
    # Stores
    "AddCertificateToStore",
    "CertificateStore",
    "CertificateStoreTarget",
    "CreateStoreArgs",
    "CreateStoreResponse",
    "InventorySchedule",
    "RemoveCertificateFromStore",
    "UpdateStoreArgs",
    "UpdateStoreResponse",
    # Store types
    "CertificateStoreType",
    "DeleteStoreTypeResponse",
    # Inventory
    "InventoriedCertificate",
    "InventoryItem",
    # Errors
    "ServiceErrorBody",
]
