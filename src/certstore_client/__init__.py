"""Client for certificate store management on a Keyfactor Command service."""

from certstore_client.client import KeyfactorClient
from certstore_client.exceptions import (
    CertStoreError,
    DecodeError,
    MalformedJSON,
    MissingRequiredField,
    PropertyEncodeError,
    StoreTypeNotFoundError,
    StoreValidationError,
    TransportError,
    TypeMismatch,
)
from certstore_client.infrastructure.transport import KeyfactorTransport

__version__ = "0.1.0"

__all__ = [
    "KeyfactorClient",
    "KeyfactorTransport",
    "CertStoreError",
    "DecodeError",
    "MalformedJSON",
    "MissingRequiredField",
    "PropertyEncodeError",
    "StoreTypeNotFoundError",
    "StoreValidationError",
    "TransportError",
    "TypeMismatch",
]
