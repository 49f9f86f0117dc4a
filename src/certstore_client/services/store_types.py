"""
Certificate store type operations.

Thin reshaping of the service's store type endpoints into
CertificateStoreType models. Lookup by id and lookup by name are separate
operations.
"""

from typing import Any

from loguru import logger
from pydantic import TypeAdapter

from certstore_client.exceptions import (
    StoreTypeNotFoundError,
    StoreValidationError,
    TransportError,
)
from certstore_client.infrastructure.transport import KeyfactorTransport
from certstore_client.models.store_type import (
    CertificateStoreType,
    DeleteStoreTypeResponse,
)
from certstore_client.utils.decoding import decode_json

STORE_TYPES_ENDPOINT = "CertificateStoreTypes"

_store_type_adapter = TypeAdapter(CertificateStoreType)
_store_type_list_adapter = TypeAdapter(list[CertificateStoreType])
_store_type_or_list_adapter: TypeAdapter[Any] = TypeAdapter(
    CertificateStoreType | list[CertificateStoreType]
)


class StoreTypeService:
    """Certificate store type operations against the service REST API."""

    def __init__(self, transport: KeyfactorTransport):
        self.transport = transport

    def get_store_type_by_id(self, store_type_id: int) -> CertificateStoreType:
        """
        Fetch a store type by its numeric id.

        Args:
            store_type_id: Store type id

        Returns:
            The store type
        """
        response = self.transport.request(
            "GET", f"{STORE_TYPES_ENDPOINT}/{store_type_id}"
        )
        return decode_json(_store_type_adapter, response.content)

    def get_store_type_by_name(self, name: str) -> CertificateStoreType:
        """
        Fetch a store type by its short name.

        Short names are expected to be unique; when the service returns
        several matches the first one is used.

        Args:
            name: Store type short name

        Returns:
            The store type

        Raises:
            StoreValidationError: If name is empty
            StoreTypeNotFoundError: If no store type has this name
        """
        if not name or not name.strip():
            raise StoreValidationError("name", "certificate store type name is required")

        response = self.transport.request(
            "GET", f"{STORE_TYPES_ENDPOINT}/Name/{name.strip()}"
        )
        result = decode_json(_store_type_or_list_adapter, response.content)
        if isinstance(result, CertificateStoreType):
            return result
        if not result:
            raise StoreTypeNotFoundError(name)
        if len(result) > 1:
            logger.warning(
                f"{len(result)} certificate store types share the name {name!r}, "
                "using the first one"
            )
        return result[0]

    def list_store_types(self) -> list[CertificateStoreType]:
        """List every certificate store type."""
        response = self.transport.request("GET", STORE_TYPES_ENDPOINT)
        return decode_json(_store_type_list_adapter, response.content)

    def create_store_type(
        self, store_type: CertificateStoreType
    ) -> CertificateStoreType:
        """
        Create a certificate store type.

        Args:
            store_type: Store type definition

        Returns:
            The created store type, as stored by the service
        """
        logger.info(f"Creating new certificate store type {store_type.short_name}")
        response = self.transport.request(
            "POST", STORE_TYPES_ENDPOINT, store_type.to_payload()
        )
        return decode_json(_store_type_adapter, response.content)

    def update_store_type(
        self, store_type: CertificateStoreType
    ) -> CertificateStoreType:
        """
        Update a certificate store type.

        Args:
            store_type: Store type definition, including its StoreType id

        Returns:
            The updated store type
        """
        logger.info(f"Updating certificate store type {store_type.short_name}")
        if store_type.store_type is None:
            raise StoreValidationError(
                "store_type", "certificate store type id is required for update"
            )
        response = self.transport.request(
            "PUT", STORE_TYPES_ENDPOINT, store_type.to_payload()
        )
        return decode_json(_store_type_adapter, response.content)

    def delete_store_type(self, store_type_id: int) -> DeleteStoreTypeResponse:
        """
        Delete a certificate store type.

        Raises:
            TransportError: If the service does not answer 204 No Content
        """
        logger.info(f"Attempting to delete certificate store type {store_type_id}")
        endpoint = f"{STORE_TYPES_ENDPOINT}/{store_type_id}"
        response = self.transport.request("DELETE", endpoint)
        if response.status_code != 204:
            raise TransportError("DELETE", endpoint, response.status_code)
        return DeleteStoreTypeResponse(id=store_type_id)
