"""
Certificate store operations.

Each operation validates its input, encodes store properties when needed,
sends the request through the transport and decodes the response:
- create / update / delete / list / get certificate stores
- add a certificate to, or remove it from, one or more stores
- fetch the certificate inventory of a store
"""

from typing import TypeVar

from loguru import logger
from pydantic import TypeAdapter

from certstore_client.exceptions import StoreValidationError, TransportError
from certstore_client.infrastructure.transport import KeyfactorTransport
from certstore_client.models.inventory import InventoryItem
from certstore_client.models.store import (
    AddCertificateToStore,
    CertificateStore,
    CertificateStoreTarget,
    CreateStoreArgs,
    CreateStoreResponse,
    RemoveCertificateFromStore,
    StoreArgs,
    UpdateStoreArgs,
    UpdateStoreResponse,
)
from certstore_client.utils.decoding import decode_json
from certstore_client.utils.inventory import decode_inventory_json
from certstore_client.utils.properties import decode_properties, encode_properties

STORES_ENDPOINT = "CertificateStores"
ADD_CERTIFICATE_ENDPOINT = "CertificateStores/Certificates/Add"
REMOVE_CERTIFICATE_ENDPOINT = "CertificateStores/Certificates/Remove"

_create_adapter = TypeAdapter(CreateStoreResponse)
_update_adapter = TypeAdapter(UpdateStoreResponse)
_store_adapter = TypeAdapter(CertificateStore)
_store_list_adapter = TypeAdapter(list[CertificateStore])
_job_ids_adapter = TypeAdapter(list[str])

StoreT = TypeVar("StoreT", bound=CertificateStore)


def validate_store_args(args: StoreArgs, action: str) -> None:
    """
    Check the fields every store creation or update requires.

    Args:
        args: Store arguments
        action: "create" or "update", used in the error message

    Raises:
        StoreValidationError: If client machine, store path or agent id is empty
    """
    if not args.client_machine:
        raise StoreValidationError(
            "client_machine",
            f"client machine is required for {action} of certificate store",
        )
    if not args.store_path:
        raise StoreValidationError(
            "store_path", f"store path is required for {action} of certificate store"
        )
    if not args.agent_id:
        raise StoreValidationError(
            "agent_id",
            f"orchestrator agent id is required for {action} of certificate store",
        )


def validate_store_id(store_id: str) -> str:
    """
    Check that a store id was given.

    Returns:
        The id, stripped of surrounding whitespace

    Raises:
        StoreValidationError: If the id is empty
    """
    store_id = (store_id or "").strip()
    if not store_id:
        raise StoreValidationError("store_id", "certificate store id is required")
    return store_id


def build_store_payload(args: StoreArgs) -> dict:
    """
    Build the request body for a store creation or update.

    A caller-supplied properties_string is sent unchanged; otherwise the
    properties map is encoded. The arguments object is not modified.
    """
    payload = args.to_payload()
    if not args.properties_string:
        payload["Properties"] = encode_properties(args.properties)
    return payload


def with_decoded_properties(store: StoreT) -> StoreT:
    """Return a copy of the store with its properties string decoded."""
    return store.model_copy(
        update={"properties": decode_properties(store.properties_string)}
    )


class StoreService:
    """Certificate store operations against the service REST API."""

    def __init__(self, transport: KeyfactorTransport):
        """
        Initialize the service.

        Args:
            transport: Transport used for every request
        """
        self.transport = transport

    def create_store(self, args: CreateStoreArgs) -> CreateStoreResponse:
        """
        Create a certificate store.

        Store types require different properties; the service rejects
        properties that do not match the type.

        Args:
            args: Store definition; client_machine, store_path and agent_id are required

        Returns:
            The created store

        Raises:
            StoreValidationError: If a required field is missing
            TransportError: If the request fails
            DecodeError: If the response cannot be decoded
        """
        logger.info("Creating new certificate store")
        validate_store_args(args, "create")

        response = self.transport.request(
            "POST", STORES_ENDPOINT, build_store_payload(args)
        )
        return with_decoded_properties(decode_json(_create_adapter, response.content))

    def update_store(self, args: UpdateStoreArgs) -> UpdateStoreResponse:
        """
        Update an existing certificate store.

        Args:
            args: Store definition; id, client_machine, store_path and agent_id are required

        Returns:
            The updated store
        """
        logger.info(f"Updating certificate store {args.id}")
        validate_store_args(args, "update")
        validate_store_id(args.id)

        response = self.transport.request(
            "PUT", STORES_ENDPOINT, build_store_payload(args)
        )
        return with_decoded_properties(decode_json(_update_adapter, response.content))

    def delete_store(self, store_id: str) -> None:
        """
        Delete a certificate store.

        Args:
            store_id: Id (GUID) of the store

        Raises:
            TransportError: If the service does not answer 204 No Content
        """
        store_id = validate_store_id(store_id)
        logger.info(f"Deleting certificate store {store_id}")

        endpoint = f"{STORES_ENDPOINT}/{store_id}"
        response = self.transport.request("DELETE", endpoint)
        if response.status_code != 204:
            raise TransportError("DELETE", endpoint, response.status_code)

    def list_stores(self) -> list[CertificateStore]:
        """
        List every certificate store known to the service.

        Returns:
            Stores, each with its properties decoded

        Raises:
            TransportError: If the service does not answer 200 OK
        """
        endpoint = f"{STORES_ENDPOINT}/"
        response = self.transport.request("GET", endpoint)
        if response.status_code != 200:
            raise TransportError("GET", endpoint, response.status_code)

        stores = decode_json(_store_list_adapter, response.content)
        return [with_decoded_properties(store) for store in stores]

    def get_store_by_id(self, store_id: str) -> CertificateStore:
        """
        Fetch one certificate store.

        Args:
            store_id: Id (GUID) of the store

        Returns:
            The store, with ``properties`` decoded from its Properties string
        """
        store_id = validate_store_id(store_id)
        response = self.transport.request("GET", f"{STORES_ENDPOINT}/{store_id}")
        return with_decoded_properties(decode_json(_store_adapter, response.content))

    def add_certificate_to_stores(self, request: AddCertificateToStore) -> list[str]:
        """
        Schedule adding a certificate to one or more stores.

        Args:
            request: Certificate id and target stores

        Returns:
            Ids of the jobs created by the service
        """
        logger.info(
            f"Adding certificate with ID {request.certificate_id} "
            "to one or more certificate stores"
        )
        self._validate_targets(request.certificate_stores)

        response = self.transport.request(
            "POST", ADD_CERTIFICATE_ENDPOINT, request.to_payload()
        )
        return decode_json(_job_ids_adapter, response.content)

    def remove_certificate_from_stores(
        self, request: RemoveCertificateFromStore
    ) -> list[str]:
        """
        Schedule removing a certificate from one or more stores.

        Args:
            request: Target stores and aliases to remove

        Returns:
            Ids of the jobs created by the service
        """
        logger.info("Removing certificate from one or more certificate stores")
        self._validate_targets(request.certificate_stores)

        response = self.transport.request(
            "POST", REMOVE_CERTIFICATE_ENDPOINT, request.to_payload()
        )
        return decode_json(_job_ids_adapter, response.content)

    def get_store_inventory(self, store_id: str) -> list[InventoryItem]:
        """
        Fetch the certificates currently present in a store.

        Args:
            store_id: Id (GUID) of the store

        Returns:
            One InventoryItem per inventory slot

        Raises:
            DecodeError: If the inventory payload is malformed
        """
        store_id = validate_store_id(store_id)
        response = self.transport.request(
            "GET", f"{STORES_ENDPOINT}/{store_id}/Inventory"
        )
        return decode_inventory_json(response.content)

    @staticmethod
    def _validate_targets(targets: list[CertificateStoreTarget]) -> None:
        if not targets:
            raise StoreValidationError(
                "certificate_stores", "at least one certificate store is required"
            )
        for target in targets:
            if not target.certificate_store_id.strip():
                raise StoreValidationError(
                    "certificate_store_id",
                    "certificate store id is required for every target store",
                )
