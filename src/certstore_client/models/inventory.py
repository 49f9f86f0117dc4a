"""
Certificate store inventory records.

The service reports a store's inventory as a list of slots, each holding the
certificates currently present in it. Field aliases match the wire names.
"""

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    computed_field,
    field_validator,
)


class InventoriedCertificate(BaseModel):
    """
    A certificate found in a store during inventory.

    Attributes:
        id: Certificate id in the service
        issued_dn: Subject distinguished name
        serial_number: Certificate serial number (hex string)
        not_before: Start of validity, as reported by the service
        not_after: End of validity, as reported by the service
        signing_algorithm: Signature algorithm name
        issuer_dn: Issuer distinguished name
        thumbprint: SHA-1 thumbprint (hex string)
        cert_store_inventory_item_id: Id of the inventory slot holding it
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: StrictInt = Field(..., alias="Id")
    issued_dn: StrictStr = Field(..., alias="IssuedDN")
    serial_number: StrictStr = Field(..., alias="SerialNumber")
    not_before: StrictStr = Field(..., alias="NotBefore")
    not_after: StrictStr = Field(..., alias="NotAfter")
    signing_algorithm: StrictStr = Field(..., alias="SigningAlgorithm")
    issuer_dn: StrictStr = Field(..., alias="IssuerDN")
    thumbprint: StrictStr = Field(..., alias="Thumbprint")
    cert_store_inventory_item_id: StrictInt = Field(
        ..., alias="CertStoreInventoryItemId"
    )


class InventoryItem(BaseModel):
    """
    One inventory slot of a certificate store.

    The thumbprint, serial and id sets are projections of ``certificates``
    and are recomputed on every access.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: StrictStr = Field(..., alias="Name", description="Slot name (alias)")
    cert_store_inventory_item_id: StrictInt = Field(
        ..., alias="CertStoreInventoryItemId", description="Slot id"
    )
    parameters: dict[str, Any] = Field(
        default_factory=dict,
        alias="Parameters",
        description="Free-form entry parameters reported for the slot",
    )
    certificates: tuple[InventoriedCertificate, ...] = Field(
        ..., alias="Certificates", description="Certificates present in the slot"
    )

    @field_validator("parameters", mode="before")
    @classmethod
    def default_parameters(cls, v: Any) -> Any:
        """Treat a missing or non-object Parameters value as empty."""
        if not isinstance(v, dict):
            return {}
        return v

    @computed_field  # type: ignore[prop-decorator]
    @property
    def thumbprints(self) -> frozenset[str]:
        """Thumbprints of the certificates in the slot."""
        return frozenset(cert.thumbprint for cert in self.certificates)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def serials(self) -> frozenset[str]:
        """Serial numbers of the certificates in the slot."""
        return frozenset(cert.serial_number for cert in self.certificates)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ids(self) -> frozenset[int]:
        """Service ids of the certificates in the slot."""
        return frozenset(cert.id for cert in self.certificates)
