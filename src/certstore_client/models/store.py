"""
Certificate store request and response models.

Field aliases match the service's PascalCase wire names. Requests are dumped
with ``to_payload()`` (by alias, without unset optional fields).
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WireModel(BaseModel):
    """Base for models exchanged with the service."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_payload(self) -> dict[str, Any]:
        """Dump the model as a JSON-ready request body."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class IntervalSchedule(WireModel):
    """Run every N minutes."""

    minutes: int = Field(..., alias="Minutes", gt=0)


class TimeSchedule(WireModel):
    """Run at a given time (ISO 8601)."""

    time: str = Field(..., alias="Time")


class InventorySchedule(WireModel):
    """
    Job schedule attached to stores and certificate add/remove requests.

    Only one of the variants is expected to be set.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    immediate: bool | None = Field(None, alias="Immediate")
    interval: IntervalSchedule | None = Field(None, alias="Interval")
    daily: TimeSchedule | None = Field(None, alias="Daily")
    exactly_once: TimeSchedule | None = Field(None, alias="ExactlyOnce")


class StoreArgs(WireModel):
    """
    Fields shared by store creation and update requests.

    Attributes:
        client_machine: Machine hosting the store
        store_path: Path of the store on the client machine
        agent_id: Orchestrator agent that manages the store
        properties: Store-type specific properties, encoded on send
        properties_string: Pre-encoded Properties string, sent verbatim if set
    """

    container_id: int | None = Field(None, alias="ContainerId")
    client_machine: str = Field(default="", alias="ClientMachine")
    store_path: str = Field(default="", alias="StorePath")
    cert_store_type: int = Field(default=0, alias="CertStoreType")
    approved: bool | None = Field(None, alias="Approved")
    create_if_missing: bool | None = Field(None, alias="CreateIfMissing")
    properties_string: str = Field(default="", alias="Properties")
    agent_id: str = Field(default="", alias="AgentId")
    agent_assigned: bool | None = Field(None, alias="AgentAssigned")
    container_name: str | None = Field(None, alias="ContainerName")
    inventory_schedule: InventorySchedule | None = Field(
        None, alias="InventorySchedule"
    )
    reenrollment_status: dict[str, Any] | None = Field(
        None, alias="ReenrollmentStatus"
    )
    set_new_password_allowed: bool | None = Field(None, alias="SetNewPasswordAllowed")
    password: dict[str, Any] | None = Field(None, alias="Password")

    properties: dict[str, str] = Field(default_factory=dict, exclude=True)


class CreateStoreArgs(StoreArgs):
    """Request to create a certificate store."""


class UpdateStoreArgs(StoreArgs):
    """Request to update an existing certificate store."""

    id: str = Field(default="", alias="Id")


class CertificateStore(WireModel):
    """
    A certificate store as returned by the service.

    ``properties`` is filled from ``properties_string`` by the client; it is
    not read from the wire.
    """

    id: str = Field(..., alias="Id")
    container_id: int | None = Field(None, alias="ContainerId")
    client_machine: str = Field(default="", alias="ClientMachine")
    store_path: str = Field(default="", alias="StorePath")
    cert_store_inventory_job_id: str | None = Field(
        None, alias="CertStoreInventoryJobId"
    )
    cert_store_type: int | None = Field(None, alias="CertStoreType")
    approved: bool | None = Field(None, alias="Approved")
    create_if_missing: bool | None = Field(None, alias="CreateIfMissing")
    properties_string: str = Field(default="", alias="Properties")
    agent_id: str | None = Field(None, alias="AgentId")
    agent_assigned: bool | None = Field(None, alias="AgentAssigned")
    container_name: str | None = Field(None, alias="ContainerName")
    inventory_schedule: InventorySchedule | None = Field(
        None, alias="InventorySchedule"
    )
    reenrollment_status: dict[str, Any] | None = Field(
        None, alias="ReenrollmentStatus"
    )
    set_new_password_allowed: bool | None = Field(None, alias="SetNewPasswordAllowed")
    password: dict[str, Any] | None = Field(None, alias="Password")

    properties: dict[str, str] = Field(default_factory=dict, exclude=True)

    @field_validator("properties_string", mode="before")
    @classmethod
    def normalize_properties_string(cls, v: Any) -> Any:
        """Accept an inline Properties object by re-serializing it."""
        if v is None:
            return ""
        if isinstance(v, dict):
            return json.dumps(v)
        return v


class CreateStoreResponse(CertificateStore):
    """Store returned after creation."""


class UpdateStoreResponse(CertificateStore):
    """Store returned after an update."""


class CertificateStoreTarget(WireModel):
    """
    A store targeted by a certificate add or remove request.

    Attributes:
        certificate_store_id: Id of the target store
        alias: Entry alias inside the store
        overwrite: Replace an existing entry with the same alias
        job_fields: Store-type specific entry parameters
    """

    certificate_store_id: str = Field(..., alias="CertificateStoreId")
    alias: str | None = Field(None, alias="Alias")
    job_fields: dict[str, Any] | None = Field(None, alias="JobFields")
    overwrite: bool | None = Field(None, alias="Overwrite")
    entry_password: dict[str, Any] | None = Field(None, alias="EntryPassword")
    pfx_password: str | None = Field(None, alias="PfxPassword")
    include_private_key: bool | None = Field(None, alias="IncludePrivateKey")


class AddCertificateToStore(WireModel):
    """Request to add a certificate to one or more stores."""

    certificate_id: int = Field(..., alias="CertificateId")
    certificate_stores: list[CertificateStoreTarget] = Field(
        default_factory=list, alias="CertificateStores"
    )
    schedule: InventorySchedule = Field(
        default_factory=lambda: InventorySchedule(immediate=True), alias="Schedule"
    )
    collection_id: int | None = Field(None, alias="CollectionId")


class RemoveCertificateFromStore(WireModel):
    """Request to remove a certificate from one or more stores."""

    certificate_stores: list[CertificateStoreTarget] = Field(
        default_factory=list, alias="CertificateStores"
    )
    schedule: InventorySchedule = Field(
        default_factory=lambda: InventorySchedule(immediate=True), alias="Schedule"
    )
    collection_id: int | None = Field(None, alias="CollectionId")
