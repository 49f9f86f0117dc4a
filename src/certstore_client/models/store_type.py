"""Certificate store type models."""

from typing import Any

from pydantic import ConfigDict, Field

from certstore_client.models.store import WireModel


class CertificateStoreType(WireModel):
    """
    Definition of a certificate store type.

    Only the commonly used fields are modelled; every other field returned by
    the service is kept as an extra and sent back unchanged on update.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    store_type: int | None = Field(None, alias="StoreType")
    name: str = Field(default="", alias="Name")
    short_name: str = Field(default="", alias="ShortName")
    capability: str | None = Field(None, alias="Capability")
    local_store: bool | None = Field(None, alias="LocalStore")
    supported_operations: dict[str, Any] | None = Field(
        None, alias="SupportedOperations"
    )
    properties: list[dict[str, Any]] = Field(default_factory=list, alias="Properties")
    entry_parameters: list[dict[str, Any]] = Field(
        default_factory=list, alias="EntryParameters"
    )
    password_options: dict[str, Any] | None = Field(None, alias="PasswordOptions")
    store_path_type: str | None = Field(None, alias="StorePathType")
    store_path_value: str | None = Field(None, alias="StorePathValue")
    private_key_allowed: str | None = Field(None, alias="PrivateKeyAllowed")
    job_properties: list[str] = Field(default_factory=list, alias="JobProperties")
    server_required: bool | None = Field(None, alias="ServerRequired")
    power_shell: bool | None = Field(None, alias="PowerShell")
    blueprint_allowed: bool | None = Field(None, alias="BlueprintAllowed")
    custom_alias_allowed: str | None = Field(None, alias="CustomAliasAllowed")


class DeleteStoreTypeResponse(WireModel):
    """Result of a store type deletion."""

    id: int
