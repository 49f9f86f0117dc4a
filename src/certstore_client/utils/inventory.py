"""
Decoding of certificate store inventory payloads.

The inventory endpoint answers with a JSON array of slots:

    [{"Name": ..., "CertStoreInventoryItemId": ..., "Parameters": {...},
      "Certificates": [{"Id": ..., "Thumbprint": ..., ...}]}]

Every certificate field is required. Any missing or mistyped field fails the
whole decode; no partial results are returned.
"""

from collections.abc import Iterable
from typing import Any

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from certstore_client.models.inventory import InventoryItem
from certstore_client.utils.decoding import decode_json, translate_validation_error

_inventory_adapter = TypeAdapter(list[InventoryItem])


def _log_decoded(items: list[InventoryItem]) -> None:
    logger.debug(
        f"Decoded {len(items)} inventory slots holding "
        f"{sum(len(item.certificates) for item in items)} certificates"
    )


def decode_inventory(document: Any) -> list[InventoryItem]:
    """
    Decode an already-parsed inventory document.

    Args:
        document: Parsed JSON value, expected to be a list of slot objects

    Returns:
        One InventoryItem per slot, in payload order

    Raises:
        MissingRequiredField: If a required field is absent
        TypeMismatch: If a field (or the document itself) has the wrong type
    """
    if isinstance(document, list) and not document:
        return []
    try:
        items = _inventory_adapter.validate_python(document)
    except ValidationError as e:
        raise translate_validation_error(e) from e

    _log_decoded(items)
    return items


def decode_inventory_json(raw: str | bytes) -> list[InventoryItem]:
    """
    Decode a raw inventory response body.

    Args:
        raw: Response body text

    Returns:
        One InventoryItem per slot, in payload order

    Raises:
        MalformedJSON: If the body is not valid JSON
        MissingRequiredField: If a required field is absent
        TypeMismatch: If a field has the wrong type
    """
    items = decode_json(_inventory_adapter, raw)
    _log_decoded(items)
    return items


def flatten_inventory(items: Iterable[InventoryItem]) -> list[InventoryItem]:
    """
    Expand inventory into one row per certificate.

    Each slot is repeated once for every certificate it holds, and each
    repetition carries the slot's full certificate list. Slots without
    certificates produce no rows.

    Args:
        items: Decoded inventory slots

    Returns:
        Flattened rows
    """
    return [item for item in items for _ in item.certificates]
