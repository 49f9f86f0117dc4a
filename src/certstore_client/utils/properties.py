"""
Store property encoding.

Store properties travel in two different shapes:
- On write, the service expects {"<name>": {"value": "<value>"}} serialized
  into the store's Properties string.
- On read, the Properties string holds a flat {"<name>": "<value>"} object,
  or is empty.
"""

import json
from collections.abc import Mapping
from typing import Any

from loguru import logger

from certstore_client.exceptions import PropertyEncodeError


def build_properties_payload(properties: Mapping[str, Any]) -> dict[str, dict[str, Any]]:
    """
    Wrap each property value the way the service expects on write.

    Args:
        properties: Flat property map

    Returns:
        Dict of {"<name>": {"value": <value>}}
    """
    return {name: {"value": value} for name, value in properties.items()}


def encode_properties(properties: Mapping[str, Any] | None) -> str:
    """
    Serialize a property map into the write-side Properties string.

    Args:
        properties: Flat property map; None or empty serializes to "{}"

    Returns:
        JSON string

    Raises:
        PropertyEncodeError: If a value cannot be serialized to JSON
    """
    try:
        return json.dumps(build_properties_payload(properties or {}))
    except (TypeError, ValueError) as e:
        raise PropertyEncodeError(f"unable to serialize store properties: {e}") from e


def decode_properties(raw: str | None) -> dict[str, str]:
    """
    Decode the read-side Properties string into a flat property map.

    Decoding never fails. A string that is not a JSON object decodes to an
    empty map, and entries whose value is not a string are skipped; both
    cases are logged as warnings.

    Args:
        raw: Properties string as returned by the service

    Returns:
        Flat {"<name>": "<value>"} map
    """
    if not raw:
        return {}

    try:
        document = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning(f"Ignoring malformed store properties: {e}")
        return {}

    if not isinstance(document, dict):
        logger.warning(
            f"Ignoring store properties of type {type(document).__name__}, "
            "expected an object"
        )
        return {}

    properties: dict[str, str] = {}
    for name, value in document.items():
        if not isinstance(value, str):
            logger.warning(
                f"Skipping store property {name!r}: "
                f"expected a string, got {type(value).__name__}"
            )
            continue
        properties[name] = value
    return properties
