"""Translation of pydantic validation failures into decode errors."""

from collections.abc import Iterable
from typing import TypeVar

from pydantic import TypeAdapter, ValidationError

from certstore_client.exceptions import (
    DecodeError,
    MalformedJSON,
    MissingRequiredField,
    TypeMismatch,
)

T = TypeVar("T")


def format_location(loc: Iterable[int | str]) -> str:
    """
    Render a pydantic error location as a path.

    Args:
        loc: Location tuple, e.g. (0, "Certificates", 1, "Thumbprint")

    Returns:
        Path string, e.g. "[0].Certificates[1].Thumbprint"
    """
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path


def translate_validation_error(exc: ValidationError) -> DecodeError:
    """
    Convert the first pydantic error into the matching DecodeError subclass.

    Args:
        exc: Error raised while validating a payload

    Returns:
        MissingRequiredField, MalformedJSON or TypeMismatch
    """
    error = exc.errors()[0]
    location = format_location(error.get("loc", ()))
    error_type = error.get("type", "")

    if error_type == "missing":
        return MissingRequiredField(location, "required field is missing")
    if error_type == "json_invalid":
        return MalformedJSON(location, error.get("msg", "invalid JSON"))
    return TypeMismatch(location, error.get("msg", "unexpected type"))


def decode_json(adapter: TypeAdapter[T], raw: str | bytes) -> T:
    """
    Validate a raw JSON body against a type adapter.

    Raises:
        DecodeError: One of its subclasses, depending on the failure
    """
    try:
        return adapter.validate_json(raw)
    except ValidationError as e:
        raise translate_validation_error(e) from e
