"""Exceptions raised by the certificate store client."""

__all__ = [
    "CertStoreError",
    "StoreValidationError",
    "TransportError",
    "DecodeError",
    "MissingRequiredField",
    "TypeMismatch",
    "MalformedJSON",
    "PropertyEncodeError",
    "StoreTypeNotFoundError",
]


class CertStoreError(Exception):
    """Generic base exception used for this library."""


class StoreValidationError(CertStoreError):
    """Raised when a required input field is missing, before any request is sent."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class TransportError(CertStoreError):
    """Raised when a request fails or the service answers with an unexpected status."""

    def __init__(
        self,
        method: str,
        endpoint: str,
        status_code: int | None = None,
        detail: str | None = None,
    ) -> None:
        if status_code is None:
            message = f"{method} call to {endpoint} failed"
        else:
            message = f"{method} call to {endpoint} returned status {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.method = method
        self.endpoint = endpoint
        self.status_code = status_code
        self.detail = detail


class DecodeError(CertStoreError):
    """Raised when a response body cannot be decoded into the expected records."""

    def __init__(self, location: str, message: str) -> None:
        super().__init__(f"{location}: {message}" if location else message)
        self.location = location
        self.message = message


class MissingRequiredField(DecodeError):
    """A required field is absent from the payload."""


class TypeMismatch(DecodeError):
    """A field is present but holds a value of the wrong type."""


class MalformedJSON(DecodeError):
    """The payload is not valid JSON."""


class PropertyEncodeError(CertStoreError):
    """Raised when a property map cannot be serialized for the service."""


class StoreTypeNotFoundError(CertStoreError):
    """Raised when no certificate store type matches the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"no certificate store type found with the name {name!r}")
        self.name = name
