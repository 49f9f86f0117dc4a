"""Error body models returned by the certificate-management service."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ServiceErrorBody(BaseModel):
    """Error payload returned with non-success responses.

    Attributes:
        error_code: Service-specific error code (e.g., "0xA0110002").
        message: Human-readable error message.
        details: Any additional fields the service included.

    Example:
        ```python
        body = ServiceErrorBody.model_validate(
            {"ErrorCode": "0xA0110002", "Message": "Certificate store not found"}
        )
        ```
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    error_code: str | None = Field(
        default=None,
        alias="ErrorCode",
        description="Service error code",
        json_schema_extra={"example": "0xA0110002"},
    )
    message: str | None = Field(
        default=None,
        alias="Message",
        description="Human-readable explanation",
        json_schema_extra={"example": "Certificate store not found"},
    )

    @property
    def details(self) -> dict[str, Any]:
        """Extra fields not covered by the model."""
        return dict(self.model_extra or {})

    def describe(self) -> str | None:
        """Single-line description suitable for an exception message."""
        if self.message and self.error_code:
            return f"{self.message} (code {self.error_code})"
        return self.message or self.error_code


def parse_error_body(content: bytes) -> ServiceErrorBody | None:
    """Parse an error response body, returning None when it is not a JSON object.

    Args:
        content: Raw response body.

    Returns:
        The parsed error body, or None.
    """
    if not content:
        return None
    try:
        return ServiceErrorBody.model_validate_json(content)
    except ValidationError:
        return None
