"""
HTTP transport for the certificate-management REST API.

Builds each request against the configured base URL, attaches basic
authentication and the service's required headers, executes it and returns
the raw response. Failures are raised as TransportError; nothing is retried.
"""

from typing import TYPE_CHECKING, Any

import httpx
from loguru import logger

from certstore_client.core.trace_context import new_trace_id
from certstore_client.exceptions import TransportError
from certstore_client.models.errors import parse_error_body

if TYPE_CHECKING:
    from certstore_client.config import Settings

API_VERSION_HEADER = "x-keyfactor-api-version"
REQUESTED_WITH_HEADER = "x-keyfactor-requested-with"


class KeyfactorTransport:
    """
    Synchronous transport shared by the store and store type services.

    The underlying httpx.Client pools connections and is safe to share
    between threads.
    """

    def __init__(
        self,
        base_url: str,
        username: str = "",
        password: str = "",
        api_version: str = "1",
        requested_with: str = "APIClient",
        timeout: float = 30.0,
        verify: bool = True,
        client: httpx.Client | None = None,
    ):
        """
        Initialize the transport.

        Args:
            base_url: https://<hostname>/<api_path>/
            username: Basic auth username (domain-qualified if needed)
            password: Basic auth password
            api_version: Value of the API version header
            requested_with: Value of the client identification header
            timeout: Request timeout in seconds
            verify: Verify the service TLS certificate
            client: Pre-built httpx.Client, mainly for tests
        """
        self.headers = {
            API_VERSION_HEADER: api_version,
            REQUESTED_WITH_HEADER: requested_with,
            "Accept": "application/json",
        }
        auth = httpx.BasicAuth(username, password) if username else None
        self._client = client or httpx.Client(
            base_url=base_url,
            auth=auth,
            timeout=timeout,
            verify=verify,
        )
        logger.info(f"Initialized KeyfactorTransport for {base_url}")

    @classmethod
    def from_settings(cls, settings: "Settings") -> "KeyfactorTransport":
        """
        Create a transport from Settings.

        Args:
            settings: Client settings from config.py

        Returns:
            KeyfactorTransport configured from settings
        """
        return cls(
            base_url=settings.get_base_url(),
            username=settings.get_username(),
            password=settings.keyfactor_password.get_secret_value(),
            api_version=settings.keyfactor_api_version,
            requested_with=settings.keyfactor_requested_with,
            timeout=settings.request_timeout,
            verify=settings.verify_tls,
        )

    def request(
        self,
        method: str,
        endpoint: str,
        payload: Any = None,
    ) -> httpx.Response:
        """
        Send a request and return the successful response.

        Args:
            method: HTTP method
            endpoint: Path relative to the API base URL
            payload: JSON-serializable request body, if any

        Returns:
            The response, with a 2xx status

        Raises:
            TransportError: On network failure or a non-2xx status
        """
        method = method.upper()
        trace_id = new_trace_id()
        logger.debug(f"Sending {method} {endpoint} (trace {trace_id})")

        try:
            response = self._client.request(
                method,
                endpoint,
                headers=self.headers,
                json=payload,
            )
        except httpx.HTTPError as e:
            logger.error(f"{method} call to {endpoint} failed: {e}")
            raise TransportError(method, endpoint, detail=str(e)) from e

        if not response.is_success:
            error_body = parse_error_body(response.content)
            detail = error_body.describe() if error_body else None
            logger.error(
                f"{method} call to {endpoint} returned status {response.status_code}"
            )
            raise TransportError(method, endpoint, response.status_code, detail)

        logger.debug(f"{method} {endpoint} returned {response.status_code}")
        return response

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._client.close()

    def __enter__(self) -> "KeyfactorTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
