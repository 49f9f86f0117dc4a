"""
Infrastructure layer for network access.

Provides the HTTP transport every service sends its requests through.
"""

from certstore_client.infrastructure.transport import KeyfactorTransport

__all__ = ["KeyfactorTransport"]
