"""
Global HTTP Client with connection pooling for external API calls.

Storage uploads go through one shared httpx.AsyncClient so TCP connections
are reused and timeouts stay consistent.
"""
import httpx
from typing import Optional


class HTTPClientManager:
    """Manages a global httpx.AsyncClient with connection pooling."""

    _client: Optional[httpx.AsyncClient] = None

    @classmethod
    def get_client(cls) -> httpx.AsyncClient:
        """
        Get or create the global HTTP client.

        The client is created lazily on first use but then reused.
        """
        if cls._client is None:
            cls._client = httpx.AsyncClient(
                limits=httpx.Limits(
                    max_keepalive_connections=10,
                    max_connections=20,
                    keepalive_expiry=30.0,
                ),
                # Uploads can be large (up to max_upload_size_mb); give writes room
                timeout=httpx.Timeout(
                    connect=5.0,
                    read=30.0,
                    write=120.0,
                    pool=5.0,
                ),
                http2=True,
                follow_redirects=True,
            )
        return cls._client

    @classmethod
    def set_client(cls, client: Optional[httpx.AsyncClient]) -> None:
        """Swap the shared client (tests inject one with a mock transport)."""
        cls._client = client

    @classmethod
    async def close(cls) -> None:
        """Close the HTTP client. Call this on app shutdown."""
        if cls._client is not None:
            await cls._client.aclose()
            cls._client = None


# Convenience function for getting the client
def get_http_client() -> httpx.AsyncClient:
    """Get the global HTTP client instance."""
    return HTTPClientManager.get_client()
