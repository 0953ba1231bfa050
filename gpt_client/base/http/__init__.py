"""HTTP utilities package for the client.

Exposes the ``httpx.AsyncClient`` factory.
"""

from .client import create_async_client

__all__ = ["create_async_client"]
