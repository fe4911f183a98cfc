"""Client module for fetching scholar pages."""

from .headers import RequestProfile
from .httpx_session import PageFetcher
from .httpx_session import get_async_client

__all__ = ["PageFetcher", "RequestProfile", "get_async_client"]
