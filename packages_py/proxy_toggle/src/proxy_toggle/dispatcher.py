"""
Convenience functions for HTTP clients that follow the active proxy map.
"""
import logging
from typing import Any, Optional
import httpx
from .proxy_map import ActiveProxyMap
from .transport import (
    AsyncProxyRoutingTransport,
    AsyncTransportFactory,
    ProxyRoutingTransport,
    TransportFactory,
)

logger = logging.getLogger(__name__)


def get_sync_client(
    proxy_map: Optional[ActiveProxyMap] = None,
    timeout: float = 30.0,
    transport_factory: Optional[TransportFactory] = None,
    **client_kwargs: Any
) -> httpx.Client:
    """Get a sync httpx client routed through the active proxy map."""
    transport = ProxyRoutingTransport(proxy_map=proxy_map, transport_factory=transport_factory)
    logger.debug(f"Creating httpx.Client with routing transport, timeout={timeout}")
    # Proxy selection comes from the map, never from the environment
    return httpx.Client(transport=transport, timeout=timeout, trust_env=False, **client_kwargs)


def get_async_client(
    proxy_map: Optional[ActiveProxyMap] = None,
    timeout: float = 30.0,
    transport_factory: Optional[AsyncTransportFactory] = None,
    **client_kwargs: Any
) -> httpx.AsyncClient:
    """Get an async httpx client routed through the active proxy map."""
    transport = AsyncProxyRoutingTransport(proxy_map=proxy_map, transport_factory=transport_factory)
    logger.debug(f"Creating httpx.AsyncClient with routing transport, timeout={timeout}")
    return httpx.AsyncClient(transport=transport, timeout=timeout, trust_env=False, **client_kwargs)
