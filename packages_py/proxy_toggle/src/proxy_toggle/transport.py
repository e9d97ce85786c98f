"""
httpx transports that route each request through the active proxy map.
"""
import logging
import threading
from typing import Callable, Dict, Optional
import httpx
from .masking import mask_proxy_url
from .proxy_map import ActiveProxyMap, get_active_proxy_map
from .routing import proxy_for_url

logger = logging.getLogger(__name__)

TransportFactory = Callable[[Optional[str]], httpx.BaseTransport]
AsyncTransportFactory = Callable[[Optional[str]], httpx.AsyncBaseTransport]


def _default_transport_factory(proxy_url: Optional[str]) -> httpx.BaseTransport:
    return httpx.HTTPTransport(proxy=proxy_url, trust_env=False)


def _default_async_transport_factory(proxy_url: Optional[str]) -> httpx.AsyncBaseTransport:
    return httpx.AsyncHTTPTransport(proxy=proxy_url, trust_env=False)


class ProxyRoutingTransport(httpx.BaseTransport):
    """Looks up the proxy for every request and delegates to a per-proxy transport.

    Inner transports are created on first use and cached by proxy URL, the
    direct connection being cached under None.
    """

    def __init__(
        self,
        proxy_map: Optional[ActiveProxyMap] = None,
        transport_factory: Optional[TransportFactory] = None
    ):
        self._proxy_map = proxy_map
        self._factory = transport_factory or _default_transport_factory
        self._transports: Dict[Optional[str], httpx.BaseTransport] = {}
        self._lock = threading.Lock()

    @property
    def proxy_map(self) -> ActiveProxyMap:
        return self._proxy_map if self._proxy_map is not None else get_active_proxy_map()

    def _get_transport(self, proxy_url: Optional[str]) -> httpx.BaseTransport:
        with self._lock:
            transport = self._transports.get(proxy_url)
            if transport is None:
                logger.debug(f"Creating transport for proxy {mask_proxy_url(proxy_url)}")
                transport = self._factory(proxy_url)
                self._transports[proxy_url] = transport
            return transport

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        proxy_url = proxy_for_url(request.url, self.proxy_map)
        return self._get_transport(proxy_url).handle_request(request)

    def close(self) -> None:
        with self._lock:
            transports = list(self._transports.values())
            self._transports.clear()
        for transport in transports:
            transport.close()


class AsyncProxyRoutingTransport(httpx.AsyncBaseTransport):
    """Async counterpart of :class:`ProxyRoutingTransport`."""

    def __init__(
        self,
        proxy_map: Optional[ActiveProxyMap] = None,
        transport_factory: Optional[AsyncTransportFactory] = None
    ):
        self._proxy_map = proxy_map
        self._factory = transport_factory or _default_async_transport_factory
        self._transports: Dict[Optional[str], httpx.AsyncBaseTransport] = {}

    @property
    def proxy_map(self) -> ActiveProxyMap:
        return self._proxy_map if self._proxy_map is not None else get_active_proxy_map()

    def _get_transport(self, proxy_url: Optional[str]) -> httpx.AsyncBaseTransport:
        transport = self._transports.get(proxy_url)
        if transport is None:
            logger.debug(f"Creating async transport for proxy {mask_proxy_url(proxy_url)}")
            transport = self._factory(proxy_url)
            self._transports[proxy_url] = transport
        return transport

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        proxy_url = proxy_for_url(request.url, self.proxy_map)
        return await self._get_transport(proxy_url).handle_async_request(request)

    async def aclose(self) -> None:
        transports = list(self._transports.values())
        self._transports.clear()
        for transport in transports:
            await transport.aclose()
