"""
Temporary proxy map overrides for a block of code.
"""
import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterable, Iterator, Optional, TypeVar
from .proxy_map import ActiveProxyMap, ProxyEntries, get_active_proxy_map
from .registry import resolve_entries
from .settings import SettingsStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


@contextmanager
def explicit_proxies(
    entries: ProxyEntries,
    proxy_map: Optional[ActiveProxyMap] = None
) -> Iterator[ActiveProxyMap]:
    """Install ``entries`` verbatim as the active proxy map inside the block.

    The previous map is restored when the block exits, including on error.
    Addresses are not normalized.
    """
    target = proxy_map if proxy_map is not None else get_active_proxy_map()
    previous = target.replace(entries)
    logger.debug(f"Proxy override installed: {target!r}")
    try:
        yield target
    finally:
        target.replace(previous)
        logger.debug(f"Proxy override restored: {target!r}")


@contextmanager
def configured_proxies(
    protocols: Iterable[str],
    settings: Optional[SettingsStore] = None,
    proxy_map: Optional[ActiveProxyMap] = None
) -> Iterator[ActiveProxyMap]:
    """Proxy the given protocols through their configured addresses inside the block."""
    entries = [entry.as_pair() for entry in resolve_entries(protocols, settings)]
    with explicit_proxies(entries, proxy_map=proxy_map) as target:
        yield target


def with_configured_proxies(
    protocols: Iterable[str],
    block: Callable[..., T],
    *args: Any,
    settings: Optional[SettingsStore] = None,
    proxy_map: Optional[ActiveProxyMap] = None,
    **kwargs: Any
) -> T:
    """Call ``block`` with the configured proxies active and return its result."""
    with configured_proxies(protocols, settings=settings, proxy_map=proxy_map):
        return block(*args, **kwargs)


def with_explicit_proxies(
    entries: ProxyEntries,
    block: Callable[..., T],
    *args: Any,
    proxy_map: Optional[ActiveProxyMap] = None,
    **kwargs: Any
) -> T:
    """Call ``block`` with ``entries`` as the active proxy map and return its result."""
    with explicit_proxies(entries, proxy_map=proxy_map):
        return block(*args, **kwargs)
