"""
Per-request proxy routing decisions.
"""
import logging
from typing import Optional, Union
import httpx
from .normalizer import compile_pattern
from .proxy_map import ActiveProxyMap, get_active_proxy_map

logger = logging.getLogger(__name__)

PROXY_URL_SCHEME = "http"


def is_excluded(host: str, pattern: Optional[str]) -> bool:
    """Whether ``host`` matches the no-proxy pattern.

    Raises InvalidPatternError when the pattern is not a valid regex.
    """
    if not pattern or not host:
        return False
    return compile_pattern(pattern).search(host) is not None


def proxy_for_url(
    url: Union[str, httpx.URL],
    proxy_map: Optional[ActiveProxyMap] = None
) -> Optional[str]:
    """Return the proxy URL to use for ``url``, or None for a direct connection."""
    target = proxy_map if proxy_map is not None else get_active_proxy_map()
    request_url = httpx.URL(url)

    address = target.get(request_url.scheme)
    if not address:
        logger.debug(f"Direct connection for {request_url.host}: no {request_url.scheme} proxy enabled")
        return None

    if not target.is_global and is_excluded(request_url.host, target.no_proxy_pattern):
        logger.debug(f"Direct connection for {request_url.host}: matches no-proxy pattern")
        return None

    return f"{PROXY_URL_SCHEME}://{address}"
