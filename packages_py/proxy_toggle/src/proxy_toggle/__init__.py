"""
Per-protocol proxy toggling and scoped proxy overrides.
"""
from .types import ProxySettings, DEFAULT_NO_PROXY_PATTERN
from .domain import ProxySetting, ProtocolEntry, ToggleResult, GlobalToggleResult, ProxyStatus
from .exceptions import (
    ProxyToggleError,
    InvalidAddressError,
    UnsupportedProtocolError,
    UnknownSettingError,
    InvalidPatternError,
    InvalidSettingError,
)
from .settings import SettingsStore, get_settings_store, set_settings_store
from .normalizer import normalize_address, compile_pattern
from .registry import SUPPORTED_PROTOCOLS, resolve_address
from .proxy_map import NO_PROXY_KEY, ActiveProxyMap, get_active_proxy_map
from .controller import ToggleController
from .scoped import (
    configured_proxies,
    explicit_proxies,
    with_configured_proxies,
    with_explicit_proxies,
)
from .routing import proxy_for_url
from .transport import ProxyRoutingTransport, AsyncProxyRoutingTransport
from .dispatcher import get_sync_client, get_async_client
from .masking import mask_proxy_url, set_log_mask

__all__ = [
    "ProxySettings",
    "DEFAULT_NO_PROXY_PATTERN",
    "ProxySetting",
    "ProtocolEntry",
    "ToggleResult",
    "GlobalToggleResult",
    "ProxyStatus",
    "ProxyToggleError",
    "InvalidAddressError",
    "UnsupportedProtocolError",
    "UnknownSettingError",
    "InvalidPatternError",
    "InvalidSettingError",
    "SettingsStore",
    "get_settings_store",
    "set_settings_store",
    "normalize_address",
    "compile_pattern",
    "SUPPORTED_PROTOCOLS",
    "resolve_address",
    "NO_PROXY_KEY",
    "ActiveProxyMap",
    "get_active_proxy_map",
    "ToggleController",
    "configured_proxies",
    "explicit_proxies",
    "with_configured_proxies",
    "with_explicit_proxies",
    "proxy_for_url",
    "ProxyRoutingTransport",
    "AsyncProxyRoutingTransport",
    "get_sync_client",
    "get_async_client",
    "mask_proxy_url",
    "set_log_mask",
]
