"""
Supported protocols and their proxy address lookup.
"""
import logging
from typing import Iterable, List, Optional
from .domain import ProtocolEntry
from .exceptions import UnsupportedProtocolError
from .normalizer import normalize_address
from .settings import SettingsStore, get_settings_store

logger = logging.getLogger(__name__)

SUPPORTED_PROTOCOLS = ("http", "https")


def is_supported(protocol: str) -> bool:
    return protocol in SUPPORTED_PROTOCOLS


def ensure_supported(protocol: str) -> None:
    if not is_supported(protocol):
        raise UnsupportedProtocolError(protocol, SUPPORTED_PROTOCOLS)


def setting_name_for(protocol: str) -> str:
    return f"{protocol}-proxy"


def resolve_address(protocol: str, settings: Optional[SettingsStore] = None) -> Optional[str]:
    """Return the normalized ``host:port`` proxy address for a protocol.

    Returns None when no address is configured for the protocol; raises
    UnsupportedProtocolError when the protocol itself is unknown.
    """
    ensure_supported(protocol)
    store = settings if settings is not None else get_settings_store()

    raw = store.get_setting(setting_name_for(protocol))
    if raw is None:
        logger.debug(f"No proxy address configured for {protocol}")
        return None
    return normalize_address(raw)


def resolve_entries(
    protocols: Iterable[str],
    settings: Optional[SettingsStore] = None
) -> List[ProtocolEntry]:
    """Resolve several protocols, skipping those without an address."""
    entries: List[ProtocolEntry] = []
    for protocol in protocols:
        address = resolve_address(protocol, settings)
        if address is None:
            logger.warning(f"Skipping {protocol}: no proxy address configured")
            continue
        entries.append(ProtocolEntry(protocol=protocol, address=address))
    return entries
