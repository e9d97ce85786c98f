"""
The active proxy map consulted by the networking layer.
"""
import logging
import threading
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union
from .masking import mask_proxy_url

logger = logging.getLogger(__name__)

NO_PROXY_KEY = "no_proxy"

ProxyEntries = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


class ActiveProxyMap:
    """Ordered mapping of protocol name (or ``no_proxy``) to address or pattern.

    A protocol key is present only while proxying is enabled for it. The
    ``no_proxy`` key holds the exclusion pattern; while it is absent the
    proxy applies to every host.
    """

    def __init__(self, entries: Optional[ProxyEntries] = None):
        self._lock = threading.RLock()
        self._entries: Dict[str, str] = dict(entries or {})

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ActiveProxyMap):
            return self.snapshot() == other.snapshot()
        if isinstance(other, Mapping):
            return self.snapshot() == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        shown = {k: mask_proxy_url(v) for k, v in self._entries.items()}
        return f"ActiveProxyMap({shown})"

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._entries.get(key, default)

    def keys(self) -> List[str]:
        return list(self.snapshot().keys())

    def items(self) -> List[Tuple[str, str]]:
        return list(self.snapshot().items())

    def snapshot(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._entries)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._entries[key] = value
        logger.debug(f"Proxy map set {key} = {mask_proxy_url(value)}")

    def remove(self, key: str) -> Optional[str]:
        with self._lock:
            value = self._entries.pop(key, None)
        logger.debug(f"Proxy map removed {key}")
        return value

    def replace(self, entries: ProxyEntries) -> Dict[str, str]:
        """Install a new mapping and return the one it replaced."""
        new_entries = dict(entries)
        with self._lock:
            previous = self._entries
            self._entries = new_entries
        return dict(previous)

    def protocols(self) -> List[str]:
        """Enabled protocol keys in map order."""
        return [key for key in self.snapshot() if key != NO_PROXY_KEY]

    @property
    def no_proxy_pattern(self) -> Optional[str]:
        return self._entries.get(NO_PROXY_KEY)

    @property
    def is_global(self) -> bool:
        """True when no-proxy exclusions are ignored."""
        return NO_PROXY_KEY not in self._entries


# Process-wide map read by the default transports
_default_map = ActiveProxyMap()


def get_active_proxy_map() -> ActiveProxyMap:
    return _default_map
