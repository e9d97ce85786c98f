"""
Per-protocol proxy toggling and the global no-proxy switch.
"""
import logging
from typing import Callable, Optional
from .domain import GlobalToggleResult, ProxyStatus, ToggleResult
from .masking import mask_proxy_url
from .proxy_map import NO_PROXY_KEY, ActiveProxyMap, get_active_proxy_map
from .registry import resolve_address
from .settings import NO_PROXY_PATTERN, SettingsStore, get_settings_store

logger = logging.getLogger(__name__)

STATUS_SEPARATOR = ","
GLOBAL_MARKER = "*"

Notifier = Callable[[str], None]


class ToggleController:
    """Flips proxy usage on the active proxy map.

    Every transition reports a message through ``notify``; by default the
    message goes to this module's logger at INFO level.
    """

    def __init__(
        self,
        proxy_map: Optional[ActiveProxyMap] = None,
        settings: Optional[SettingsStore] = None,
        notify: Optional[Notifier] = None
    ):
        self.proxy_map = proxy_map if proxy_map is not None else get_active_proxy_map()
        self._settings = settings
        self._notify = notify or logger.info

    @property
    def settings(self) -> SettingsStore:
        return self._settings if self._settings is not None else get_settings_store()

    def toggle_protocol(self, protocol: str) -> ToggleResult:
        """Enable proxying for a protocol if it is off, disable it if it is on.

        Turning a protocol on without a configured address leaves the map
        untouched and only reports it.
        """
        address = resolve_address(protocol, self.settings)

        if protocol in self.proxy_map:
            self.proxy_map.remove(protocol)
            result = ToggleResult(
                protocol=protocol,
                enabled=False,
                changed=True,
                message=f"{protocol.upper()} proxy disabled"
            )
        elif address is None:
            result = ToggleResult(
                protocol=protocol,
                enabled=False,
                changed=False,
                message=f"No proxy address configured for {protocol.upper()}"
            )
        else:
            self.proxy_map.set(protocol, address)
            result = ToggleResult(
                protocol=protocol,
                enabled=True,
                changed=True,
                address=address,
                message=f"{protocol.upper()} proxy enabled ({mask_proxy_url(address)})"
            )

        self._notify(result.message)
        return result

    def toggle_global(self) -> GlobalToggleResult:
        """Switch between honoring the no-proxy pattern and proxying every host."""
        if NO_PROXY_KEY in self.proxy_map:
            self.proxy_map.remove(NO_PROXY_KEY)
            result = GlobalToggleResult(
                global_mode=True,
                message="Proxy applies to all hosts"
            )
        else:
            pattern = self.settings.get_setting(NO_PROXY_PATTERN)
            self.proxy_map.set(NO_PROXY_KEY, pattern)
            result = GlobalToggleResult(
                global_mode=False,
                no_proxy_pattern=pattern,
                message=f"Hosts matching {pattern} bypass the proxy"
            )

        self._notify(result.message)
        return result

    def current_status_label(self) -> str:
        label = STATUS_SEPARATOR.join(self.proxy_map.protocols())
        if self.proxy_map.is_global:
            label += GLOBAL_MARKER
        return label

    def status(self) -> ProxyStatus:
        entries = self.proxy_map.snapshot()
        pattern = entries.pop(NO_PROXY_KEY, None)
        return ProxyStatus(
            entries=entries,
            global_mode=pattern is None,
            no_proxy_pattern=pattern,
            label=self.current_status_label()
        )
