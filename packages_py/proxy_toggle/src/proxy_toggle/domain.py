"""Result and state records for proxy toggling."""

from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional

SettingSource = Literal['config', 'env', 'fallback', 'default', 'unset']


@dataclass
class ProxySetting:
    """A resolved setting and where its value came from."""
    name: str
    raw_value: Optional[str]
    source: SettingSource
    env_var_used: Optional[str] = None


@dataclass
class ProtocolEntry:
    protocol: str
    address: str

    def as_pair(self) -> tuple:
        return (self.protocol, self.address)


@dataclass
class ToggleResult:
    """Outcome of toggling a single protocol."""
    protocol: str
    enabled: bool
    changed: bool
    message: str
    address: Optional[str] = None


@dataclass
class GlobalToggleResult:
    global_mode: bool
    message: str
    no_proxy_pattern: Optional[str] = None


@dataclass
class ProxyStatus:
    """Snapshot of the active proxy map for display."""
    entries: Dict[str, str] = field(default_factory=dict)
    global_mode: bool = True
    no_proxy_pattern: Optional[str] = None
    label: str = ""

    @property
    def protocols(self) -> List[str]:
        return list(self.entries.keys())
