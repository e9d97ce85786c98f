"""
Exceptions raised by proxy_toggle.
"""
from typing import Any


class ProxyToggleError(Exception):
    pass


class InvalidAddressError(ProxyToggleError):
    """Raised when a proxy address is not a string."""

    def __init__(self, address: Any):
        self.address = address
        super().__init__(f"Proxy address must be a string, got {type(address).__name__}: {address!r}")


class UnsupportedProtocolError(ProxyToggleError):
    """Raised when a protocol is not in the protocol registry."""

    def __init__(self, protocol: Any, supported: tuple):
        self.protocol = protocol
        self.supported = supported
        super().__init__(f"Unsupported protocol '{protocol}'. Supported: {list(supported)}")


class UnknownSettingError(ProxyToggleError):
    def __init__(self, name: str, known: list):
        self.name = name
        super().__init__(f"Unknown setting '{name}'. Available: {known}")


class InvalidPatternError(ProxyToggleError):
    """Raised when a no-proxy pattern is not a valid regular expression."""

    def __init__(self, pattern: Any, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid no-proxy pattern {pattern!r}: {reason}")


class InvalidSettingError(ProxyToggleError):
    def __init__(self, name: str, value: Any, reason: str):
        self.name = name
        self.value = value
        super().__init__(f"Invalid value for setting '{name}': {reason}")
