"""
Proxy address normalization and no-proxy pattern validation.
"""
import re
from typing import Any, Pattern
from .exceptions import InvalidAddressError, InvalidPatternError


def normalize_address(address: Any) -> str:
    """Strip a scheme prefix from a proxy address.

    ``http://proxy:8080`` and ``socks5://proxy:8080`` become ``proxy:8080``;
    an address without ``//`` is returned unchanged.
    """
    if not isinstance(address, str):
        raise InvalidAddressError(address)
    return address.split("//")[-1]


def compile_pattern(pattern: Any) -> Pattern[str]:
    """Compile a no-proxy pattern, raising InvalidPatternError if it is not a regex.

    Glob-style values such as ``*.corp.example`` are rejected.
    """
    if not isinstance(pattern, str):
        raise InvalidPatternError(pattern, f"expected a string, got {type(pattern).__name__}")
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e
