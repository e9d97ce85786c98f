"""
Data models for proxy toggle configuration.
"""
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from .exceptions import InvalidPatternError
from .normalizer import compile_pattern

DEFAULT_NO_PROXY_PATTERN = r"^(localhost|10\..*|192\.168\..*)"


class ProxySettings(BaseModel):
    """Explicit proxy configuration.

    A field left as None is not configured; the settings store then falls
    back to the matching environment variable (and, for https, to the http
    value).
    """
    http_proxy: Optional[str] = Field(default=None, description="Proxy address for http, e.g. http://proxy:8080")
    https_proxy: Optional[str] = Field(default=None, description="Proxy address for https; defaults to http_proxy")
    no_proxy_pattern: Optional[str] = Field(default=None, description="Regex of hosts that bypass the proxy")
    socks_proxy: Optional[str] = Field(default=None, description="SOCKS proxy address")

    @field_validator("no_proxy_pattern")
    @classmethod
    def check_no_proxy_pattern(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            try:
                compile_pattern(value)
            except InvalidPatternError as e:
                raise ValueError(e.reason)
        return value
