"""
Proxy settings resolution.
"""
import os
import logging
from typing import Dict, List, Mapping, Optional, Tuple
from dotenv import dotenv_values
from pydantic import ValidationError
from .domain import ProxySetting
from .exceptions import InvalidSettingError, UnknownSettingError
from .normalizer import compile_pattern
from .masking import mask_proxy_url
from .types import DEFAULT_NO_PROXY_PATTERN, ProxySettings

logger = logging.getLogger(__name__)

HTTP_PROXY = "http-proxy"
HTTPS_PROXY = "https-proxy"
NO_PROXY_PATTERN = "no-proxy-pattern"
SOCKS_PROXY = "socks-proxy"

# setting name -> (ProxySettings field, environment variables in priority order)
SETTING_SOURCES: Dict[str, Tuple[str, List[str]]] = {
    HTTP_PROXY: ("http_proxy", ["HTTP_PROXY", "http_proxy"]),
    HTTPS_PROXY: ("https_proxy", ["HTTPS_PROXY", "https_proxy"]),
    NO_PROXY_PATTERN: ("no_proxy_pattern", ["NO_PROXY", "no_proxy"]),
    SOCKS_PROXY: ("socks_proxy", ["SOCKS"]),
}


class SettingsStore:
    """Configured proxy settings with environment fallbacks.

    The environment is captured once when the store is built; later changes
    to ``os.environ`` are not seen. Explicit configuration can be changed at
    any time with :meth:`set_setting`.
    """

    def __init__(
        self,
        settings: Optional[ProxySettings] = None,
        environ: Optional[Mapping[str, str]] = None
    ):
        self.settings = settings or ProxySettings()
        self._environ: Dict[str, str] = dict(os.environ if environ is None else environ)

    @classmethod
    def from_env(
        cls,
        env_file: Optional[str] = None,
        override: bool = False,
        settings: Optional[ProxySettings] = None
    ) -> "SettingsStore":
        """Build a store from the process environment and an optional dotenv file.

        Process variables take precedence over the file unless ``override``
        is set.
        """
        environ: Dict[str, str] = {}
        if env_file:
            file_values = {k: v for k, v in dotenv_values(env_file).items() if v is not None}
            logger.debug(f"Loaded {len(file_values)} vars from {env_file}")
            if override:
                environ = {**os.environ, **file_values}
            else:
                environ = {**file_values, **os.environ}
        else:
            environ = dict(os.environ)
        return cls(settings=settings, environ=environ)

    @staticmethod
    def names() -> List[str]:
        return list(SETTING_SOURCES.keys())

    def _lookup(self, name: str) -> Tuple[str, List[str]]:
        if name not in SETTING_SOURCES:
            raise UnknownSettingError(name, self.names())
        return SETTING_SOURCES[name]

    def _from_env(self, env_keys: List[str]) -> Tuple[Optional[str], Optional[str]]:
        for key in env_keys:
            value = self._environ.get(key)
            if value is not None and value != '':
                return value, key
        return None, None

    def describe(self, name: str) -> ProxySetting:
        """Resolve a setting and report where the value came from.

        Precedence:
        1. Explicit configuration
        2. Environment variable
        3. https-proxy only: the resolved http-proxy value
        4. no-proxy-pattern only: the built-in default pattern
        """
        field_name, env_keys = self._lookup(name)

        # 1. Explicit configuration
        configured = getattr(self.settings, field_name)
        if configured is not None:
            logger.debug(f"{name}: using configured value {mask_proxy_url(configured)}")
            if name == NO_PROXY_PATTERN:
                compile_pattern(configured)
            return ProxySetting(name=name, raw_value=configured, source='config')

        # 2. Environment
        env_value, env_key = self._from_env(env_keys)
        if env_value is not None:
            logger.debug(f"{name}: using {env_key} env var")
            if name == NO_PROXY_PATTERN:
                compile_pattern(env_value)
            return ProxySetting(name=name, raw_value=env_value, source='env', env_var_used=env_key)

        # 3. https falls back to http
        if name == HTTPS_PROXY:
            http_setting = self.describe(HTTP_PROXY)
            if http_setting.raw_value is not None:
                logger.debug(f"{name}: falling back to {HTTP_PROXY}")
                return ProxySetting(
                    name=name,
                    raw_value=http_setting.raw_value,
                    source='fallback',
                    env_var_used=http_setting.env_var_used
                )

        # 4. Built-in no-proxy default
        if name == NO_PROXY_PATTERN:
            return ProxySetting(name=name, raw_value=DEFAULT_NO_PROXY_PATTERN, source='default')

        logger.debug(f"{name}: not configured")
        return ProxySetting(name=name, raw_value=None, source='unset')

    def get_setting(self, name: str) -> Optional[str]:
        return self.describe(name).raw_value

    def set_setting(self, name: str, value: Optional[str]) -> None:
        """Assign an explicit value; None clears it so the fallbacks apply again.

        Raises InvalidSettingError when the value fails validation; the
        current settings are left unchanged in that case.
        """
        field_name, _ = self._lookup(name)
        logger.debug(f"Setting {name} = {mask_proxy_url(value)}")
        try:
            self.settings = ProxySettings.model_validate({**self.settings.model_dump(), field_name: value})
        except ValidationError as e:
            reason = "; ".join(error["msg"] for error in e.errors())
            raise InvalidSettingError(name, value, reason) from e


_default_store: Optional[SettingsStore] = None


def get_settings_store() -> SettingsStore:
    """Return the process-wide store, creating it from the environment on first use."""
    global _default_store
    if _default_store is None:
        _default_store = SettingsStore.from_env()
    return _default_store


def set_settings_store(store: Optional[SettingsStore]) -> None:
    """Replace the process-wide store; None makes the next access rebuild it."""
    global _default_store
    _default_store = store
