"""
Basic usage examples for proxy_toggle package.

Shows settings resolution, per-protocol toggling and scoped overrides.
"""
from proxy_toggle import (
    ActiveProxyMap,
    ProxySettings,
    SettingsStore,
    ToggleController,
    proxy_for_url,
    resolve_address,
    with_configured_proxies,
    with_explicit_proxies,
)


# =============================================================================
# Example 1: https falls back to http
# =============================================================================
def example1_https_fallback() -> None:
    """
    Only HTTP_PROXY is set, so https uses the same proxy. Addresses are
    returned without their scheme.
    """
    store = SettingsStore(environ={"HTTP_PROXY": "http://corporate-proxy:8080"})

    print(f"Example 1 - http:  {resolve_address('http', store)}")
    print(f"Example 1 - https: {resolve_address('https', store)}")
    # Output: "corporate-proxy:8080" for both


# =============================================================================
# Example 2: Toggling protocols and the no-proxy pattern
# =============================================================================
def example2_toggle() -> None:
    store = SettingsStore(settings=ProxySettings(http_proxy="http://proxy:3128"), environ={})
    proxy_map = ActiveProxyMap()
    controller = ToggleController(proxy_map=proxy_map, settings=store, notify=print)

    controller.toggle_protocol("https")
    controller.toggle_global()
    print(f"Example 2 - status: {controller.current_status_label()}")
    # Output: "https"

    print(f"Example 2 - example.com: {proxy_for_url('https://example.com', proxy_map)}")
    print(f"Example 2 - localhost:   {proxy_for_url('https://localhost', proxy_map)}")
    # Output: "http://proxy:3128" then None

    controller.toggle_global()
    print(f"Example 2 - status: {controller.current_status_label()}")
    # Output: "https*"


# =============================================================================
# Example 3: Scoped overrides
# =============================================================================
def example3_scoped() -> None:
    store = SettingsStore(settings=ProxySettings(http_proxy="http://proxy:3128"), environ={})
    proxy_map = ActiveProxyMap()

    def current():
        return proxy_map.snapshot()

    inner = with_configured_proxies(
        ["http"],
        lambda: with_explicit_proxies([("https", "other-proxy:1080")], current, proxy_map=proxy_map),
        proxy_map=proxy_map,
        settings=store,
    )
    print(f"Example 3 - inside: {inner}")
    print(f"Example 3 - after:  {proxy_map.snapshot()}")
    # Output: {'https': 'other-proxy:1080'} then {}


if __name__ == "__main__":
    example1_https_fallback()
    example2_toggle()
    example3_scoped()
