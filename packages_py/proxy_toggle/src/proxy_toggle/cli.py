#!/usr/bin/env python3
"""
Command-line interface for proxy-toggle.

Usage:
    proxy-toggle settings
    proxy-toggle resolve https
    proxy-toggle route https://example.com --enable https
    proxy-toggle fetch https://example.com --proxy https
"""

import sys
import logging
from typing import Optional, Tuple

import click
import httpx
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .controller import ToggleController
from .dispatcher import get_sync_client
from .exceptions import ProxyToggleError
from .masking import mask_proxy_url
from .proxy_map import NO_PROXY_KEY, ActiveProxyMap
from .registry import SUPPORTED_PROTOCOLS, resolve_address
from .routing import proxy_for_url
from .scoped import configured_proxies
from .settings import NO_PROXY_PATTERN, SettingsStore

console = Console()


def print_error(msg: str):
    console.print(f"[red]Error:[/red] {escape(msg)}")


def print_success(msg: str):
    console.print(f"[green]{escape(msg)}[/green]")


def print_info(msg: str):
    console.print(f"[blue]{escape(msg)}[/blue]")


@click.group()
@click.version_option(version="0.1.0", prog_name="proxy-toggle")
@click.option("--env-file", type=click.Path(exists=True, dir_okay=False), help="Dotenv file with proxy variables")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, env_file: Optional[str], verbose: bool):
    """Toggle HTTP/HTTPS proxy usage per protocol.

    Proxy addresses come from HTTP_PROXY, HTTPS_PROXY and NO_PROXY, optionally
    loaded from a dotenv file.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    ctx.obj = SettingsStore.from_env(env_file=env_file)


@cli.command()
@click.pass_obj
def settings(store: SettingsStore):
    """Show resolved proxy settings and where each value came from."""
    table = Table(title="Proxy settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Source")
    table.add_column("Env var")

    for name in store.names():
        try:
            setting = store.describe(name)
        except ProxyToggleError as e:
            table.add_row(name, f"[red]{escape(str(e))}[/red]", "invalid", "-")
            continue
        table.add_row(
            setting.name,
            escape(mask_proxy_url(setting.raw_value)) if setting.raw_value is not None else "-",
            setting.source,
            setting.env_var_used or "-",
        )

    console.print(table)


@cli.command()
@click.argument("protocol")
@click.pass_obj
def resolve(store: SettingsStore, protocol: str):
    """Print the normalized proxy address for PROTOCOL."""
    try:
        address = resolve_address(protocol, store)
    except ProxyToggleError as e:
        print_error(str(e))
        sys.exit(1)

    if address is None:
        print_info(f"No proxy address configured for {protocol}")
        return
    console.print(escape(mask_proxy_url(address)))


@cli.command()
@click.argument("url")
@click.option("-e", "--enable", "protocols", multiple=True, type=click.Choice(SUPPORTED_PROTOCOLS), help="Protocol to toggle on")
@click.option("--global", "global_mode", is_flag=True, help="Ignore the no-proxy pattern")
@click.pass_obj
def route(store: SettingsStore, url: str, protocols: Tuple[str, ...], global_mode: bool):
    """Show how URL would be routed after toggling the given protocols.

    Examples:

        proxy-toggle route https://example.com -e https

        proxy-toggle route http://localhost:3000 -e http --global
    """
    try:
        proxy_map = ActiveProxyMap({NO_PROXY_KEY: store.get_setting(NO_PROXY_PATTERN)})
        controller = ToggleController(proxy_map=proxy_map, settings=store, notify=print_info)
        for protocol in protocols:
            controller.toggle_protocol(protocol)
        if global_mode:
            controller.toggle_global()
        proxy_url = proxy_for_url(url, proxy_map)
    except (ProxyToggleError, httpx.InvalidURL) as e:
        print_error(str(e))
        sys.exit(1)

    console.print(f"Status: [bold]{controller.current_status_label() or '-'}[/bold]")
    if proxy_url:
        print_success(f"{url} -> {mask_proxy_url(proxy_url)}")
    else:
        print_success(f"{url} -> direct")


@cli.command()
@click.argument("url")
@click.option("-p", "--proxy", "protocols", multiple=True, type=click.Choice(SUPPORTED_PROTOCOLS), help="Protocol to proxy during the request")
@click.option("--timeout", type=float, default=30.0, show_default=True, help="Request timeout in seconds")
@click.pass_obj
def fetch(store: SettingsStore, url: str, protocols: Tuple[str, ...], timeout: float):
    """GET URL with the configured proxies active for the listed protocols."""
    proxy_map = ActiveProxyMap()

    try:
        with configured_proxies(protocols, settings=store, proxy_map=proxy_map):
            proxy_url = proxy_for_url(url, proxy_map)
            print_info(f"Routing: {mask_proxy_url(proxy_url) if proxy_url else 'direct'}")
            with get_sync_client(proxy_map=proxy_map, timeout=timeout) as client:
                response = client.get(url)
    except (ProxyToggleError, httpx.HTTPError, httpx.InvalidURL) as e:
        print_error(str(e))
        sys.exit(1)

    print_success(f"{response.status_code} {response.reason_phrase}")
    console.print(f"{len(response.content)} bytes")


def main():
    """Main entry point."""
    return cli()


if __name__ == "__main__":
    main()
