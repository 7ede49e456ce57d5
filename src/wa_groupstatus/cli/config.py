"""CLI: wags config set|show"""

from typing import Optional

import click
from rich.console import Console

console = Console()


def _load_config() -> dict:
    from wa_groupstatus.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from wa_groupstatus.cli.main import _save_config
    _save_config(cfg)


@click.group()
def config():
    """Gateway settings."""


@config.command("set")
@click.option("--base-url", default=None, help="Gateway base URL")
@click.option("--token", default=None, help="Gateway bearer token")
def config_set(base_url: Optional[str], token: Optional[str]):
    """Save gateway URL and/or token."""
    cfg = _load_config()
    if base_url:
        cfg["base_url"] = base_url
    if token:
        cfg["token"] = token
    _save_config(cfg)
    console.print("[green]Saved to ~/.wa-groupstatus/config.json[/green]")


@config.command("show")
def config_show():
    """Show the saved gateway settings."""
    cfg = _load_config()
    if not cfg:
        console.print("[yellow]No config saved. Run `wags config set`.[/yellow]")
        return
    console.print(f"Gateway: {cfg.get('base_url', '(default)')}")
    console.print(f"Token:   {'set' if cfg.get('token') else 'not set'}")
