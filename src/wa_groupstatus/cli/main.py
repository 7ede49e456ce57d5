"""
wa-groupstatus CLI — `wags` command.

Commands:
  wags config set|show        Gateway URL and token
  wags members <group-jid>    List group member JIDs
  wags send <group-jid> TEXT  Post a group-scoped status
"""

import asyncio
import json
import logging
import os
from pathlib import Path

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install wa-groupstatus[cli]")

from wa_groupstatus.client import AsyncGroupStatusClient
from wa_groupstatus.transport.http import DEFAULT_BASE_URL

console = Console()
CONFIG_FILE = Path.home() / ".wa-groupstatus" / "config.json"

ENV_BASE_URL = "WAGS_BASE_URL"
ENV_TOKEN = "WAGS_TOKEN"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _resolve_config() -> dict:
    """Config file values, overridden by WAGS_* environment variables."""
    cfg = _load_config()
    if os.environ.get(ENV_BASE_URL):
        cfg["base_url"] = os.environ[ENV_BASE_URL]
    if os.environ.get(ENV_TOKEN):
        cfg["token"] = os.environ[ENV_TOKEN]
    return cfg


def _get_client() -> AsyncGroupStatusClient:
    cfg = _resolve_config()
    return AsyncGroupStatusClient(
        base_url=cfg.get("base_url", DEFAULT_BASE_URL),
        token=cfg.get("token"),
    )


def _run(coro):
    return asyncio.run(coro)


@click.group()
@click.version_option("0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
def main(verbose: bool):
    """Post WhatsApp statuses visible only to one group's members."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
    )


# Register subcommands from separate modules
from wa_groupstatus.cli.config import config
from wa_groupstatus.cli.status import members_cmd, send_cmd

main.add_command(config)
main.add_command(members_cmd)
main.add_command(send_cmd)


if __name__ == "__main__":
    main()
