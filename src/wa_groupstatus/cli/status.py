"""CLI: wags members, wags send"""

import json

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from wa_groupstatus.errors import GroupStatusError
from wa_groupstatus.models.message import Message

console = Console()


def _get_client():
    from wa_groupstatus.cli.main import _get_client
    return _get_client()


def _run(coro):
    from wa_groupstatus.cli.main import _run
    return _run(coro)


@click.command("members")
@click.argument("group_jid")
@click.option("--json-output", "--json", is_flag=True)
def members_cmd(group_jid: str, json_output: bool):
    """List the member JIDs of a group."""

    async def _members():
        async with _get_client() as client:
            return await client.get_group_member_jids(group_jid)

    try:
        jids = _run(_members())
    except GroupStatusError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)

    if json_output:
        click.echo(json.dumps([str(j) for j in jids], indent=2))
        return
    table = Table(title=f"Members of {group_jid} ({len(jids)})")
    table.add_column("#", justify="right")
    table.add_column("JID", style="bold")
    for i, jid in enumerate(jids, 1):
        table.add_row(str(i), str(jid))
    console.print(table)


@click.command("send")
@click.argument("group_jid")
@click.argument("text")
@click.option("--legacy", is_flag=True, help="Broadcast to status@broadcast restricted to members")
@click.option("--json-output", "--json", is_flag=True)
def send_cmd(group_jid: str, text: str, legacy: bool, json_output: bool):
    """Post a text status visible only to a group's members."""

    async def _send():
        async with _get_client() as client:
            message = Message(conversation=text)
            if legacy:
                return await client.send_status_to_group(group_jid, message)
            return await client.send_group_status(group_jid, message)

    try:
        resp = _run(_send())
    except GroupStatusError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)

    if json_output:
        click.echo(resp.model_dump_json())
    else:
        console.print(f"[green]Sent {resp.id}[/green] at {resp.timestamp.isoformat()}")
