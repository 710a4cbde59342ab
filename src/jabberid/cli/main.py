"""jabberid CLI -- inspect, validate and sort JIDs from the command line.

Thin wrapper around :mod:`jabberid.address` using click.
"""

from __future__ import annotations

import json
import logging
from typing import IO

import click

from jabberid.address import Address
from jabberid.config import CLIConfig, configure_logging
from jabberid.errors import ConfigError, InvalidAddressError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _error(msg: str) -> None:
    """Print an error message to stderr and exit 1."""
    click.echo(msg, err=True)
    raise SystemExit(1)


def _parts(address: Address) -> dict:
    return {
        "jid": address.to_string(),
        "node": address.node,
        "domain": address.domain,
        "resource": address.resource,
    }


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="jabberid")
@click.option("--log-level", default=None, help="Logging level (default: WARNING).")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default=None,
    help="Output format for parse (default: text).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, output_format: str | None) -> None:
    """jabberid -- Jabber ID parsing and validation."""
    try:
        config = CLIConfig(log_level=log_level, output_format=output_format)
    except ConfigError as exc:
        _error(f"Error: {exc}")
    configure_logging(config.log_level)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


# ---------------------------------------------------------------------------
# jabberid parse
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("jids", nargs=-1, required=True)
@click.pass_context
def parse(ctx: click.Context, jids: tuple[str, ...]) -> None:
    """Split each JID into node, domain and resource."""
    config: CLIConfig = ctx.obj["config"]
    for raw in jids:
        try:
            address = Address.parse(raw)
        except InvalidAddressError as exc:
            _error(f"Error: {exc}")

        if config.output_format == "json":
            click.echo(json.dumps(_parts(address)))
            continue

        click.echo(f"JID:      {address}")
        click.echo(f"Node:     {address.node if address.node is not None else '-'}")
        click.echo(f"Domain:   {address.domain}")
        click.echo(f"Resource: {address.resource if address.resource is not None else '-'}")


# ---------------------------------------------------------------------------
# jabberid check
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("jids", nargs=-1, required=True)
def check(jids: tuple[str, ...]) -> None:
    """Report whether each JID is valid; exit 1 if any is not."""
    failed = False
    for raw in jids:
        try:
            Address.parse(raw)
        except InvalidAddressError as exc:
            failed = True
            click.echo(f"{raw}: invalid ({exc.reason.value})")
        else:
            click.echo(f"{raw}: valid")
    if failed:
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# jabberid bare
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("jids", nargs=-1, required=True)
def bare(jids: tuple[str, ...]) -> None:
    """Print each JID without its resource."""
    for raw in jids:
        try:
            click.echo(Address.parse(raw).bare())
        except InvalidAddressError as exc:
            _error(f"Error: {exc}")


# ---------------------------------------------------------------------------
# jabberid sort
# ---------------------------------------------------------------------------


@cli.command("sort")
@click.argument("source", type=click.File("r"), default="-")
@click.option("--skip-invalid", is_flag=True, help="Ignore lines that are not valid JIDs.")
def sort_jids(source: IO[str], skip_invalid: bool) -> None:
    """Sort JIDs (one per line), dropping case-insensitive duplicates."""
    seen: dict[Address, Address] = {}
    for lineno, line in enumerate(source, start=1):
        raw = line.rstrip("\r\n")
        if not raw.strip():
            continue
        try:
            address = Address.parse(raw)
        except InvalidAddressError as exc:
            if skip_invalid:
                logger.info("Skipping line %d: %s", lineno, exc)
                continue
            _error(f"Error on line {lineno}: {exc}")
        seen.setdefault(address, address)

    for address in sorted(seen.values()):
        click.echo(address)
