"""
Lukup CLI

Command-line interface for the Lukup Content contracts.

Commands:
  whoami    - Show current wallet address and network
  networks  - List known networks
  wallet    - Create or import a wallet
  content   - List and call Content contract operations
"""

from __future__ import annotations

import logging
import sys

import click

from .chain.network import NETWORKS, Network
from .errors import LukupError
from .wallet.keystore import load_identity


# ============ Constants ============

VERSION = "1.0.0"


# ============ Main CLI Group ============


@click.group()
@click.version_option(version=VERSION, prog_name="lukup")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Lukup — Content contract client."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# ============ Top-level Commands ============

from .commands.wallet import wallet
from .commands.content import content

cli.add_command(wallet)
cli.add_command(content)


# ============ Identity ============


@cli.command()
def whoami() -> None:
    """Show current wallet identity."""
    try:
        network = Network.from_env()
        identity = load_identity(network)
    except LukupError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)

    click.echo(click.style("  Address: ", dim=True) + identity.address)
    click.echo(
        click.style("  Network: ", dim=True)
        + f"{network.name} (chain {network.chain_id}, {network.rpc_url})"
    )


@cli.command()
def networks() -> None:
    """List known networks."""
    for name, network in NETWORKS.items():
        click.echo(f"  {name:<10} chain {network.chain_id:<9} {network.rpc_url}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
