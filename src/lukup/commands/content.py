"""
Content commands - list and call Content contract operations.

Examples:
  lukup content ops
  lukup content call totalSupply
  lukup content call createContent ipfs://abc PPV 100 0xAbC... 50 s1,s2,s3 2
  lukup content call fetchContentByCategory PPV --network sepolia
"""

from __future__ import annotations

import sys
from typing import Any, Optional

import click

from ..chain.abi import content_abi, find_function, is_read_only
from ..chain.network import Network, get_network
from ..contract.base import FeeOptions
from ..contract.content import OPERATIONS, ContentContract, ContentFunction
from ..errors import ConfigError, LukupError
from ..wallet.keystore import load_identity


def _resolve_function(name: str) -> ContentFunction:
    """Accept the on-chain name (createContent) or the member name (create_content)."""
    for function in ContentFunction:
        if name == function.value or name.upper() == function.name:
            return function
    raise click.BadParameter(
        f"Unknown operation {name!r}. Run 'lukup content ops' for the list.",
        param_hint="OPERATION",
    )


def _format(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_format(v) for v in value) + "]"
    return str(value)


@click.group()
def content() -> None:
    """Content contract operations."""


@content.command()
def ops() -> None:
    """List Content contract operations and their parameters."""
    for function, record in OPERATIONS.items():
        params = " ".join(
            f"<{p.name}:{p.data_type.value}>" for p in record.params
        )
        click.echo(f"  {function.value:<26} {params}")


@content.command()
@click.argument("operation")
@click.argument("args", nargs=-1)
@click.option("--address", default=None, help="Content contract address (default: address book)")
@click.option("--network", "network_name", default=None, help="Network name (default: LUKUP_NETWORK)")
@click.option("--gas-price", default=None, type=int, help="Gas price in wei")
@click.option("--gas-limit", default=None, type=int, help="Gas limit")
def call(
    operation: str,
    args: tuple[str, ...],
    address: Optional[str],
    network_name: Optional[str],
    gas_price: Optional[int],
    gas_limit: Optional[int],
) -> None:
    """Call OPERATION with positional ARGS."""
    function = _resolve_function(operation)
    record = OPERATIONS[function]

    if len(args) != len(record.params):
        expected = " ".join(p.name for p in record.params) or "(none)"
        raise click.UsageError(
            f"{function.value} takes {len(record.params)} arguments: {expected}"
        )

    try:
        network = get_network(network_name) if network_name else Network.from_env()
        try:
            identity = load_identity(network)
        except ConfigError:
            # view functions can be read without signing
            if not is_read_only(find_function(content_abi(), function.value)):
                raise
            identity = None
        contract = ContentContract(identity, address, network=network)
        fee = None
        if gas_price is not None or gas_limit is not None:
            fee = FeeOptions(gas_price=gas_price, gas_limit=gas_limit)

        sender = identity.address if identity else "(none, read-only call)"
        click.echo(click.style("  Sender:   ", dim=True) + sender)
        click.echo(click.style("  Contract: ", dim=True) + contract.contract_address)
        click.echo(click.style("  Function: ", dim=True) + function.value)
        click.echo()

        result = contract.dispatch(record(*args), fee)
    except LukupError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)

    if isinstance(result, dict) and "tx_hash" in result:
        click.secho("SUCCESS: Transaction confirmed!", fg="green")
        click.echo(f"  TX: {result['tx_hash']}")
    else:
        click.echo(_format(result))
