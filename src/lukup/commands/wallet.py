"""
Wallet commands - create or import the local signing identity.

The mnemonic is stored in ~/.lukup/.env (owner-only permissions).
"""

from __future__ import annotations

import sys
from typing import Optional

import click

from ..config import LUKUP_ENV, get_setting
from ..errors import LukupError
from ..wallet.identity import generate_mnemonic, import_from_mnemonic
from ..wallet.keystore import save_mnemonic


@click.group()
def wallet() -> None:
    """Create or import a wallet."""


@wallet.command()
@click.option("--words", default=12, type=click.Choice(["12", "15", "18", "21", "24"]),
              help="Number of mnemonic words")
@click.option("--force", is_flag=True, help="Overwrite an existing wallet")
def new(words: str, force: bool) -> None:
    """Generate a new wallet and store its mnemonic."""
    if get_setting("LUKUP_MNEMONIC") and not force:
        click.secho(
            f"ERROR: A wallet already exists in {LUKUP_ENV}. Use --force to replace it.",
            fg="red",
        )
        sys.exit(1)

    phrase = generate_mnemonic(int(words))
    try:
        identity = import_from_mnemonic(phrase)
    except LukupError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)
    env_path = save_mnemonic(phrase)

    click.secho("Wallet created.", fg="green")
    click.echo(click.style("  Address:  ", dim=True) + identity.address)
    click.echo(click.style("  Saved to: ", dim=True) + str(env_path))
    click.echo()
    click.secho("  Write down this recovery phrase and keep it offline:", fg="yellow")
    click.echo(f"  {phrase}")


@wallet.command(name="import")
@click.argument("phrase")
@click.option("--path", "hd_path", default=None, help="HD derivation path")
def import_(phrase: str, hd_path: Optional[str]) -> None:
    """Import a wallet from a mnemonic PHRASE."""
    try:
        identity = import_from_mnemonic(phrase, hd_path)
    except LukupError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)

    env_path = save_mnemonic(" ".join(phrase.split()), hd_path)
    click.secho("Wallet imported.", fg="green")
    click.echo(click.style("  Address:  ", dim=True) + identity.address)
    click.echo(click.style("  Saved to: ", dim=True) + str(env_path))
