"""
Wallet identity factory.

Four construction paths produce a WalletIdentity:
- create_random:         fresh BIP-39 mnemonic
- import_from_mnemonic:  existing phrase (+ optional HD path)
- from_private_key:      raw hex key
- from_external_account: an already-capable signer owned by someone else
                         (hardware wallet bridge, remote signer, ...)

Key material stays inside the signer object.  The identity only exposes
the address and a sign_transaction pass-through.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Optional

from eth_account import Account
from eth_account.signers.base import BaseAccount
from eth_utils import ValidationError

from ..chain.network import Network
from ..errors import InvalidArgument, InvalidMnemonic, UnsupportedAccount

DEFAULT_HD_PATH = "m/44'/60'/0'/0/0"

Account.enable_unaudited_hdwallet_features()


@dataclass(frozen=True)
class WalletIdentity:
    address: str
    network: Network
    _signer: Any = field(repr=False, compare=False)

    def sign_transaction(self, tx: dict) -> Any:
        return self._signer.sign_transaction(tx)


def _resolve_network(network: Optional[Network]) -> Network:
    return network if network is not None else Network.from_env()


def generate_mnemonic(num_words: int = 12) -> str:
    """Generate a new BIP-39 English mnemonic phrase."""
    _, phrase = Account.create_with_mnemonic(num_words=num_words)
    return phrase


def create_random(network: Optional[Network] = None) -> WalletIdentity:
    """Create an identity from fresh OS entropy."""
    account, _ = Account.create_with_mnemonic(account_path=DEFAULT_HD_PATH)
    return WalletIdentity(account.address, _resolve_network(network), account)


def import_from_mnemonic(
    phrase: str,
    path: Optional[str] = None,
    network: Optional[Network] = None,
) -> WalletIdentity:
    """
    Derive an identity from a BIP-39 mnemonic.

    Args:
        phrase: Space separated mnemonic words
        path: HD derivation path (default: m/44'/60'/0'/0/0)
        network: Network to bind (default: Network.from_env())

    Raises:
        InvalidMnemonic: If the phrase fails word-list or checksum validation
    """
    if not isinstance(phrase, str) or not phrase.strip():
        raise InvalidMnemonic("Mnemonic phrase is empty")

    normalized = " ".join(phrase.split())
    try:
        account = Account.from_mnemonic(normalized, account_path=path or DEFAULT_HD_PATH)
    except (ValidationError, ValueError) as exc:
        raise InvalidMnemonic(f"Invalid mnemonic phrase: {exc}") from exc

    return WalletIdentity(account.address, _resolve_network(network), account)


def from_private_key(private_key: str, network: Optional[Network] = None) -> WalletIdentity:
    """Build an identity from a hex private key (with or without 0x)."""
    if not isinstance(private_key, str):
        raise InvalidArgument("Private key must be a hex string", name="private_key")
    if not private_key.startswith("0x"):
        private_key = "0x" + private_key

    try:
        account = Account.from_key(private_key)
    except (ValidationError, ValueError) as exc:
        raise InvalidArgument("Malformed private key", name="private_key") from exc

    return WalletIdentity(account.address, _resolve_network(network), account)


def from_external_account(handle: Any, network: Optional[Network] = None) -> WalletIdentity:
    """
    Wrap a signer owned outside this process.

    The handle must be an eth-account BaseAccount, or carry a truthy
    ``is_signer`` marker together with ``address`` and ``sign_transaction``.

    Raises:
        UnsupportedAccount: If the handle is not a capable signer
    """
    capable = isinstance(handle, BaseAccount) or (
        getattr(handle, "is_signer", False)
        and isinstance(getattr(handle, "address", None), str)
        and callable(getattr(handle, "sign_transaction", None))
    )
    if not capable:
        raise UnsupportedAccount(
            f"{type(handle).__name__} is not a signer (expected is_signer, "
            "address and sign_transaction)"
        )

    return WalletIdentity(handle.address, _resolve_network(network), handle)


def rebind(identity: WalletIdentity, network: Network) -> WalletIdentity:
    """Return a copy of ``identity`` bound to ``network``; the input is untouched."""
    return dataclasses.replace(identity, network=network)
