from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional
from unittest.mock import patch

import pytest

from lukup.chain.network import Network, get_network
from lukup.contract.base import FeeOptions
from lukup.wallet.identity import WalletIdentity, from_private_key

# Well-known development key (Hardhat / Anvil account #0)
TEST_MNEMONIC = "test test test test test test test test test test test junk"
TEST_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

TOKEN_ADDRESS = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
CONTENT_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"

_LUKUP_KEYS = (
    "LUKUP_MNEMONIC",
    "LUKUP_HD_PATH",
    "PRIVATE_KEY",
    "LUKUP_NETWORK",
    "LUKUP_RPC_URL",
    "LUKUP_CHAIN_ID",
    "CONTENT_ADDRESS",
)


@pytest.fixture(autouse=True)
def lukup_home(tmp_path: Path):
    """Point ~/.lukup/.env at a temp file and hide any real settings."""
    env_path = tmp_path / ".lukup" / ".env"
    with patch("lukup.config.LUKUP_ENV", env_path):
        with patch.dict(os.environ):
            for key in _LUKUP_KEYS:
                os.environ.pop(key, None)
            yield env_path


@pytest.fixture()
def network() -> Network:
    return get_network("localhost")


@pytest.fixture()
def wallet(network: Network) -> WalletIdentity:
    return from_private_key(TEST_PRIVATE_KEY, network)


class EchoInvoker:
    """Remote primitive stub that records calls and echoes the arguments."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, list, Optional[FeeOptions]]] = []

    def __call__(self, function_name: str, args: list, fee: Optional[FeeOptions]) -> Any:
        self.calls.append((function_name, args, fee))
        return args


@pytest.fixture()
def invoker() -> EchoInvoker:
    return EchoInvoker()
