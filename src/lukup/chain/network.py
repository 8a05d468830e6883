"""
Network endpoint descriptors.

A Network names a JSON-RPC endpoint and the chain id transactions are signed
for.  Instances are immutable; wallets are rebound to a different network by
building a new identity, never by mutating one.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..config import get_setting
from ..errors import ConfigError


@dataclass(frozen=True)
class Network:
    name: str
    rpc_url: str
    chain_id: int

    @classmethod
    def from_env(cls) -> "Network":
        """
        Resolve the network from configuration.

        Priority: LUKUP_RPC_URL + LUKUP_CHAIN_ID  >  LUKUP_NETWORK  >  localhost.
        """
        rpc_url = get_setting("LUKUP_RPC_URL")
        if rpc_url:
            chain_id = get_setting("LUKUP_CHAIN_ID")
            if not chain_id:
                raise ConfigError("LUKUP_RPC_URL is set but LUKUP_CHAIN_ID is missing.")
            try:
                return cls(name="custom", rpc_url=rpc_url, chain_id=int(chain_id))
            except ValueError:
                raise ConfigError(
                    f"LUKUP_CHAIN_ID must be an integer, got {chain_id!r}"
                ) from None

        return get_network(get_setting("LUKUP_NETWORK", "localhost"))


NETWORKS: dict[str, Network] = {
    "mainnet": Network("mainnet", "https://ethereum-rpc.publicnode.com", 1),
    "sepolia": Network("sepolia", "https://ethereum-sepolia-rpc.publicnode.com", 11155111),
    "polygon": Network("polygon", "https://polygon-rpc.com", 137),
    "amoy": Network("amoy", "https://rpc-amoy.polygon.technology", 80002),
    "localhost": Network("localhost", "http://127.0.0.1:8545", 31337),
}


def get_network(name: str) -> Network:
    try:
        return NETWORKS[name]
    except KeyError:
        known = ", ".join(sorted(NETWORKS))
        raise ConfigError(f"Unknown network {name!r}. Known networks: {known}") from None
