"""
Transaction Builder - Build, sign, and send contract transactions.

Signing is delegated to the wallet identity (eth-account underneath);
sending goes through the httpx-based JSON-RPC client.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from eth_utils import to_checksum_address, to_hex

from .network import Network
from .rpc import (
    encode_function_call,
    estimate_gas,
    get_gas_price,
    get_nonce,
    send_raw_transaction,
    wait_for_receipt,
)

logger = logging.getLogger(__name__)


def build_contract_tx(
    contract_address: str,
    function_name: str,
    args: list,
    abi: list,
    sender: str,
    network: Network,
    value: int = 0,
    gas_price: Optional[int] = None,
    gas_limit: Optional[int] = None,
) -> dict:
    """
    Build a contract call transaction (unsigned).

    Args:
        contract_address: 0x-prefixed contract address
        function_name: Function to call
        args: Function arguments
        abi: Contract ABI
        sender: Address that will sign the transaction
        network: Target network (RPC endpoint and chain id)
        value: ETH value in wei (default: 0)
        gas_price: Gas price in wei (default: node's eth_gasPrice)
        gas_limit: Gas limit (default: node's eth_estimateGas)

    Returns:
        Unsigned legacy transaction dict
    """
    calldata = encode_function_call(abi, function_name, args)
    to = to_checksum_address(contract_address)
    sender = to_checksum_address(sender)

    if gas_limit is None:
        gas_limit = estimate_gas(
            {"from": sender, "to": to, "data": calldata, "value": value},
            network.rpc_url,
        )
    if gas_price is None:
        gas_price = get_gas_price(network.rpc_url)

    return {
        "to": to,
        "data": calldata,
        "value": value,
        "nonce": get_nonce(sender, network.rpc_url),
        "gas": gas_limit,
        "gasPrice": gas_price,
        "chainId": network.chain_id,
    }


def sign_and_send(
    tx: dict,
    signer: Any,
    network: Network,
    wait: bool = True,
    timeout: Optional[float] = None,
) -> dict:
    """
    Sign a transaction and send it.

    Args:
        tx: Unsigned transaction dict
        signer: Anything exposing sign_transaction(tx) (LocalAccount, WalletIdentity)
        network: Target network
        wait: Whether to wait for receipt
        timeout: Receipt wait timeout in seconds (default: wait until mined)

    Returns:
        Dict with tx_hash and optionally receipt and status
    """
    signed = signer.sign_transaction(tx)
    raw_tx = to_hex(signed.raw_transaction)

    tx_hash = send_raw_transaction(raw_tx, network.rpc_url)
    logger.debug("sent transaction %s on chain %s", tx_hash, network.chain_id)
    result: dict[str, Any] = {"tx_hash": tx_hash}

    if wait:
        receipt = wait_for_receipt(tx_hash, network.rpc_url, timeout=timeout)
        result["receipt"] = receipt
        result["status"] = int(receipt.get("status", "0x0"), 16)

    return result


def send_contract_tx(
    contract_address: str,
    function_name: str,
    args: list,
    abi: list,
    signer: Any,
    network: Network,
    value: int = 0,
    gas_price: Optional[int] = None,
    gas_limit: Optional[int] = None,
    wait: bool = True,
) -> dict:
    """
    Build, sign, and send a contract call transaction.

    Returns:
        Dict with tx_hash, receipt, status
    """
    tx = build_contract_tx(
        contract_address=contract_address,
        function_name=function_name,
        args=args,
        abi=abi,
        sender=signer.address,
        network=network,
        value=value,
        gas_price=gas_price,
        gas_limit=gas_limit,
    )
    return sign_and_send(tx, signer, network, wait=wait)
