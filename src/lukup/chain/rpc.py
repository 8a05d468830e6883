"""
JSON-RPC client for EVM networks.

Lightweight alternative to web3.py: uses httpx for HTTP + eth-abi for encoding.
Supports read-only contract calls, gas queries, raw transaction submission and
transaction receipt polling.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Optional

import httpx
from eth_abi import decode, encode
from eth_utils import keccak

from .abi import find_function

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class RpcError(RuntimeError):
    """The node answered with a JSON-RPC error object."""

    def __init__(self, method: str, error: Any) -> None:
        if isinstance(error, dict):
            message = error.get("message", str(error))
            self.code = error.get("code")
            self.data = error.get("data")
        else:
            message = str(error)
            self.code = None
            self.data = None
        super().__init__(f"RPC error from {method}: {message}")
        self.method = method


def _rpc_call(method: str, params: list, rpc_url: str) -> Any:
    """
    Make a JSON-RPC call.

    Args:
        method: RPC method name (e.g., "eth_call")
        params: RPC parameters
        rpc_url: RPC endpoint URL

    Returns:
        Result field from the RPC response

    Raises:
        RpcError: If the node returns an error object
        httpx.HTTPError: On transport failure or non-2xx status
    """
    payload = {
        "jsonrpc": "2.0",
        "method": method,
        "params": params,
        "id": 1,
    }
    logger.debug("rpc %s -> %s", method, rpc_url)

    with httpx.Client(timeout=DEFAULT_TIMEOUT) as client:
        response = client.post(rpc_url, json=payload)
        response.raise_for_status()
        data = response.json()

    if "error" in data:
        raise RpcError(method, data["error"])

    return data.get("result")


def function_selector(entry: dict[str, Any]) -> bytes:
    """First 4 bytes of keccak256 over the canonical function signature."""
    input_types = [inp["type"] for inp in entry.get("inputs", [])]
    sig = f"{entry['name']}({','.join(input_types)})"
    return keccak(text=sig)[:4]


def encode_function_call(abi: list, function_name: str, args: list) -> str:
    """
    ABI-encode a function call.

    Args:
        abi: Contract ABI
        function_name: Function name to call
        args: Function arguments, already converted to ABI-compatible types

    Returns:
        0x-prefixed hex encoded calldata
    """
    func = find_function(abi, function_name)
    input_types = [inp["type"] for inp in func.get("inputs", [])]

    if len(args) != len(input_types):
        raise ValueError(
            f"{function_name} expects {len(input_types)} arguments, got {len(args)}"
        )

    encoded_args = encode(input_types, args) if args else b""
    return "0x" + function_selector(func).hex() + encoded_args.hex()


def decode_function_result(abi: list, function_name: str, data: str) -> Any:
    """
    ABI-decode a function call result.

    Returns:
        None for functions without outputs, the single value for one output,
        otherwise a tuple
    """
    func = find_function(abi, function_name)
    output_types = [out["type"] for out in func.get("outputs", [])]
    if not output_types:
        return None

    raw = bytes.fromhex(data[2:]) if data.startswith("0x") else bytes.fromhex(data)
    decoded = decode(output_types, raw)

    if len(decoded) == 1:
        return decoded[0]
    return decoded


def read_contract(
    contract_address: str,
    function_name: str,
    args: list,
    abi: list,
    rpc_url: str,
    sender: Optional[str] = None,
    gas: Optional[int] = None,
) -> Any:
    """
    Read from a smart contract (eth_call).

    Args:
        contract_address: 0x-prefixed contract address
        function_name: Function to call
        args: Function arguments
        abi: Contract ABI
        rpc_url: RPC endpoint URL
        sender: Optional "from" address, for functions that depend on msg.sender
        gas: Optional gas cap for the call

    Returns:
        Decoded return value(s)
    """
    call: dict[str, Any] = {
        "to": contract_address,
        "data": encode_function_call(abi, function_name, args),
    }
    if sender:
        call["from"] = sender
    if gas is not None:
        call["gas"] = hex(gas)

    result = _rpc_call("eth_call", [call, "latest"], rpc_url)

    if result is None or result == "0x":
        return None

    return decode_function_result(abi, function_name, result)


def get_nonce(address: str, rpc_url: str) -> int:
    """Get the pending transaction count for an address."""
    result = _rpc_call("eth_getTransactionCount", [address, "pending"], rpc_url)
    return int(result, 16)


def get_gas_price(rpc_url: str) -> int:
    """Get current gas price in wei."""
    result = _rpc_call("eth_gasPrice", [], rpc_url)
    return int(result, 16)


def estimate_gas(tx: dict[str, Any], rpc_url: str) -> int:
    """Ask the node to estimate gas for an unsigned transaction."""
    call = {k: (hex(v) if isinstance(v, int) else v) for k, v in tx.items()}
    result = _rpc_call("eth_estimateGas", [call], rpc_url)
    return int(result, 16)


def send_raw_transaction(raw_tx: str, rpc_url: str) -> str:
    """
    Send a signed raw transaction.

    Returns:
        Transaction hash (0x-prefixed hex)
    """
    return _rpc_call("eth_sendRawTransaction", [raw_tx], rpc_url)


def wait_for_receipt(
    tx_hash: str,
    rpc_url: str,
    timeout: Optional[float] = None,
    poll_interval: float = 2.0,
) -> dict:
    """
    Wait for a transaction receipt.

    Polls until the node returns a receipt.  With the default timeout of None
    there is no deadline: a sent transaction is either mined or the caller
    stops waiting.

    Raises:
        TimeoutError: If a timeout is given and no receipt arrives within it
    """
    start = time.time()
    while True:
        receipt = _rpc_call("eth_getTransactionReceipt", [tx_hash], rpc_url)
        if receipt is not None:
            return receipt
        if timeout is not None and time.time() - start >= timeout:
            raise TimeoutError(f"Transaction {tx_hash} not confirmed within {timeout}s")
        time.sleep(poll_interval)
