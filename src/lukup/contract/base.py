"""
Contract gateway base.

A gateway binds a contract address to a wallet identity and turns typed
request records into exactly one remote invocation:

    validate every param in order -> sanitise flagged params -> invoke -> return

The remote invocation primitive is any callable matching RemoteInvoker.
ChainInvoker is the default one and talks JSON-RPC to the wallet's network.
Without a wallet a gateway can still serve view functions as unsigned reads.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Optional, Protocol

import httpx
from eth_abi.exceptions import EncodingError

from ..chain.abi import find_function, is_read_only
from ..chain.network import Network
from ..chain.rpc import RpcError, read_contract
from ..chain.tx import send_contract_tx
from ..errors import ConfigError, InvalidArgument, LukupError, RemoteCallFailed
from ..wallet.identity import WalletIdentity
from .types import DataType, sanitise_input, validate_input

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeeOptions:
    """Fee bidding hints for a transaction.  None lets the node decide."""

    gas_price: Optional[int] = None
    gas_limit: Optional[int] = None

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidArgument(
                    f"{f.name} must be a non-negative integer, got {value!r}", f.name
                )


@dataclass(frozen=True)
class Param:
    name: str
    data_type: DataType
    sanitise: Optional[DataType] = None


class RemoteInvoker(Protocol):
    def __call__(self, function_name: str, args: list, fee: Optional[FeeOptions]) -> Any:
        ...


@dataclass(frozen=True)
class ContractCall:
    """
    Base for typed request records.

    Subclasses are frozen dataclasses whose fields match ``params`` one to one,
    in order.  ``function`` is an Enum member whose value is the on-chain name.
    """

    function: ClassVar[Any]
    params: ClassVar[tuple[Param, ...]] = ()

    def values(self) -> list[Any]:
        return [getattr(self, p.name) for p in self.params]


def _coerce_arg(abi_type: str, value: Any) -> Any:
    if abi_type.startswith(("uint", "int")) and isinstance(value, str):
        return int(value, 10)
    return value


class ChainInvoker:
    """
    Send calls for one deployed contract through a network endpoint.

    view/pure functions are executed with eth_call and return decoded values;
    with no wallet the call carries no "from" address.  Everything else is
    signed by the wallet and sent as a transaction; the result is
    {"tx_hash", "receipt", "status"}.  The receipt is awaited without a
    deadline.
    """

    def __init__(
        self,
        contract_address: str,
        abi: list,
        wallet: Optional[WalletIdentity],
        network: Optional[Network] = None,
    ) -> None:
        if wallet is None and network is None:
            raise ConfigError("ChainInvoker needs a wallet or a network")
        self._address = contract_address
        self._abi = abi
        self._wallet = wallet
        self._network = wallet.network if wallet is not None else network

    def __call__(self, function_name: str, args: list, fee: Optional[FeeOptions]) -> Any:
        entry = find_function(self._abi, function_name)
        input_types = [inp["type"] for inp in entry.get("inputs", [])]
        encoded = [_coerce_arg(t, v) for t, v in zip(input_types, args)]
        fee = fee or FeeOptions()
        network = self._network
        read_only = is_read_only(entry)
        if not read_only and self._wallet is None:
            raise ConfigError(f"A wallet is required to send {function_name}")

        try:
            if read_only:
                return read_contract(
                    self._address,
                    function_name,
                    encoded,
                    abi=self._abi,
                    rpc_url=network.rpc_url,
                    sender=self._wallet.address if self._wallet else None,
                    gas=fee.gas_limit,
                )

            result = send_contract_tx(
                contract_address=self._address,
                function_name=function_name,
                args=encoded,
                abi=self._abi,
                signer=self._wallet,
                network=network,
                gas_price=fee.gas_price,
                gas_limit=fee.gas_limit,
            )
        except (RpcError, httpx.HTTPError, EncodingError) as exc:
            raise RemoteCallFailed(function_name, str(exc)) from exc

        if result.get("status") == 0:
            raise RemoteCallFailed(
                function_name, f"transaction {result.get('tx_hash')} reverted"
            )
        return result


class LukupContract:
    """
    Bound façade for one deployed contract.

    wallet may be None for a read-only gateway; the network is then taken
    from ``network`` or, failing that, from configuration.
    """

    def __init__(
        self,
        wallet: Optional[WalletIdentity],
        contract_address: str,
        abi: list,
        invoker: Optional[RemoteInvoker] = None,
        network: Optional[Network] = None,
    ) -> None:
        validate_input(DataType.ADDRESS, contract_address, "contract_address")
        self._wallet = wallet
        self._contract_address = contract_address
        self._abi = copy.deepcopy(abi)
        if invoker is None:
            if wallet is None and network is None:
                network = Network.from_env()
            invoker = ChainInvoker(contract_address, self._abi, wallet, network)
        self._invoker = invoker

    @property
    def contract_address(self) -> str:
        return self._contract_address

    @property
    def wallet(self) -> Optional[WalletIdentity]:
        return self._wallet

    @property
    def abi(self) -> list:
        return copy.deepcopy(self._abi)

    def dispatch(self, request: ContractCall, fee: Optional[FeeOptions] = None) -> Any:
        """
        Validate, sanitise and send one request.

        Raises:
            InvalidArgument: A param does not match its declared type
            EncodingOverflow: Text is too long for its fixed-width encoding
            RemoteCallFailed: The invocation was rejected
            ConfigError: A transaction was requested without a wallet
        """
        if fee is not None and not isinstance(fee, FeeOptions):
            raise InvalidArgument("fee must be a FeeOptions instance", "fee")

        values = request.values()
        for param, value in zip(request.params, values):
            validate_input(param.data_type, value, param.name)

        args = [
            sanitise_input(param.sanitise, value) if param.sanitise else value
            for param, value in zip(request.params, values)
        ]

        function_name = request.function.value
        logger.debug("dispatch %s on %s", function_name, self._contract_address)
        try:
            return self._invoker(function_name, args, fee)
        except LukupError:
            raise
        except Exception as exc:
            raise RemoteCallFailed(function_name, str(exc)) from exc
