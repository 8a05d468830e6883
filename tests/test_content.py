"""Tests for the Content contract gateway dispatch."""

from __future__ import annotations

import dataclasses

import pytest

from lukup.chain.abi import content_abi, find_function
from lukup.contract.base import FeeOptions
from lukup.contract.content import (
    OPERATIONS,
    ContentContract,
    ContentFunction,
    CreateContent,
)
from lukup.contract.types import DataType, encode_bytes32
from lukup.errors import EncodingOverflow, InvalidArgument, RemoteCallFailed
from lukup.wallet.identity import WalletIdentity

from .conftest import CONTENT_ADDRESS, TOKEN_ADDRESS, EchoInvoker

_SAMPLE = {
    DataType.STRING: "PPV",
    DataType.NUMBER: "1",
    DataType.ADDRESS: TOKEN_ADDRESS,
    DataType.BYTE32: "PPV",
}


@pytest.fixture()
def contract(wallet: WalletIdentity, invoker: EchoInvoker) -> ContentContract:
    return ContentContract(wallet, CONTENT_ADDRESS, invoker=invoker)


def _sample_args(record: type) -> list:
    return [_SAMPLE[p.data_type] for p in record.params]


class TestOperationTable:
    """The enum, the request records and the ABI describe the same surface."""

    def test_every_function_has_a_record(self) -> None:
        assert set(OPERATIONS) == set(ContentFunction)
        assert len(OPERATIONS) == 19

    @pytest.mark.parametrize("function", list(ContentFunction))
    def test_record_fields_match_params(self, function: ContentFunction) -> None:
        record = OPERATIONS[function]
        field_names = [f.name for f in dataclasses.fields(record)]
        assert field_names == [p.name for p in record.params]

    @pytest.mark.parametrize("function", list(ContentFunction))
    def test_record_matches_abi(self, function: ContentFunction) -> None:
        entry = find_function(content_abi(), function.value)
        record = OPERATIONS[function]
        assert [i["name"] for i in entry["inputs"]] == [p.name for p in record.params]
        for param, abi_input in zip(record.params, entry["inputs"]):
            if param.sanitise is DataType.BYTE32:
                assert abi_input["type"] == "bytes32"

    def test_records_are_immutable(self) -> None:
        request = OPERATIONS[ContentFunction.STAKE](TOKEN_ADDRESS, "5")
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.amount = "6"  # type: ignore[misc]


class TestValidationBeforeNetwork:
    """Invalid arguments never reach the remote primitive."""

    @pytest.mark.parametrize(
        "function",
        [f for f, r in OPERATIONS.items() if any(p.data_type is DataType.NUMBER for p in r.params)],
    )
    def test_non_numeric_string_rejected(
        self, contract: ContentContract, invoker: EchoInvoker, function: ContentFunction
    ) -> None:
        record = OPERATIONS[function]
        for i, param in enumerate(record.params):
            if param.data_type is not DataType.NUMBER:
                continue
            args = _sample_args(record)
            args[i] = "not-a-number"
            with pytest.raises(InvalidArgument) as exc_info:
                contract.dispatch(record(*args))
            assert exc_info.value.name == param.name
        assert invoker.calls == []

    def test_number_above_uint256_rejected(
        self, contract: ContentContract, invoker: EchoInvoker
    ) -> None:
        with pytest.raises(InvalidArgument) as exc_info:
            contract.view_content(str(2**256))
        assert exc_info.value.name == "contentId"
        assert invoker.calls == []

    @pytest.mark.parametrize(
        "function",
        [f for f, r in OPERATIONS.items() if any(p.data_type is DataType.ADDRESS for p in r.params)],
    )
    def test_bad_address_rejected(
        self, contract: ContentContract, invoker: EchoInvoker, function: ContentFunction
    ) -> None:
        record = OPERATIONS[function]
        for i, param in enumerate(record.params):
            if param.data_type is not DataType.ADDRESS:
                continue
            args = _sample_args(record)
            args[i] = "0xnot-an-address"
            with pytest.raises(InvalidArgument):
                contract.dispatch(record(*args))
        assert invoker.calls == []

    def test_first_invalid_argument_wins(self, contract: ContentContract, invoker: EchoInvoker) -> None:
        with pytest.raises(InvalidArgument) as exc_info:
            contract.create_content("ipfs://abc", "PPV", "x", "bad", "y", "s1", "z")
        assert exc_info.value.name == "price"
        assert invoker.calls == []

    def test_overlong_category_overflows(self, contract: ContentContract, invoker: EchoInvoker) -> None:
        with pytest.raises(EncodingOverflow):
            contract.fetch_content_by_category("c" * 33)
        assert invoker.calls == []

    def test_bad_fee_rejected(self) -> None:
        with pytest.raises(InvalidArgument):
            FeeOptions(gas_price=-1)
        with pytest.raises(InvalidArgument):
            FeeOptions(gas_limit="lots")  # type: ignore[arg-type]

    def test_bad_contract_address(self, wallet: WalletIdentity, invoker: EchoInvoker) -> None:
        with pytest.raises(InvalidArgument):
            ContentContract(wallet, "0x123", invoker=invoker)


class TestDispatch:
    """Successful calls issue exactly one remote invocation."""

    def test_create_content_end_to_end(self, contract: ContentContract, invoker: EchoInvoker) -> None:
        result = contract.create_content(
            tokenURI="ipfs://abc",
            pricingModel="PPV",
            price="100",
            stakedToken=TOKEN_ADDRESS,
            staked="50",
            shards="s1,s2,s3",
            keyquorum="2",
        )
        assert result == [
            "ipfs://abc",
            encode_bytes32("PPV"),
            "100",
            TOKEN_ADDRESS,
            "50",
            "s1,s2,s3",
            "2",
        ]
        assert len(invoker.calls) == 1
        assert invoker.calls[0][0] == "createContent"

    def test_empty_category_encodes_to_zero_bytes(
        self, contract: ContentContract, invoker: EchoInvoker
    ) -> None:
        result = contract.fetch_content_by_category("")
        assert result == [b"\x00" * 32]
        assert invoker.calls[0][0] == "fetchContentByCategory"

    def test_earnings_by_category_uses_onchain_name(
        self, contract: ContentContract, invoker: EchoInvoker
    ) -> None:
        contract.fetch_earnings_by_category("AD")
        assert invoker.calls == [("fetchEarningsbyCategory", [encode_bytes32("AD")], None)]

    def test_no_argument_operation(self, contract: ContentContract, invoker: EchoInvoker) -> None:
        assert contract.total_supply() == []
        assert invoker.calls == [("totalSupply", [], None)]

    def test_fee_is_forwarded(self, contract: ContentContract, invoker: EchoInvoker) -> None:
        fee = FeeOptions(gas_price=2_000_000_000, gas_limit=300_000)
        contract.stake(TOKEN_ADDRESS, 10, fee=fee)
        assert invoker.calls == [("stake", [TOKEN_ADDRESS, 10], fee)]

    def test_argument_order_preserved(self, contract: ContentContract, invoker: EchoInvoker) -> None:
        contract.view_ad("7", "9")
        contract.share_content(TOKEN_ADDRESS, "3")
        contract.remove_content("4", "FREE")
        assert [c[1] for c in invoker.calls] == [
            ["7", "9"],
            [TOKEN_ADDRESS, "3"],
            ["4", encode_bytes32("FREE")],
        ]

    @pytest.mark.parametrize("function", list(ContentFunction))
    def test_every_operation_dispatches_its_name(
        self, contract: ContentContract, invoker: EchoInvoker, function: ContentFunction
    ) -> None:
        record = OPERATIONS[function]
        contract.dispatch(record(*_sample_args(record)))
        assert invoker.calls[-1][0] == function.value

    def test_gateway_methods_cover_every_operation(
        self, contract: ContentContract, invoker: EchoInvoker
    ) -> None:
        contract.create_content("ipfs://a", "PPV", 1, TOKEN_ADDRESS, 1, "s", 1)
        contract.total_supply()
        contract.token_by_index(0)
        contract.token_of_owner_by_index(TOKEN_ADDRESS, 0)
        contract.remove_content(1, "PPV")
        contract.support_tokens(TOKEN_ADDRESS)
        contract.check_support_for_token(TOKEN_ADDRESS)
        contract.stake(TOKEN_ADDRESS, 1)
        contract.view_performance(1)
        contract.view_delivery(1)
        contract.fetch_content_by_category("PPV")
        contract.subscribe(1)
        contract.view_content(1)
        contract.view_ad(1, 1)
        contract.share_content(TOKEN_ADDRESS, 1)
        contract.set_license_term(86_400_000)
        contract.fetch_earnings_by_category("PPV")
        contract.fetch_earnings_for_item(1)
        contract.fetch_expenses_for_ad(1)
        assert {c[0] for c in invoker.calls} == {f.value for f in ContentFunction}


class TestRemoteFailure:
    def test_failure_wrapped_with_message(self, wallet: WalletIdentity) -> None:
        def failing(function_name: str, args: list, fee: object) -> None:
            raise RuntimeError("execution reverted: insufficient stake")

        contract = ContentContract(wallet, CONTENT_ADDRESS, invoker=failing)
        with pytest.raises(RemoteCallFailed) as exc_info:
            contract.subscribe("1")
        assert exc_info.value.function == "subscribe"
        assert exc_info.value.message == "execution reverted: insufficient stake"
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_remote_call_failed_passes_through(self, wallet: WalletIdentity) -> None:
        original = RemoteCallFailed("stake", "unsupported token")

        def failing(function_name: str, args: list, fee: object) -> None:
            raise original

        contract = ContentContract(wallet, CONTENT_ADDRESS, invoker=failing)
        with pytest.raises(RemoteCallFailed) as exc_info:
            contract.stake(TOKEN_ADDRESS, "1")
        assert exc_info.value is original


class TestGatewayInstance:
    def test_fields_are_read_only(self, contract: ContentContract) -> None:
        assert contract.contract_address == CONTENT_ADDRESS
        with pytest.raises(AttributeError):
            contract.contract_address = TOKEN_ADDRESS  # type: ignore[misc]

    def test_address_from_address_book(self, wallet: WalletIdentity, invoker: EchoInvoker) -> None:
        contract = ContentContract(wallet, invoker=invoker)
        assert contract.contract_address == CONTENT_ADDRESS

    def test_create_content_record_direct(self, contract: ContentContract, invoker: EchoInvoker) -> None:
        request = CreateContent("ipfs://x", "FREE", "0", TOKEN_ADDRESS, "0", "", "1")
        contract.dispatch(request)
        assert invoker.calls[0][1][1] == encode_bytes32("FREE")
