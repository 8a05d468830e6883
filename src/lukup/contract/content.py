"""
Content contract gateway.

Content items are NFTs whose encrypted payload is pinned on IPFS.  Creators
stake a supported token to pay verification fees; viewers subscribe, view or
share content; advertisers have ads delivered on content.  Earnings and
expenses are tracked per content item, per ad and per pricing category.

Each on-chain function has one ContentFunction member and one frozen request
record listing its params in call order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from ..chain.abi import content_abi, content_address
from ..chain.network import Network
from ..wallet.identity import WalletIdentity
from .base import ContractCall, FeeOptions, LukupContract, Param, RemoteInvoker
from .types import DataType

Number = Union[int, str]

S = DataType.STRING
N = DataType.NUMBER
A = DataType.ADDRESS
B32 = DataType.BYTE32


class ContentFunction(Enum):
    CREATE_CONTENT = "createContent"
    TOKEN_OF_OWNER_BY_INDEX = "tokenOfOwnerByIndex"
    TOTAL_SUPPLY = "totalSupply"
    TOKEN_BY_INDEX = "tokenByIndex"
    REMOVE_CONTENT = "removeContent"
    SUPPORT_TOKENS = "supportTokens"
    CHECK_SUPPORT_FOR_TOKEN = "checkSupportForToken"
    STAKE = "stake"
    VIEW_PERFORMANCE = "viewPerformance"
    VIEW_DELIVERY = "viewDelivery"
    FETCH_CONTENT_BY_CATEGORY = "fetchContentByCategory"
    SUBSCRIBE = "subscribe"
    VIEW_CONTENT = "viewContent"
    VIEW_AD = "viewAd"
    SHARE_CONTENT = "shareContent"
    SET_LICENSE_TERM = "setLicenseTerm"
    FETCH_EARNINGS_BY_CATEGORY = "fetchEarningsbyCategory"
    FETCH_EARNINGS_FOR_ITEM = "fetchEarningsForItem"
    FETCH_EXPENSES_FOR_AD = "fetchExpensesForAd"


# ============ Request records ============


@dataclass(frozen=True)
class CreateContent(ContractCall):
    tokenURI: str
    pricingModel: str
    price: Number
    stakedToken: str
    staked: Number
    shards: str
    keyquorum: Number

    function = ContentFunction.CREATE_CONTENT
    params = (
        Param("tokenURI", S),
        Param("pricingModel", S, sanitise=B32),
        Param("price", N),
        Param("stakedToken", A),
        Param("staked", N),
        Param("shards", S),
        Param("keyquorum", N),
    )


@dataclass(frozen=True)
class TotalSupply(ContractCall):
    function = ContentFunction.TOTAL_SUPPLY
    params = ()


@dataclass(frozen=True)
class TokenByIndex(ContractCall):
    index: Number

    function = ContentFunction.TOKEN_BY_INDEX
    params = (Param("index", N),)


@dataclass(frozen=True)
class TokenOfOwnerByIndex(ContractCall):
    owner: str
    index: Number

    function = ContentFunction.TOKEN_OF_OWNER_BY_INDEX
    params = (Param("owner", A), Param("index", N))


@dataclass(frozen=True)
class RemoveContent(ContractCall):
    contentId: Number
    category: str

    function = ContentFunction.REMOVE_CONTENT
    params = (Param("contentId", N), Param("category", S, sanitise=B32))


@dataclass(frozen=True)
class SupportTokens(ContractCall):
    token: str

    function = ContentFunction.SUPPORT_TOKENS
    params = (Param("token", A),)


@dataclass(frozen=True)
class CheckSupportForToken(ContractCall):
    token: str

    function = ContentFunction.CHECK_SUPPORT_FOR_TOKEN
    params = (Param("token", A),)


@dataclass(frozen=True)
class Stake(ContractCall):
    token: str
    amount: Number

    function = ContentFunction.STAKE
    params = (Param("token", A), Param("amount", N))


@dataclass(frozen=True)
class ViewPerformance(ContractCall):
    contentId: Number

    function = ContentFunction.VIEW_PERFORMANCE
    params = (Param("contentId", N),)


@dataclass(frozen=True)
class ViewDelivery(ContractCall):
    adId: Number

    function = ContentFunction.VIEW_DELIVERY
    params = (Param("adId", N),)


@dataclass(frozen=True)
class FetchContentByCategory(ContractCall):
    category: str

    function = ContentFunction.FETCH_CONTENT_BY_CATEGORY
    params = (Param("category", S, sanitise=B32),)


@dataclass(frozen=True)
class Subscribe(ContractCall):
    contentId: Number

    function = ContentFunction.SUBSCRIBE
    params = (Param("contentId", N),)


@dataclass(frozen=True)
class ViewContent(ContractCall):
    contentId: Number

    function = ContentFunction.VIEW_CONTENT
    params = (Param("contentId", N),)


@dataclass(frozen=True)
class ViewAd(ContractCall):
    adId: Number
    contentId: Number

    function = ContentFunction.VIEW_AD
    params = (Param("adId", N), Param("contentId", N))


@dataclass(frozen=True)
class ShareContent(ContractCall):
    sharedWith: str
    contentId: Number

    function = ContentFunction.SHARE_CONTENT
    params = (Param("sharedWith", A), Param("contentId", N))


@dataclass(frozen=True)
class SetLicenseTerm(ContractCall):
    time: Number

    function = ContentFunction.SET_LICENSE_TERM
    params = (Param("time", N),)


@dataclass(frozen=True)
class FetchEarningsByCategory(ContractCall):
    category: str

    function = ContentFunction.FETCH_EARNINGS_BY_CATEGORY
    params = (Param("category", S, sanitise=B32),)


@dataclass(frozen=True)
class FetchEarningsForItem(ContractCall):
    contentId: Number

    function = ContentFunction.FETCH_EARNINGS_FOR_ITEM
    params = (Param("contentId", N),)


@dataclass(frozen=True)
class FetchExpensesForAd(ContractCall):
    adId: Number

    function = ContentFunction.FETCH_EXPENSES_FOR_AD
    params = (Param("adId", N),)


OPERATIONS: dict[ContentFunction, type[ContractCall]] = {
    cls.function: cls
    for cls in (
        CreateContent,
        TotalSupply,
        TokenByIndex,
        TokenOfOwnerByIndex,
        RemoveContent,
        SupportTokens,
        CheckSupportForToken,
        Stake,
        ViewPerformance,
        ViewDelivery,
        FetchContentByCategory,
        Subscribe,
        ViewContent,
        ViewAd,
        ShareContent,
        SetLicenseTerm,
        FetchEarningsByCategory,
        FetchEarningsForItem,
        FetchExpensesForAd,
    )
}


# ============ Gateway ============


class ContentContract(LukupContract):
    """Typed gateway for a deployed Content contract."""

    def __init__(
        self,
        wallet: Optional[WalletIdentity],
        contract_address: Optional[str] = None,
        invoker: Optional[RemoteInvoker] = None,
        network: Optional[Network] = None,
    ) -> None:
        if wallet is not None:
            network = wallet.network
        elif network is None:
            network = Network.from_env()
        if contract_address is None:
            contract_address = content_address(network.chain_id)
        super().__init__(wallet, contract_address, content_abi(), invoker, network)

    def create_content(
        self,
        tokenURI: str,
        pricingModel: str,
        price: Number,
        stakedToken: str,
        staked: Number,
        shards: str,
        keyquorum: Number,
        fee: Optional[FeeOptions] = None,
    ) -> Any:
        """
        Record a content item on chain.

        Args:
            tokenURI:     IPFS url of the pinned content file
            pricingModel: pricing category, e.g. "PPV", "AD", "FREE"
            price:        price in LUKUP token units
            stakedToken:  address of the token staked to pay verification fees
            staked:       amount of stakedToken staked
            shards:       comma separated key shards of the content encryption key
            keyquorum:    minimum number of shards needed to rebuild the key
            fee:          optional gas price / gas limit

        Returns:
            Transaction result; the content id is emitted on chain
        """
        return self.dispatch(
            CreateContent(tokenURI, pricingModel, price, stakedToken, staked, shards, keyquorum),
            fee,
        )

    def total_supply(self, fee: Optional[FeeOptions] = None) -> Any:
        """Number of content items created."""
        return self.dispatch(TotalSupply(), fee)

    def token_by_index(self, index: Number, fee: Optional[FeeOptions] = None) -> Any:
        """Content id at ``index`` in the list of all content items."""
        return self.dispatch(TokenByIndex(index), fee)

    def token_of_owner_by_index(
        self, owner: str, index: Number, fee: Optional[FeeOptions] = None
    ) -> Any:
        """Content id at ``index`` in the list of items created by ``owner``."""
        return self.dispatch(TokenOfOwnerByIndex(owner, index), fee)

    def remove_content(
        self, contentId: Number, category: str, fee: Optional[FeeOptions] = None
    ) -> Any:
        return self.dispatch(RemoveContent(contentId, category), fee)

    def support_tokens(self, token: str, fee: Optional[FeeOptions] = None) -> Any:
        """Register ``token`` as accepted for staking (contract deployer only)."""
        return self.dispatch(SupportTokens(token), fee)

    def check_support_for_token(self, token: str, fee: Optional[FeeOptions] = None) -> Any:
        """True if ``token`` is accepted for staking."""
        return self.dispatch(CheckSupportForToken(token), fee)

    def stake(self, token: str, amount: Number, fee: Optional[FeeOptions] = None) -> Any:
        """Stake ``amount`` of ``token`` to pay for content verification."""
        return self.dispatch(Stake(token, amount), fee)

    def view_performance(self, contentId: Number, fee: Optional[FeeOptions] = None) -> Any:
        """(likes, shares, subscriptions) for a content item."""
        return self.dispatch(ViewPerformance(contentId), fee)

    def view_delivery(self, adId: Number, fee: Optional[FeeOptions] = None) -> Any:
        """Content ids on which the ad has been delivered."""
        return self.dispatch(ViewDelivery(adId), fee)

    def fetch_content_by_category(self, category: str, fee: Optional[FeeOptions] = None) -> Any:
        """Content ids in ``category``."""
        return self.dispatch(FetchContentByCategory(category), fee)

    def subscribe(self, contentId: Number, fee: Optional[FeeOptions] = None) -> Any:
        return self.dispatch(Subscribe(contentId), fee)

    def view_content(self, contentId: Number, fee: Optional[FeeOptions] = None) -> Any:
        """Key shards needed to decrypt the content item."""
        return self.dispatch(ViewContent(contentId), fee)

    def view_ad(self, adId: Number, contentId: Number, fee: Optional[FeeOptions] = None) -> Any:
        """Key shards needed to decrypt an ad delivered on ``contentId``."""
        return self.dispatch(ViewAd(adId, contentId), fee)

    def share_content(
        self, sharedWith: str, contentId: Number, fee: Optional[FeeOptions] = None
    ) -> Any:
        return self.dispatch(ShareContent(sharedWith, contentId), fee)

    def set_license_term(self, time: Number, fee: Optional[FeeOptions] = None) -> Any:
        """Set the standard viewing window in milliseconds (contract deployer only)."""
        return self.dispatch(SetLicenseTerm(time), fee)

    def fetch_earnings_by_category(
        self, category: str, fee: Optional[FeeOptions] = None
    ) -> Any:
        """Caller's earnings for a pricing category (PPV, AD, FREE)."""
        return self.dispatch(FetchEarningsByCategory(category), fee)

    def fetch_earnings_for_item(self, contentId: Number, fee: Optional[FeeOptions] = None) -> Any:
        return self.dispatch(FetchEarningsForItem(contentId), fee)

    def fetch_expenses_for_ad(self, adId: Number, fee: Optional[FeeOptions] = None) -> Any:
        """Amount spent delivering the ad."""
        return self.dispatch(FetchExpensesForAd(adId), fee)
