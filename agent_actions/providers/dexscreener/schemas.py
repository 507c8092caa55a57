"""Pydantic schemas for DexScreener action inputs and API responses.

Token profile and boost objects are pass-through: DexScreener adds fields
over time, so unknown fields are kept as-is. Orders and pairs are strict
because their values (prices, liquidity, volumes) are what the actions are
for.
"""

from typing import Dict, List, Optional

from pydantic import Field, RootModel, field_validator

from ...schema import (
    ActionInput,
    DecimalString,
    EmptyInput,
    HttpUrlString,
    Number,
    PassthroughModel,
    RemoteModel,
)


# ---------------------------------------------------------------------------
# Remote objects
# ---------------------------------------------------------------------------

class DexScreenerLink(PassthroughModel):
    """Link attached to a token profile."""

    type: Optional[str] = None
    label: Optional[str] = None
    url: str


class DexScreenerTokenProfile(PassthroughModel):
    """Token profile from /token-profiles/latest/v1."""

    url: str
    chainId: str
    tokenAddress: str
    icon: Optional[str] = None
    header: Optional[str] = None
    description: Optional[str] = None
    links: Optional[List[DexScreenerLink]] = None


class DexScreenerTokenBoost(DexScreenerTokenProfile):
    """Boosted token from the /token-boosts endpoints."""

    amount: Number
    totalAmount: Number


class DexScreenerOrder(RemoteModel):
    """Paid order for a token."""

    type: str = Field(description="Type of the order")
    status: str = Field(description="Status of the order")
    paymentTimestamp: Number = Field(description="Timestamp of the payment")


class DexScreenerTokenInfo(RemoteModel):
    """Base or quote token of a pair."""

    address: str = Field(description="Token address")
    name: str = Field(description="Token name")
    symbol: str = Field(description="Token symbol")


class DexScreenerTxnCounts(RemoteModel):
    """Buy/sell counts over one time window."""

    buys: Number = Field(description="Number of buy transactions")
    sells: Number = Field(description="Number of sell transactions")


class DexScreenerLiquidity(RemoteModel):
    usd: Number = Field(description="Liquidity in USD")
    base: Number = Field(description="Base token liquidity")
    quote: Number = Field(description="Quote token liquidity")


class DexScreenerWebsite(RemoteModel):
    url: HttpUrlString = Field(description="Website URL")


class DexScreenerSocial(RemoteModel):
    platform: str = Field(description="Social media platform")
    handle: str = Field(description="Social media handle")


class DexScreenerPairInfo(RemoteModel):
    imageUrl: Optional[HttpUrlString] = Field(default=None, description="Token image URL")
    websites: List[DexScreenerWebsite] = Field(description="Associated websites")
    socials: List[DexScreenerSocial] = Field(description="Social media links")


class DexScreenerBoosts(RemoteModel):
    active: Number = Field(description="Number of active boosts")


class DexScreenerPair(RemoteModel):
    """Trading pair with market data."""

    chainId: str = Field(description="Chain ID")
    dexId: str = Field(description="DEX identifier")
    url: HttpUrlString = Field(description="Pair URL")
    pairAddress: str = Field(description="Pair contract address")
    labels: List[str] = Field(description="Labels associated with the pair")
    baseToken: DexScreenerTokenInfo = Field(description="Base token information")
    quoteToken: DexScreenerTokenInfo = Field(description="Quote token information")
    priceNative: DecimalString = Field(description="Price in native token")
    priceUsd: DecimalString = Field(description="Price in USD")
    txns: Dict[str, DexScreenerTxnCounts] = Field(description="Transactions per time window")
    volume: Dict[str, Number] = Field(description="Volume per time window")
    priceChange: Dict[str, Number] = Field(description="Price change per time window")
    liquidity: DexScreenerLiquidity = Field(description="Liquidity information")
    fdv: Number = Field(description="Fully diluted valuation")
    marketCap: Number = Field(description="Market capitalization")
    pairCreatedAt: Number = Field(description="Pair creation timestamp")
    info: DexScreenerPairInfo = Field(description="Additional pair information")
    boosts: DexScreenerBoosts = Field(description="Boost information")


# ---------------------------------------------------------------------------
# Action inputs and outputs
# ---------------------------------------------------------------------------

class GetLatestTokenProfilesInput(EmptyInput):
    """No input parameters required."""


class GetLatestTokenProfilesOutput(RootModel[List[DexScreenerTokenProfile]]):
    """Array of latest token profiles."""


class GetLatestTokenBoostsInput(EmptyInput):
    """No input parameters required."""


class GetLatestTokenBoostsOutput(RootModel[List[DexScreenerTokenBoost]]):
    """Array of latest token boosts."""


class GetTopTokenBoostsInput(EmptyInput):
    """No input parameters required."""


class GetTopTokenBoostsOutput(RootModel[List[DexScreenerTokenBoost]]):
    """Array of tokens with most active boosts."""


class CheckTokenOrdersInput(ActionInput):
    chainId: str = Field(min_length=1, description="Chain ID of the token (e.g., 'solana')")
    tokenAddress: str = Field(min_length=1, description="Token address to check orders for")


class CheckTokenOrdersOutput(RootModel[List[DexScreenerOrder]]):
    """Array of orders for the token."""


class GetPairDetailsInput(ActionInput):
    chainId: str = Field(min_length=1, description="Chain ID of the pair (e.g., 'solana')")
    pairId: str = Field(
        min_length=1,
        description="Pair address to get details for; several may be given comma-separated",
    )

    @field_validator("pairId")
    @classmethod
    def validate_pair_ids(cls, v: str) -> str:
        """Normalise a comma-separated address list."""
        pair_ids = [pair_id.strip() for pair_id in v.split(",") if pair_id.strip()]
        if not pair_ids:
            raise ValueError("pairId must contain at least one pair address")
        return ",".join(pair_ids)

    @property
    def pair_ids(self) -> List[str]:
        return self.pairId.split(",")


class GetPairDetailsOutput(RemoteModel):
    schemaVersion: str = Field(description="Schema version")
    pairs: List[DexScreenerPair] = Field(description="Array of pair details")
