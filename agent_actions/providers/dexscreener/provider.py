"""DexScreener action provider.

Exposes DexScreener's public market-data API (token profiles, boosts,
orders and pair details). The API is chain-agnostic from the agent's point
of view, so the provider supports every network.
"""

from typing import Optional

import httpx

from ...actions.descriptor import create_action
from ...config import DEFAULT_DEXSCREENER_BASE_URL
from ...network import Network
from ..base import DEFAULT_TIMEOUT, ActionProvider, RemoteRequest, path_segment
from .schemas import (
    CheckTokenOrdersInput,
    CheckTokenOrdersOutput,
    GetLatestTokenBoostsInput,
    GetLatestTokenBoostsOutput,
    GetLatestTokenProfilesInput,
    GetLatestTokenProfilesOutput,
    GetPairDetailsInput,
    GetPairDetailsOutput,
    GetTopTokenBoostsInput,
    GetTopTokenBoostsOutput,
)


class DexScreenerActionProvider(ActionProvider):
    """Action provider for the DexScreener API.

    Usage:
        provider = DexScreenerActionProvider()
        output = await provider.get_actions()[0].invoke({})
    """

    default_base_url = DEFAULT_DEXSCREENER_BASE_URL
    api_label = "DexScreener API"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(
            "dexscreener",
            [],
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

    def supports_network(self, network: Network) -> bool:
        """DexScreener actions don't depend on blockchain networks directly."""
        return True

    @create_action(
        name="get_latest_token_profiles",
        description="""
Get the latest token profiles from DexScreener.
Rate limit: 60 requests per minute

A successful response will return an array of token profiles with details like URL, chain ID, token address, etc.
A failure response will return an error message with the reason for failure.""",
        input_schema=GetLatestTokenProfilesInput,
        output_schema=GetLatestTokenProfilesOutput,
        purpose="get latest token profiles",
    )
    def get_latest_token_profiles(self, params: GetLatestTokenProfilesInput) -> RemoteRequest:
        return RemoteRequest("/token-profiles/latest/v1")

    @create_action(
        name="get_latest_token_boosts",
        description="""
Get the latest boosted tokens from DexScreener.
Rate limit: 60 requests per minute

A successful response will return an array of boosted tokens with details like URL, chain ID, token address, boost amount, etc.
A failure response will return an error message with the reason for failure.""",
        input_schema=GetLatestTokenBoostsInput,
        output_schema=GetLatestTokenBoostsOutput,
        purpose="get latest token boosts",
    )
    def get_latest_token_boosts(self, params: GetLatestTokenBoostsInput) -> RemoteRequest:
        return RemoteRequest("/token-boosts/latest/v1")

    @create_action(
        name="get_top_token_boosts",
        description="""
Get the tokens with most active boosts from DexScreener.
Rate limit: 60 requests per minute

A successful response will return an array of tokens sorted by active boost count.
A failure response will return an error message with the reason for failure.""",
        input_schema=GetTopTokenBoostsInput,
        output_schema=GetTopTokenBoostsOutput,
        purpose="get top token boosts",
    )
    def get_top_token_boosts(self, params: GetTopTokenBoostsInput) -> RemoteRequest:
        return RemoteRequest("/token-boosts/top/v1")

    @create_action(
        name="check_token_orders",
        description="""
Check orders paid for a specific token on DexScreener.
Rate limit: 60 requests per minute

Required parameters:
- chainId: The chain ID of the token (e.g., "solana")
- tokenAddress: The token address to check orders for

A successful response will return an array of orders with their status and payment details.
A failure response will return an error message with the reason for failure.""",
        input_schema=CheckTokenOrdersInput,
        output_schema=CheckTokenOrdersOutput,
        purpose="check token orders",
    )
    def check_token_orders(self, params: CheckTokenOrdersInput) -> RemoteRequest:
        return RemoteRequest(
            f"/orders/v1/{path_segment(params.chainId)}/{path_segment(params.tokenAddress)}"
        )

    @create_action(
        name="get_pair_details",
        description="""
Get detailed information about one or multiple pairs by chain and pair address.
Rate limit: 300 requests per minute

Required parameters:
- chainId: The chain ID of the pair (e.g., "solana")
- pairId: The pair address to get details for (several addresses may be comma-separated)

A successful response will return detailed information about the pair(s) including price, volume, liquidity, etc.
A failure response will return an error message with the reason for failure.""",
        input_schema=GetPairDetailsInput,
        output_schema=GetPairDetailsOutput,
        purpose="get pair details",
    )
    def get_pair_details(self, params: GetPairDetailsInput) -> RemoteRequest:
        pair_ids = ",".join(path_segment(pair_id) for pair_id in params.pair_ids)
        return RemoteRequest(
            f"/latest/dex/pairs/{path_segment(params.chainId)}/{pair_ids}"
        )


def dexscreener_action_provider(
    base_url: Optional[str] = None,
    timeout: float = DEFAULT_TIMEOUT,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> DexScreenerActionProvider:
    """Create a new DexScreenerActionProvider instance."""
    return DexScreenerActionProvider(base_url=base_url, timeout=timeout, transport=transport)
