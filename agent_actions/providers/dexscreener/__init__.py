"""DexScreener market-data actions.

- get_latest_token_profiles
- get_latest_token_boosts
- get_top_token_boosts
- check_token_orders
- get_pair_details
"""

from .provider import DexScreenerActionProvider, dexscreener_action_provider
from .schemas import (
    CheckTokenOrdersInput,
    CheckTokenOrdersOutput,
    DexScreenerOrder,
    DexScreenerPair,
    DexScreenerTokenBoost,
    DexScreenerTokenProfile,
    GetLatestTokenBoostsOutput,
    GetLatestTokenProfilesOutput,
    GetPairDetailsInput,
    GetPairDetailsOutput,
    GetTopTokenBoostsOutput,
)

__all__ = [
    "DexScreenerActionProvider",
    "dexscreener_action_provider",
    "CheckTokenOrdersInput",
    "CheckTokenOrdersOutput",
    "DexScreenerOrder",
    "DexScreenerPair",
    "DexScreenerTokenBoost",
    "DexScreenerTokenProfile",
    "GetLatestTokenBoostsOutput",
    "GetLatestTokenProfilesOutput",
    "GetPairDetailsInput",
    "GetPairDetailsOutput",
    "GetTopTokenBoostsOutput",
]
