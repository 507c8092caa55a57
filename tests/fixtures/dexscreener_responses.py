"""Sample DexScreener API responses for testing.

Shaped after real responses from api.dexscreener.com.
"""

# /token-profiles/latest/v1
TOKEN_PROFILES = [
    {
        "url": "https://dexscreener.com/solana/tok1",
        "chainId": "solana",
        "tokenAddress": "So1anaTokenAddr1",
        "icon": "https://cdn.dexscreener.com/icon1.png",
        "header": None,
        "description": "First token",
        "links": [
            {"type": "twitter", "url": "https://x.com/tok1"},
            {"label": "Website", "url": "https://tok1.io", "rank": 1},
        ],
        "openGraph": "https://cdn.dexscreener.com/og1.png",
    },
    {
        "url": "https://dexscreener.com/base/tok2",
        "chainId": "base",
        "tokenAddress": "0xBaseToken2",
    },
]

# /token-boosts/latest/v1 and /token-boosts/top/v1
TOKEN_BOOSTS = [
    {
        "url": "https://dexscreener.com/solana/tok1",
        "chainId": "solana",
        "tokenAddress": "So1anaTokenAddr1",
        "amount": 10,
        "totalAmount": 510,
        "icon": "https://cdn.dexscreener.com/icon1.png",
        "links": [{"type": "telegram", "url": "https://t.me/tok1"}],
    },
    {
        "url": "https://dexscreener.com/ethereum/tok3",
        "chainId": "ethereum",
        "tokenAddress": "0xEthToken3",
        "amount": 2.5,
        "totalAmount": 7.5,
        "description": None,
    },
]

TOP_BOOST_SINGLE = [
    {"url": "u", "chainId": "solana", "tokenAddress": "T1", "amount": 5, "totalAmount": 10},
]

# /orders/v1/{chainId}/{tokenAddress}
TOKEN_ORDERS = [
    {"type": "tokenProfile", "status": "approved", "paymentTimestamp": 1718000000000},
    {"type": "communityTakeover", "status": "processing", "paymentTimestamp": 1718500000000},
]

# /latest/dex/pairs/{chainId}/{pairId}
PAIR = {
    "chainId": "solana",
    "dexId": "raydium",
    "url": "https://dexscreener.com/solana/pair1",
    "pairAddress": "Pair1Address",
    "labels": ["CLMM"],
    "baseToken": {"address": "So1anaTokenAddr1", "name": "Token One", "symbol": "ONE"},
    "quoteToken": {"address": "So11111111111111111111111111111111111111112", "name": "Wrapped SOL", "symbol": "SOL"},
    "priceNative": "0.000000012345678901",
    "priceUsd": "0.000002123456789012",
    "txns": {
        "m5": {"buys": 3, "sells": 1},
        "h1": {"buys": 40, "sells": 22},
        "h24": {"buys": 1200, "sells": 980},
    },
    "volume": {"m5": 120.5, "h1": 5400, "h24": 250000.75},
    "priceChange": {"m5": 0.4, "h1": -1.25, "h24": 12},
    "liquidity": {"usd": 81234.56, "base": 19000000000, "quote": 245.6},
    "fdv": 2123456,
    "marketCap": 2100000,
    "pairCreatedAt": 1717000000000,
    "info": {
        "imageUrl": "https://cdn.dexscreener.com/pair1.png",
        "websites": [{"url": "https://tok1.io"}],
        "socials": [{"platform": "twitter", "handle": "tok1"}],
    },
    "boosts": {"active": 3},
}

PAIR_DETAILS = {"schemaVersion": "1.0.0", "pairs": [PAIR]}

EMPTY_PAIR_DETAILS = {"schemaVersion": "1.0.0", "pairs": []}
