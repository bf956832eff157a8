"""Pytest configuration and fixtures."""

import os

import pytest

# Keep a developer's .env or shell from leaking into the settings tests
for _name in list(os.environ):
    if _name.startswith("JUPITER_"):
        del os.environ[_name]

SOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
RAYDIUM_AMM = "675kPX9MHTjS2zt1qfr1NYHuzeLXfQM9H24wFSUt1Mp8"
TOKEN_PROGRAM = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
USER_WALLET = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"


@pytest.fixture
def sol_mint() -> str:
    """Wrapped SOL mint."""
    return SOL_MINT


@pytest.fixture
def usdc_mint() -> str:
    """USDC mint."""
    return USDC_MINT


@pytest.fixture
def user_wallet() -> str:
    """Wallet signing the swap."""
    return USER_WALLET


@pytest.fixture
def swap_info_payload() -> dict:
    """Wire payload of a single Raydium hop."""
    return {
        "ammKey": RAYDIUM_AMM,
        "label": "Raydium",
        "inputMint": SOL_MINT,
        "outputMint": USDC_MINT,
        "inAmount": "1000000000",
        "outAmount": "150123456",
        "feeAmount": "2500000",
        "feeMint": SOL_MINT,
    }


@pytest.fixture
def quote_response_payload(swap_info_payload) -> dict:
    """Wire payload of a SOL -> USDC quote."""
    return {
        "inputMint": SOL_MINT,
        "inAmount": "1000000000",
        "outputMint": USDC_MINT,
        "outAmount": "150123456",
        "otherAmountThreshold": "149372838",
        "swapMode": "ExactIn",
        "slippageBps": 50,
        "platformFee": None,
        "priceImpactPct": "0.0001",
        "routePlan": [{"swapInfo": swap_info_payload, "percent": 100}],
        "contextSlot": 301234567,
        "timeTaken": 0.012,
    }


@pytest.fixture
def keyed_account_payload() -> dict:
    """Wire payload of a keyed token account without AMM params."""
    return {
        "pubkey": RAYDIUM_AMM,
        "lamports": 2039280,
        "data": ["AQAAAA==", "base64"],
        "owner": TOKEN_PROGRAM,
        "executable": False,
        "rentEpoch": 18446744073709551615,
        "space": 165,
    }
