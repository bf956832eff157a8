"""Request and response contracts for the Jupiter swap API.

These Pydantic models define the JSON payloads of the quote and swap
endpoints, in camelCase on the wire.
"""

from jupiter_swap.contracts.accounts import (
    KeyedUiAccount,
    UiAccount,
    UiAccountEncoding,
)
from jupiter_swap.contracts.fees import (
    AUTO,
    DEFAULT_PRIORITIZATION_FEE,
    DISABLED,
    AutoMultiplier,
    ComputeUnitPriceMicroLamports,
    JitoTipLamports,
    PrioritizationFeeLamports,
    PriorityLevel,
    PriorityLevelWithMaxLamports,
)
from jupiter_swap.contracts.fields import PubkeyString, U64String
from jupiter_swap.contracts.quotes import (
    ComputeUnitScore,
    InternalQuoteRequest,
    PlatformFee,
    QuoteRequest,
    QuoteResponse,
    RoutePlanStep,
    SwapInfo,
    SwapMode,
)
from jupiter_swap.contracts.transactions import (
    DynamicSlippageSettings,
    SwapRequest,
    TransactionConfig,
)

__all__ = [
    # Field codecs
    "PubkeyString",
    "U64String",
    # Quote contracts
    "SwapMode",
    "SwapInfo",
    "RoutePlanStep",
    "ComputeUnitScore",
    "QuoteRequest",
    "InternalQuoteRequest",
    "PlatformFee",
    "QuoteResponse",
    # Fee settings
    "AUTO",
    "DISABLED",
    "DEFAULT_PRIORITIZATION_FEE",
    "ComputeUnitPriceMicroLamports",
    "PriorityLevel",
    "PrioritizationFeeLamports",
    "AutoMultiplier",
    "JitoTipLamports",
    "PriorityLevelWithMaxLamports",
    # Account contracts
    "UiAccount",
    "UiAccountEncoding",
    "KeyedUiAccount",
    # Transaction contracts
    "DynamicSlippageSettings",
    "TransactionConfig",
    "SwapRequest",
]
