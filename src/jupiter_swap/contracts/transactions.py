"""Swap transaction building contracts.

``TransactionConfig`` is the policy the API applies when it turns a quote
into a transaction. Every field has a default, so any subset of keys (or
none) is a valid payload.
"""

from typing import Any, Optional

from pydantic import Field

from jupiter_swap.contracts.accounts import KeyedUiAccount
from jupiter_swap.contracts.base import WireModel
from jupiter_swap.contracts.fees import ComputeUnitPriceMicroLamports, PrioritizationFeeLamports
from jupiter_swap.contracts.fields import U8, U16, PubkeyString
from jupiter_swap.contracts.quotes import QuoteResponse


class DynamicSlippageSettings(WireModel):
    min_bps: Optional[U16] = None
    max_bps: Optional[U16] = None


class TransactionConfig(WireModel):
    """Transaction building policy sent alongside a quote."""

    wrap_and_unwrap_sol: bool = Field(
        default=True,
        description=(
            "Wrap and unwrap SOL. Ignored when destination_token_account is set, "
            "since that account may belong to another user"
        ),
    )
    allow_optimized_wrapped_sol_token_account: bool = Field(
        default=False,
        description="Create the WSOL account with seeds instead of an associated token account",
    )
    fee_account: Optional[PubkeyString] = Field(
        default=None,
        description="Referral token account collecting the platform fee for the output mint",
    )
    destination_token_account: Optional[PubkeyString] = Field(
        default=None,
        description="Initialized token account receiving the output; the user's ATA if unset",
    )
    tracking_account: Optional[PubkeyString] = Field(
        default=None, description="Read-only, non-signer account added for tracking"
    )
    compute_unit_price_micro_lamports: Optional[ComputeUnitPriceMicroLamports] = Field(
        default=None,
        description="Extra fee = consumed compute units * computeUnitPriceMicroLamports",
    )
    prioritization_fee_lamports: Optional[PrioritizationFeeLamports] = Field(
        default=None,
        description="Priority fee on top of the signature fee. Exclusive with the compute unit price",
    )
    dynamic_compute_unit_limit: bool = Field(
        default=False,
        description="Simulate the swap to set the compute unit limit. Costs one extra RPC call",
    )
    as_legacy_transaction: bool = Field(
        default=False,
        description="Build a legacy transaction. Pair with a quote made with asLegacyTransaction",
    )
    use_shared_accounts: Optional[bool] = Field(
        default=None,
        description="Use shared program accounts; unset lets the API decide",
    )
    use_token_ledger: bool = Field(
        default=False,
        description="Swap only the difference between the token ledger and the current amount",
    )
    skip_user_accounts_rpc_calls: bool = Field(
        default=False,
        description="Assume user accounts do not exist and emit every setup instruction",
    )
    keyed_ui_accounts: Optional[list[KeyedUiAccount]] = Field(
        default=None,
        description="Accounts for AMMs missing from the market cache",
    )
    program_authority_id: Optional[U8] = None
    dynamic_slippage: Optional[DynamicSlippageSettings] = None
    blockhash_slots_to_expiry: Optional[U8] = Field(
        default=None, description="Slots left before the blockhash expires"
    )
    correct_last_valid_block_height: bool = Field(
        default=False, description="Request the correct last valid block height"
    )


class SwapRequest(TransactionConfig):
    """Request body of the swap endpoints.

    The ``TransactionConfig`` fields sit at the top level next to
    ``userPublicKey`` and ``quoteResponse``.
    """

    user_public_key: PubkeyString
    quote_response: QuoteResponse

    @classmethod
    def from_config(
        cls,
        user_public_key: Any,
        quote_response: QuoteResponse,
        config: Optional[TransactionConfig] = None,
    ) -> "SwapRequest":
        config = config or TransactionConfig()
        fields = {name: getattr(config, name) for name in TransactionConfig.model_fields}
        return cls(user_public_key=user_public_key, quote_response=quote_response, **fields)

    @property
    def config(self) -> TransactionConfig:
        return TransactionConfig.model_construct(
            **{name: getattr(self, name) for name in TransactionConfig.model_fields}
        )
