"""Quote request and response contracts."""

import logging
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer

from jupiter_swap.contracts.base import WireModel
from jupiter_swap.contracts.fields import (
    U8,
    U16,
    U32,
    U64,
    FixedPointDecimal,
    PubkeyString,
    U64String,
)

logger = logging.getLogger(__name__)


class SwapMode(str, Enum):
    """Whether ``amount`` is the exact input or the exact output."""

    EXACT_IN = "ExactIn"
    EXACT_OUT = "ExactOut"


class SwapInfo(WireModel):
    """Swap information of a single hop in the route."""

    amm_key: PubkeyString
    label: str
    input_mint: PubkeyString
    output_mint: PubkeyString
    in_amount: U64String = Field(..., description="Estimated input amount into the AMM")
    out_amount: U64String = Field(..., description="Estimated output amount from the AMM")
    fee_amount: U64String
    fee_mint: PubkeyString


class RoutePlanStep(WireModel):
    """One hop of the route plan and the share of the amount it carries."""

    swap_info: SwapInfo
    percent: U8
    bps: Optional[U16] = None

    @model_serializer(mode="wrap")
    def omit_missing_bps(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        if self.bps is None:
            data.pop("bps", None)
        return data


class ComputeUnitScore(BaseModel):
    """Route scoring by compute units. Sent with snake_case keys."""

    model_config = ConfigDict(frozen=True)

    max_penalty_bps: Optional[float] = None


class InternalQuoteRequest(WireModel):
    """Quote request as sent to the quote endpoint.

    Same as ``QuoteRequest`` without the fields that are sent separately
    or not at all; ``QuoteRequest.quote_args`` travels as sibling query
    parameters.
    """

    input_mint: PubkeyString
    output_mint: PubkeyString
    amount: U64String = Field(..., description="Amount to swap, in the token's smallest unit")
    swap_mode: Optional[SwapMode] = Field(
        None,
        description="ExactIn by default. With ExactOut the slippage applies to the input token",
    )
    slippage_bps: U16 = Field(..., description="Allowed slippage in basis points")
    auto_slippage: Optional[bool] = Field(
        None, description="Ask the API to suggest a slippage in slippageBps"
    )
    max_auto_slippage_bps: Optional[U16] = Field(
        None, description="Upper bound for the suggested slippage"
    )
    compute_auto_slippage: bool
    auto_slippage_collision_usd_value: Optional[U32] = Field(
        None, description="Max USD value accepted for auto slippage"
    )
    minimize_slippage: Optional[bool] = Field(
        None, description="Quote a larger amount to find the route that minimizes slippage"
    )
    platform_fee_bps: Optional[U8] = None
    dexes: Optional[str] = Field(None, description="Comma delimited list of dex labels to use")
    excluded_dexes: Optional[str] = Field(
        None, description="Comma delimited list of dex labels to skip"
    )
    only_direct_routes: Optional[bool] = None
    as_legacy_transaction: Optional[bool] = Field(
        None, description="Only return routes that fit in a legacy transaction"
    )
    restrict_intermediate_tokens: Optional[bool] = Field(
        None, description="Restrict intermediate tokens to a set with stable liquidity"
    )
    max_accounts: Optional[U64] = Field(
        None,
        description="Rough cap on accounts used by the route; may limit routing and worsen price",
    )
    quote_type: Optional[str] = Field(None, description="Routing algorithm selector")
    prefer_liquid_dexes: Optional[bool] = Field(
        None, description="Only use fully liquid markets as intermediate tokens"
    )

    def to_query_params(self) -> dict[str, str]:
        """Encode as quote endpoint query parameters, skipping unset fields."""
        params = {}
        for key, value in self.model_dump(mode="json", by_alias=True, exclude_none=True).items():
            if isinstance(value, bool):
                params[key] = "true" if value else "false"
            else:
                params[key] = str(value)
        return params


class QuoteRequest(InternalQuoteRequest):
    """Quote request as built by callers."""

    quote_args: Optional[dict[str, str]] = Field(
        None, description="Quote type specific arguments, sent as extra query parameters"
    )
    compute_unit_score: Optional[ComputeUnitScore] = None
    routing_constraints: Optional[str] = None
    token_category_based_intermediate_tokens: Optional[bool] = None

    def to_internal(self) -> InternalQuoteRequest:
        """Drop the fields that are not part of the quote endpoint payload."""
        return InternalQuoteRequest.model_construct(
            **{name: getattr(self, name) for name in InternalQuoteRequest.model_fields}
        )

    def to_query_params(self) -> dict[str, str]:
        """Encode the internal request, then add ``quote_args`` as extra parameters.

        A ``quote_args`` key that matches a request field replaces that
        field's value; the two are not sent as a repeated parameter.
        """
        params = self.to_internal().to_query_params()
        if self.quote_args:
            overridden = sorted(params.keys() & self.quote_args.keys())
            if overridden:
                logger.debug(f"quote_args override query parameters: {overridden}")
            params.update(self.quote_args)
        return params


class PlatformFee(WireModel):
    amount: U64String
    fee_bps: U8


class QuoteResponse(WireModel):
    """Quote computed by the API. Passed back as-is to build the swap."""

    input_mint: PubkeyString
    in_amount: U64String
    output_mint: PubkeyString
    out_amount: U64String
    other_amount_threshold: U64String = Field(..., description="Not used by build transaction")
    swap_mode: SwapMode
    slippage_bps: U16
    computed_auto_slippage: Optional[U16] = None
    uses_quote_minimizing_slippage: Optional[bool] = None
    platform_fee: Optional[PlatformFee] = None
    price_impact_pct: FixedPointDecimal
    route_plan: list[RoutePlanStep]
    context_slot: U64 = 0
    time_taken: float = 0.0

    @model_serializer(mode="wrap")
    def omit_missing_slippage_info(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for name in ("computed_auto_slippage", "uses_quote_minimizing_slippage"):
            if getattr(self, name) is None:
                data.pop(name, None)
                data.pop(type(self).model_fields[name].alias, None)
        return data
