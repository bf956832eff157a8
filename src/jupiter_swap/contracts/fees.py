"""Priority fee settings for transaction building.

Both fee fields accept several JSON shapes. Decoding tries the shapes in a
fixed order and the first match wins, so the order of the matcher tuples
below is part of the wire contract. Encoding always writes the canonical
shape of the in-memory value.

In memory a fee setting is one of:

- ``AUTO`` / ``DISABLED``: the literal strings ``"auto"`` / ``"disabled"``
- an ``int``: an explicit lamport (or micro-lamport) amount
- ``AutoMultiplier``, ``JitoTipLamports``, ``PriorityLevelWithMaxLamports``
"""

import logging
from enum import Enum
from typing import Annotated, Any, Callable, Literal, Union

from pydantic import (
    ConfigDict,
    Field,
    PlainSerializer,
    PlainValidator,
    ValidationError,
    ValidationInfo,
    model_serializer,
)
from pydantic_core import PydanticCustomError

from jupiter_swap.contracts.base import WIRE_CONTEXT, WireModel, is_wire_input
from jupiter_swap.contracts.fields import U32, U64, U64_MAX

logger = logging.getLogger(__name__)

AUTO = "auto"
DISABLED = "disabled"

_NO_MATCH = object()

Matcher = Callable[[Any, dict], Any]


class PriorityLevel(str, Enum):
    """Priority bucket used when estimating a priority fee."""

    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "veryHigh"


class AutoMultiplier(WireModel):
    """Multiply the automatically estimated priority fee."""

    model_config = ConfigDict(extra="forbid")

    auto_multiplier: U32

    @model_serializer
    def serialize_wire(self) -> dict[str, Any]:
        return {"autoMultiplier": self.auto_multiplier}


class JitoTipLamports(WireModel):
    """Pay the priority fee as a Jito tip."""

    model_config = ConfigDict(extra="forbid")

    jito_tip_lamports: U64

    @model_serializer
    def serialize_wire(self) -> dict[str, Any]:
        return {"jitoTipLamports": self.jito_tip_lamports}


class PriorityLevelWithMaxLamports(WireModel):
    """Estimate the fee for a priority level, capped at ``max_lamports``.

    ``global_`` selects the global fee market instead of the local one
    for the accounts touched by the swap.
    """

    priority_level: PriorityLevel
    max_lamports: U64
    global_: bool = Field(default=False, alias="global")

    @model_serializer
    def serialize_wire(self) -> dict[str, Any]:
        return {
            "priorityLevelWithMaxLamports": {
                "priorityLevel": self.priority_level.value,
                "maxLamports": self.max_lamports,
                "global": self.global_,
            }
        }


def _match_literal(literal: str) -> Matcher:
    def matcher(value: Any, context: dict) -> Any:
        if isinstance(value, str) and value == literal:
            return literal
        return _NO_MATCH

    return matcher


def _match_u64(value: Any, context: dict) -> Any:
    if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= U64_MAX:
        return value
    return _NO_MATCH


def _match_single_key(key: str, model: type[WireModel]) -> Matcher:
    """Match ``{key: <payload>}`` objects validated by ``model``."""

    def matcher(value: Any, context: dict) -> Any:
        if isinstance(value, model):
            return value
        if not isinstance(value, dict) or list(value) != [key]:
            return _NO_MATCH
        try:
            return model.model_validate(value, context=context)
        except ValidationError:
            return _NO_MATCH

    return matcher


def _match_priority_level_with_max_lamports(value: Any, context: dict) -> Any:
    if isinstance(value, PriorityLevelWithMaxLamports):
        return value
    if not isinstance(value, dict) or list(value) != ["priorityLevelWithMaxLamports"]:
        return _NO_MATCH
    inner = value["priorityLevelWithMaxLamports"]
    if not isinstance(inner, dict):
        return _NO_MATCH
    try:
        return PriorityLevelWithMaxLamports.model_validate(inner, context=context)
    except ValidationError:
        return _NO_MATCH


COMPUTE_UNIT_PRICE_MATCHERS: tuple[Matcher, ...] = (
    _match_u64,
    _match_literal(AUTO),
)

PRIORITIZATION_FEE_MATCHERS: tuple[Matcher, ...] = (
    _match_single_key("autoMultiplier", AutoMultiplier),
    _match_single_key("jitoTipLamports", JitoTipLamports),
    _match_priority_level_with_max_lamports,
    _match_literal(AUTO),
    _match_u64,
    _match_literal(DISABLED),
)


def _first_match(
    matchers: tuple[Matcher, ...],
    value: Any,
    info: ValidationInfo,
    error_type: str,
    description: str,
) -> Any:
    context = {WIRE_CONTEXT: is_wire_input(info)}
    for matcher in matchers:
        result = matcher(value, context)
        if result is not _NO_MATCH:
            return result

    logger.debug(f"Rejected {description} payload: {value!r}")
    raise PydanticCustomError(
        error_type,
        "unrecognized {description} representation: {value}",
        {"description": description, "value": repr(value)},
    )


def parse_compute_unit_price(value: Any, info: ValidationInfo) -> Any:
    """Decode a compute unit price: a bare integer, then ``"auto"``."""
    return _first_match(
        COMPUTE_UNIT_PRICE_MATCHERS, value, info, "compute_unit_price_shape", "compute unit price"
    )


def parse_prioritization_fee(value: Any, info: ValidationInfo) -> Any:
    """Decode a prioritization fee using ``PRIORITIZATION_FEE_MATCHERS`` order."""
    return _first_match(
        PRIORITIZATION_FEE_MATCHERS, value, info, "prioritization_fee_shape", "prioritization fee"
    )


def dump_prioritization_fee(value: Any) -> Any:
    if isinstance(value, WireModel):
        return value.to_wire()
    return value


ComputeUnitPriceMicroLamports = Annotated[
    Union[int, Literal["auto"]],
    PlainValidator(parse_compute_unit_price),
]

PrioritizationFeeLamports = Annotated[
    Union[
        AutoMultiplier,
        JitoTipLamports,
        PriorityLevelWithMaxLamports,
        Literal["auto"],
        int,
        Literal["disabled"],
    ],
    PlainValidator(parse_prioritization_fee),
    PlainSerializer(dump_prioritization_fee),
]

DEFAULT_PRIORITIZATION_FEE = AUTO
