"""Field codecs shared by the wire contracts.

Account keys and token amounts travel as strings. Amounts are u64 and
routinely exceed 2**53, so they are never sent as JSON numbers.
"""

import re
from decimal import Decimal
from typing import Annotated, Any

from pydantic import Field, PlainSerializer, PlainValidator, StrictInt, ValidationInfo
from pydantic_core import PydanticCustomError
from solders.pubkey import Pubkey

U8_MAX = 2**8 - 1
U16_MAX = 2**16 - 1
U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1

_DECIMAL_DIGITS = re.compile(r"\+?[0-9]+")
_U64_MAX_DIGITS = len(str(U64_MAX))


def parse_pubkey(value: Any, info: ValidationInfo) -> Pubkey:
    """Parse a base58 account key.

    JSON input must be a string. Python callers may also pass a Pubkey.
    """
    if isinstance(value, Pubkey) and info.mode == "python":
        return value
    if not isinstance(value, str):
        raise PydanticCustomError(
            "pubkey_parsing",
            "expected a base58 account key string, got {kind}",
            {"kind": type(value).__name__},
        )
    try:
        return Pubkey.from_string(value)
    except ValueError as e:
        raise PydanticCustomError(
            "pubkey_parsing",
            "invalid account key {value}: {reason}",
            {"value": value, "reason": str(e)},
        ) from e


def parse_u64_string(value: Any, info: ValidationInfo) -> int:
    """Parse a u64 sent as its decimal string form.

    JSON input must be a string. Python callers may also pass an int.
    """
    if isinstance(value, int) and not isinstance(value, bool) and info.mode == "python":
        amount = value
    elif isinstance(value, str) and _DECIMAL_DIGITS.fullmatch(value):
        digits = value.lstrip("+").lstrip("0") or "0"
        if len(digits) > _U64_MAX_DIGITS:
            raise PydanticCustomError(
                "u64_parsing",
                "{length} digit value is out of range for u64",
                {"length": len(digits)},
            )
        amount = int(digits)
    else:
        raise PydanticCustomError(
            "u64_parsing",
            "expected a decimal u64 string, got {value}",
            {"value": repr(value)},
        )

    if amount < 0 or amount > U64_MAX:
        raise PydanticCustomError(
            "u64_parsing",
            "{value} is out of range for u64",
            {"value": amount},
        )
    return amount


PubkeyString = Annotated[
    Pubkey,
    PlainValidator(parse_pubkey),
    PlainSerializer(str, return_type=str, when_used="json"),
]

U64String = Annotated[
    int,
    PlainValidator(parse_u64_string),
    PlainSerializer(str, return_type=str, when_used="json"),
]

# str() of a Decimal switches to exponent notation below 1e-6; keep fixed-point.
FixedPointDecimal = Annotated[
    Decimal,
    PlainSerializer(lambda value: format(value, "f"), return_type=str, when_used="json"),
]

# Plain JSON numbers. Strict so that "50" is not silently accepted for 50.
U8 = Annotated[StrictInt, Field(ge=0, le=U8_MAX)]
U16 = Annotated[StrictInt, Field(ge=0, le=U16_MAX)]
U32 = Annotated[StrictInt, Field(ge=0, le=U32_MAX)]
U64 = Annotated[StrictInt, Field(ge=0, le=U64_MAX)]
