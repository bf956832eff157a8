"""Account state supplied by the caller when building a swap transaction."""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import Field, SerializerFunctionWrapHandler, model_serializer

from jupiter_swap.contracts.base import WireModel
from jupiter_swap.contracts.fields import U64


class UiAccountEncoding(str, Enum):
    BINARY = "binary"
    BASE58 = "base58"
    BASE64 = "base64"
    JSON_PARSED = "jsonParsed"
    BASE64_ZSTD = "base64+zstd"


class UiAccount(WireModel):
    """Account state as returned by the RPC ``getAccountInfo`` call."""

    lamports: U64
    data: Union[str, tuple[str, UiAccountEncoding], dict[str, Any]] = Field(
        ..., description="Legacy binary string, [data, encoding] pair, or parsed account JSON"
    )
    owner: str
    executable: bool
    rent_epoch: U64
    space: Optional[U64] = None


class KeyedUiAccount(UiAccount):
    """An account keyed by address, with optional AMM parameters.

    The ``UiAccount`` fields sit next to ``pubkey`` and ``params`` in a
    single object, both on the wire and on this model.
    """

    pubkey: str
    params: Optional[Any] = Field(
        None, description="AMM specific parameters, decoded by the AMM implementation"
    )

    @classmethod
    def from_ui_account(
        cls, pubkey: str, ui_account: UiAccount, params: Optional[Any] = None
    ) -> "KeyedUiAccount":
        fields = {name: getattr(ui_account, name) for name in UiAccount.model_fields}
        return cls(pubkey=pubkey, params=params, **fields)

    @property
    def ui_account(self) -> UiAccount:
        return UiAccount.model_construct(
            **{name: getattr(self, name) for name in UiAccount.model_fields}
        )

    @model_serializer(mode="wrap")
    def omit_missing_params(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        if self.params is None:
            data.pop("params", None)
        return data
