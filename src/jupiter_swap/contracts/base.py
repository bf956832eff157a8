"""Base model for camelCase JSON wire contracts."""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, model_validator
from pydantic.alias_generators import to_camel

# Validation context flag marking Python-side data that came off the wire.
WIRE_CONTEXT = "wire"


def is_wire_input(info: ValidationInfo) -> bool:
    """True when validating JSON, or data flagged with ``WIRE_CONTEXT``."""
    return info.mode == "json" or bool((info.context or {}).get(WIRE_CONTEXT))


class WireModel(BaseModel):
    """Immutable model that reads and writes camelCase JSON.

    Snake_case names are accepted when constructing from Python only; on
    the wire they are unknown keys and ignored like any other.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def drop_field_names(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict) or not is_wire_input(info):
            return data
        names = {
            name
            for name, field in cls.model_fields.items()
            if field.alias is not None and field.alias != name
        }
        return {key: value for key, value in data.items() if key not in names}

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON-compatible wire payload."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        """Return the wire payload as a JSON string."""
        return self.model_dump_json(by_alias=True)
