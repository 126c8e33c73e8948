"""Parameter kinds: the closed set of value shapes a parameter or output may take.

A kind travels on the wire either as a bare tag string (``"Uint32"``) or,
for the enumerated kind, as ``{"Enum": ["A", "B"]}``.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_serializer, model_validator


class KindTag(str, Enum):
    """Tag of a ParameterKind. Values are the wire spelling."""

    BOOL = "Bool"
    UINT8 = "Uint8"
    UINT16 = "Uint16"
    UINT32 = "Uint32"
    UINT64 = "Uint64"
    INT8 = "Int8"
    INT16 = "Int16"
    INT32 = "Int32"
    INT64 = "Int64"
    FLOAT = "Float"
    DOUBLE = "Double"
    STRING = "String"
    ENUM = "Enum"


UNSIGNED_TAGS = frozenset({KindTag.UINT8, KindTag.UINT16, KindTag.UINT32, KindTag.UINT64})
SIGNED_TAGS = frozenset({KindTag.INT8, KindTag.INT16, KindTag.INT32, KindTag.INT64})
FLOATING_TAGS = frozenset({KindTag.FLOAT, KindTag.DOUBLE})


class ParameterKind(BaseModel):
    """A scalar kind, or an Enum kind carrying its ordered allowed values.

    Two kinds are equal only if their tags match and, for Enum, their
    allowed-value sequences match element by element.
    """

    model_config = ConfigDict(frozen=True)

    tag: KindTag
    allowed: tuple[str, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _from_wire(cls, data: Any) -> Any:
        if isinstance(data, str):
            if data == KindTag.ENUM.value:
                raise ValueError("Enum kind needs its allowed values: {\"Enum\": [...]}")
            return {"tag": data}
        if isinstance(data, dict) and "tag" not in data:
            if set(data) != {KindTag.ENUM.value}:
                raise ValueError(f"unknown parameter kind encoding: {data!r}")
            values = data[KindTag.ENUM.value]
            if not isinstance(values, (list, tuple)):
                raise ValueError("Enum allowed values must be a list of strings")
            return {"tag": KindTag.ENUM, "allowed": values}
        return data

    @model_validator(mode="after")
    def _check_payload(self) -> "ParameterKind":
        if self.tag is not KindTag.ENUM and self.allowed:
            raise ValueError(f"{self.tag.value} kind cannot carry allowed values")
        return self

    @model_serializer
    def _to_wire(self) -> str | dict[str, list[str]]:
        if self.tag is KindTag.ENUM:
            return {KindTag.ENUM.value: list(self.allowed)}
        return self.tag.value

    @classmethod
    def enum(cls, *allowed: str) -> "ParameterKind":
        """Build an Enum kind from its allowed values, in order."""
        return cls(tag=KindTag.ENUM, allowed=allowed)

    @property
    def is_enum(self) -> bool:
        return self.tag is KindTag.ENUM

    @property
    def is_unsigned(self) -> bool:
        return self.tag in UNSIGNED_TAGS

    @property
    def is_signed(self) -> bool:
        return self.tag in SIGNED_TAGS

    @property
    def is_numeric(self) -> bool:
        return self.tag in UNSIGNED_TAGS | SIGNED_TAGS | FLOATING_TAGS

    def __str__(self) -> str:
        if self.is_enum:
            return f"Enum({', '.join(self.allowed)})"
        return self.tag.value


BOOL = ParameterKind(tag=KindTag.BOOL)
UINT8 = ParameterKind(tag=KindTag.UINT8)
UINT16 = ParameterKind(tag=KindTag.UINT16)
UINT32 = ParameterKind(tag=KindTag.UINT32)
UINT64 = ParameterKind(tag=KindTag.UINT64)
INT8 = ParameterKind(tag=KindTag.INT8)
INT16 = ParameterKind(tag=KindTag.INT16)
INT32 = ParameterKind(tag=KindTag.INT32)
INT64 = ParameterKind(tag=KindTag.INT64)
FLOAT = ParameterKind(tag=KindTag.FLOAT)
DOUBLE = ParameterKind(tag=KindTag.DOUBLE)
STRING = ParameterKind(tag=KindTag.STRING)
