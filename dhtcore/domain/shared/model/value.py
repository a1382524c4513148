from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel, field_validator

T = TypeVar("T")


def _require_utf8(v: Any) -> Any:
    # Lone surrogates pass str validation but cannot be serialized.
    if isinstance(v, str):
        try:
            v.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("string is not encodable as UTF-8") from None
    return v


class ValueObject(BaseModel):
    """Immutable value with structural equality and a field-wise hash."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("*", mode="after")
    @classmethod
    def _utf8_only(cls, v: Any) -> Any:
        return _require_utf8(v)


class RootValueObject(RootModel[T], Generic[T]):
    model_config = ConfigDict(frozen=True)

    @field_validator("root", mode="after")
    @classmethod
    def _utf8_only(cls, v: Any) -> Any:
        return _require_utf8(v)
