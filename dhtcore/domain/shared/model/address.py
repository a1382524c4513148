"""Content addresses."""

import hashlib
from typing import NewType

from pydantic import field_validator

from dhtcore.domain.shared.model.value import RootValueObject

# Canonical serialized form of a value (JSON text).
Content = NewType("Content", str)


class Address(RootValueObject[str]):
    """
    Opaque content identifier.
    Examples: the SHA-256 hex digest of an entry's canonical JSON, an agent key.
    """

    @field_validator("root")
    @classmethod
    def _validate(cls, v: str) -> str:
        if not v:
            raise ValueError("invalid Address (must not be empty)")
        if v != v.strip():
            raise ValueError("invalid Address (surrounding whitespace)")
        return v

    @classmethod
    def of(cls, content: str | bytes) -> "Address":
        """Address of the given content: its SHA-256 digest in lowercase hex."""
        if isinstance(content, str):
            content = content.encode("utf-8")
        return cls(hashlib.sha256(content).hexdigest())

    def __str__(self) -> str:
        return self.root

    def __lt__(self, other: "Address") -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self.root < other.root
