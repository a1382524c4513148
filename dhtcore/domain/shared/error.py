"""Error hierarchy for dhtcore.

Error layers:
- DhtError: Base class for all dhtcore errors
- DomainError: Malformed or inconsistent aspect data (never transient)
- InfrastructureError: Environment-level failures such as unreadable settings

Nothing at this layer is retried; errors are surfaced to the caller as-is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dhtcore.domain.chain.model.header import ChainHeader


class DhtError(Exception):
    """Base class for all dhtcore errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (bad input data - deterministic)
# =============================================================================


class DomainError(DhtError):
    """Base class for domain errors."""


class AddressResolutionError(DomainError):
    """An Update or Deletion aspect whose header has no supersede reference."""

    def __init__(self, message: str, header: ChainHeader) -> None:
        super().__init__(message, code="ADDRESS_RESOLUTION_ERROR")
        self.header = header


class DeserializationError(DomainError):
    """Encoded aspect content is malformed or structurally invalid."""

    def __init__(self, message: str, content: str | bytes | None = None) -> None:
        super().__init__(message, code="DESERIALIZATION_ERROR")
        self.content = content


class AspectConstructionError(DomainError):
    """An entry and header pair cannot produce a resolvable aspect."""


# =============================================================================
# Infrastructure Errors (environment failures)
# =============================================================================


class InfrastructureError(DhtError):
    """Base class for infrastructure/system errors."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
