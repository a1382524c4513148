"""Chain headers: the provenance record committed alongside every entry."""

from dhtcore.domain.shared.model.address import Address
from dhtcore.domain.shared.model.value import ValueObject


class Provenance(ValueObject):
    """An agent's signature over an entry address."""

    source: Address
    signature: str


class ChainHeader(ValueObject):
    """Header of a source-chain entry.

    Attributes:
        entry_type: Type tag of the entry this header is for.
        entry_address: Address of the entry this header is for.
        provenances: Signatures of the agents that authored the entry.
        link: Address of the previous header in the chain.
        link_same_type: Address of the previous header of the same entry type.
        link_update_delete: Address of the entry this header's entry updates
            or deletes, if any.
        timestamp: ISO-8601 commit time.
    """

    entry_type: str
    entry_address: Address
    provenances: tuple[Provenance, ...] = ()
    link: Address | None = None
    link_same_type: Address | None = None
    link_update_delete: Address | None = None
    timestamp: str = ""

    def supersede_reference(self) -> Address | None:
        """Address of the entry superseded or deleted by this header's entry."""
        return self.link_update_delete

    def address(self) -> Address:
        """Content address of the header itself."""
        return Address.of(self.model_dump_json())

    def summary(self) -> str:
        return f"Header[type: {self.entry_type}, crud_link: {self.link_update_delete}]"
