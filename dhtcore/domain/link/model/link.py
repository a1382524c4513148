"""Links between entries and the data committed when adding or removing one."""

from enum import StrEnum

from dhtcore.domain.chain.model.header import ChainHeader
from dhtcore.domain.shared.model.address import Address
from dhtcore.domain.shared.model.value import ValueObject


class LinkAction(StrEnum):
    ADD = "add"
    REMOVE = "remove"


class Link(ValueObject):
    """A typed, tagged edge from a base entry to a target entry."""

    base: Address
    target: Address
    link_type: str
    tag: str = ""


class LinkData(ValueObject):
    """Payload of a link add/remove entry.

    ``top_chain_header`` is the head of the author's source chain at the time
    the link was committed.
    """

    action: LinkAction
    link: Link
    timestamp: str
    agent_id: Address
    top_chain_header: ChainHeader
