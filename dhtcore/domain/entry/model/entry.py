"""Entries committed to a source chain.

Only the entry kinds the aspect model distinguishes are modelled here; all
application data is carried by ``AppEntry``.
"""

from typing import Annotated, Literal, Union

from pydantic import Field

from dhtcore.domain.link.model.link import LinkData
from dhtcore.domain.shared.model.address import Address
from dhtcore.domain.shared.model.value import ValueObject

LINK_ADD_ENTRY_TYPE = "%link_add"
LINK_REMOVE_ENTRY_TYPE = "%link_remove"
DELETION_ENTRY_TYPE = "%deletion"


class _EntryBase(ValueObject):
    def address(self) -> Address:
        """Content address of the entry's canonical JSON."""
        return Address.of(self.model_dump_json())


class AppEntry(_EntryBase):
    type: Literal["app"] = "app"
    app_type: str
    value: str  # opaque JSON document

    def entry_type(self) -> str:
        return self.app_type


class LinkAddEntry(_EntryBase):
    type: Literal["link_add"] = "link_add"
    link_data: LinkData

    def entry_type(self) -> str:
        return LINK_ADD_ENTRY_TYPE


class LinkRemoveEntry(_EntryBase):
    type: Literal["link_remove"] = "link_remove"
    link_data: LinkData
    removed: tuple[Address, ...] = ()

    def entry_type(self) -> str:
        return LINK_REMOVE_ENTRY_TYPE


class DeletionEntry(_EntryBase):
    type: Literal["deletion"] = "deletion"
    deleted_entry_address: Address

    def entry_type(self) -> str:
        return DELETION_ENTRY_TYPE


Entry = Annotated[
    Union[
        AppEntry,
        LinkAddEntry,
        LinkRemoveEntry,
        DeletionEntry,
    ],
    Field(discriminator="type"),
]
