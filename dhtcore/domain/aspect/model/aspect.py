"""Entry aspects: the facts a DHT node holds and gossips about one entry.

An aspect always pairs a payload with the chain header that gives it
provenance. Aspects for the same entry are collected by address, so
``entry_address`` must resolve to the address the aspect was constructed
for (see ``dhtcore.domain.aspect.service.construct.aspect_for_entry``).

Equality is structural over every field. Hashing only covers the header and
the type hint, so unequal aspects of the same kind sharing a header collide;
``a == b`` still implies ``hash(a) == hash(b)``.
"""

from typing import Annotated, Literal, Union, assert_never

from pydantic import Field, TypeAdapter

from dhtcore.domain.chain.model.header import ChainHeader
from dhtcore.domain.entry.model.entry import Entry
from dhtcore.domain.link.model.link import LinkData
from dhtcore.domain.shared.error import AddressResolutionError
from dhtcore.domain.shared.model.address import Address, Content
from dhtcore.domain.shared.model.value import ValueObject

TypeHint = Literal["content", "header", "link_add", "link_remove", "update", "deletion"]


class _AspectBase(ValueObject):
    type: str
    header: ChainHeader

    def type_hint(self) -> TypeHint:
        return type_hint(self)  # type: ignore[arg-type]

    def entry_address(self) -> Address:
        """Address of the entry this aspect is about."""
        return entry_address(self)  # type: ignore[arg-type]

    def content(self) -> Content:
        """Canonical serialized form."""
        return Content(self.model_dump_json())

    def address(self) -> Address:
        """Content address of the aspect itself."""
        return Address.of(self.content())

    def __hash__(self) -> int:
        return hash((self.header, self.type_hint()))

    def __repr__(self) -> str:
        return render(self)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return render(self)  # type: ignore[arg-type]


class ContentAspect(_AspectBase):
    """The entry itself with the header it was committed under."""

    type: Literal["content"] = "content"
    entry: Entry


class HeaderAspect(_AspectBase):
    """A header on its own.

    Nothing produces this yet; it is meant for remembering that an entry
    existed after its content has been dropped.
    """

    type: Literal["header"] = "header"


class LinkAddAspect(_AspectBase):
    """A link added to the entry at ``link_data.link.base``.

    Wrapping ``link_data`` in a ``LinkAddEntry`` yields the entry ``header``
    was committed for.
    """

    type: Literal["link_add"] = "link_add"
    link_data: LinkData


class LinkRemoveAspect(_AspectBase):
    """A link removed from the entry at ``link_data.link.base``.

    ``removed`` holds the addresses of the link entries being removed.
    """

    type: Literal["link_remove"] = "link_remove"
    link_data: LinkData
    removed: tuple[Address, ...] = ()


class UpdateAspect(_AspectBase):
    """The new version of an entry with that version's header.

    The header's supersede reference points at the entry being updated.
    """

    type: Literal["update"] = "update"
    entry: Entry


class DeletionAspect(_AspectBase):
    """The header of a deletion; its supersede reference is the deleted entry."""

    type: Literal["deletion"] = "deletion"


EntryAspect = Annotated[
    Union[
        ContentAspect,
        HeaderAspect,
        LinkAddAspect,
        LinkRemoveAspect,
        UpdateAspect,
        DeletionAspect,
    ],
    Field(discriminator="type"),
]

ENTRY_ASPECT_ADAPTER: TypeAdapter[EntryAspect] = TypeAdapter(EntryAspect)


def type_hint(aspect: EntryAspect) -> TypeHint:
    match aspect:
        case ContentAspect():
            return "content"
        case HeaderAspect():
            return "header"
        case LinkAddAspect():
            return "link_add"
        case LinkRemoveAspect():
            return "link_remove"
        case UpdateAspect():
            return "update"
        case DeletionAspect():
            return "deletion"
        case _:
            assert_never(aspect)


def header(aspect: EntryAspect) -> ChainHeader:
    """The header the aspect was built with (the same object, not a copy)."""
    return aspect.header


def entry_address(aspect: EntryAspect) -> Address:
    """Resolve the address of the entry an aspect is about.

    Raises:
        AddressResolutionError: If an Update or Deletion header carries no
            supersede reference.
    """
    match aspect:
        case ContentAspect(header=header):
            return header.entry_address
        case LinkAddAspect(link_data=link_data) | LinkRemoveAspect(link_data=link_data):
            return link_data.link.base
        case UpdateAspect(header=header) | DeletionAspect(header=header):
            reference = header.supersede_reference()
            if reference is None:
                raise AddressResolutionError(
                    f"no link_update_delete on {type_hint(aspect)} entry header. "
                    f"Header: {header!r}",
                    header=header,
                )
            return reference
        case HeaderAspect(header=header):
            return header.address()
        case _:
            assert_never(aspect)


def render(aspect: EntryAspect) -> str:
    """Human-readable one-line summary for logs."""
    match aspect:
        case ContentAspect(entry=entry, header=header):
            return f"EntryAspect::Content({entry.address()}, {header.summary()})"
        case HeaderAspect(header=header):
            return f"EntryAspect::Header({header.summary()})"
        case LinkAddAspect(link_data=link_data, header=header):
            return f"EntryAspect::LinkAdd({_render_link(link_data)}, {header.summary()})"
        case LinkRemoveAspect(link_data=link_data, header=header):
            return (
                f"EntryAspect::LinkRemove({_render_link(link_data)}, "
                f"top_chain_header:{link_data.top_chain_header.summary()}, "
                f"remove_header: {header.summary()})"
            )
        case UpdateAspect(entry=entry, header=header):
            return f"EntryAspect::Update({entry.address()}, {header.summary()})"
        case DeletionAspect(header=header):
            return f"EntryAspect::Deletion({header.summary()})"
        case _:
            assert_never(aspect)


def _render_link(link_data: LinkData) -> str:
    link = link_data.link
    return f"{link.base} -> {link.target} [tag: {link.tag}, type: {link.link_type}]"
