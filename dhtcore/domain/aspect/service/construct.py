"""Turning committed entries into the aspects gossiped about them."""

import logging
from typing import assert_never

from dhtcore.domain.aspect.model.aspect import (
    ContentAspect,
    DeletionAspect,
    EntryAspect,
    LinkAddAspect,
    LinkRemoveAspect,
    UpdateAspect,
)
from dhtcore.domain.chain.model.header import ChainHeader
from dhtcore.domain.entry.model.entry import (
    AppEntry,
    DeletionEntry,
    Entry,
    LinkAddEntry,
    LinkRemoveEntry,
)
from dhtcore.domain.shared.error import AspectConstructionError

logger = logging.getLogger(__name__)


def aspect_for_entry(entry: Entry, header: ChainHeader) -> EntryAspect:
    """Build the aspect a node publishes for ``entry`` committed under ``header``.

    This is the inverse of ``EntryAspect.entry_address``: the returned aspect
    resolves to the address it is about (the entry itself, a link base, or the
    superseded/deleted entry).

    Raises:
        AspectConstructionError: If a deletion header does not reference the
            deleted entry.
    """
    match entry:
        case LinkAddEntry(link_data=link_data):
            return LinkAddAspect(link_data=link_data, header=header)
        case LinkRemoveEntry(link_data=link_data, removed=removed):
            return LinkRemoveAspect(link_data=link_data, removed=removed, header=header)
        case DeletionEntry(deleted_entry_address=deleted):
            reference = header.supersede_reference()
            if reference != deleted:
                logger.warning(
                    "Deletion of %s committed under header with crud_link %s", deleted, reference
                )
                raise AspectConstructionError(
                    f"deletion header must reference the deleted entry {deleted}, "
                    f"got {reference}"
                )
            return DeletionAspect(header=header)
        case AppEntry():
            if header.supersede_reference() is not None:
                return UpdateAspect(entry=entry, header=header)
            return ContentAspect(entry=entry, header=header)
        case _:
            assert_never(entry)
