"""Entry aspects and the operations on them."""

from dhtcore.domain.aspect.model.aspect import (
    ContentAspect,
    DeletionAspect,
    EntryAspect,
    HeaderAspect,
    LinkAddAspect,
    LinkRemoveAspect,
    TypeHint,
    UpdateAspect,
    entry_address,
    header,
    render,
    type_hint,
)
from dhtcore.domain.aspect.service.codec import AspectCodec, deserialize, serialize
from dhtcore.domain.aspect.service.construct import aspect_for_entry

__all__ = [
    "AspectCodec",
    "ContentAspect",
    "DeletionAspect",
    "EntryAspect",
    "HeaderAspect",
    "LinkAddAspect",
    "LinkRemoveAspect",
    "TypeHint",
    "UpdateAspect",
    "aspect_for_entry",
    "deserialize",
    "entry_address",
    "header",
    "render",
    "serialize",
    "type_hint",
]
