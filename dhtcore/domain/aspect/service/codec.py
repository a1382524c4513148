"""Wire/storage encoding of entry aspects.

The encoding is the aspect's JSON with fields in declaration order, so equal
aspects always encode to identical text and ``deserialize(serialize(a)) == a``.
"""

import logging
from dataclasses import dataclass, field

from pydantic import ValidationError

from dhtcore.config import CodecConfig
from dhtcore.domain.aspect.model.aspect import ENTRY_ASPECT_ADAPTER, EntryAspect
from dhtcore.domain.shared.error import DeserializationError
from dhtcore.domain.shared.model.address import Content

logger = logging.getLogger(__name__)


def serialize(aspect: EntryAspect, *, indent: int | None = None) -> Content:
    return Content(aspect.model_dump_json(indent=indent))


def deserialize(content: str | bytes) -> EntryAspect:
    """Parse encoded aspect content.

    Raises:
        DeserializationError: If the content is not valid JSON or does not
            describe exactly one known aspect variant.
    """
    try:
        return ENTRY_ASPECT_ADAPTER.validate_json(content)
    except ValidationError as e:
        logger.debug("Rejected malformed aspect content: %s", e)
        raise DeserializationError(
            f"invalid entry aspect content ({e.error_count()} errors): {e.errors()[0]['msg']}",
            content=content,
        ) from e


@dataclass
class AspectCodec:
    """Encodes aspects according to the configured codec settings."""

    config: CodecConfig = field(default_factory=CodecConfig)

    def serialize(self, aspect: EntryAspect) -> Content:
        return serialize(aspect, indent=self.config.indent)

    def deserialize(self, content: str | bytes) -> EntryAspect:
        return deserialize(content)
