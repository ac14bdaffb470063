"""Log-level decoder on top of an `EventRegistry`.

This module translates raw logs (hex topics + data) into `ParsedEvent`
objects: the schema is selected by topic0 and the values are decoded by
`abilog.decoding.event.decode`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from abilog.core.config import DecodeConfig
from abilog.core.models import EventLog, EventSchema, Token
from abilog.decoding.event import decode
from abilog.decoding.registry import EventRegistry
from abilog.decoding.utils import hex_to_bytes, topics_to_bytes

logger = logging.getLogger(__name__)

# ---------- parsed event ----------


@dataclass(slots=True)
class ParsedEvent:
    """Decoded event: its schema and one token per declared input."""

    name: str
    schema: EventSchema
    tokens: list[Token]

    @property
    def values(self) -> dict[str, Any]:
        """Decoded values keyed by param name (`arg{i}` for unnamed params)."""
        return {
            (p.name or f"arg{i}"): t.value
            for i, (p, t) in enumerate(zip(self.schema.inputs, self.tokens))
        }


# ---------- main decoder ----------


def decode_event(
    *,
    topics: Sequence[str | bytes],
    data: str | bytes,
    registry: EventRegistry,
    config: DecodeConfig | None = None,
) -> ParsedEvent | None:
    """Decode raw log (topics + data) into a `ParsedEvent`.

    Returns None when there is no topic0 or it is not in the registry.
    Logs whose topic0 is registered but which do not decode raise.
    """
    if not topics:
        return None
    topic_bytes = topics_to_bytes(topics)
    topic0 = "0x" + topic_bytes[0].hex()
    schema = registry.get(topic0)
    if schema is None:
        logger.debug("no schema registered for topic0 %s", topic0)
        return None

    tokens = decode(schema, topic_bytes, hex_to_bytes(data), config=config)
    return ParsedEvent(name=schema.name, schema=schema, tokens=tokens)


def decode_event_log(
    log: EventLog, registry: EventRegistry, *, config: DecodeConfig | None = None
) -> ParsedEvent | None:
    """Decode an `EventLog`; see `decode_event`."""
    return decode_event(topics=log.topics, data=log.data_hex, registry=registry, config=config)
