"""Event registry keyed by topic0.

This module exposes:
- `EventRegistry` → mapping from lowercased 0x-hex topic0 to EventSchema
- `topic0_of(schema)` → the registry key of a schema
- `add_event_schema(registry, schema)` → insert one schema
- `add_many(registry, schemas)` → insert multiple

Anonymous events have no topic0 and cannot be registered; decode them
directly with `EventSchema.decode`.
"""

from __future__ import annotations

from collections.abc import Iterable

from eth_utils import encode_hex

from abilog.core.models import EventSchema
from abilog.decoding.event import signature_hash

# The full registry keyed by topic0 (lowercased 0x-hex).
EventRegistry = dict[str, EventSchema]


def topic0_of(schema: EventSchema) -> str:
    """Return the lowercased 0x-hex topic0 of a non-anonymous event."""
    return encode_hex(signature_hash(schema)).lower()


def add_event_schema(registry: EventRegistry, schema: EventSchema) -> None:
    """Insert one schema into the registry keyed by its topic0."""
    if schema.anonymous:
        raise ValueError(f"Anonymous event {schema.signature} has no topic0")
    registry[topic0_of(schema)] = schema


def add_many(registry: EventRegistry, schemas: Iterable[EventSchema]) -> None:
    """Insert many schemas into the registry."""
    for s in schemas:
        add_event_schema(registry, s)
