"""Event log decoding.

This package provides:
- The schema-driven decoder (`decode`, `signature_hash`, `topic_param_type`)
- The generic value codec over `eth_abi`
- Registry management keyed by topic0
- Schema builders from human-readable signatures
- A log-level decoder returning ParsedEvent objects
"""

from abilog.decoding.decoder import ParsedEvent, decode_event, decode_event_log
from abilog.decoding.event import decode, signature_hash, topic_param_type
from abilog.decoding.registry import EventRegistry, add_event_schema, add_many, topic0_of
from abilog.decoding.registry_builder import event_schema_from_signature, make_registry

__all__ = [
    "ParsedEvent",
    "decode_event",
    "decode_event_log",
    "decode",
    "signature_hash",
    "topic_param_type",
    "EventRegistry",
    "add_event_schema",
    "add_many",
    "topic0_of",
    "event_schema_from_signature",
    "make_registry",
]
