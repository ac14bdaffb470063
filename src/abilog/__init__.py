from __future__ import annotations

from .core.config import DecodeConfig
from .core.errors import AbiError, DecodeInconsistency, InvalidData, UnsupportedType
from .core.models import EventLog, EventParam, EventSchema, Token
from .core.types import parse_param_type
from .decoding.decoder import ParsedEvent, decode_event, decode_event_log
from .decoding.event import decode, signature_hash
from .decoding.registry import EventRegistry, add_event_schema, add_many
from .decoding.registry_builder import event_schema_from_signature, make_registry

__all__ = [
    "decode",
    "signature_hash",
    "decode_event",
    "decode_event_log",
    "ParsedEvent",
    "make_registry",
    "add_event_schema",
    "add_many",
    "event_schema_from_signature",
    "EventRegistry",
    "EventSchema",
    "EventParam",
    "EventLog",
    "Token",
    "parse_param_type",
    "DecodeConfig",
    "AbiError",
    "InvalidData",
    "DecodeInconsistency",
    "UnsupportedType",
]
