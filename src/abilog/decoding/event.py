"""Schema-driven event log decoding.

Indexed params are read from topics, the rest from data. Both groups are
decoded separately by the generic codec and merged back into declaration
order. For non-anonymous events topic0 must be the keccak-256 of the
signature and is not decoded as a value.

Indexed params of dynamic or composite type are logged as a 32-byte hash of
their encoding, so their topic is decoded as `bytes32`. See
https://docs.soliditylang.org/en/latest/abi-spec.html#encoding-of-indexed-event-parameters
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from eth_utils import keccak

from abilog.core.config import DEFAULT_CONFIG, DecodeConfig
from abilog.core.errors import DecodeInconsistency, InvalidData
from abilog.core.models import EventSchema, Token
from abilog.core.types import (
    AddressType,
    ArrayType,
    BoolType,
    BytesType,
    FixedArrayType,
    FixedBytesType,
    IntType,
    ParamType,
    StringType,
    TupleType,
    UintType,
)
from abilog.decoding import codec

logger = logging.getLogger(__name__)

TOPIC_SIZE = 32


def signature_hash(schema: EventSchema) -> bytes:
    """Return keccak-256 of the event signature (the expected topic0)."""
    return keccak(text=schema.signature)


def topic_param_type(kind: ParamType) -> ParamType:
    """Return the type an indexed param of `kind` is decoded as from its topic."""
    match kind:
        case BytesType() | StringType() | ArrayType() | FixedArrayType() | TupleType():
            return FixedBytesType(32)
        case AddressType() | BoolType() | IntType() | UintType() | FixedBytesType():
            return kind
    raise TypeError(f"Unsupported parameter type: {kind!r}")


def _flatten_topics(topics: Sequence[bytes], skip: int) -> bytes:
    for i, topic in enumerate(topics):
        if len(topic) != TOPIC_SIZE:
            raise InvalidData(f"topic {i} is {len(topic)} bytes, expected {TOPIC_SIZE}")
    return b"".join(bytes(t) for t in topics[skip:])


def decode(
    schema: EventSchema,
    topics: Sequence[bytes],
    data: bytes,
    *,
    config: DecodeConfig | None = None,
) -> list[Token]:
    """Decode one log (`topics` + `data`) of `schema` into declaration-ordered tokens.

    Raises `InvalidData` when topic0 is missing or is not the signature hash
    of a non-anonymous event, or when the number of decoded topic values
    differs from the number of topics carrying values. Codec errors propagate.
    """
    config = config or DEFAULT_CONFIG
    topics_len = len(topics)

    topic_params_index = schema.indices(True)
    data_params_index = schema.indices(False)
    topic_params = schema.indexed_params(True)
    data_params = schema.indexed_params(False)

    # topic0 carries the signature hash unless the event is anonymous
    if schema.anonymous:
        to_skip = 0
    else:
        if not topics:
            raise InvalidData(f"missing signature topic for {schema.signature}")
        if bytes(topics[0]) != signature_hash(schema):
            raise InvalidData(f"topic0 {bytes(topics[0]).hex()} does not match {schema.signature}")
        to_skip = 1

    logger.debug(
        "decoding %s: %d topic params, %d data params, skip=%d",
        schema.signature,
        len(topic_params),
        len(data_params),
        to_skip,
    )

    topic_types = [topic_param_type(p.kind) for p in topic_params]
    flat_topics = _flatten_topics(topics, to_skip)
    topic_tokens = codec.decode(topic_types, flat_topics, config=config)

    # every remaining topic must hold exactly one value
    if len(topic_tokens) != topics_len - to_skip:
        raise InvalidData(
            f"{schema.signature}: decoded {len(topic_tokens)} indexed values "
            f"from {topics_len - to_skip} topics"
        )

    data_types = [p.kind for p in data_params]
    data_tokens = codec.decode(data_types, data, config=config)

    slots: list[Token | None] = [None] * len(schema.inputs)
    for i, token in zip(topic_params_index, topic_tokens):
        slots[i] = token
    for i, token in zip(data_params_index, data_tokens):
        slots[i] = token

    missing = [i for i, token in enumerate(slots) if token is None]
    if missing:
        raise DecodeInconsistency(f"{schema.signature}: no decoded value for params {missing}")

    return [token for token in slots if token is not None]
