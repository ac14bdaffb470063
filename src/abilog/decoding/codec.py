"""Generic ABI value decoder.

Thin wrapper around `eth_abi.decode`: takes parameter types and raw bytes,
returns one `Token` per type. Errors from `eth_abi` (`DecodingError`,
`InsufficientDataBytes`, `NonEmptyPaddingBytes`, ...) propagate unchanged.
"""

from __future__ import annotations

from collections.abc import Sequence

from eth_abi import decode as abi_decode

from abilog.core.config import DEFAULT_CONFIG, DecodeConfig
from abilog.core.models import Token
from abilog.core.types import ParamType


def decode(types: Sequence[ParamType], data: bytes, *, config: DecodeConfig = DEFAULT_CONFIG) -> list[Token]:
    """Decode `types` from the head of `data`."""
    if not types:
        return []
    values = abi_decode([t.abi_type for t in types], bytes(data), strict=config.strict)
    return [Token(kind, value) for kind, value in zip(types, values)]
