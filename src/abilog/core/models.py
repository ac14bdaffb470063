"""Core data models: event schemas, decoded tokens and raw logs.

This module defines:
- `EventParam`: one declared event parameter (type + indexed flag).
- `EventSchema`: an immutable event description used by the decoder.
- `Token`: one decoded value tagged with its parameter type.
- `EventLog`: a raw log in its JSON-RPC hex form.

Design notes
------------
- Schemas are frozen and hold tuples only, so a single instance can be shared
  by any number of concurrent decodes.
- `inputs` order is the declaration order; decoded values are returned in
  that order whatever the topic/data split.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from abilog.core.config import DecodeConfig
from abilog.core.types import ParamType


@dataclass(frozen=True, slots=True)
class EventParam:
    """One event input. Indexed inputs are carried in topics, the rest in data."""

    kind: ParamType
    indexed: bool = False
    name: str = ""


@dataclass(frozen=True, slots=True)
class EventSchema:
    """Contract event description.

    `signature` is the canonical form hashed into topic0, e.g.
    ``"Transfer(address,address,uint256)"``.
    """

    signature: str
    inputs: tuple[EventParam, ...] = ()
    anonymous: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.inputs, tuple):
            object.__setattr__(self, "inputs", tuple(self.inputs))

    @property
    def name(self) -> str:
        return self.signature.split("(", 1)[0]

    def indexed_params(self, indexed: bool) -> list[EventParam]:
        """Return the params whose indexed flag equals `indexed`, in order."""
        return [p for p in self.inputs if p.indexed == indexed]

    def indices(self, indexed: bool) -> list[int]:
        """Return original positions of the params selected by `indexed_params`."""
        return [i for i, p in enumerate(self.inputs) if p.indexed == indexed]

    def decode(
        self, topics: Sequence[bytes], data: bytes, *, config: DecodeConfig | None = None
    ) -> list[Token]:
        """Decode one log of this event; see `abilog.decoding.event.decode`."""
        from abilog.decoding.event import decode

        return decode(self, topics, data, config=config)


@dataclass(frozen=True, slots=True)
class Token:
    """A decoded value and the parameter type it was decoded as."""

    kind: ParamType
    value: Any


@dataclass(slots=True, frozen=True)
class EventLog:
    """Raw log as fetched from RPC, minimally normalized."""

    topics: tuple[str, ...]  # 0x-prefixed hex, 32 bytes each
    data_hex: str = "0x"
    address: str | None = None
    block_number: int | None = None
    tx_hash: str | None = None
    log_index: int | None = None

    @classmethod
    def from_rpc(cls, entry: dict[str, Any]) -> EventLog:
        """Build from an `eth_getLogs` result entry."""
        block = entry.get("blockNumber")
        log_index = entry.get("logIndex")
        return cls(
            topics=tuple(t.lower() for t in entry.get("topics", [])),
            data_hex=entry.get("data") or "0x",
            address=(entry.get("address") or "").lower() or None,
            block_number=int(block, 16) if isinstance(block, str) else block,
            tx_hash=(entry.get("transactionHash") or "").lower() or None,
            log_index=int(log_index, 16) if isinstance(log_index, str) else log_index,
        )
