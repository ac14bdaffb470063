from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DecodeConfig:
    """Configuration for the generic value decoder."""

    strict: bool = True  # reject non-zero padding bytes (eth_abi strict mode)


DEFAULT_CONFIG = DecodeConfig()
