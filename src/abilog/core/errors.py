"""Exceptions raised by abilog.

Errors raised by the underlying `eth_abi` decoder are not wrapped: they reach
the caller unchanged.
"""


class AbiError(Exception):
    """Base exception for abilog."""


class InvalidData(AbiError):
    """The log does not match the event schema (signature topic, topic count)."""


class DecodeInconsistency(AbiError):
    """Decoded values could not be placed back into declaration order."""


class UnsupportedType(AbiError, ValueError):
    """An ABI type string outside the supported set of parameter types."""
