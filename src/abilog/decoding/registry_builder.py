"""Registry builder utilities for creating event schemas from signatures.

This module provides:
- `event_schema_from_signature()` for human-readable Solidity event signatures
- Generic `make_registry()` for single or multiple signatures

Example
-------
>>> schema = event_schema_from_signature(
...     "Transfer(address indexed from, address indexed to, uint256 value)"
... )
>>> schema.signature
'Transfer(address,address,uint256)'
"""

from __future__ import annotations

from abilog.core.models import EventParam, EventSchema
from abilog.core.types import parse_param_type

from .registry import EventRegistry, add_event_schema


# ---- Helpers: build schemas from event signature ----
def _split_params(params_str: str) -> list[str]:
    """Split the parameter list by commas while respecting nested tuple types."""
    items: list[str] = []
    depth = 0
    buf: list[str] = []
    for ch in params_str:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                raise ValueError(f"Unbalanced parentheses in: {params_str}")
        if ch == "," and depth == 0:
            items.append("".join(buf).strip())
            buf = []
        else:
            buf.append(ch)
    if depth != 0:
        raise ValueError(f"Unbalanced parentheses in: {params_str}")
    if buf:
        items.append("".join(buf).strip())
    return [i for i in items if i]


def _canonical_type(abi_type: str) -> str:
    """Drop component names (and a `tuple` prefix) from tuple types."""
    s = abi_type.strip()
    if s.startswith("tuple("):
        s = s[len("tuple"):]
    if not s.startswith("("):
        return s.replace(" ", "")
    close = s.rfind(")")
    inner, suffix = s[1:close], s[close + 1 :].replace(" ", "")
    parts = [_parse_param(p, fallback_name="")[1] for p in _split_params(inner)]
    return "(" + ",".join(parts) + ")" + suffix


def _parse_param(p: str, fallback_name: str) -> tuple[str, str, bool]:
    """Parse one parameter fragment into (name, abi_type, indexed)."""
    s = " ".join(p.strip().split())
    # the type may contain spaces inside a tuple; the name never does
    close = s.rfind(")")
    head, tail = (s[: close + 1], s[close + 1 :]) if close != -1 else ("", s)
    tokens = tail.split()
    if head:
        # tuple type: array suffix glued to ")" belongs to the type
        while tokens and tokens[0].startswith("["):
            head += tokens.pop(0)
    else:
        head = tokens.pop(0) if tokens else ""
    if not head:
        raise ValueError(f"Missing type in parameter: {p!r}")

    indexed = "indexed" in tokens
    tokens = [t for t in tokens if t != "indexed"]
    if len(tokens) > 1:
        raise ValueError(f"Cannot parse parameter: {p!r}")
    name = tokens[0] if tokens else fallback_name
    return (name, _canonical_type(head), indexed)


def event_schema_from_signature(signature: str, *, anonymous: bool = False) -> EventSchema:
    """Build an EventSchema from a Solidity event signature string.

    Example input:
      "GaugeCreated(address indexed pool, address indexed gauge, address indexed reward)"
    """
    sig = signature.strip()
    if sig.startswith("event "):
        sig = sig[len("event ") :].strip()
    if sig.endswith("anonymous"):
        sig = sig[: -len("anonymous")].strip()
        anonymous = True
    open_paren = sig.find("(")
    close_paren = sig.rfind(")")
    if open_paren <= 0 or close_paren == -1 or close_paren < open_paren or sig[close_paren + 1 :].strip():
        raise ValueError(f"Invalid event signature: {signature}")
    name = sig[:open_paren].strip()
    params_str = sig[open_paren + 1 : close_paren].strip()

    inputs: list[EventParam] = []
    for i, part in enumerate(_split_params(params_str)):
        name_i, abi_type_i, is_indexed = _parse_param(part, fallback_name=f"arg{i}")
        inputs.append(EventParam(parse_param_type(abi_type_i), is_indexed, name_i))

    # canonical signature: types only, no names or 'indexed'
    canonical_types = ",".join(p.kind.abi_type for p in inputs)
    return EventSchema(
        signature=f"{name}({canonical_types})",
        inputs=tuple(inputs),
        anonymous=anonymous,
    )


def make_registry(signatures: str | list[str]) -> EventRegistry:
    """Create a registry from one or multiple event signatures.

    Args:
        signatures: Single signature string or list of signature strings

    Returns:
        EventRegistry with entries for each signature
    """
    reg: EventRegistry = {}

    sig_list = [signatures] if isinstance(signatures, str) else signatures

    for signature in sig_list:
        add_event_schema(reg, event_schema_from_signature(signature))

    return reg
