"""ABI parameter types.

The set of parameter types is closed: every decoder path matches on the
classes defined here. Each type renders to its canonical ABI type string
(`abi_type`), which is what the underlying `eth_abi` codec consumes.

Example
-------
>>> parse_param_type("address[5]")
FixedArrayType(item=AddressType(), length=5)
>>> parse_param_type("(uint,bytes)[]").abi_type
'(uint256,bytes)[]'
"""

from __future__ import annotations

from dataclasses import dataclass

from eth_abi.exceptions import ABITypeError, ParseError
from eth_abi.grammar import ABIType, BasicType, TupleType as GrammarTupleType, normalize, parse

from abilog.core.errors import UnsupportedType


@dataclass(frozen=True, slots=True)
class AddressType:
    @property
    def abi_type(self) -> str:
        return "address"


@dataclass(frozen=True, slots=True)
class BoolType:
    @property
    def abi_type(self) -> str:
        return "bool"


@dataclass(frozen=True, slots=True)
class IntType:
    size: int = 256

    @property
    def abi_type(self) -> str:
        return f"int{self.size}"


@dataclass(frozen=True, slots=True)
class UintType:
    size: int = 256

    @property
    def abi_type(self) -> str:
        return f"uint{self.size}"


@dataclass(frozen=True, slots=True)
class FixedBytesType:
    size: int = 32

    @property
    def abi_type(self) -> str:
        return f"bytes{self.size}"


@dataclass(frozen=True, slots=True)
class BytesType:
    @property
    def abi_type(self) -> str:
        return "bytes"


@dataclass(frozen=True, slots=True)
class StringType:
    @property
    def abi_type(self) -> str:
        return "string"


@dataclass(frozen=True, slots=True)
class ArrayType:
    item: ParamType

    @property
    def abi_type(self) -> str:
        return f"{self.item.abi_type}[]"


@dataclass(frozen=True, slots=True)
class FixedArrayType:
    item: ParamType
    length: int

    @property
    def abi_type(self) -> str:
        return f"{self.item.abi_type}[{self.length}]"


@dataclass(frozen=True, slots=True)
class TupleType:
    components: tuple[ParamType, ...]

    @property
    def abi_type(self) -> str:
        return "(" + ",".join(c.abi_type for c in self.components) + ")"


ParamType = (
    AddressType
    | BoolType
    | IntType
    | UintType
    | FixedBytesType
    | BytesType
    | StringType
    | ArrayType
    | FixedArrayType
    | TupleType
)


# ---------- parsing from ABI type strings ----------


def _from_grammar(node: ABIType) -> ParamType:
    if node.is_array:
        item = _from_grammar(node.item_type)
        dim = node.arrlist[-1]
        return FixedArrayType(item, dim[0]) if dim else ArrayType(item)

    if isinstance(node, GrammarTupleType):
        return TupleType(tuple(_from_grammar(c) for c in node.components))

    if not isinstance(node, BasicType):
        raise UnsupportedType(f"Unsupported ABI type node: {type(node).__name__}")
    base, sub = node.base, node.sub
    if base == "address":
        return AddressType()
    if base == "bool":
        return BoolType()
    if base == "string":
        return StringType()
    if base == "int":
        return IntType(sub)
    if base == "uint":
        return UintType(sub)
    if base == "bytes":
        return BytesType() if sub is None else FixedBytesType(sub)
    raise UnsupportedType(f"Unsupported ABI type: {node.to_type_str()}")


def parse_param_type(type_str: str) -> ParamType:
    """Parse an ABI type string (`uint256`, `address[5]`, `(int24,bytes)[]`)."""
    try:
        node = parse(normalize(type_str.strip()))
        node.validate()
    except (ParseError, ABITypeError) as e:
        raise UnsupportedType(f"Invalid ABI type {type_str!r}: {e}") from e
    return _from_grammar(node)
