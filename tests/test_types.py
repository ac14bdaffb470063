import pytest
from eth_abi.grammar import ABIType

from abilog.core.errors import UnsupportedType
from abilog.core.types import (
    AddressType,
    ArrayType,
    BoolType,
    BytesType,
    FixedArrayType,
    FixedBytesType,
    IntType,
    StringType,
    TupleType,
    UintType,
    _from_grammar,
    parse_param_type,
)


@pytest.mark.parametrize(
    ("type_str", "expected"),
    [
        ("address", AddressType()),
        ("bool", BoolType()),
        ("int24", IntType(24)),
        ("int", IntType(256)),
        ("uint", UintType(256)),
        ("uint128", UintType(128)),
        ("bytes32", FixedBytesType(32)),
        ("bytes", BytesType()),
        ("string", StringType()),
        ("function", FixedBytesType(24)),
        ("int256[]", ArrayType(IntType(256))),
        ("address[5]", FixedArrayType(AddressType(), 5)),
        ("uint8[2][]", ArrayType(FixedArrayType(UintType(8), 2))),
        ("(uint256,bool)", TupleType((UintType(256), BoolType()))),
        ("(address,(bytes,string))[3]", FixedArrayType(
            TupleType((AddressType(), TupleType((BytesType(), StringType())))), 3
        )),
    ],
)
def test_parse_param_type(type_str: str, expected) -> None:
    assert parse_param_type(type_str) == expected


def test_canonical_type_strings() -> None:
    assert parse_param_type("uint").abi_type == "uint256"
    assert parse_param_type("(int,bytes)[]").abi_type == "(int256,bytes)[]"
    assert FixedArrayType(ArrayType(AddressType()), 2).abi_type == "address[][2]"


@pytest.mark.parametrize("type_str", ["fixed128x18", "ufixed", "int7", "bytes33", "uint256[", "foo"])
def test_unsupported_types(type_str: str) -> None:
    with pytest.raises(UnsupportedType):
        parse_param_type(type_str)


def test_unsupported_type_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_param_type("nope")


def test_unknown_grammar_node_is_unsupported() -> None:
    with pytest.raises(UnsupportedType):
        _from_grammar(ABIType())
