import pytest
from eth_utils import keccak

from abilog.core.models import EventParam, EventSchema
from abilog.core.types import AddressType, ArrayType, FixedArrayType, IntType, StringType

FOO_SIGNATURE = "foo(int256,int256,address,address,string,int256[],address[5])"


def word(hex_str: str) -> bytes:
    """32-byte word from a hex string, left-padded with zeros."""
    return bytes.fromhex(hex_str.removeprefix("0x").rjust(64, "0"))


@pytest.fixture
def foo_schema() -> EventSchema:
    return EventSchema(
        signature=FOO_SIGNATURE,
        inputs=(
            EventParam(IntType(256), indexed=False),
            EventParam(IntType(256), indexed=True),
            EventParam(AddressType(), indexed=False),
            EventParam(AddressType(), indexed=True),
            EventParam(StringType(), indexed=True),
            EventParam(ArrayType(IntType(256)), indexed=True),
            EventParam(FixedArrayType(AddressType(), 5), indexed=True),
        ),
        anonymous=False,
    )


@pytest.fixture
def foo_topics() -> list[bytes]:
    return [
        keccak(text=FOO_SIGNATURE),
        word("02"),
        word("1111111111111111111111111111111111111111"),
        word("00000000000000000aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa"),
        word("00000000000000000bbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb"),
        word("00000000000000000ccccccccccccccccccccccccccccccccccccccccccccccc"),
    ]


@pytest.fixture
def foo_data() -> bytes:
    return word("03") + word("2222222222222222222222222222222222222222")
