from pathlib import Path

from click.testing import CliRunner
from eth_utils import encode_hex, keccak

from abilog.cli import cli

ABI = Path(__file__).parent / "abi" / "token_abi.json"
TRANSFER = "Transfer(address indexed from, address indexed to, uint256 value)"
TRANSFER_T0 = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"
FROM = "0x" + "0" * 24 + "1234567890123456789012345678901234567890"
TO = "0x" + "0" * 24 + "2222222222222222222222222222222222222222"
VALUE = "0x" + "00" * 31 + "64"


def test_topic0():
    result = CliRunner().invoke(cli, ["topic0", TRANSFER])

    assert result.exit_code == 0, result.output
    assert "Transfer(address,address,uint256)" in result.output
    assert TRANSFER_T0 in result.output


def test_topic0_invalid_signature():
    result = CliRunner().invoke(cli, ["topic0", "Transfer(address"])
    assert result.exit_code == 1
    assert "Invalid event signature" in result.output


def test_decode_with_signature():
    result = CliRunner().invoke(
        cli,
        ["decode", "--signature", TRANSFER, "--topic", TRANSFER_T0, "--topic", FROM, "--topic", TO, "--data", VALUE],
    )

    assert result.exit_code == 0, result.output
    assert "Transfer(address,address,uint256)" in result.output
    assert "value" in result.output
    assert "100" in result.output


def test_decode_with_abi_anonymous_event():
    payload = "0x" + "00" * 31 + "20" + "00" * 31 + "01" + "ff" + "00" * 31
    result = CliRunner().invoke(
        cli,
        ["decode", "--abi", str(ABI), "--event", "Ping", "--topic", "0x09", "--data", payload],
    )

    assert result.exit_code == 0, result.output
    assert "anonymous" in result.output
    assert "payload" in result.output


def test_decode_signature_mismatch():
    result = CliRunner().invoke(
        cli,
        ["decode", "--signature", TRANSFER, "--event", "Transfer", "--topic", FROM, "--topic", FROM, "--topic", TO],
    )

    assert result.exit_code == 1
    assert "InvalidData" in result.output


def test_decode_unknown_topic0():
    result = CliRunner().invoke(cli, ["decode", "--abi", str(ABI), "--topic", FROM])
    assert result.exit_code == 1
    assert "No event with topic0" in result.output


def test_decode_truncated_data():
    result = CliRunner().invoke(
        cli,
        ["decode", "--signature", TRANSFER, "--topic", TRANSFER_T0, "--topic", FROM, "--topic", TO, "--data", "0x01"],
    )
    assert result.exit_code == 1
    assert "InsufficientDataBytes" in result.output


def test_decode_requires_a_schema_source():
    result = CliRunner().invoke(cli, ["decode", "--topic", TRANSFER_T0])
    assert result.exit_code == 2


OVERLOADS = ["Transfer(uint256 value)", "Transfer(uint256 value, address indexed to)"]


def _with_overloads(*args: str):
    sigs = [arg for sig in OVERLOADS for arg in ("--signature", sig)]
    return CliRunner().invoke(cli, ["decode", *sigs, *args])


def test_decode_overloaded_event_by_topic0():
    topic0 = encode_hex(keccak(text="Transfer(uint256,address)"))
    result = _with_overloads("--topic", topic0, "--topic", TO, "--data", VALUE)

    assert result.exit_code == 0, result.output
    assert "Transfer(uint256,address)" in result.output
    assert "100" in result.output


def test_decode_overloaded_event_by_signature():
    topic0 = encode_hex(keccak(text="Transfer(uint256)"))
    result = _with_overloads("--event", "Transfer(uint256)", "--topic", topic0, "--data", VALUE)

    assert result.exit_code == 0, result.output
    assert "Transfer(uint256)" in result.output


def test_decode_overloaded_event_name_is_ambiguous():
    result = _with_overloads("--event", "Transfer", "--topic", TRANSFER_T0)

    assert result.exit_code == 2
    assert "overloaded" in result.output


def test_decode_unknown_event_name():
    result = CliRunner().invoke(cli, ["decode", "--signature", TRANSFER, "--event", "Approval", "--topic", TRANSFER_T0])
    assert result.exit_code == 2
    assert "Unknown event" in result.output


def test_decode_odd_length_data():
    result = CliRunner().invoke(
        cli,
        ["decode", "--signature", TRANSFER, "--topic", TRANSFER_T0, "--topic", FROM, "--topic", TO, "--data", VALUE + "0"],
    )
    assert result.exit_code == 1
    assert "Odd-length hex data" in result.output
