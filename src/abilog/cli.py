import logging
from pathlib import Path

import click
from eth_abi.exceptions import DecodingError
from eth_utils import encode_hex
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from abilog.core.config import DecodeConfig
from abilog.core.errors import AbiError
from abilog.core.models import EventSchema, Token
from abilog.decoding.event import decode, signature_hash
from abilog.decoding.registry import EventRegistry, add_event_schema
from abilog.decoding.registry_builder import event_schema_from_signature
from abilog.decoding.utils import format_value, hex_to_bytes, topics_to_bytes

console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_schemas(abi: Path | None, signatures: tuple[str, ...]) -> dict[str, EventSchema]:
    from abilog.abi_events import get_event_schemas_from_abi

    schemas: dict[str, EventSchema] = {}
    if abi is not None:
        schemas.update(get_event_schemas_from_abi(abi))
    for sig in signatures:
        schema = event_schema_from_signature(sig)
        schemas[schema.signature] = schema
    return schemas


def _schema_by_event(schemas: dict[str, EventSchema], event: str) -> EventSchema:
    """Look up `--event` by canonical signature, or by name when it is not overloaded."""
    if event in schemas:
        return schemas[event]
    matches = [schema for schema in schemas.values() if schema.name == event]
    if not matches:
        raise click.UsageError(f"Unknown event {event!r}; known: {', '.join(sorted(schemas))}")
    if len(matches) > 1:
        overloads = ", ".join(sorted(schema.signature for schema in matches))
        raise click.UsageError(f"Event name {event!r} is overloaded; pass one of: {overloads}")
    return matches[0]


def _select_schema(schemas: dict[str, EventSchema], event: str | None, topics: list[bytes]) -> EventSchema:
    if event is not None:
        return _schema_by_event(schemas, event)
    if not topics:
        raise click.UsageError("Pass --event to decode a log without topics")
    registry: EventRegistry = {}
    for schema in schemas.values():
        if not schema.anonymous:
            add_event_schema(registry, schema)
    topic0 = encode_hex(topics[0]).lower()
    if topic0 not in registry:
        raise click.ClickException(f"No event with topic0 {topic0}; pass --event for anonymous events")
    return registry[topic0]


def _render(schema: EventSchema, tokens: list[Token]) -> Table:
    table = Table(title=schema.signature + (" anonymous" if schema.anonymous else ""))
    table.add_column("#", justify="right")
    table.add_column("name")
    table.add_column("type")
    table.add_column("indexed")
    table.add_column("value", overflow="fold")
    for i, (param, token) in enumerate(zip(schema.inputs, tokens)):
        shown = token.kind.abi_type
        if token.kind != param.kind:
            shown = f"{param.kind.abi_type} → {shown}"
        table.add_row(str(i), param.name or f"arg{i}", shown, "yes" if param.indexed else "", str(format_value(token.value)))
    return table


@click.group()
def cli() -> None:
    """abilog — decode smart-contract event logs against their ABI."""


@cli.command("topic0")
@click.argument("signature")
def topic0_cmd(signature: str) -> None:
    """Print the canonical signature and topic0 of an event signature."""
    try:
        schema = event_schema_from_signature(signature)
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    console.print(schema.signature)
    console.print(encode_hex(signature_hash(schema)))


@cli.command("decode")
@click.option("--abi", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="JSON ABI file")
@click.option("--signature", "signatures", multiple=True, help="Event signature; repeat to add more")
@click.option("--event", default=None, help="Event name or canonical signature to decode as (required for anonymous events)")
@click.option("--topic", "topics", multiple=True, help="Log topic (hex); repeat in log order")
@click.option("--data", default="0x", show_default=True, help="Log data (hex)")
@click.option("--strict/--no-strict", default=True, show_default=True, help="Reject non-zero padding bytes")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging")
def decode_cmd(
    abi: Path | None,
    signatures: tuple[str, ...],
    event: str | None,
    topics: tuple[str, ...],
    data: str,
    strict: bool,
    verbose: bool,
) -> None:
    """Decode one log given its topics and data."""
    _setup_logging(verbose)
    if abi is None and not signatures:
        raise click.UsageError("Pass --abi or at least one --signature")

    config = DecodeConfig(strict=strict)
    try:
        schemas = _load_schemas(abi, signatures)
        topic_bytes = topics_to_bytes(topics, pad=True)
        schema = _select_schema(schemas, event, topic_bytes)
        tokens = decode(schema, topic_bytes, hex_to_bytes(data), config=config)
    except (AbiError, DecodingError, ValueError) as e:
        raise click.ClickException(f"{type(e).__name__}: {e}") from e

    console.print(_render(schema, tokens))
