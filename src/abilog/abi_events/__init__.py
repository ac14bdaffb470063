import json
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel

from abilog.core.models import EventParam, EventSchema
from abilog.core.types import parse_param_type
from abilog.decoding.registry import EventRegistry, add_event_schema


class AbiInput(BaseModel):
    indexed: bool = False
    internalType: str | None = None
    name: str = ""
    type: str
    components: Sequence["AbiInput"] | None = None


AbiInput.model_rebuild()

class AbiEvent(BaseModel):
    anonymous: bool = False
    inputs: Sequence[AbiInput]
    name: str
    type: Literal["event"]


def get_input_type(event_input: AbiInput) -> str:
    """Canonical ABI type of an input; tuples are expanded from `components`."""
    if not event_input.type.startswith("tuple"):
        return event_input.type
    suffix = event_input.type[len("tuple") :]
    inner = ",".join(get_input_type(c) for c in event_input.components or ())
    return f"({inner}){suffix}"


def get_event_signature(event: AbiEvent) -> str:
    return f"{event.name}({','.join(get_input_type(event_input) for event_input in event.inputs)})"


def get_event_schema(event: AbiEvent) -> EventSchema:
    return EventSchema(
        signature=get_event_signature(event),
        inputs=tuple(
            EventParam(parse_param_type(get_input_type(event_input)), event_input.indexed, event_input.name)
            for event_input in event.inputs
        ),
        anonymous=event.anonymous,
    )


AbiJson = Iterable[dict[str, Any]]
AbiSpec = AbiJson | Path


def _load_abi(abi: AbiSpec) -> AbiJson:
    if isinstance(abi, Path):
        loaded = json.loads(abi.read_text())
        # compiler artifacts wrap the ABI: {"abi": [...], ...}
        return loaded["abi"] if isinstance(loaded, dict) else loaded
    return abi


def get_events_from_abi(abi: AbiSpec) -> list[AbiEvent]:
    # a list, not a name-keyed mapping: overloaded events share a name
    abi = _load_abi(abi)
    return [AbiEvent.model_validate(entry) for entry in abi if entry.get("type") == "event"]


def get_event_schemas_from_abi(abi: AbiSpec) -> dict[str, EventSchema]:
    """Event schemas keyed by canonical signature."""
    schemas = (get_event_schema(event) for event in get_events_from_abi(abi))
    return {schema.signature: schema for schema in schemas}


def make_event_registry_from_events(events: Iterable[AbiEvent]) -> EventRegistry:
    reg: EventRegistry = {}

    for event in events:
        # anonymous events cannot be looked up by topic0
        if event.anonymous:
            continue
        add_event_schema(reg, get_event_schema(event))

    return reg


def make_event_registry_from_abi(abi: AbiSpec) -> EventRegistry:
    return make_event_registry_from_events(get_events_from_abi(abi))
