"""Core data models, parameter types, configuration and errors.

This package provides:
- Parameter types (`ParamType` and its variants, `parse_param_type`)
- Data models (EventParam, EventSchema, Token, EventLog)
- Configuration (DecodeConfig)
- Exceptions (AbiError, InvalidData, DecodeInconsistency, UnsupportedType)
"""

from abilog.core.config import DEFAULT_CONFIG, DecodeConfig
from abilog.core.errors import AbiError, DecodeInconsistency, InvalidData, UnsupportedType
from abilog.core.models import EventLog, EventParam, EventSchema, Token
from abilog.core.types import ParamType, parse_param_type

__all__ = [
    "DEFAULT_CONFIG",
    "DecodeConfig",
    "AbiError",
    "DecodeInconsistency",
    "InvalidData",
    "UnsupportedType",
    "EventLog",
    "EventParam",
    "EventSchema",
    "Token",
    "ParamType",
    "parse_param_type",
]
