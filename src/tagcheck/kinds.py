"""Value kinds and type resolution.

Runtime values are resolved to a concrete Kind after unwrapping any layers
of indirection (enum members wrap their value). Static annotations are
resolved the same way after unwrapping Annotated, Optional and NewType
layers, which is what message lookup uses for the ``rule-kind`` keys.
"""

import dataclasses
import types
from collections.abc import Mapping, Set
from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, NamedTuple, Union, get_args, get_origin

from pydantic import BaseModel


class Kind(str, Enum):
    """Concrete value categories rules dispatch on."""
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    STRUCT = "struct"
    TIME = "time"
    DURATION = "duration"
    ABSENT = "absent"


class Resolved(NamedTuple):
    """A value after indirection has been stripped, with its kind."""
    value: Any
    kind: Kind


SEQUENCE_TYPES = (list, tuple, set, frozenset, bytes, bytearray)

_ZERO_VALUES = {
    Kind.STRING: "",
    Kind.INT: 0,
    Kind.FLOAT: 0.0,
    Kind.BOOL: False,
    Kind.DURATION: timedelta(0),
}


def is_record(value: Any) -> bool:
    """Whether value is a record instance (dataclass or pydantic model)."""
    if isinstance(value, type):
        return False
    return dataclasses.is_dataclass(value) or isinstance(value, BaseModel)


def is_record_type(tp: Any) -> bool:
    if not isinstance(tp, type):
        return False
    return dataclasses.is_dataclass(tp) or issubclass(tp, BaseModel)


def resolve(value: Any) -> Resolved:
    """Unwrap indirection layers and classify the underlying value.

    Never raises: ``None`` is the absent terminal.
    """
    while isinstance(value, Enum):
        value = value.value

    if value is None:
        return Resolved(None, Kind.ABSENT)
    if isinstance(value, bool):
        return Resolved(value, Kind.BOOL)
    if isinstance(value, str):
        return Resolved(value, Kind.STRING)
    if isinstance(value, int):
        return Resolved(value, Kind.INT)
    if isinstance(value, (float, Decimal)):
        return Resolved(value, Kind.FLOAT)
    if isinstance(value, timedelta):
        return Resolved(value, Kind.DURATION)
    if isinstance(value, (datetime, date)):
        return Resolved(value, Kind.TIME)
    if is_record(value):
        return Resolved(value, Kind.STRUCT)
    if isinstance(value, Mapping):
        return Resolved(value, Kind.MAPPING)
    if isinstance(value, SEQUENCE_TYPES) or isinstance(value, Set):
        return Resolved(value, Kind.SEQUENCE)
    return Resolved(value, Kind.STRUCT)


def is_empty(resolved: Resolved) -> bool:
    """Absent-detection rule used by the optional marker.

    None, the zero value of a scalar kind and empty collections count as
    empty. Records and times never do.
    """
    if resolved.kind is Kind.ABSENT:
        return True
    if resolved.kind in (Kind.SEQUENCE, Kind.MAPPING):
        return len(resolved.value) == 0
    if resolved.kind in _ZERO_VALUES:
        return resolved.value == _ZERO_VALUES[resolved.kind]
    return False


def kind_of_type(tp: Any) -> Kind | None:
    """Kind of a concrete (already unwrapped) type, or None if unknown."""
    origin = get_origin(tp)
    if origin is not None:
        tp = origin

    if not isinstance(tp, type):
        return None
    if issubclass(tp, Enum):
        for base in (str, int, float):
            if issubclass(tp, base):
                return kind_of_type(base)
        return None
    if issubclass(tp, bool):
        return Kind.BOOL
    if issubclass(tp, str):
        return Kind.STRING
    if issubclass(tp, int):
        return Kind.INT
    if issubclass(tp, (float, Decimal)):
        return Kind.FLOAT
    if issubclass(tp, timedelta):
        return Kind.DURATION
    if issubclass(tp, (datetime, date)):
        return Kind.TIME
    if is_record_type(tp):
        return Kind.STRUCT
    if issubclass(tp, Mapping):
        return Kind.MAPPING
    if issubclass(tp, SEQUENCE_TYPES) or issubclass(tp, Set):
        return Kind.SEQUENCE
    # collections.abc.Sequence and friends
    if tp.__module__ == "collections.abc" and hasattr(tp, "__getitem__"):
        return Kind.SEQUENCE
    return None


def unwrap_annotation(annotation: Any) -> Any:
    """Strip Annotated, Optional and NewType layers from an annotation.

    A union with more than one non-None member cannot be narrowed and is
    returned as is.
    """
    while True:
        origin = get_origin(annotation)
        if origin is Annotated:
            annotation = get_args(annotation)[0]
        elif origin is Union or origin is types.UnionType:
            members = [arg for arg in get_args(annotation) if arg is not type(None)]
            if len(members) != 1:
                return annotation
            annotation = members[0]
        elif hasattr(annotation, "__supertype__"):
            annotation = annotation.__supertype__
        else:
            return annotation


def declared_kind(annotation: Any) -> Kind | None:
    """Kind of a field's declared type, pointee kind for optionals."""
    return kind_of_type(unwrap_annotation(annotation))
