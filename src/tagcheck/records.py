"""Field descriptors for record types.

Records are stdlib dataclasses or pydantic models. Their fields, declared
types and tag mappings are read once per class and cached, so traversal
only pays for attribute access.

Tags live in field metadata:

    @dataclass
    class User:
        name: str = field(metadata={"validate": "required", "desc": "Name"})

    class Job(BaseModel):
        id: int = Field(json_schema_extra={"validate": "required,min=1"})
"""

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, get_type_hints

from pydantic import BaseModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldDescriptor:
    """Static description of one record field."""
    index: int                                          # declaration position
    name: str                                           # attribute name
    annotation: Any = None                              # declared type
    tags: Mapping[str, str] = field(default_factory=dict)

    @property
    def exported(self) -> bool:
        """Whether the field has an externally visible name."""
        return not self.name.startswith("_")

    def tag(self, key: str) -> str:
        """Value of tag ``key``, empty string when missing."""
        value = self.tags.get(key, "")
        return value if isinstance(value, str) else str(value)


def _string_tags(source: Any) -> dict[str, str]:
    if not isinstance(source, Mapping):
        return {}
    return {str(key): value for key, value in source.items() if isinstance(value, str)}


def _type_hints(cls: type) -> dict[str, Any]:
    try:
        return get_type_hints(cls, include_extras=True)
    except (NameError, TypeError) as e:
        # Unresolvable forward references; fall back to raw annotations
        logger.debug(f"Could not resolve type hints for {cls.__name__}: {e}")
        return {}


def _dataclass_fields(cls: type) -> tuple[FieldDescriptor, ...]:
    hints = _type_hints(cls)
    return tuple(
        FieldDescriptor(
            index=index,
            name=fld.name,
            annotation=hints.get(fld.name, fld.type),
            tags=_string_tags(fld.metadata),
        )
        for index, fld in enumerate(dataclasses.fields(cls))
    )


def _model_fields(cls: type[BaseModel]) -> tuple[FieldDescriptor, ...]:
    return tuple(
        FieldDescriptor(
            index=index,
            name=name,
            annotation=info.annotation,
            tags=_string_tags(info.json_schema_extra),
        )
        for index, (name, info) in enumerate(cls.model_fields.items())
    )


@lru_cache(maxsize=512)
def describe_record(cls: type) -> tuple[FieldDescriptor, ...]:
    """Return the field descriptors of a record type in declaration order.

    Types that are not records have no fields.
    """
    if dataclasses.is_dataclass(cls):
        return _dataclass_fields(cls)
    if issubclass(cls, BaseModel):
        return _model_fields(cls)
    return ()
