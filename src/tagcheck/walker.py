"""Depth-first traversal of an object graph applying field rules.

The walker visits record fields in declaration order and collection
elements in iteration order, so the first failure is the same for the same
input every time. Every level returns either None or the failing
FieldContext and callers forward a failure as soon as they see it.
"""

import logging
from dataclasses import dataclass
from typing import Any

from .config import ValidatorConfig
from .errors import InvalidRuleTagError, RootTypeError, RuleDefinitionError
from .grammar import RuleInvocation, RuleSlot, is_skip_tag, parse_tag
from .kinds import Kind, Resolved, declared_kind, is_empty, is_record, resolve
from .records import FieldDescriptor, describe_record
from .rules import RuleTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleOutcome:
    """A rule that failed, with the value it failed on."""
    invocation: RuleInvocation
    value: Any
    kind: Kind

    @property
    def rule(self) -> str:
        return self.invocation.name

    @property
    def param(self) -> str:
        return self.invocation.param


@dataclass(frozen=True)
class FieldContext:
    """The field whose rule failed.

    Attributes:
        index: Position of the field in its record's declaration order
        name: Attribute name of the field
        display_name: Description tag value, else the attribute name
        annotation: Declared type of the field
        path: Location from the root, e.g. ``addresses[2].street``
        outcome: The failing rule
    """
    index: int
    name: str
    display_name: str
    annotation: Any
    path: str
    outcome: RuleOutcome

    @property
    def declared_kind(self) -> Kind:
        """Kind of the declared type, falling back to the runtime kind."""
        return declared_kind(self.annotation) or self.outcome.kind


def _join(path: str, name: str) -> str:
    return f"{path}.{name}" if path else name


class GraphWalker:
    """Walks records, mappings and sequences looking for the first failure."""

    def __init__(self, config: ValidatorConfig, rules: RuleTable):
        self.config = config
        self.rules = rules

    def walk(self, root: Any) -> FieldContext | None:
        """Validate everything reachable from ``root``.

        Raises:
            RootTypeError: If root is neither a record nor a mapping
            RuleDefinitionError: If a rule tag or rule is broken
        """
        value, kind = resolve(root)
        if kind is not Kind.MAPPING and not is_record(value):
            raise RootTypeError(f"Validated object must be a record, got {type(root).__name__}")

        return self._descend(value, "", set())

    def _descend(self, value: Any, path: str, active: set[int]) -> FieldContext | None:
        value, kind = resolve(value)
        if kind not in (Kind.STRUCT, Kind.MAPPING, Kind.SEQUENCE):
            return None
        if isinstance(value, (bytes, bytearray)):
            return None

        # containers on the current descent path; reaching one again is a cycle
        if id(value) in active:
            logger.debug(f"Skipping cyclic reference at {path or '<root>'}")
            return None
        active.add(id(value))
        try:
            if kind is Kind.STRUCT:
                return self._walk_record(value, path, active)
            if kind is Kind.MAPPING:
                items = ((f"{path}[{key!r}]", item) for key, item in value.items())
            else:
                items = ((f"{path}[{position}]", item) for position, item in enumerate(value))
            for item_path, item in items:
                failure = self._descend(item, item_path, active)
                if failure is not None:
                    return failure
            return None
        finally:
            active.discard(id(value))

    def _walk_record(self, record: Any, path: str, active: set[int]) -> FieldContext | None:
        for descriptor in describe_record(type(record)):
            if not descriptor.exported:
                continue

            tag = descriptor.tag(self.config.rule_tag)
            if is_skip_tag(tag):
                continue

            field_path = _join(path, descriptor.name)
            field_value = getattr(record, descriptor.name, None)

            if tag:
                try:
                    outcome = self._check_field(field_value, tag)
                except RuleDefinitionError as e:
                    if not e.field_path:
                        e.field_path = field_path
                    raise
                if outcome is not None:
                    logger.debug(f"Rule '{outcome.rule}' failed on {field_path}")
                    return self._context(descriptor, field_path, outcome)

            failure = self._descend(field_value, field_path, active)
            if failure is not None:
                return failure

        return None

    def _context(self, descriptor: FieldDescriptor, path: str, outcome: RuleOutcome) -> FieldContext:
        return FieldContext(
            index=descriptor.index,
            name=descriptor.name,
            display_name=descriptor.tag(self.config.description_tag) or descriptor.name,
            annotation=descriptor.annotation,
            path=path,
            outcome=outcome,
        )

    def _check_field(self, value: Any, tag: str) -> RuleOutcome | None:
        resolved = resolve(value)

        for slot in parse_tag(tag, self.config.omit_tag):
            if slot.omit_marker:
                if is_empty(resolved):
                    return None
                continue

            if not self._slot_passes(slot, resolved):
                return RuleOutcome(slot.primary, resolved.value, resolved.kind)

        return None

    def _slot_passes(self, slot: RuleSlot, resolved: Resolved) -> bool:
        # every alternative name must resolve before any is evaluated
        predicates = []
        for invocation in slot.alternatives:
            if not invocation.name:
                raise InvalidRuleTagError("Invalid validation tag: empty rule name")
            predicates.append((invocation, self.rules.get(invocation.name)))

        for invocation, predicate in predicates:
            if predicate(resolved, invocation.param):
                return True
        return False

