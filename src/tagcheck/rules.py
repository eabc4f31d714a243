"""Built-in rule predicates and the rule table.

Every predicate takes a resolved value and the rule's raw parameter and
answers whether the rule is satisfied. Applying a rule to a kind it has no
meaning for raises UnsupportedKindError; a parameter that does not parse
raises RuleParameterError. Neither is ever reported as invalid data.
"""

import operator
import re
from collections.abc import Callable, Mapping
from datetime import UTC, date, datetime
from threading import Lock
from types import MappingProxyType

from .errors import UndefinedRuleError, UnsupportedKindError
from .kinds import Kind, Resolved
from .params import is_bool_literal, parse_bool, parse_duration, parse_float, parse_int

Predicate = Callable[[Resolved, str], bool]

EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)+$"
)

# 'quoted candidates' or bare whitespace delimited tokens
ONEOF_PATTERN = re.compile(r"'[^']*'|\S+")

_COMPARISONS = {
    "len": operator.eq,
    "lt": operator.lt,
    "lte": operator.le,
    "gt": operator.gt,
    "gte": operator.ge,
    "min": operator.ge,
    "max": operator.le,
}


class OneOfCache:
    """Thread-safe memo of parsed ``oneof`` candidate lists.

    Reads are lock free; a miss takes the lock and re-checks before
    populating, so each distinct parameter is parsed once.
    """

    def __init__(self):
        self._values: dict[str, tuple[str, ...]] = {}
        self._lock = Lock()

    def candidates(self, param: str) -> tuple[str, ...]:
        values = self._values.get(param)
        if values is not None:
            return values

        with self._lock:
            values = self._values.get(param)
            if values is None:
                values = tuple(token.replace("'", "") for token in ONEOF_PATTERN.findall(param))
                self._values[param] = values
        return values

    def clear(self) -> None:
        with self._lock:
            self._values.clear()

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, param: str) -> bool:
        return param in self._values


def _operands(rule: str, resolved: Resolved, param: str) -> tuple:
    """Left and right operands of a size or magnitude comparison."""
    value, kind = resolved
    if kind in (Kind.STRING, Kind.SEQUENCE, Kind.MAPPING):
        # str length counts code points
        return len(value), parse_int(param, rule)
    if kind is Kind.INT:
        return value, parse_int(param, rule)
    if kind is Kind.FLOAT:
        return float(value), parse_float(param, rule)
    if kind is Kind.DURATION:
        return value, parse_duration(param, rule)
    raise UnsupportedKindError(rule, kind)


def _now_like(value: date) -> date:
    """Current UTC time in the shape of ``value``; naive values are UTC."""
    now = datetime.now(UTC)
    if isinstance(value, datetime):
        return now if value.tzinfo is not None else now.replace(tzinfo=None)
    return now.date()


def comparison(rule: str) -> Predicate:
    """Build the predicate for one of the size/magnitude comparison rules."""
    compare = _COMPARISONS[rule]

    def predicate(resolved: Resolved, param: str) -> bool:
        if resolved.kind is Kind.TIME and rule != "len":
            return compare(resolved.value, _now_like(resolved.value))
        left, right = _operands(rule, resolved, param)
        return compare(left, right)

    predicate.__name__ = f"is_{rule}"
    return predicate


def has_value(resolved: Resolved, param: str) -> bool:
    value, kind = resolved
    if kind is Kind.ABSENT:
        return False
    if kind is Kind.STRING:
        return value != ""
    if kind in (Kind.INT, Kind.FLOAT):
        return value != 0
    if kind is Kind.DURATION:
        return bool(value)
    return True


def is_eq(resolved: Resolved, param: str) -> bool:
    value, kind = resolved
    if kind is Kind.STRING:
        return value == param
    if kind is Kind.BOOL:
        return value == parse_bool(param, "eq")
    left, right = _operands("eq", resolved, param)
    return left == right


def is_ne(resolved: Resolved, param: str) -> bool:
    value, kind = resolved
    if kind is Kind.STRING:
        return value != param
    if kind is Kind.BOOL:
        return value != parse_bool(param, "ne")
    left, right = _operands("ne", resolved, param)
    return left != right


def is_email(resolved: Resolved, param: str) -> bool:
    if resolved.kind is not Kind.STRING:
        raise UnsupportedKindError("email", resolved.kind)
    return EMAIL_PATTERN.match(resolved.value) is not None


def is_boolean(resolved: Resolved, param: str) -> bool:
    if resolved.kind is Kind.BOOL:
        return True
    if resolved.kind is not Kind.STRING:
        raise UnsupportedKindError("boolean", resolved.kind)
    return is_bool_literal(resolved.value)


class OneOfRule:
    """``oneof``: the value's string form is one of the listed candidates."""

    def __init__(self, cache: OneOfCache):
        self.cache = cache

    def __call__(self, resolved: Resolved, param: str) -> bool:
        value, kind = resolved
        if kind is Kind.STRING:
            text = value
        elif kind is Kind.INT:
            text = str(value)
        else:
            raise UnsupportedKindError("oneof", kind)
        return text in self.cache.candidates(param)


def builtin_rules(oneof_cache: OneOfCache) -> dict[str, Predicate]:
    """Fresh mapping of the built-in rule set."""
    rules: dict[str, Predicate] = {
        "required": has_value,
        "eq": is_eq,
        "ne": is_ne,
        "email": is_email,
        "boolean": is_boolean,
        "oneof": OneOfRule(oneof_cache),
    }
    for name in _COMPARISONS:
        rules[name] = comparison(name)
    return rules


class RuleTable:
    """Read-only mapping from rule name to predicate.

    Safe to share between threads; the only mutable state is the oneof
    cache, which synchronizes itself.
    """

    def __init__(
        self,
        rules: Mapping[str, Predicate] | None = None,
        oneof_cache: OneOfCache | None = None,
    ):
        self.oneof_cache = oneof_cache if oneof_cache is not None else OneOfCache()
        table = builtin_rules(self.oneof_cache)
        if rules:
            table.update(rules)
        self._rules = MappingProxyType(table)

    def get(self, name: str) -> Predicate:
        try:
            return self._rules[name]
        except KeyError:
            raise UndefinedRuleError(name) from None

    def with_rule(self, name: str, predicate: Predicate) -> "RuleTable":
        """Copy of this table with ``name`` added or replaced."""
        extra = {key: value for key, value in self._rules.items()}
        extra[name] = predicate
        return RuleTable(extra, oneof_cache=self.oneof_cache)

    def names(self) -> list[str]:
        return list(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)
