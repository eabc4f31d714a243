"""Parsing of rule parameters into comparable values.

Numeric literals follow the same base-prefixed syntax rule authors know
from integer literals: ``0x1F``, ``0o17``, ``0b101`` and legacy ``017``
octal. A parameter that cannot be parsed is a broken rule, never a failed
validation.
"""

import math
import re
from datetime import timedelta

from .errors import RuleParameterError

INT64_MIN = -(1 << 63)
UINT64_MAX = (1 << 64) - 1

TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_LEGACY_OCTAL = re.compile(r"^0[0-7]+$")
# unsigned literal: optional base prefix, then digits and underscores only
_UNSIGNED_INT = re.compile(r"^(?:0[xXoObB])?[0-9a-fA-F_]+$")
_DURATION_PART = re.compile(r"([0-9]+(?:\.[0-9]*)?|\.[0-9]+)(ns|us|µs|μs|ms|s|m|h)")

# microseconds per duration unit
_DURATION_UNITS = {
    "ns": 1e-3,
    "us": 1.0,
    "µs": 1.0,
    "μs": 1.0,
    "ms": 1e3,
    "s": 1e6,
    "m": 60e6,
    "h": 3600e6,
}


def _split_sign(text: str) -> tuple[int, str]:
    """Split one leading sign off ``text``."""
    if text[:1] in ("+", "-"):
        return (-1 if text[0] == "-" else 1), text[1:]
    return 1, text


def parse_int(param: str, rule: str = "") -> int:
    """Parse a base-prefixed 64-bit integer literal."""
    sign, text = _split_sign(param.strip())
    if not _UNSIGNED_INT.match(text):
        raise RuleParameterError(rule, param, "integer")

    try:
        if _LEGACY_OCTAL.match(text):
            number = int(text, 8)
        else:
            number = int(text, 0)
    except ValueError:
        raise RuleParameterError(rule, param, "integer") from None

    number *= sign
    if not INT64_MIN <= number <= UINT64_MAX:
        raise RuleParameterError(rule, param, "64-bit integer")
    return number


def parse_float(param: str, rule: str = "") -> float:
    """Parse a 64-bit float literal, hex floats included."""
    text = param.strip()
    try:
        if "0x" in text.lower():
            number = float.fromhex(text)
        else:
            number = float(text)
    except ValueError:
        raise RuleParameterError(rule, param, "float") from None

    if math.isinf(number) and "inf" not in text.lower():
        raise RuleParameterError(rule, param, "64-bit float")
    return number


def parse_bool(param: str, rule: str = "") -> bool:
    """Parse a boolean literal (1, t, true, 0, f, false and case variants)."""
    if param in TRUE_LITERALS:
        return True
    if param in FALSE_LITERALS:
        return False
    raise RuleParameterError(rule, param, "boolean")


def is_bool_literal(text: str) -> bool:
    return text in TRUE_LITERALS or text in FALSE_LITERALS


def parse_duration(param: str, rule: str = "") -> timedelta:
    """Parse a duration such as ``1h30m``, ``250ms`` or ``-1.5s``.

    A bare integer is read as nanoseconds.
    """
    sign, text = _split_sign(param.strip())

    if text == "0":
        return timedelta(0)

    position = 0
    micros = 0.0
    for match in _DURATION_PART.finditer(text):
        if match.start() != position:
            break
        micros += float(match.group(1)) * _DURATION_UNITS[match.group(2)]
        position = match.end()

    if position == 0 or position != len(text):
        # not a duration string; nanoseconds as an integer
        try:
            nanos = parse_int(param, rule)
        except RuleParameterError:
            raise RuleParameterError(rule, param, "duration") from None
        return timedelta(microseconds=nanos / 1000)

    return timedelta(microseconds=sign * micros)
