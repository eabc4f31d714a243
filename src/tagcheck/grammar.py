"""Rule tag grammar.

A rule tag is a comma separated list of slots. Each slot holds one or more
pipe separated alternatives of the form ``name`` or ``name=parameter``:

    required,min=1,oneof=1 2|eq=0

Parameters can carry literal commas and pipes through the escape codes
``0x2C`` and ``0x7C``. Parsing never fails; broken rule names are left
for the evaluator to report.
"""

from dataclasses import dataclass
from functools import lru_cache

from .constants import (
    DEFAULT_OMIT_TAG,
    ESCAPED_COMMA,
    ESCAPED_PIPE,
    OR_SEPARATOR,
    PARAM_SEPARATOR,
    SKIP_TAG,
    SLOT_SEPARATOR,
)


@dataclass(frozen=True)
class RuleInvocation:
    """One parsed rule: its name and raw (unescaped) parameter."""
    name: str
    param: str = ""
    alternative: bool = False  # member of an OR group with more than one rule

    def __str__(self) -> str:
        if not self.param:
            return self.name
        return f"{self.name}{PARAM_SEPARATOR}{escape_param(self.param)}"


@dataclass(frozen=True)
class RuleSlot:
    """A comma separated slot; passes when any alternative passes."""
    alternatives: tuple[RuleInvocation, ...] = ()
    omit_marker: bool = False

    @property
    def primary(self) -> RuleInvocation:
        """The invocation reported when every alternative fails."""
        return self.alternatives[0]

    def __str__(self) -> str:
        return OR_SEPARATOR.join(str(invocation) for invocation in self.alternatives)


def unescape_param(param: str) -> str:
    return param.replace(ESCAPED_COMMA, SLOT_SEPARATOR).replace(ESCAPED_PIPE, OR_SEPARATOR)


def escape_param(param: str) -> str:
    return param.replace(SLOT_SEPARATOR, ESCAPED_COMMA).replace(OR_SEPARATOR, ESCAPED_PIPE)


def is_skip_tag(tag: str) -> bool:
    """Whether the whole tag disables validation for its field."""
    return tag == SKIP_TAG


def parse_invocation(text: str, alternative: bool = False) -> RuleInvocation:
    """Parse ``name`` or ``name=param``; only the first '=' splits."""
    name, separator, param = text.partition(PARAM_SEPARATOR)
    return RuleInvocation(
        name=name,
        param=unescape_param(param) if separator else "",
        alternative=alternative,
    )


@lru_cache(maxsize=1024)
def parse_tag(tag: str, omit_marker: str = DEFAULT_OMIT_TAG) -> tuple[RuleSlot, ...]:
    """Parse a rule tag into its ordered slots.

    Args:
        tag: Raw rule tag, e.g. ``"omitempty,required,min=1"``
        omit_marker: Configured optional marker key

    Returns:
        Tuple of RuleSlot in tag order. An empty tag yields no slots; the
        optional marker yields a slot with ``omit_marker`` set and no
        alternatives.
    """
    if not tag:
        return ()

    slots = []
    for chunk in tag.split(SLOT_SEPARATOR):
        if chunk == omit_marker:
            slots.append(RuleSlot(omit_marker=True))
            continue

        parts = chunk.split(OR_SEPARATOR)
        is_group = len(parts) > 1
        slots.append(RuleSlot(
            alternatives=tuple(parse_invocation(part, is_group) for part in parts)
        ))

    return tuple(slots)


def format_tag(slots: tuple[RuleSlot, ...], omit_marker: str = DEFAULT_OMIT_TAG) -> str:
    """Serialize parsed slots back into tag text (inverse of parse_tag)."""
    return SLOT_SEPARATOR.join(
        omit_marker if slot.omit_marker else str(slot) for slot in slots
    )
