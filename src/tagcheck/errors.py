"""Exception hierarchy for tagcheck.

Two disjoint classes of problems exist. A *validation failure* means the
data is invalid; it is returned as a ValidationResult and only becomes an
exception when the caller asks for it (ValidationFailed). A *rule
definition error* means the rule tags, the rule table or the message
table are broken; it is always raised.
"""

from typing import Any


class TagCheckError(Exception):
    """Base class for all tagcheck errors."""


class RuleDefinitionError(TagCheckError):
    """Raised when a rule tag, rule table or message template is broken.

    Attributes:
        field_path: Path of the field being validated when the error
            surfaced (empty when not known yet)
    """

    def __init__(self, message: str, field_path: str = ""):
        self.field_path = field_path
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.field_path:
            return f"{message} (field {self.field_path})"
        return message


class InvalidRuleTagError(RuleDefinitionError):
    """Raised when a rule slot contains an empty rule name."""


class UndefinedRuleError(RuleDefinitionError):
    """Raised when a rule tag names a rule missing from the rule table."""

    def __init__(self, rule: str, field_path: str = ""):
        self.rule = rule
        super().__init__(f"Undefined validation rule '{rule}'", field_path)


class RuleParameterError(RuleDefinitionError):
    """Raised when a rule parameter cannot be parsed for its comparison."""

    def __init__(self, rule: str, param: str, expected: str, field_path: str = ""):
        self.rule = rule
        self.param = param
        super().__init__(
            f"Rule '{rule}' parameter {param!r} is not a valid {expected}", field_path
        )


class UnsupportedKindError(RuleDefinitionError):
    """Raised when a rule is applied to a value kind it does not support."""

    def __init__(self, rule: str, kind: Any, field_path: str = ""):
        self.rule = rule
        self.kind = kind
        kind_name = getattr(kind, "value", kind)
        super().__init__(f"Rule '{rule}' does not apply to {kind_name} values", field_path)


class TemplateError(RuleDefinitionError):
    """Raised when a message template carries none of its placeholders."""


class RootTypeError(TagCheckError):
    """Raised when the validated object is neither a record nor a mapping."""


class DecodeError(TagCheckError):
    """Raised when a payload cannot be decoded into the target type."""


class ValidationFailed(TagCheckError):
    """Raised by ValidationResult.raise_for_error() for invalid data.

    Attributes:
        result: The failed ValidationResult
    """

    def __init__(self, result: Any):
        self.result = result
        super().__init__(result.message or "validation failed")
