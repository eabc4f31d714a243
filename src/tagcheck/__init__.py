"""tagcheck - declarative validation of object graphs through field rule tags.

Fields of dataclasses and pydantic models carry short rule tags such as
``"required,min=1,oneof=1 2"``. tagcheck walks the object graph, applies
each rule to its field and reports the first violated rule with a
localized message.
"""

__version__ = "0.1.0"
__author__ = "tagcheck contributors"
__description__ = "Declarative rule-tag validation for dataclasses and pydantic models"

from tagcheck.config import ValidatorConfig, load_config
from tagcheck.errors import (
    DecodeError,
    InvalidRuleTagError,
    RootTypeError,
    RuleDefinitionError,
    RuleParameterError,
    TagCheckError,
    TemplateError,
    UndefinedRuleError,
    UnsupportedKindError,
    ValidationFailed,
)
from tagcheck.grammar import RuleInvocation, RuleSlot, format_tag, parse_tag
from tagcheck.kinds import Kind
from tagcheck.rules import OneOfCache, RuleTable
from tagcheck.translator import Translator
from tagcheck.validator import ValidationResult, Validator, bind, get_validator, validate
from tagcheck.walker import FieldContext, RuleOutcome

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    # Facade
    "Validator",
    "ValidationResult",
    "ValidatorConfig",
    "load_config",
    "validate",
    "bind",
    "get_validator",
    # Engine parts
    "RuleTable",
    "OneOfCache",
    "Translator",
    "Kind",
    "FieldContext",
    "RuleOutcome",
    "RuleInvocation",
    "RuleSlot",
    "parse_tag",
    "format_tag",
    # Errors
    "TagCheckError",
    "RuleDefinitionError",
    "InvalidRuleTagError",
    "UndefinedRuleError",
    "RuleParameterError",
    "UnsupportedKindError",
    "TemplateError",
    "RootTypeError",
    "DecodeError",
    "ValidationFailed",
]
