"""Validator facade: walk an object, translate the first failure.

Basic usage:
    from dataclasses import dataclass, field
    from tagcheck import Validator

    @dataclass
    class User:
        name: str = field(metadata={"validate": "required", "desc": "Name"})

    result = Validator().validate(User(name=""))
    if not result.valid:
        print(result.message)
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .config import ValidatorConfig
from .errors import DecodeError, RootTypeError, ValidationFailed
from .kinds import is_record_type
from .messages import get_messages
from .rules import RuleTable
from .translator import Translator
from .walker import FieldContext, GraphWalker

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Outcome of one validation call.

    Attributes:
        valid: Whether every reachable rule passed
        context: The failing field, None when valid
        message: Translated failure message, None when valid
        value: The validated object (the decoded object for bind())
    """
    valid: bool
    context: FieldContext | None = None
    message: str | None = None
    value: Any = None

    @property
    def field(self) -> str | None:
        """Display name of the failing field."""
        return self.context.display_name if self.context else None

    @property
    def rule(self) -> str | None:
        return self.context.outcome.rule if self.context else None

    @property
    def param(self) -> str | None:
        return self.context.outcome.param if self.context else None

    @property
    def path(self) -> str | None:
        return self.context.path if self.context else None

    def raise_for_error(self) -> None:
        """Raise ValidationFailed if the result is invalid."""
        if not self.valid:
            raise ValidationFailed(self)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "valid": self.valid,
            "field": self.field,
            "path": self.path,
            "rule": self.rule,
            "param": self.param,
            "message": self.message,
        }


@lru_cache(maxsize=256)
def _adapter(target: type) -> TypeAdapter:
    return TypeAdapter(target)


class Validator:
    """Validates record graphs against the rule tags on their fields.

    A validator holds no per-call state, so one instance can serve
    concurrent calls from several threads.
    """

    def __init__(
        self,
        config: ValidatorConfig | None = None,
        *,
        messages: dict[str, str] | None = None,
        fallback: str | None = None,
        rules: RuleTable | None = None,
    ):
        """Initialize a validator.

        Args:
            config: Tag keys and locale (defaults: validate / desc / omitempty, zh)
            messages: Replacement message table; defaults to the locale's table
            fallback: Message used when no template matches a failed rule
            rules: Rule table; defaults to the built-in rules
        """
        self.config = config or ValidatorConfig()
        self.rules = rules or RuleTable()

        locale_messages, locale_fallback = get_messages(self.config.locale)
        self.translator = Translator(
            messages if messages is not None else locale_messages,
            fallback if fallback is not None else locale_fallback,
        )
        self._walker = GraphWalker(self.config, self.rules)

    def configure(
        self,
        rule_tag: str | None = None,
        description_tag: str | None = None,
        omit_tag: str | None = None,
    ) -> "Validator":
        """Return a validator using different tag keys.

        The rule table and message table are shared with this validator.
        """
        updates = {
            key: value
            for key, value in (
                ("rule_tag", rule_tag),
                ("description_tag", description_tag),
                ("omit_tag", omit_tag),
            )
            if value is not None
        }
        config = ValidatorConfig(**{**self.config.model_dump(), **updates})

        validator = Validator(config, rules=self.rules)
        validator.translator = self.translator
        return validator

    def validate(self, obj: Any) -> ValidationResult:
        """Validate ``obj`` and everything reachable from it.

        Returns:
            ValidationResult describing the first failing rule, if any

        Raises:
            RootTypeError: If obj is neither a record nor a mapping
            RuleDefinitionError: If a rule tag, rule or template is broken
        """
        logger.debug(f"Validating {type(obj).__name__}")
        context = self._walker.walk(obj)

        if context is None:
            return ValidationResult(valid=True, value=obj)

        message = self.translator.translate(context)
        logger.info(f"Validation failed at {context.path}: {message}")
        return ValidationResult(valid=False, context=context, message=message, value=obj)

    def bind(self, payload: str | bytes, target: Any) -> ValidationResult:
        """Decode a JSON payload into ``target`` and validate the result.

        Args:
            payload: JSON document
            target: Record class (dataclass or pydantic model), or an
                    instance whose class is used

        Returns:
            ValidationResult whose ``value`` is the decoded object

        Raises:
            RootTypeError: If target is not a record type
            DecodeError: If the payload does not decode into target
        """
        target_type = target if isinstance(target, type) else type(target)
        if not is_record_type(target_type):
            raise RootTypeError(f"Bind target must be a record type, got {target_type.__name__}")

        try:
            obj = _adapter(target_type).validate_json(payload)
        except PydanticValidationError as e:
            raise DecodeError(f"Failed to decode payload into {target_type.__name__}: {e}") from e

        return self.validate(obj)


_default_validator: Validator | None = None


def get_validator() -> Validator:
    """Get default validator instance."""
    global _default_validator
    if _default_validator is None:
        _default_validator = Validator()
    return _default_validator


def validate(obj: Any) -> ValidationResult:
    """Validate ``obj`` with the default validator."""
    return get_validator().validate(obj)


def bind(payload: str | bytes, target: Any) -> ValidationResult:
    """Decode and validate ``payload`` with the default validator."""
    return get_validator().bind(payload, target)
