"""Translate a failed field into a human-readable message."""

import logging
from collections.abc import Mapping

from .constants import NAME_PLACEHOLDER, PARAM_PLACEHOLDER
from .errors import TemplateError
from .messages import DEFAULT_FALLBACK, DEFAULT_MESSAGES
from .walker import FieldContext

logger = logging.getLogger(__name__)


def render(template: str, display_name: str, param: str) -> str:
    """Fill the first ``{0}`` with the display name and first ``{1}`` with the parameter.

    Raises:
        TemplateError: If the template carries neither placeholder
    """
    if NAME_PLACEHOLDER not in template and PARAM_PLACEHOLDER not in template:
        raise TemplateError(f"Message template {template!r} has no placeholders")
    return template.replace(NAME_PLACEHOLDER, display_name, 1).replace(PARAM_PLACEHOLDER, param, 1)


class Translator:
    """Looks up message templates for failed rules.

    Lookup tries the bare rule name, then ``rule-kind`` with the declared
    kind of the field. A miss yields the fallback message.
    """

    def __init__(self, messages: Mapping[str, str] | None = None, fallback: str = DEFAULT_FALLBACK):
        self.messages = messages if messages is not None else DEFAULT_MESSAGES
        self.fallback = fallback

    def template_for(self, rule: str, kind: str) -> str | None:
        template = self.messages.get(rule)
        if template is None:
            template = self.messages.get(f"{rule}-{kind}")
        return template

    def translate(self, context: FieldContext) -> str:
        outcome = context.outcome
        kind = context.declared_kind.value
        template = self.template_for(outcome.rule, kind)

        if template is None:
            logger.warning(f"No message for rule '{outcome.rule}' on {kind} field {context.path}")
            return self.fallback

        try:
            return render(template, context.display_name, outcome.param)
        except TemplateError as e:
            e.field_path = context.path
            raise
