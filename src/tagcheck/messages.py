"""Message templates for failed rules.

Keys are a bare rule name (``required``) or a rule name suffixed with the
declared kind of the field (``min-string``). ``{0}`` is replaced with the
field's display name and ``{1}`` with the rule parameter.
"""

from types import MappingProxyType

ZH_FALLBACK = "参数异常"
EN_FALLBACK = "invalid parameter"

ZH_MESSAGES = MappingProxyType({
    "required": "{0}为必填字段",
    "eq": "{0}不等于{1}",
    "ne": "{0}不能等于{1}",
    "email": "{0}必须是一个有效的邮箱",
    "oneof": "{0}必须是[{1}]中的一个",
    "boolean": "{0}必须是一个有效的布尔值",
    # len
    "len-string": "{0}长度必须是{1}个字符",
    "len-int": "{0}必须等于{1}",
    "len-float": "{0}必须等于{1}",
    "len-duration": "{0}必须等于{1}",
    "len-sequence": "{0}必须包含{1}项",
    "len-mapping": "{0}必须包含{1}项",
    # min
    "min-string": "{0}长度必须至少为{1}个字符",
    "min-int": "{0}最小只能为{1}",
    "min-float": "{0}最小只能为{1}",
    "min-duration": "{0}最小只能为{1}",
    "min-sequence": "{0}至少包含{1}项",
    "min-mapping": "{0}至少包含{1}项",
    "min-time": "{0}必须晚于或等于当前时间",
    # max
    "max-string": "{0}长度不超过{1}个字符",
    "max-int": "{0}必须小于或等于{1}",
    "max-float": "{0}必须小于或等于{1}",
    "max-duration": "{0}必须小于或等于{1}",
    "max-sequence": "{0}最多包含{1}项",
    "max-mapping": "{0}最多包含{1}项",
    "max-time": "{0}必须早于或等于当前时间",
    # lt
    "lt-string": "{0}长度必须小于{1}个字符",
    "lt-int": "{0}必须小于{1}",
    "lt-float": "{0}必须小于{1}",
    "lt-duration": "{0}必须小于{1}",
    "lt-sequence": "{0}必须少于{1}项",
    "lt-mapping": "{0}必须少于{1}项",
    "lt-time": "{0}必须早于当前时间",
    # lte
    "lte-string": "{0}长度不能超过{1}个字符",
    "lte-int": "{0}必须小于或等于{1}",
    "lte-float": "{0}必须小于或等于{1}",
    "lte-duration": "{0}必须小于或等于{1}",
    "lte-sequence": "{0}只能包含{1}项",
    "lte-mapping": "{0}只能包含{1}项",
    "lte-time": "{0}必须早于或等于当前时间",
    # gt
    "gt-string": "{0}长度必须大于{1}个字符",
    "gt-int": "{0}必须大于{1}",
    "gt-float": "{0}必须大于{1}",
    "gt-duration": "{0}必须大于{1}",
    "gt-sequence": "{0}必须大于{1}项",
    "gt-mapping": "{0}必须大于{1}项",
    "gt-time": "{0}必须晚于当前时间",
    # gte
    "gte-string": "{0}长度必须至少为{1}个字符",
    "gte-int": "{0}必须大于或等于{1}",
    "gte-float": "{0}必须大于或等于{1}",
    "gte-duration": "{0}必须大于或等于{1}",
    "gte-sequence": "{0}必须至少包含{1}项",
    "gte-mapping": "{0}必须至少包含{1}项",
    "gte-time": "{0}必须晚于或等于当前时间",
})

EN_MESSAGES = MappingProxyType({
    "required": "{0} is required",
    "eq": "{0} is not equal to {1}",
    "ne": "{0} must not be equal to {1}",
    "email": "{0} must be a valid email address",
    "oneof": "{0} must be one of [{1}]",
    "boolean": "{0} must be a valid boolean",
    # len
    "len-string": "{0} must be {1} characters long",
    "len-int": "{0} must be equal to {1}",
    "len-float": "{0} must be equal to {1}",
    "len-duration": "{0} must be equal to {1}",
    "len-sequence": "{0} must contain {1} items",
    "len-mapping": "{0} must contain {1} items",
    # min
    "min-string": "{0} must be at least {1} characters long",
    "min-int": "{0} must be {1} or greater",
    "min-float": "{0} must be {1} or greater",
    "min-duration": "{0} must be {1} or greater",
    "min-sequence": "{0} must contain at least {1} items",
    "min-mapping": "{0} must contain at least {1} items",
    "min-time": "{0} must be after or equal to the current time",
    # max
    "max-string": "{0} must be at most {1} characters long",
    "max-int": "{0} must be {1} or less",
    "max-float": "{0} must be {1} or less",
    "max-duration": "{0} must be {1} or less",
    "max-sequence": "{0} must contain at most {1} items",
    "max-mapping": "{0} must contain at most {1} items",
    "max-time": "{0} must be before or equal to the current time",
    # lt
    "lt-string": "{0} must be shorter than {1} characters",
    "lt-int": "{0} must be less than {1}",
    "lt-float": "{0} must be less than {1}",
    "lt-duration": "{0} must be less than {1}",
    "lt-sequence": "{0} must contain fewer than {1} items",
    "lt-mapping": "{0} must contain fewer than {1} items",
    "lt-time": "{0} must be before the current time",
    # lte
    "lte-string": "{0} must be at most {1} characters long",
    "lte-int": "{0} must be {1} or less",
    "lte-float": "{0} must be {1} or less",
    "lte-duration": "{0} must be {1} or less",
    "lte-sequence": "{0} must contain at most {1} items",
    "lte-mapping": "{0} must contain at most {1} items",
    "lte-time": "{0} must be before or equal to the current time",
    # gt
    "gt-string": "{0} must be longer than {1} characters",
    "gt-int": "{0} must be greater than {1}",
    "gt-float": "{0} must be greater than {1}",
    "gt-duration": "{0} must be greater than {1}",
    "gt-sequence": "{0} must contain more than {1} items",
    "gt-mapping": "{0} must contain more than {1} items",
    "gt-time": "{0} must be after the current time",
    # gte
    "gte-string": "{0} must be at least {1} characters long",
    "gte-int": "{0} must be {1} or greater",
    "gte-float": "{0} must be {1} or greater",
    "gte-duration": "{0} must be {1} or greater",
    "gte-sequence": "{0} must contain at least {1} items",
    "gte-mapping": "{0} must contain at least {1} items",
    "gte-time": "{0} must be after or equal to the current time",
})

_TABLES = {
    "zh": (ZH_MESSAGES, ZH_FALLBACK),
    "en": (EN_MESSAGES, EN_FALLBACK),
}

DEFAULT_MESSAGES = ZH_MESSAGES
DEFAULT_FALLBACK = ZH_FALLBACK


def get_messages(locale: str) -> tuple[MappingProxyType, str]:
    """Message table and fallback message for a locale.

    Raises:
        KeyError: If no table exists for ``locale``
    """
    return _TABLES[getattr(locale, "value", locale)]


def available_locales() -> list[str]:
    return sorted(_TABLES)
