"""Constants for rule tags, separators and defaults.

Tag grammar tokens and default tag keys are centralized here so the
parser, walker and configuration agree on them.
"""

# Default tag keys looked up on each record field
DEFAULT_RULE_TAG = "validate"
DEFAULT_DESCRIPTION_TAG = "desc"
DEFAULT_OMIT_TAG = "omitempty"
DEFAULT_LOCALE = "zh"

# Tag grammar
SLOT_SEPARATOR = ","
OR_SEPARATOR = "|"
PARAM_SEPARATOR = "="
SKIP_TAG = "-"

# Escape codes for reserved characters inside rule parameters
ESCAPED_COMMA = "0x2C"
ESCAPED_PIPE = "0x7C"

# Characters a configured tag key may not contain
RESERVED_TAG_CHARACTERS = (SLOT_SEPARATOR, OR_SEPARATOR, PARAM_SEPARATOR)

# Message template placeholders: display name, rule parameter
NAME_PLACEHOLDER = "{0}"
PARAM_PLACEHOLDER = "{1}"

# Config file searched by load_config()
CONFIG_FILE_NAME = ".tagcheck.json"
