"""
Constants and defaults for modeset.
"""
from typing import Final

APP_NAME: Final[str] = "modeset"
APP_VERSION: Final[str] = "1.0.0"
APP_DESCRIPTION: Final[str] = "Cyclable list and boolean modes for user-configurable switches"

MIN_LIST_LENGTH: Final[int] = 2

BOOLEAN_LABEL: Final[str] = "Boolean"
ON_VALUE: Final[str] = "on"
OFF_VALUE: Final[str] = "off"

# Lowercased strings accepted by BooleanMode.set()
TRUE_WORDS: Final[frozenset] = frozenset({"on", "true"})
FALSE_WORDS: Final[frozenset] = frozenset({"off", "false"})

DESCRIPTION_SEPARATOR: Final[str] = ": "
LABEL_SEPARATOR: Final[str] = ", "

# Rich styles used by modeset.display
STYLE_DESCRIPTION: Final[str] = "bold"
STYLE_CURRENT: Final[str] = "bold cyan"
STYLE_OPTION: Final[str] = "dim"
STYLE_ON: Final[str] = "bold green"
STYLE_OFF: Final[str] = "bold red"
STYLE_MUTED: Final[str] = "bright_black"
