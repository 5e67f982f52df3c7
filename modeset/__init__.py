"""
modeset - Cyclable list and boolean modes for user-configurable switches.
"""
from .constants import APP_NAME, APP_VERSION, APP_DESCRIPTION
from .errors import (
    ModeError,
    ModeConstructionError,
    InvalidOperationError,
    UnrecognizedValueError,
    ModeTypeError,
    UnknownCommandError,
)
from .mode import Mode, ModeKind, ListMode, BooleanMode, M
from .commands import COMMANDS, ParsedCommand, parse_command, apply_command
from .display import mode_text, modes_table

__version__ = APP_VERSION
__all__ = [
    'APP_NAME',
    'APP_VERSION',
    'APP_DESCRIPTION',
    # Modes
    'Mode',
    'ModeKind',
    'ListMode',
    'BooleanMode',
    'M',
    # Errors
    'ModeError',
    'ModeConstructionError',
    'InvalidOperationError',
    'UnrecognizedValueError',
    'ModeTypeError',
    'UnknownCommandError',
    # Commands
    'COMMANDS',
    'ParsedCommand',
    'parse_command',
    'apply_command',
    # Display
    'mode_text',
    'modes_table',
]
