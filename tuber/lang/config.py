"""Process-wide settings, read from the environment. Command-line flags in main.py take precedence over these."""

import os
from enum import Enum

STYLE_VAR = "TUBER_DISPLAY_STYLE"
LIMIT_VAR = "TUBER_STEP_LIMIT"
HISTORY_VAR = "TUBER_HISTORY_DIR"

DEFAULT_STEP_LIMIT = 1000
DEFAULT_HISTORY_DIR = "~/.tuber"


class DisplayStyle(Enum):
    """Surface syntax used to print terms. Values are the names accepted in TUBER_DISPLAY_STYLE."""
    LAZY_K = "Lazy_K"
    ECMASCRIPT = "ECMAScript"

    @classmethod
    def parse(cls, name):
        """Returns the style called name, falling back to LAZY_K for unknown names."""
        for style in cls:
            if style.value == name:
                return style
        return cls.LAZY_K


def display_style():
    return DisplayStyle.parse(os.environ.get(STYLE_VAR, DisplayStyle.LAZY_K.value))


def step_limit():
    """Maximum number of reduction steps shown for a single command. Invalid values fall back to the default."""
    try:
        limit = int(os.environ.get(LIMIT_VAR, DEFAULT_STEP_LIMIT))
    except ValueError:
        return DEFAULT_STEP_LIMIT
    return limit if limit > 0 else DEFAULT_STEP_LIMIT


def history_dir():
    return os.path.expanduser(os.environ.get(HISTORY_VAR, DEFAULT_HISTORY_DIR))
