"""
SciClope Utilities

Small helpers shared by startup, logging and the web layer.
"""

import re
from typing import Optional


# A leading non-zero number, e.g. "1", " +02", "-7 days"
_NONZERO_NUMBER = re.compile(r"^\s*[+-]?0*[1-9]")


def option_str_to_bool(value: Optional[str]) -> bool:
    """Interpret an option string as a boolean.

    'true', 'yes' and 'on' (case-insensitive, no surrounding whitespace) are
    true, as is any string starting with a non-zero number. Everything else,
    including None, is false.
    """
    if value is None:
        return False

    value = value.lower()
    if value in ("true", "yes", "on"):
        return True
    return bool(_NONZERO_NUMBER.match(value))
