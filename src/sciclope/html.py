"""
SciClope HTML helpers

Element builders used by the installer output and pages.
"""

from typing import Optional, Dict

from markupsafe import escape


def open_element(elem: str, attrs: Optional[Dict[str, str]] = None) -> str:
    """Return the opening tag for an element, with escaped attributes."""
    elem = elem.lower()
    parts = [elem]
    for name, value in (attrs or {}).items():
        if value is None:
            continue
        parts.append(f'{name}="{escape(value)}"')
    return "<" + " ".join(parts) + ">"


def close_element(elem: str) -> str:
    """Return the closing tag for an element, e.g. '</form>'."""
    return f"</{elem.lower()}>"


def element(elem: str, contents: str = "", attrs: Optional[Dict[str, str]] = None) -> str:
    """Return a complete element with escaped text contents."""
    return open_element(elem, attrs) + str(escape(contents)) + close_element(elem)
