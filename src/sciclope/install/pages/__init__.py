"""
SciClope Installer Pages

Individual pages of the web installer, in wizard order.
"""

from sciclope.install.pages.base import Page, Signal
from sciclope.install.pages.welcome import WelcomePage

# Page sequence for the web installer
DEFAULT_PAGES = [
    ("Welcome", WelcomePage),
]

__all__ = [
    "Page",
    "Signal",
    "WelcomePage",
    "DEFAULT_PAGES",
]
