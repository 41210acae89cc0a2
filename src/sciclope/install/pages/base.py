"""
Installer page base class

A page renders one wizard step into the installer output and reports
whether the step is complete.
"""

import enum
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import TYPE_CHECKING, Optional, Iterator

from sciclope.html import open_element, close_element, element

if TYPE_CHECKING:
    from sciclope.install.installer import WebInstaller


class Signal(enum.Enum):
    """Result of emitting a page."""
    INCOMPLETE = "incomplete"  # show the same page again
    CONTINUE = "continue"      # step is done, the wizard may advance


class Page(ABC):
    """Base class for installer pages."""

    title: Optional[str] = None

    def __init__(self, installer: "WebInstaller", name: str):
        self.parent = installer
        self.name = name
        self._form_open = False

    @abstractmethod
    def emit(self) -> Signal:
        """Render the page and return its completion signal."""

    def add_html(self, html: str):
        self.parent.output.add_html(html)

    def add_heading(self):
        self.add_html(element("h2", self.title or self.name))

    def was_posted(self, field: str) -> bool:
        """Check whether the current request is a form post carrying a field."""
        request = self.parent.request
        if request is None or request.method != "POST":
            return False
        return field in request.form

    def begin_form(self):
        """Open the page's form, posting back to this page."""
        if self._form_open:
            return
        self._form_open = True
        self.add_html(open_element("form", {
            "method": "post",
            "action": self.parent.page_url(self.name),
        }))

    def end_form(self):
        """Close the form opened by begin_form(), if any."""
        if not self._form_open:
            return
        self._form_open = False
        self.add_html(close_element("form"))

    @contextmanager
    def form(self) -> Iterator[None]:
        """Wrap output in a form that is closed even if rendering fails."""
        self.begin_form()
        try:
            yield
        finally:
            self.end_form()
