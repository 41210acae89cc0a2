"""
Welcome Page

First page of the web installer.
"""

from sciclope.html import element
from sciclope.install.pages.base import Page, Signal


WELCOME_TEXT = (
    "This installer will set up a new SciClope site. "
    "Press Continue when you are ready to begin."
)


class WelcomePage(Page):
    """Introductory page; completes when the user presses Continue."""

    def emit(self) -> Signal:
        if self.was_posted("submit-continue"):
            return Signal.CONTINUE

        with self.form():
            self.add_heading()
            self.add_html(element("p", WELCOME_TEXT))
            self.add_html(
                '<input type="submit" name="submit-continue" value="Continue">'
            )
        return Signal.INCOMPLETE
