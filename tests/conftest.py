"""Shared fixtures for SciClope tests."""

from pathlib import Path

import pytest

from sciclope.html import element
from sciclope.install.pages import Page, Signal, WelcomePage
from sciclope.install.registry import PageRegistry
from sciclope.startup import SiteContext


class FakeRequest:
    """Minimal stand-in for a Flask request."""

    def __init__(self, method="GET", form=None, args=None):
        self.method = method
        self.form = form or {}
        self.args = args or {}


class DonePage(Page):
    """Second page used to exercise multi-page sequencing."""

    def emit(self) -> Signal:
        if self.was_posted("submit-finish"):
            return Signal.CONTINUE
        with self.form():
            self.add_heading()
            self.add_html(element("p", "All done."))
        return Signal.INCOMPLETE


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host SCICLOPE_* variables out of the tests."""
    for name in ("SCICLOPE_PATH", "SCICLOPE_CONFIG", "SCICLOPE_DEBUG", "SCICLOPE_SECRET_KEY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def install_dir(tmp_path) -> Path:
    return tmp_path


@pytest.fixture
def context(install_dir) -> SiteContext:
    return SiteContext(
        install_path=install_dir,
        config_file=install_dir / "LocalSettings.yaml",
        version="1.0.0",
    )


@pytest.fixture
def two_page_registry() -> PageRegistry:
    return PageRegistry([("Welcome", WelcomePage), ("Done", DonePage)])


@pytest.fixture
def make_request():
    return FakeRequest


@pytest.fixture
def get_request():
    return FakeRequest()


@pytest.fixture
def continue_request():
    return FakeRequest(method="POST", form={"submit-continue": "Continue"})


@pytest.fixture
def finish_request():
    return FakeRequest(method="POST", form={"submit-finish": "Finish"})


@pytest.fixture
def app(context, two_page_registry):
    from sciclope.web import create_app

    return create_app(
        context,
        config={"TESTING": True, "SECRET_KEY": "test-secret"},
        registry=two_page_registry,
    )


@pytest.fixture
def client(app):
    return app.test_client()
