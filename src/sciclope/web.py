"""
SciClope Web Application

Flask application factory: the site index, which falls back to the
no-configuration page, and the web installer.
"""

import os
import secrets
from datetime import timedelta
from typing import Optional

from flask import (
    Flask, Response, render_template, request, redirect, url_for,
    session, has_request_context
)
from flask.sessions import SecureCookieSessionInterface

from sciclope.exceptions import SessionUnavailable
from sciclope.html import element
from sciclope.install import WebInstaller, WizardState, PageRegistry, SessionStore
from sciclope.install.pages import DEFAULT_PAGES, Signal
from sciclope.logging_config import get_logger
from sciclope.startup import SiteContext, load_context

logger = get_logger("web")

SESSION_COOKIE_NAME = "sciclope_installer"


class InstallerSessionInterface(SecureCookieSessionInterface):
    """Signed cookie sessions whose Secure flag follows the request scheme."""

    def get_cookie_secure(self, app: Flask) -> bool:
        if app.config.get("SESSION_COOKIE_SECURE"):
            return True
        return has_request_context() and request.is_secure


def _secret_key(context: SiteContext) -> str:
    key = context.get("secret_key") or os.environ.get("SCICLOPE_SECRET_KEY")
    if key:
        return key
    logger.warning("No session secret configured; installer sessions "
                   "will not survive a restart")
    return secrets.token_hex(32)


def create_app(
    context: Optional[SiteContext] = None,
    config: Optional[dict] = None,
    registry: Optional[PageRegistry] = None
) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        context: Site context (default: discovered from the environment)
        config: Optional Flask configuration overrides
        registry: Installer page sequence (default: DEFAULT_PAGES)

    Returns:
        Configured Flask application
    """
    context = context or load_context()
    registry = registry or PageRegistry(DEFAULT_PAGES)

    app = Flask(__name__, template_folder="templates")
    app.session_interface = InstallerSessionInterface()
    app.config.update(
        SECRET_KEY=_secret_key(context),
        SESSION_COOKIE_NAME=SESSION_COOKIE_NAME,
        SESSION_COOKIE_SECURE=False,  # Set per request from the scheme
        SESSION_COOKIE_HTTPONLY=True,
        SESSION_COOKIE_SAMESITE="Lax",
        PERMANENT_SESSION_LIFETIME=timedelta(hours=4),
        DEBUG=context.debug,
    )
    if config:
        app.config.update(config)

    app.extensions["sciclope"] = context

    @app.after_request
    def disable_content_sniffing(response: Response) -> Response:
        response.headers["X-Content-Type-Options"] = "nosniff"
        return response

    @app.route("/")
    def index():
        """Site entry point, or the no-configuration page."""
        if context.config_exists:
            return "Hello world!"

        try:
            installer_started = SessionStore(session).started
        except SessionUnavailable:
            installer_started = False

        return render_template(
            "no_config.html",
            path=(request.script_root or "") + "/",
            version=context.version,
            installer_started=installer_started,
            install_url=url_for("install"),
        )

    @app.route("/install", methods=["GET", "POST"])
    def install():
        """Run one step of the web installer."""
        try:
            store = SessionStore(session)
        except SessionUnavailable as e:
            logger.error("Installer session unavailable: %s", e.message)
            return Response(status=503)

        installer = WebInstaller(
            context,
            request=request,
            registry=registry,
            url_for_page=lambda name: url_for("install", p=name),
        )

        # Installers at other paths or versions keep separate state
        fingerprint = installer.get_fingerprint()
        state = store.get(fingerprint) or WizardState.new()
        session.permanent = True

        result = installer.advance(state, request.args.get("p", ""))

        if result.state.completed:
            store.discard(fingerprint)
            installer.output.add_html(element("p", "Installation complete."))
        elif result.signal is Signal.CONTINUE:
            store.put(fingerprint, result.state)
            next_page = installer.next_page_name(result.page_index)
            return redirect(url_for("install", p=next_page), code=303)
        else:
            store.put(fingerprint, result.state)

        installer.output.finish()
        return Response(installer.output.getvalue(), mimetype="text/html")

    return app
