"""
Installer Session Store

Keeps wizard state in the HTTP session, keyed by installer fingerprint.
"""

from typing import MutableMapping, Optional, Any

from flask.sessions import NullSession

from sciclope.exceptions import SessionUnavailable
from sciclope.install.installer import WizardState
from sciclope.logging_config import get_logger

logger = get_logger("install.session")

SESSION_KEY = "installation"


class SessionStore:
    """Fingerprint-keyed wizard state inside a session mapping."""

    def __init__(self, session: MutableMapping[str, Any], key: str = SESSION_KEY):
        if session is None or isinstance(session, NullSession):
            raise SessionUnavailable(
                details="The session interface returned no usable session"
            )
        self.session = session
        self.key = key

    def _entries(self) -> dict:
        entries = self.session.get(self.key)
        return dict(entries) if isinstance(entries, dict) else {}

    @property
    def started(self) -> bool:
        """True if any installer state is stored in this session."""
        return bool(self._entries())

    def get(self, fingerprint: str) -> Optional[WizardState]:
        """Load the state for a fingerprint. Stale or absent state yields None."""
        data = self._entries().get(fingerprint)
        if not isinstance(data, dict):
            return None

        state = WizardState.from_dict(data)
        if state.is_stale():
            logger.info("Discarding stale installer session (%.1f hours old)",
                        state.get_age_hours())
            self.discard(fingerprint)
            return None
        return state

    def put(self, fingerprint: str, state: WizardState):
        entries = self._entries()
        entries[fingerprint] = state.to_dict()
        # Reassign so the session notices the change
        self.session[self.key] = entries

    def discard(self, fingerprint: str):
        entries = self._entries()
        if entries.pop(fingerprint, None) is not None:
            self.session[self.key] = entries
