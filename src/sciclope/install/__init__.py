"""
SciClope Web Installer

Multi-step installer driven by per-fingerprint session state.
"""

from sciclope.install.installer import WebInstaller, WizardState, AdvanceResult
from sciclope.install.registry import PageRegistry
from sciclope.install.session import SessionStore

__all__ = ["WebInstaller", "WizardState", "AdvanceResult", "PageRegistry", "SessionStore"]
