"""
SciClope: bootstrap layer and web installer

Startup pipeline, configuration discovery and the multi-step web installer.
"""

try:
    from importlib.metadata import version
    __version__ = version("sciclope")
except Exception:
    __version__ = "1.0.0"  # Fallback for development

__all__ = ["__version__"]
