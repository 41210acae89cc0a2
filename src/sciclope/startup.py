"""
SciClope Startup

Install path and configuration discovery shared by every entry point. The
resulting SiteContext is built once per process and passed explicitly.
"""

import os
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, field

import yaml

from sciclope import __version__
from sciclope.exceptions import ConfigError
from sciclope.utils import option_str_to_bool


CONFIG_FILENAME = "LocalSettings.yaml"

# Known entry points; anything else is reported as "unknown"
ENTRY_POINTS = ("index", "install", "unknown")


@dataclass
class SiteContext:
    """Per-process configuration for a SciClope site."""
    install_path: Path
    config_file: Path
    version: str = __version__
    entry_point: str = "unknown"
    settings: Dict[str, Any] = field(default_factory=dict)
    debug: bool = False

    @property
    def config_exists(self) -> bool:
        return self.config_file.is_file()

    @property
    def site_name(self) -> str:
        return self.settings.get("site_name") or "SciClope"

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value from the loaded settings."""
        return self.settings.get(key, default)


def detect_install_path() -> Path:
    """Get the installation path.

    SCICLOPE_PATH overrides the default, which is the directory containing
    the sciclope package.
    """
    path = os.environ.get("SCICLOPE_PATH")
    if path:
        return Path(path)
    return Path(__file__).resolve().parent.parent


def detect_config_file(install_path: Path) -> Path:
    """Get the configuration file path (SCICLOPE_CONFIG overrides)."""
    path = os.environ.get("SCICLOPE_CONFIG")
    if path:
        return Path(path)
    return install_path / CONFIG_FILENAME


def load_settings(config_file: Path) -> Dict[str, Any]:
    """Load settings from the YAML configuration file.

    Returns an empty dict when the file does not exist.

    Raises:
        ConfigError: if the file is unreadable or not a YAML mapping
    """
    if not config_file.exists():
        return {}

    try:
        data = yaml.safe_load(config_file.read_text())
    except OSError as e:
        raise ConfigError(
            f"Configuration file {config_file} exists but is not readable",
            details=str(e)
        )
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Configuration file {config_file} is not valid YAML",
            details=str(e)
        )

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Configuration file {config_file} must contain a mapping",
            details=f"Got {type(data).__name__}"
        )
    return data


def load_context(
    entry_point: str = "unknown",
    install_path: Optional[Path] = None,
    config_file: Optional[Path] = None
) -> SiteContext:
    """Build the SiteContext for this process."""
    if entry_point not in ENTRY_POINTS:
        entry_point = "unknown"

    install_path = install_path or detect_install_path()
    config_file = config_file or detect_config_file(install_path)

    return SiteContext(
        install_path=install_path,
        config_file=config_file,
        entry_point=entry_point,
        settings=load_settings(config_file),
        debug=option_str_to_bool(os.environ.get("SCICLOPE_DEBUG")),
    )
