"""Application settings.

Settings are resolved in three layers: built-in defaults, an optional YAML
file (passed explicitly or named by ``ROSTER_CONFIG``) and environment
variable overrides.
"""
import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_COHORT = "2412-FTB-ET-WEB-FT"
DEFAULT_API_ROOT = "https://fsa-puppy-bowl.herokuapp.com/api"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class RosterSettings:
    """
    Runtime settings for the roster application.

    Attributes:
        cohort_name: Tenant identifier selecting the backend dataset
        api_root: API root URL, the cohort is appended to it
        request_timeout: Seconds before a request is abandoned (None = wait forever)
        debug: Run the Dash server in debug mode
        host: Interface the development server binds to
        port: Port the development server listens on
    """

    cohort_name: str = DEFAULT_COHORT
    api_root: str = DEFAULT_API_ROOT
    request_timeout: Optional[float] = None
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8050

    def __post_init__(self):
        if not self.cohort_name or not str(self.cohort_name).strip():
            raise ValueError("cohort_name must not be empty")
        object.__setattr__(self, "api_root", str(self.api_root).rstrip("/"))

    @property
    def base_url(self) -> str:
        """Base URL of the cohort's API, e.g. ``.../api/2412-FTB-ET-WEB-FT``."""
        return f"{self.api_root}/{self.cohort_name}"


def _read_yaml(config_path: str) -> Dict[str, Any]:
    logger.info(f"[Config] Loading settings from: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Settings file must contain a mapping: {config_path}")

    # Allow the settings to live under a top-level `roster:` key
    if "roster" in raw and isinstance(raw["roster"], dict):
        raw = raw["roster"]

    known = {f.name for f in fields(RosterSettings)}
    unknown = set(raw) - known
    if unknown:
        raise ValueError(f"Unknown settings keys: {sorted(unknown)}")

    return raw


def _env_overrides(environ) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}

    if environ.get("ROSTER_COHORT"):
        overrides["cohort_name"] = environ["ROSTER_COHORT"]
    if environ.get("ROSTER_API_ROOT"):
        overrides["api_root"] = environ["ROSTER_API_ROOT"]
    if environ.get("ROSTER_REQUEST_TIMEOUT"):
        overrides["request_timeout"] = float(environ["ROSTER_REQUEST_TIMEOUT"])
    if environ.get("ROSTER_DEBUG"):
        overrides["debug"] = environ["ROSTER_DEBUG"].strip().lower() in _TRUTHY
    if environ.get("HOST"):
        overrides["host"] = environ["HOST"]
    if environ.get("PORT"):
        overrides["port"] = int(environ["PORT"])

    return overrides


def load_settings(
    config_path: Optional[str] = None, environ: Optional[Dict[str, str]] = None
) -> RosterSettings:
    """
    Resolve settings from defaults, YAML file and environment.

    Args:
        config_path: Optional YAML settings file (falls back to ``ROSTER_CONFIG``)
        environ: Environment mapping (defaults to ``os.environ``)

    Returns:
        RosterSettings: Resolved settings

    Raises:
        FileNotFoundError: If the settings file doesn't exist
        ValueError: If the file is malformed or a value is invalid
    """
    environ = os.environ if environ is None else environ
    path = config_path or environ.get("ROSTER_CONFIG")

    settings = RosterSettings()
    if path:
        settings = replace(settings, **_read_yaml(path))

    settings = replace(settings, **_env_overrides(environ))
    logger.debug(f"[Config] Resolved settings: {settings}")
    return settings
