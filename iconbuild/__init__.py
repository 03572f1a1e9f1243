"""Generate React icon components from SVG sources."""

from .config import BuildConfig, ConfigError, load_config
from .errors import IconBuildError
from .orchestrator import BuildResult, Orchestrator, build_icons

__all__ = [
    "BuildConfig",
    "BuildResult",
    "ConfigError",
    "IconBuildError",
    "Orchestrator",
    "build_icons",
    "load_config",
]
