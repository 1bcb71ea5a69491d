from .loader import load_registry
from .types import ConfigError, ReleaseVersions, UnsupportedConfigFormatError, VersionError
from .versions import (
    DEFAULT_BUILD_CONFIG,
    compute_release_versions,
    next_versions,
    release_versions_or_blank,
)

__all__ = [
    "compute_release_versions",
    "ConfigError",
    "DEFAULT_BUILD_CONFIG",
    "load_registry",
    "next_versions",
    "release_versions_or_blank",
    "ReleaseVersions",
    "UnsupportedConfigFormatError",
    "VersionError",
]
