"""Next release versions, read from the build config of the Android library.

Only used to decorate the release menu entries, so every failure here is
recoverable: callers go through ``release_versions_or_blank``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

import yaml

from .types import ReleaseVersions, VersionError

logger = logging.getLogger(__name__)

DEFAULT_BUILD_CONFIG = ".buildconfig-android.yml"
VERSION_FIELD = "libraryVersion"


def compute_release_versions(path: str | Path = DEFAULT_BUILD_CONFIG) -> ReleaseVersions:
    pure_path = Path(path)

    # Only the first line is read: the version is expected at the top of the file.
    try:
        with pure_path.open(encoding="utf-8") as fh:
            first_line = fh.readline()
    except (OSError, UnicodeDecodeError) as exc:
        raise VersionError(f"{pure_path}: can't read build config") from exc

    try:
        raw = yaml.safe_load(first_line)
    except yaml.YAMLError as exc:
        raise VersionError(f"{pure_path}: invalid YAML on first line") from exc

    if not isinstance(raw, Mapping):
        raise VersionError(f"{pure_path}: first line is not a mapping")

    if VERSION_FIELD not in raw:
        raise VersionError(f"{pure_path}: No version available")

    return next_versions(str(raw[VERSION_FIELD]))


def next_versions(version: str) -> ReleaseVersions:
    parts = version.strip().split(".")
    names = ("major", "minor", "patch")

    if len(parts) < 3:
        missing = names[len(parts)]
        raise VersionError(f"{version!r}: No {missing} version")

    major, minor, patch = parts[:3]
    for name, part in zip(names, (major, minor, patch)):
        if not (part.isascii() and part.isdigit()):
            raise VersionError(f"{version!r}: {name} version is not a number: {part!r}")

    return ReleaseVersions(
        f"{int(major) + 1}.0.0",
        f"{major}.{int(minor) + 1}.0",
        f"{major}.{minor}.{int(patch) + 1}",
    )


def release_versions_or_blank(path: str | Path = DEFAULT_BUILD_CONFIG) -> ReleaseVersions:
    try:
        return compute_release_versions(path)
    except VersionError as exc:
        logger.debug("Release versions unavailable: %s", exc)
        return ReleaseVersions("", "", "")
