from typing import NamedTuple


class ReleaseVersions(NamedTuple):
    major: str
    minor: str
    patch: str


class ConfigError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedConfigFormatError(ConfigError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class VersionError(ConfigError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
