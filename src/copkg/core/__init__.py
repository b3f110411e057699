"""copkg 코어: 설정, 좌표, 예외."""

from copkg.core.config import DOWNLOAD_DIR, Configuration
from copkg.core.coordinate import Coordinate, PackageCoordinate
from copkg.core.exceptions import (
    ConfigError,
    ConfigFieldMissingError,
    ConfigParseError,
    ConfigReadError,
    ConfigSerializationError,
    CoordinateError,
    CopkgError,
)

__all__ = [
    "DOWNLOAD_DIR",
    "ConfigError",
    "ConfigFieldMissingError",
    "ConfigParseError",
    "ConfigReadError",
    "ConfigSerializationError",
    "Configuration",
    "Coordinate",
    "CoordinateError",
    "CopkgError",
    "PackageCoordinate",
]
