"""Package metadata and naming constants."""

from importlib import metadata

PACKAGE_NAME = "design-patterns-catalog"

try:
    __version__ = metadata.version(PACKAGE_NAME)
except metadata.PackageNotFoundError:
    __version__ = "1.0.0"

ENV_PREFIX = "DP_"
