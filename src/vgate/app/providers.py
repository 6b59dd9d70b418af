"""Application version providers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from importlib import metadata

from loguru import logger

from ..core.exceptions import ConfigurationError


@dataclass(frozen=True)
class StaticVersionProvider:
    """Returns a fixed version string."""

    version: str

    def get_version(self) -> str:
        return self.version


@dataclass(frozen=True)
class EnvVersionProvider:
    """Reads the app version from an environment variable."""

    var: str = "VGATE_APP_VERSION"

    def get_version(self) -> str:
        """Return the variable's value.

        Raises:
            ConfigurationError: If the variable is unset or empty.
        """
        version = os.environ.get(self.var)
        if not version:
            raise ConfigurationError(f"Environment variable {self.var} is not set")
        return version


@dataclass(frozen=True)
class PackageVersionProvider:
    """Reads the app version from installed distribution metadata."""

    distribution: str

    def get_version(self) -> str:
        """Return the installed distribution's version.

        Raises:
            ConfigurationError: If the distribution is not installed.
        """
        try:
            version = metadata.version(self.distribution)
        except metadata.PackageNotFoundError as e:
            raise ConfigurationError(
                f"Distribution not installed: {self.distribution}"
            ) from e
        logger.debug(f"Resolved {self.distribution} version {version}")
        return version
