"""Custom exceptions for vgate."""


class VGateError(Exception):
    """Base exception for all vgate errors."""

    pass


class ConfigurationError(VGateError):
    """Gate could not be configured."""

    pass


class StoreError(VGateError):
    """Key-value store operation failed."""

    pass


class VersionGateError(VGateError):
    """A migration declaration was rejected.

    These are integration errors: malformed version literals, declarations
    in the wrong order, or migrations for a version newer than the app.
    """

    pass


class InvalidVersionError(VersionGateError):
    """Version string does not match the version grammar."""

    def __init__(self, raw: object):
        """Initialize exception with the offending value.

        Args:
            raw: The value that failed to parse.
        """
        self.raw = raw
        super().__init__(f"Invalid version string: {raw!r}")


class OutOfOrderDeclarationError(VersionGateError):
    """Migration declared at or below a previously declared version."""

    def __init__(self, version: str, previous: str):
        """Initialize exception with both versions.

        Args:
            version: Version being declared.
            previous: Version declared before it.
        """
        self.version = version
        self.previous = previous
        super().__init__(
            f"Migration version {version} is declared after version {previous}, "
            "which is not permitted"
        )


class MigrationAheadOfAppError(VersionGateError):
    """Migration declared for a version newer than the running app."""

    def __init__(self, version: str, current: str):
        """Initialize exception with declared and current versions.

        Args:
            version: Version being declared.
            current: Current application version.
        """
        self.version = version
        self.current = current
        super().__init__(
            f"Cannot run migration for version {version}, "
            f"which is newer than the current app version {current}"
        )
