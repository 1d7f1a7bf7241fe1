"""
Exceptions raised while loading and migrating loadouts.
"""


class LoadoutError(Exception):
    """Base class for loadout errors."""


class InvalidVersionError(LoadoutError, ValueError):
    """A version string is empty or not a dotted version."""

    def __init__(self, version):
        self.version = version
        super().__init__(f"Invalid version string: {version!r}")


class MigrationRefusedError(LoadoutError):
    """
    A migration rule refused to upgrade a widget.

    When ``notice_override`` is set the failure is a user-facing
    incompatibility (e.g. a loadout that is too old to open) rather than an
    internal error, and callers should show ``message`` instead of a
    crash report.
    """

    def __init__(self, message: str, version: str, notice_override: bool = True):
        self.message = message
        self.version = version
        self.notice_override = notice_override
        super().__init__(message)


class SignatureError(LoadoutError):
    """The loadout file does not carry the expected signature."""


class LoadoutFormatError(LoadoutError, ValueError):
    """The loadout file is not laid out as a widget list."""
