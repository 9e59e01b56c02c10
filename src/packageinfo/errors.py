"""Errors raised by the package model.

Every error keeps the raw input that caused it so the manifest loader or
lock-file reader can point at the offending value.
"""


class PackageInfoError(ValueError):
    """Base class for package model errors."""

    def __init__(self, raw, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"{reason}: {raw!r}")


class InvalidFormat(PackageInfoError):
    """A canonical source/version string is malformed."""


class InvalidRequirement(PackageInfoError):
    """A dependency requirement string was rejected by the range parser."""


class InvalidResolutionKey(PackageInfoError):
    """A resolutions key is not a valid package path."""


class InvalidResolutionValue(PackageInfoError):
    """A resolutions value is not a valid version."""


class DecodeError(PackageInfoError):
    """A structured document has the wrong shape (not a grammar error)."""
