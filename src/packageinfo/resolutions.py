"""Pinned resolutions: forced exact versions keyed by package name."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from common.logging_utils import extra_context, is_debug_enabled
from versioning.models import Ecosystem

from . import package_path
from . import version as ver
from . import version_spec as vs
from .errors import DecodeError, InvalidFormat, InvalidResolutionKey, InvalidResolutionValue
from .req import Req, is_opam_name

logger = logging.getLogger(__name__)


class Resolutions:
    """Immutable mapping from package name to a pinned version."""

    __slots__ = ("_pins",)

    def __init__(self, pins: Optional[Mapping[str, ver.Version]] = None):
        self._pins = MappingProxyType(dict(pins or {}))

    @classmethod
    def empty(cls) -> "Resolutions":
        return cls()

    @classmethod
    def from_mapping(cls, items: Mapping[str, str]) -> "Resolutions":
        """Build from raw ``package path -> version string`` pairs.

        Keys may be package paths (``parent/**/name``); only the final name is
        kept. Values for ``@opam/`` names default to the opam ecosystem unless
        they carry an explicit prefix. When two keys name the same package the
        later one wins.

        Raises:
            InvalidResolutionKey: when a key is not a package path.
            InvalidResolutionValue: when a value is not a version.
        """
        pins: Dict[str, ver.Version] = {}
        for key, text in items.items():
            try:
                _, name = package_path.parse(key)
            except ValueError as e:
                raise InvalidResolutionKey(key, str(e)) from None
            default = Ecosystem.OPAM if is_opam_name(name) else None
            try:
                version = ver.parse(text, default_ecosystem=default)
            except InvalidFormat as e:
                raise InvalidResolutionValue(text, f"invalid version for {name!r} ({e.reason})") from None
            if is_debug_enabled(logger):
                logger.debug(
                    "Pinned resolution",
                    extra=extra_context(event="resolution", package=name, key=key, version=str(version)),
                )
            pins[name] = version
        return cls(pins)

    @classmethod
    def from_json(cls, value) -> "Resolutions":
        """Decode from a ``{package path: version}`` object."""
        if not isinstance(value, dict):
            raise DecodeError(value, "expected object")
        for key, text in value.items():
            if not isinstance(text, str):
                raise DecodeError(text, f"expected string for resolution {key!r}")
        return cls.from_mapping(value)

    def to_json(self) -> Dict[str, str]:
        return {name: version.to_string() for name, version in self.entries()}

    def find(self, name: str) -> Optional[ver.Version]:
        return self._pins.get(name)

    def entries(self) -> List[Tuple[str, ver.Version]]:
        """Return ``(name, version)`` pairs sorted by name."""
        return sorted(self._pins.items(), key=lambda item: item[0])

    def apply(self, req: Req) -> Optional[Req]:
        """Return ``req`` pinned to its resolution, or None when it has none.

        The original spec of ``req`` is discarded.
        """
        version = self.find(req.name)
        if version is None:
            return None
        return Req.of_spec(req.name, vs.of_version(version))

    def __contains__(self, name) -> bool:
        return name in self._pins

    def __len__(self) -> int:
        return len(self._pins)

    def __eq__(self, other):
        if not isinstance(other, Resolutions):
            return NotImplemented
        return dict(self._pins) == dict(other._pins)

    def __repr__(self) -> str:
        return f"Resolutions({dict(self._pins)!r})"
