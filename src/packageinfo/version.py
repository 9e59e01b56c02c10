"""Concrete package versions.

A version is either an upstream ecosystem version (npm or opam) or a concrete
source for packages that have no semantic version (git, github, path ...).
Ordering is variant-first (npm < opam < source), then by payload; it is not
meaningful across variants.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from constants import Constants
from versioning import registry
from versioning.models import Ecosystem

from . import source as source_mod
from .errors import DecodeError, InvalidFormat
from .source import Source, cut

logger = logging.getLogger(__name__)


@functools.total_ordering
class Version:
    """Base class of the concrete version variants."""

    __slots__ = ()

    def _order_key(self) -> Tuple:
        raise NotImplementedError

    def __lt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self._order_key() < other._order_key()

    def to_string(self) -> str:
        return to_string(self)

    def __str__(self) -> str:
        return to_string(self)

    def to_json(self) -> str:
        return to_string(self)

    def to_npm_version(self) -> str:
        """Render without the ecosystem prefix (the form npm tooling expects)."""
        if isinstance(self, NpmVersion):
            return registry.get(Ecosystem.NPM).version_to_string(self.value)
        if isinstance(self, OpamVersion):
            return registry.get(Ecosystem.OPAM).version_to_string(self.value)
        if isinstance(self, SourceVersion):
            return self.source.to_string()
        raise TypeError(f"not a version: {self!r}")


@dataclass(frozen=True)
class NpmVersion(Version):
    value: Any

    def _order_key(self):
        return (0, self.value)


@dataclass(frozen=True)
class OpamVersion(Version):
    value: Any

    def _order_key(self):
        return (1, self.value)


@dataclass(frozen=True)
class SourceVersion(Version):
    source: Source

    def _order_key(self):
        return (2,) + self.source._order_key()  # pylint: disable=protected-access


def to_string(version: Version) -> str:
    """Render ``version``; npm versions are bare, opam ones carry ``opam:``."""
    if isinstance(version, NpmVersion):
        return registry.get(Ecosystem.NPM).version_to_string(version.value)
    if isinstance(version, OpamVersion):
        return "opam:" + registry.get(Ecosystem.OPAM).version_to_string(version.value)
    if isinstance(version, SourceVersion):
        return version.source.to_string()
    raise TypeError(f"not a version: {version!r}")


def _parse_ecosystem(text: str, payload: str, ecosystem: Ecosystem) -> Version:
    try:
        value = registry.get(ecosystem).parse_version(payload)
    except ValueError as e:
        raise InvalidFormat(text, f"invalid {ecosystem.value} version ({e})") from None
    if ecosystem is Ecosystem.OPAM:
        return OpamVersion(value)
    return NpmVersion(value)


def parse(text: str, default_ecosystem: Optional[Ecosystem] = None) -> Version:
    """Parse a version string.

    Strings without a prefix go to ``default_ecosystem`` (Constants.DEFAULT_ECOSYSTEM
    when omitted); ``npm:`` and ``opam:`` force an ecosystem and the canonical
    source prefixes produce a source version.

    Raises:
        InvalidFormat: when no parser accepts the string.
    """
    parts = cut(text, ":")
    if parts is None:
        ecosystem = default_ecosystem or Ecosystem.from_name(Constants.DEFAULT_ECOSYSTEM)
        return _parse_ecosystem(text, text, ecosystem)
    prefix, payload = parts
    if prefix == "opam":
        return _parse_ecosystem(text, payload, Ecosystem.OPAM)
    if prefix == "npm":
        return _parse_ecosystem(text, payload, Ecosystem.NPM)
    logger.debug("Parsing %r as a source version", text)
    return SourceVersion(source_mod.parse(text))


def from_json(value) -> Version:
    """Decode a version from its structured (string) form."""
    if not isinstance(value, str):
        raise DecodeError(value, "expected string")
    return parse(value)
