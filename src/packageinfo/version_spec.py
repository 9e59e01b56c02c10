"""Version requirements and the satisfaction check.

``matches`` is total: any pairing it does not know how to decide (mismatched
ecosystems, archive/git specs, ...) is simply not satisfied.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from common.logging_utils import extra_context, is_debug_enabled
from versioning import registry
from versioning.models import Ecosystem

from . import source as src
from . import source_spec as ss
from . import version as ver
from .errors import DecodeError, InvalidFormat, InvalidRequirement
from .source import cut, has_source_prefix

logger = logging.getLogger(__name__)


class VersionSpec:
    """Base class of the version spec variants."""

    __slots__ = ()

    def to_string(self) -> str:
        return to_string(self)

    def __str__(self) -> str:
        return to_string(self)

    def to_json(self) -> str:
        return to_string(self)

    def matches(self, version: ver.Version) -> bool:
        return matches(self, version)


@dataclass(frozen=True)
class NpmVersionSpec(VersionSpec):
    formula: Any


@dataclass(frozen=True)
class OpamVersionSpec(VersionSpec):
    formula: Any


@dataclass(frozen=True)
class SourceVersionSpec(VersionSpec):
    spec: ss.SourceSpec


def to_string(spec: VersionSpec) -> str:
    """Render ``spec``; opam formulas carry an ``opam:`` prefix."""
    if isinstance(spec, NpmVersionSpec):
        return registry.get(Ecosystem.NPM).formula_to_string(spec.formula)
    if isinstance(spec, OpamVersionSpec):
        return "opam:" + registry.get(Ecosystem.OPAM).formula_to_string(spec.formula)
    if isinstance(spec, SourceVersionSpec):
        return spec.spec.to_string()
    raise TypeError(f"not a version spec: {spec!r}")


def parse_formula(text: str, ecosystem: Ecosystem) -> VersionSpec:
    """Parse a range formula for ``ecosystem``.

    Raises:
        InvalidRequirement: if the ecosystem parser rejects ``text``.
    """
    try:
        formula = registry.get(ecosystem).parse_formula(text)
    except ValueError as e:
        if is_debug_enabled(logger):
            logger.debug(
                "Range rejected",
                extra=extra_context(event="parse_formula", ecosystem=ecosystem.value, raw=text, error=str(e)),
            )
        raise InvalidRequirement(text, f"invalid {ecosystem.value} range") from None
    if ecosystem is Ecosystem.OPAM:
        return OpamVersionSpec(formula)
    return NpmVersionSpec(formula)


def parse(text: str) -> VersionSpec:
    """Parse the canonical form produced by ``to_string``.

    Raises:
        InvalidFormat: for a malformed source spec.
        InvalidRequirement: for a range the ecosystem parser rejects.
    """
    if has_source_prefix(text):
        return SourceVersionSpec(ss.parse(text))
    parts = cut(text, ":")
    if parts is not None and parts[0] == "opam":
        return parse_formula(parts[1], Ecosystem.OPAM)
    if parts is not None and parts[0] == "npm":
        return parse_formula(parts[1], Ecosystem.NPM)
    if parts is not None:
        raise InvalidFormat(text, "unknown prefix")
    return parse_formula(text, Ecosystem.NPM)


def from_json(value) -> VersionSpec:
    """Decode a version spec from its structured (string) form."""
    if not isinstance(value, str):
        raise DecodeError(value, "expected string")
    return parse(value)


def matches(spec: VersionSpec, version: ver.Version) -> bool:
    """Return True when ``version`` satisfies ``spec``."""
    if isinstance(spec, NpmVersionSpec):
        if isinstance(version, ver.NpmVersion):
            return registry.get(Ecosystem.NPM).matches(spec.formula, version.value)
        return False
    if isinstance(spec, OpamVersionSpec):
        if isinstance(version, ver.OpamVersion):
            return registry.get(Ecosystem.OPAM).matches(spec.formula, version.value)
        return False
    if isinstance(spec, SourceVersionSpec) and isinstance(version, ver.SourceVersion):
        required, actual = spec.spec, version.source
        if isinstance(required, ss.LocalPathSpec) and isinstance(actual, src.LocalPath):
            return required.path == actual.path
        if isinstance(required, ss.GithubSpec) and isinstance(actual, src.Github):
            if required.user != actual.user or required.repo != actual.repo:
                return False
            return required.ref is None or required.ref == actual.ref
    return False


def of_version(version: ver.Version) -> VersionSpec:
    """Freeze a concrete version into a requirement only it (or an equal) satisfies."""
    if isinstance(version, ver.NpmVersion):
        return NpmVersionSpec(registry.get(Ecosystem.NPM).exact(version.value))
    if isinstance(version, ver.OpamVersion):
        return OpamVersionSpec(registry.get(Ecosystem.OPAM).exact(version.value))
    if isinstance(version, ver.SourceVersion):
        return SourceVersionSpec(ss.of_source(version.source))
    raise TypeError(f"not a version: {version!r}")
