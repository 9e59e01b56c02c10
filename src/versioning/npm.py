"""NPM versioning capability using semantic versioning."""

import re
from dataclasses import dataclass, field

import semantic_version

from .base import EcosystemVersioning
from .models import Ecosystem

# npm accepts partial and "v"-prefixed versions in manifests (e.g. "v1.2", "=1").
_LOOSE_VERSION = re.compile(r'^[v=\s]*(\d+(?:\.\d+){0,2})$')
# NpmSpec splits comparators on single spaces, so ">= 1.2.3" must become ">=1.2.3".
_OPERATOR_GAP = re.compile(r'(<=|>=|<|>|=|\^|~) ')


@dataclass(frozen=True)
class NpmFormula:
    """An npm range (``||``-separated disjuncts of space-separated comparators)."""
    raw: str
    spec: semantic_version.NpmSpec = field(compare=False, repr=False)

    def __str__(self) -> str:
        return self.raw


class NpmVersioning(EcosystemVersioning):
    """Versioning for the npm ecosystem backed by semantic_version."""

    @property
    def ecosystem(self) -> Ecosystem:
        """Return NPM ecosystem."""
        return Ecosystem.NPM

    def parse_version(self, text: str) -> semantic_version.Version:
        """Parse an npm version, accepting loose forms such as ``1.0`` or ``v2``."""
        s = text.strip()
        try:
            return semantic_version.Version(s)
        except ValueError:
            m = _LOOSE_VERSION.match(s)
            if not m:
                raise ValueError(f"invalid npm version: {text!r}") from None
            return semantic_version.Version.coerce(m.group(1))

    def version_to_string(self, version: semantic_version.Version) -> str:
        return str(version)

    def _normalize_formula(self, text: str) -> str:
        """Collapse whitespace and glue operators to their versions; empty means any."""
        s = " ".join(text.split())
        s = _OPERATOR_GAP.sub(r'\1', s)
        return s or "*"

    def parse_formula(self, text: str) -> NpmFormula:
        """Parse an npm range expression.

        Raises:
            ValueError: if semantic_version rejects the range.
        """
        raw = self._normalize_formula(text)
        try:
            spec = semantic_version.NpmSpec(raw)
        except ValueError as e:
            raise ValueError(f"invalid npm range {text!r}: {e}") from None
        return NpmFormula(raw=raw, spec=spec)

    def formula_to_string(self, formula: NpmFormula) -> str:
        return formula.raw

    def matches(self, formula: NpmFormula, version: semantic_version.Version) -> bool:
        return bool(formula.spec.match(version))

    def exact(self, version: semantic_version.Version) -> NpmFormula:
        raw = f"={version}"
        return NpmFormula(raw=raw, spec=semantic_version.NpmSpec(raw))
