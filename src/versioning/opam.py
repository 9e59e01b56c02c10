"""Opam versioning capability.

Opam orders versions the Debian way: a version is read as alternating
non-digit and digit chunks. Non-digit chunks compare character by character
with ``~`` sorting before everything (even the end of the chunk) and letters
sorting before other characters; digit chunks compare numerically.

Formulas are written in the manifest range syntax: ``||`` (or ``|``) separates
alternatives, whitespace (or ``&&``) joins constraints, and a constraint is an
optional operator (``= != < <= > >=``, default ``=``) followed by a version.
``*`` or an empty alternative accepts any version.
"""

from __future__ import annotations

import functools
import operator
import re
from dataclasses import dataclass, field
from typing import Tuple

from .base import EcosystemVersioning
from .models import Ecosystem

_VALID_VERSION = re.compile(r'^[A-Za-z0-9\-_+.~]+$')
_CHUNK = re.compile(r'(\D*)(\d*)')
_CONSTRAINT = re.compile(r'\s*(<=|>=|!=|<|>|=)?\s*([^\s<>=!|&]+)\s*')
_DISJUNCTION = re.compile(r'\|\|?')

_OPERATORS = {
    "=": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
}


def _char_weight(c: str) -> int:
    if c == "~":
        return -1
    if c.isalpha():
        return ord(c)
    return ord(c) + 256


def _version_key(raw: str) -> Tuple:
    """Build a sort key equivalent to the Debian comparison of ``raw``."""
    chunks = []
    pos = 0
    while pos < len(raw):
        m = _CHUNK.match(raw, pos)
        text, digits = m.group(1), m.group(2)
        chunks.append((tuple(_char_weight(c) for c in text) + (0,), int(digits or 0)))
        pos = m.end()
    # Sentinel for the end of the string: sorts after "~" chunks, before the rest.
    chunks.append(((0,), 0))
    return tuple(chunks)


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class OpamVersionNumber:
    """A concrete opam version; equal when the Debian comparison says so."""
    raw: str
    key: Tuple = field(repr=False)

    def __eq__(self, other):
        if not isinstance(other, OpamVersionNumber):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other):
        if not isinstance(other, OpamVersionNumber):
            return NotImplemented
        return self.key < other.key

    def __hash__(self):
        return hash(self.key)

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True)
class Constraint:
    """A single ``<op> <version>`` comparison."""
    op: str
    version: OpamVersionNumber

    def satisfied_by(self, version: OpamVersionNumber) -> bool:
        return _OPERATORS[self.op](version, self.version)

    def __str__(self) -> str:
        return f"{self.op}{self.version}"


@dataclass(frozen=True)
class OpamFormula:
    """Disjunction of conjunctions; an empty conjunction accepts any version."""
    disjuncts: Tuple[Tuple[Constraint, ...], ...]

    def __str__(self) -> str:
        parts = []
        for conj in self.disjuncts:
            parts.append(" ".join(str(c) for c in conj) if conj else "*")
        return " || ".join(parts)


class OpamVersioning(EcosystemVersioning):
    """Versioning for the opam ecosystem."""

    @property
    def ecosystem(self) -> Ecosystem:
        """Return OPAM ecosystem."""
        return Ecosystem.OPAM

    def parse_version(self, text: str) -> OpamVersionNumber:
        s = text.strip()
        if not _VALID_VERSION.match(s):
            raise ValueError(f"invalid opam version: {text!r}")
        return OpamVersionNumber(raw=s, key=_version_key(s))

    def version_to_string(self, version: OpamVersionNumber) -> str:
        return version.raw

    def _parse_conjunction(self, text: str) -> Tuple[Constraint, ...]:
        group = text.replace("&&", " ").strip()
        constraints = []
        pos = 0
        while pos < len(group):
            m = _CONSTRAINT.match(group, pos)
            if not m or m.end() == pos:
                raise ValueError(f"invalid opam constraint near {group[pos:]!r}")
            op, ver = m.group(1), m.group(2)
            if ver == "*":
                if op:
                    raise ValueError(f"operator {op!r} cannot apply to '*'")
            else:
                constraints.append(Constraint(op or "=", self.parse_version(ver)))
            pos = m.end()
        return tuple(constraints)

    def parse_formula(self, text: str) -> OpamFormula:
        """Parse an opam range formula.

        Raises:
            ValueError: on an unknown operator or a malformed version.
        """
        disjuncts = tuple(self._parse_conjunction(g) for g in _DISJUNCTION.split(text))
        return OpamFormula(disjuncts=disjuncts)

    def formula_to_string(self, formula: OpamFormula) -> str:
        return str(formula)

    def matches(self, formula: OpamFormula, version: OpamVersionNumber) -> bool:
        return any(
            all(c.satisfied_by(version) for c in conj)
            for conj in formula.disjuncts
        )

    def exact(self, version: OpamVersionNumber) -> OpamFormula:
        return OpamFormula(disjuncts=((Constraint("=", version),),))
