"""Ordered dependency lists with override semantics.

Overrides model manifest layering: a later override replaces every earlier
entry for the same package in the slot of the first one, and unrelated entries
keep their declared order.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Iterator, Mapping, Optional, Tuple

from . import version_spec as vs
from .errors import DecodeError
from .req import Req


class Dependencies:
    """Immutable ordered sequence of requirements; names may repeat."""

    __slots__ = ("_reqs",)

    def __init__(self, reqs: Iterable[Req] = ()):
        self._reqs: Tuple[Req, ...] = tuple(reqs)

    @classmethod
    def empty(cls) -> "Dependencies":
        return cls()

    @classmethod
    def from_mapping(cls, items: Mapping[str, str]) -> "Dependencies":
        """Build from manifest ``name -> requirement string`` pairs, keeping their order."""
        return cls(Req.make(name, text) for name, text in items.items())

    @staticmethod
    def _check_object(value) -> Dict[str, str]:
        if not isinstance(value, dict):
            raise DecodeError(value, "expected object")
        for name, text in value.items():
            if not isinstance(text, str):
                raise DecodeError(text, f"expected string for dependency {name!r}")
        return value

    @classmethod
    def from_manifest(cls, value) -> "Dependencies":
        """Read a manifest ``dependencies`` object written in the shorthand grammar."""
        return cls.from_mapping(cls._check_object(value))

    @classmethod
    def from_json(cls, value) -> "Dependencies":
        """Decode the canonical ``{name: spec}`` object produced by ``to_json``."""
        return cls(Req(name, vs.parse(text)) for name, text in cls._check_object(value).items())

    def to_json(self) -> Dict[str, str]:
        """Encode as ``{name: spec}``; for a repeated name the first entry wins."""
        items: Dict[str, str] = {}
        for req in self._reqs:
            items.setdefault(req.name, req.spec.to_string())
        return items

    def add(self, req: Req) -> "Dependencies":
        """Prepend ``req`` without touching existing entries."""
        return Dependencies((req,) + self._reqs)

    def add_many(self, reqs: Iterable[Req]) -> "Dependencies":
        """Place ``reqs`` (in order) ahead of the existing entries."""
        return Dependencies(tuple(reqs) + self._reqs)

    def override(self, req: Req) -> "Dependencies":
        """Replace every entry named like ``req`` with a single ``req``.

        ``req`` takes the slot of the first replaced entry; if there was none
        it is prepended.
        """
        result = []
        placed = False
        for existing in self._reqs:
            if existing.name != req.name:
                result.append(existing)
            elif not placed:
                result.append(req)
                placed = True
        if not placed:
            result.insert(0, req)
        return Dependencies(result)

    def override_many(self, reqs: Iterable[Req]) -> "Dependencies":
        """Apply ``override`` for each of ``reqs``, left to right."""
        deps = self
        for req in reqs:
            deps = deps.override(req)
        return deps

    def find_by_name(self, name: str) -> Optional[Req]:
        for req in self._reqs:
            if req.name == name:
                return req
        return None

    def map(self, f: Callable[[Req], Req]) -> "Dependencies":
        return Dependencies(f(req) for req in self._reqs)

    def to_list(self):
        return list(self._reqs)

    def __iter__(self) -> Iterator[Req]:
        return iter(self._reqs)

    def __len__(self) -> int:
        return len(self._reqs)

    def __eq__(self, other):
        if not isinstance(other, Dependencies):
            return NotImplemented
        return self._reqs == other._reqs

    def __hash__(self):
        return hash(self._reqs)

    def __repr__(self) -> str:
        return f"Dependencies({list(self._reqs)!r})"

    def __str__(self) -> str:
        return "[" + ", ".join(str(r) for r in self._reqs) + "]"
