"""Concrete package sources.

A source is an exact origin of package bytes: an archive with its checksum, a
git remote at a commit, a GitHub repository at a ref, a local path, or nothing
at all (virtual/root packages). Canonical string forms::

    archive:<url>#<checksum>
    git:<url>#<commit>
    github:<user>/<repo>#<ref>
    path:<path>
    no-source:
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import DecodeError, InvalidFormat

SOURCE_PREFIXES = ("archive", "git", "github", "path", "no-source")


def cut(text: str, sep: str) -> Optional[Tuple[str, str]]:
    """Split ``text`` at the first ``sep``; None when ``sep`` is absent."""
    left, found, right = text.partition(sep)
    if not found:
        return None
    return left, right


def has_source_prefix(text: str) -> bool:
    """Return True when ``text`` starts with one of the canonical source prefixes."""
    parts = cut(text, ":")
    return parts is not None and parts[0] in SOURCE_PREFIXES


@functools.total_ordering
class Source:
    """Base class of the concrete source variants."""

    __slots__ = ()

    def _order_key(self) -> Tuple:
        raise NotImplementedError

    def __lt__(self, other):
        if not isinstance(other, Source):
            return NotImplemented
        return self._order_key() < other._order_key()

    def to_string(self) -> str:
        return to_string(self)

    def __str__(self) -> str:
        return to_string(self)

    def to_json(self) -> str:
        return to_string(self)


@dataclass(frozen=True)
class Archive(Source):
    url: str
    checksum: str

    def _order_key(self):
        return (0, self.url, self.checksum)


@dataclass(frozen=True)
class Git(Source):
    url: str
    commit: str

    def _order_key(self):
        return (1, self.url, self.commit)


@dataclass(frozen=True)
class Github(Source):
    user: str
    repo: str
    ref: str

    def _order_key(self):
        return (2, self.user, self.repo, self.ref)


@dataclass(frozen=True)
class LocalPath(Source):
    path: str

    def _order_key(self):
        return (3, self.path)


@dataclass(frozen=True)
class NoSource(Source):

    def _order_key(self):
        return (4,)


def to_string(source: Source) -> str:
    """Render ``source`` in its canonical form."""
    if isinstance(source, Github):
        return f"github:{source.user}/{source.repo}#{source.ref}"
    if isinstance(source, Git):
        return f"git:{source.url}#{source.commit}"
    if isinstance(source, Archive):
        return f"archive:{source.url}#{source.checksum}"
    if isinstance(source, LocalPath):
        return f"path:{source.path}"
    if isinstance(source, NoSource):
        return "no-source:"
    raise TypeError(f"not a source: {source!r}")


def _require(text: str, payload: str, sep: str) -> Tuple[str, str]:
    parts = cut(payload, sep)
    if parts is None:
        raise InvalidFormat(text, f"missing {sep!r}")
    left, right = parts
    if not left or not right:
        raise InvalidFormat(text, f"empty component around {sep!r}")
    return left, right


def parse(text: str) -> Source:
    """Parse a canonical source string.

    Raises:
        InvalidFormat: on an unknown prefix or a missing delimiter.
    """
    parts = cut(text, ":")
    if parts is None:
        raise InvalidFormat(text, "unknown source")
    prefix, payload = parts
    if prefix == "github":
        user, rest = _require(text, payload, "/")
        repo, ref = _require(text, rest, "#")
        return Github(user, repo, ref)
    if prefix == "git":
        url, commit = _require(text, payload, "#")
        return Git(url, commit)
    if prefix == "archive":
        url, checksum = _require(text, payload, "#")
        return Archive(url, checksum)
    if prefix == "path":
        if not payload:
            raise InvalidFormat(text, "empty path")
        return LocalPath(payload)
    if prefix == "no-source" and not payload:
        return NoSource()
    raise InvalidFormat(text, "unknown source")


def from_json(value) -> Source:
    """Decode a source from its structured (string) form."""
    if not isinstance(value, str):
        raise DecodeError(value, "expected string")
    return parse(value)
