"""Named requirements and the manifest dependency-string grammar."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants
from versioning.models import Ecosystem

from . import version_spec as vs
from .errors import DecodeError, InvalidFormat
from .source import cut
from .source_spec import GitSpec, GithubSpec, LocalPathSpec

logger = logging.getLogger(__name__)


def is_opam_name(name: str) -> bool:
    """Return True for names in the opam scope (``@opam/<pkg>``)."""
    parts = cut(name, "/")
    return parts is not None and parts[0] == Constants.OPAM_SCOPE


def _strip_git_suffix(repo: str) -> str:
    return repo[:-len(".git")] if repo.endswith(".git") else repo


def parse_github_shorthand(text: str) -> Optional[GithubSpec]:
    """Read ``org/repo[#ref]``; None when ``text`` has any other shape.

    Both halves must be non-empty and the org cannot hold a ``:``, so URLs
    such as ``git+https://host#ref`` are never read as shorthand. An empty
    ref (``org/repo#``) means no ref.
    """
    parts = text.split("/")
    if len(parts) != 2:
        return None
    org, rest = parts
    if not org or ":" in org:
        return None
    pieces = rest.split("#")
    repo = _strip_git_suffix(pieces[0])
    if len(pieces) > 2 or not repo:
        return None
    ref = pieces[1] if len(pieces) == 2 and pieces[1] else None
    return GithubSpec(org, repo, ref)


def _parse_git_url(text: str) -> GitSpec:
    # The ref is resolved at fetch time, so anything after '#' is dropped here.
    url = text[len("git+"):].partition("#")[0]
    return GitSpec(url, None)


@dataclass(frozen=True)
class Req:
    """A package name together with the version it requires."""
    name: str
    spec: vs.VersionSpec

    @classmethod
    def make(cls, name: str, text: str) -> "Req":
        """Build a requirement from a manifest dependency entry.

        The first matching form wins: local path (``.``/``/`` prefix), GitHub
        shorthand, opam range (for ``@opam/`` names), ``git+`` URL, npm range.

        Raises:
            InvalidRequirement: when the opam or npm range parser rejects ``text``.
        """
        spec = _classify(name, text)
        if is_debug_enabled(logger):
            logger.debug(
                "Classified requirement",
                extra=extra_context(event="req_make", package=name, raw=text, kind=type(spec).__name__),
            )
        return cls(name, spec)

    @classmethod
    def of_spec(cls, name: str, spec: vs.VersionSpec) -> "Req":
        return cls(name, spec)

    @classmethod
    def parse(cls, text: str) -> "Req":
        """Parse the ``name@spec`` form produced by ``to_string``."""
        at = text.find("@", 1)
        if at <= 0:
            raise InvalidFormat(text, "missing '@' between name and spec")
        return cls(text[:at], vs.parse(text[at + 1:]))

    @classmethod
    def from_json(cls, value) -> "Req":
        if not isinstance(value, str):
            raise DecodeError(value, "expected string")
        return cls.parse(value)

    def to_string(self) -> str:
        return f"{self.name}@{self.spec.to_string()}"

    def __str__(self) -> str:
        return self.to_string()

    def to_json(self) -> str:
        return self.to_string()


def _classify(name: str, text: str) -> vs.VersionSpec:
    if text.startswith(".") or text.startswith("/"):
        return vs.SourceVersionSpec(LocalPathSpec(text))
    github = parse_github_shorthand(text)
    if github is not None:
        return vs.SourceVersionSpec(github)
    if is_opam_name(name):
        return vs.parse_formula(text, Ecosystem.OPAM)
    if text.startswith("git+"):
        return vs.SourceVersionSpec(_parse_git_url(text))
    return vs.parse_formula(text, Ecosystem.NPM)
