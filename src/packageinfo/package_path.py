"""Package paths used as resolution keys.

A package path names a package, optionally through the chain of packages that
depend on it, e.g. ``react``, ``@opam/dune``, ``webpack/**/lodash`` or
``@babel/core/json5``. Scoped names (``@scope/name``) count as one segment and
``**`` matches any number of intermediate packages.
"""

from __future__ import annotations

from typing import List, Tuple

WILDCARD = "**"


def parse(text: str) -> Tuple[Tuple[str, ...], str]:
    """Split ``text`` into (parent path, package name).

    Raises:
        ValueError: for an empty path, an empty segment, a dangling scope or a
            path that ends in a wildcard.
    """
    raw = text.strip()
    if not raw:
        raise ValueError("empty package path")
    segments = raw.split("/")
    names: List[str] = []
    i = 0
    while i < len(segments):
        seg = segments[i]
        if not seg:
            raise ValueError(f"empty segment in package path {text!r}")
        if seg.startswith("@"):
            if len(seg) == 1 or i + 1 >= len(segments) or not segments[i + 1]:
                raise ValueError(f"scope without a package name in {text!r}")
            names.append(f"{seg}/{segments[i + 1]}")
            i += 2
            continue
        names.append(seg)
        i += 1
    name = names[-1]
    if name == WILDCARD:
        raise ValueError(f"package path must end with a package name: {text!r}")
    return tuple(names[:-1]), name
