"""Extra data carried by packages converted from the opam registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .errors import DecodeError


@dataclass(frozen=True)
class OpamInfo:
    """Synthesized package.json, files to write into the source tree, and patches."""
    package_json: Dict[str, Any]
    files: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)
    patches: Tuple[str, ...] = field(default_factory=tuple)

    def to_json(self) -> Dict[str, Any]:
        return {
            "packageJson": self.package_json,
            "files": [[path, content] for path, content in self.files],
            "patches": list(self.patches),
        }

    @classmethod
    def from_json(cls, value) -> "OpamInfo":
        if not isinstance(value, dict):
            raise DecodeError(value, "expected object")
        package_json = value.get("packageJson")
        if not isinstance(package_json, dict):
            raise DecodeError(package_json, "expected object for packageJson")

        files = value.get("files", [])
        if not isinstance(files, list):
            raise DecodeError(files, "expected array for files")
        parsed_files = []
        for item in files:
            if (not isinstance(item, (list, tuple)) or len(item) != 2
                    or not all(isinstance(part, str) for part in item)):
                raise DecodeError(item, "expected [path, content] pair")
            parsed_files.append((item[0], item[1]))

        patches = value.get("patches", [])
        if not isinstance(patches, list) or not all(isinstance(p, str) for p in patches):
            raise DecodeError(patches, "expected array of strings for patches")

        return cls(package_json, tuple(parsed_files), tuple(patches))
