"""Data models shared by the ecosystem versioning capabilities."""

from enum import Enum


class Ecosystem(Enum):
    """Enum for supported upstream ecosystems."""
    NPM = "npm"
    OPAM = "opam"

    @classmethod
    def from_name(cls, name: str) -> "Ecosystem":
        """Look up an ecosystem by its (case-insensitive) name."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"unknown ecosystem: {name}") from None
