"""Base class for ecosystem versioning capabilities."""

from abc import ABC, abstractmethod
from typing import Any

from .models import Ecosystem


class EcosystemVersioning(ABC):
    """Version and range-formula operations for one upstream ecosystem.

    Versions and formulas are opaque to callers: they are produced by the
    parse methods and handed back to ``matches`` and the string renderers.
    Parse methods raise ValueError on malformed input.
    """

    @property
    @abstractmethod
    def ecosystem(self) -> Ecosystem:
        """Return the ecosystem handled by this capability."""

    @abstractmethod
    def parse_version(self, text: str) -> Any:
        """Parse a concrete version."""

    @abstractmethod
    def version_to_string(self, version: Any) -> str:
        """Render a version so that ``parse_version`` reads it back."""

    @abstractmethod
    def parse_formula(self, text: str) -> Any:
        """Parse a range formula (disjunction of conjunctions)."""

    @abstractmethod
    def formula_to_string(self, formula: Any) -> str:
        """Render a formula so that ``parse_formula`` reads it back."""

    @abstractmethod
    def matches(self, formula: Any, version: Any) -> bool:
        """Return True when ``version`` is a member of ``formula``."""

    @abstractmethod
    def exact(self, version: Any) -> Any:
        """Return the single-point formula ``= version``."""
