"""Versioning capabilities for the upstream ecosystems."""

from .base import EcosystemVersioning
from .models import Ecosystem
from .npm import NpmFormula, NpmVersioning
from .opam import OpamFormula, OpamVersionNumber, OpamVersioning

__all__ = [
    "Ecosystem",
    "EcosystemVersioning",
    "NpmFormula",
    "NpmVersioning",
    "OpamFormula",
    "OpamVersionNumber",
    "OpamVersioning",
]
