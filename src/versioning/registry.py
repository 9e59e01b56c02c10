"""Process-wide lookup of ecosystem versioning capabilities.

The package model never imports a concrete ecosystem implementation directly;
it asks this registry, so tests and embedders can swap one in with
``register``.
"""

import logging
from typing import Dict

from .base import EcosystemVersioning
from .models import Ecosystem
from .npm import NpmVersioning
from .opam import OpamVersioning

logger = logging.getLogger(__name__)

_DEFAULTS = (NpmVersioning, OpamVersioning)
_registry: Dict[Ecosystem, EcosystemVersioning] = {}


def reset() -> None:
    """Restore the built-in capabilities."""
    _registry.clear()
    for cls in _DEFAULTS:
        impl = cls()
        _registry[impl.ecosystem] = impl


def register(impl: EcosystemVersioning) -> EcosystemVersioning:
    """Install ``impl`` for its ecosystem and return the one it replaced."""
    previous = _registry.get(impl.ecosystem)
    _registry[impl.ecosystem] = impl
    logger.debug("Registered %s for %s", type(impl).__name__, impl.ecosystem.value)
    return previous


def get(ecosystem: Ecosystem) -> EcosystemVersioning:
    """Return the capability for ``ecosystem``."""
    return _registry[ecosystem]


reset()
