"""Shared fixtures: keep the versioning registry and Constants pristine per test."""

import pytest

from constants import Constants
from versioning import registry


@pytest.fixture(autouse=True)
def _restore_state(monkeypatch):
    """Undo registry injections and config overrides after each test."""
    monkeypatch.setattr(Constants, "OPAM_SCOPE", Constants.OPAM_SCOPE)
    monkeypatch.setattr(Constants, "DEFAULT_ECOSYSTEM", Constants.DEFAULT_ECOSYSTEM)
    monkeypatch.delenv(Constants.ENV_CONFIG, raising=False)
    monkeypatch.delenv(Constants.ENV_LOG_LEVEL, raising=False)
    yield
    registry.reset()
