"""Tests for YAML configuration and logging helpers."""

import logging

from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from constants import Constants, _load_yaml_config


class TestYamlConfig:
    """Overrides loaded onto Constants."""

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "cfg.yml"
        path.write_text("packageinfo:\n  opam_scope: '@ocaml'\n  default_ecosystem: OPAM\n")
        applied = _load_yaml_config(str(path))
        assert applied == {"opam_scope": "@ocaml", "default_ecosystem": "opam"}
        assert Constants.OPAM_SCOPE == "@ocaml"
        assert Constants.DEFAULT_ECOSYSTEM == "opam"

    def test_env_path(self, tmp_path, monkeypatch):
        path = tmp_path / "cfg.yml"
        path.write_text("opam_scope: '@esy-ocaml'\n")
        monkeypatch.setenv(Constants.ENV_CONFIG, str(path))
        assert _load_yaml_config() == {"opam_scope": "@esy-ocaml"}

    def test_missing_file(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            assert _load_yaml_config(str(tmp_path / "missing.yml")) == {}
        assert "not found" in caplog.text

    def test_invalid_values_ignored(self, tmp_path):
        path = tmp_path / "cfg.yml"
        path.write_text("packageinfo:\n  opam_scope: ocaml\n  default_ecosystem: pypi\n")
        assert _load_yaml_config(str(path)) == {}
        assert Constants.OPAM_SCOPE == "@opam"
        assert Constants.DEFAULT_ECOSYSTEM == "npm"

    def test_broken_yaml(self, tmp_path):
        path = tmp_path / "cfg.yml"
        path.write_text("packageinfo: [unclosed\n")
        assert _load_yaml_config(str(path)) == {}


class TestLoggingUtils:
    """Structured logging helpers."""

    def test_extra_context_drops_none_and_renames_reserved(self):
        ctx = extra_context(event="x", name="pkg", skipped=None)
        assert ctx == {"event": "x", "ctx_name": "pkg"}

    def test_configure_logging_from_env(self, monkeypatch):
        monkeypatch.setenv(Constants.ENV_LOG_LEVEL, "debug")
        configure_logging()
        assert is_debug_enabled(logging.getLogger("packageinfo.test"))
        configure_logging("WARNING")
        assert not is_debug_enabled(logging.getLogger("packageinfo.test"))
