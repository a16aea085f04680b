"""Tests for Config module."""

import pytest

from tabledef.config import Config, load_tabledefcfg
from tabledef.exceptions import ConfigError

ENV_VARS = (
    "TABLEDEF_SCHEMA_PATH",
    "TABLEDEF_STATEMENT",
    "TABLEDEF_OUTPUT",
    "TABLEDEF_PROFILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the real environment and home directory."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))


class TestConfigDefaults:
    """Test Config default values."""

    def test_config_defaults(self):
        config = Config()
        assert config.schema_path == "schema/tables"
        assert config.statement == "create"
        assert config.output is None


class TestConfigFromEnv:
    """Test Config.from_env() loading."""

    def test_config_uses_defaults_when_nothing_set(self):
        assert Config.from_env() == Config()

    def test_config_loads_from_env(self, monkeypatch):
        monkeypatch.setenv("TABLEDEF_SCHEMA_PATH", "defs")
        monkeypatch.setenv("TABLEDEF_STATEMENT", "alter")
        monkeypatch.setenv("TABLEDEF_OUTPUT", "out.sql")

        config = Config.from_env()

        assert config.schema_path == "defs"
        assert config.statement == "alter"
        assert config.output == "out.sql"

    def test_explicit_overrides_env(self, monkeypatch):
        monkeypatch.setenv("TABLEDEF_STATEMENT", "alter")
        config = Config.from_env(statement="create")
        assert config.statement == "create"

    def test_loads_from_cfg_profile(self, tmp_path, monkeypatch):
        (tmp_path / ".tabledefcfg").write_text(
            "[DEFAULT]\nschema_path = base\n\n[migrate]\nstatement = alter\n"
        )
        monkeypatch.setenv("TABLEDEF_PROFILE", "migrate")

        config = Config.from_env()

        assert config.schema_path == "base"
        assert config.statement == "alter"

    def test_env_overrides_cfg(self, tmp_path, monkeypatch):
        (tmp_path / ".tabledefcfg").write_text("[DEFAULT]\nstatement = alter\n")
        monkeypatch.setenv("TABLEDEF_STATEMENT", "create")
        assert Config.from_env().statement == "create"


class TestLoadTabledefcfg:
    """Test ~/.tabledefcfg parsing."""

    def test_missing_file_returns_empty(self, tmp_path):
        assert load_tabledefcfg(path=tmp_path / "absent") == {}

    def test_missing_profile_raises(self, tmp_path):
        cfg = tmp_path / "cfg"
        cfg.write_text("[dev]\nstatement = alter\n")
        with pytest.raises(ConfigError, match="Available profiles: dev"):
            load_tabledefcfg("prod", path=cfg)

    def test_values_are_stripped(self, tmp_path):
        cfg = tmp_path / "cfg"
        cfg.write_text("[dev]\noutput =  out.sql  \nunrelated = x\n")
        assert load_tabledefcfg("dev", path=cfg) == {"output": "out.sql"}


class TestConfigValidate:
    """Test Config.validate()."""

    def test_valid_statements(self):
        Config(statement="create").validate()
        Config(statement="alter").validate()

    def test_invalid_statement_raises(self):
        with pytest.raises(ConfigError, match="drop"):
            Config(statement="drop").validate()
