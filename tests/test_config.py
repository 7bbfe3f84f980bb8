"""Tests for configuration loading and models."""

import pytest
from pydantic import ValidationError

from genlab.config import (
    CacheConfig,
    ConfigError,
    GenlabConfig,
    LoggingConfig,
    get_config_path,
    get_default_config,
    get_genlab_home,
    load_config,
)


class TestCacheConfig:
    def test_defaults(self):
        config = CacheConfig()
        assert config.default_ttl_seconds == 5.0
        assert config.maxsize is None

    def test_with_maxsize(self):
        config = CacheConfig(maxsize=100)
        assert config.maxsize == 100

    @pytest.mark.parametrize("maxsize", [0, -10])
    def test_rejects_non_positive_maxsize(self, maxsize):
        with pytest.raises(ValidationError):
            CacheConfig(maxsize=maxsize)


class TestLoggingConfig:
    def test_defaults(self):
        assert LoggingConfig().level == "INFO"

    def test_level_is_case_insensitive(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_rejects_unknown_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")


class TestGenlabConfig:
    def test_cache_kwargs_unbounded(self):
        assert GenlabConfig().cache_kwargs() == {}

    def test_cache_kwargs_bounded(self):
        config = GenlabConfig(cache=CacheConfig(maxsize=3))
        assert config.cache_kwargs() == {"maxsize": 3}


class TestPaths:
    def test_home_from_env(self, isolated_home):
        assert get_genlab_home() == isolated_home.resolve()
        assert get_config_path() == isolated_home.resolve() / "config.toml"


class TestLoadConfig:
    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text(
            """
[cache]
default_ttl_seconds = 30
maxsize = 50

[logging]
level = "warning"
"""
        )

        config = load_config(path)

        assert config.cache.default_ttl_seconds == 30
        assert config.cache.maxsize == 50
        assert config.logging.level == "WARNING"

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_config(tmp_path / "missing.toml")

    def test_defaults_when_no_file(self):
        config = load_config()
        assert config == GenlabConfig()

    def test_finds_config_in_cwd(self, tmp_path):
        (tmp_path / "config.toml").write_text("[cache]\ndefault_ttl_seconds = 12\n")

        assert load_config().cache.default_ttl_seconds == 12

    def test_finds_config_in_home(self, isolated_home):
        (isolated_home / "config.toml").write_text("[cache]\nmaxsize = 7\n")

        assert load_config().cache.maxsize == 7

    def test_cwd_takes_precedence_over_home(self, tmp_path, isolated_home):
        (tmp_path / "config.toml").write_text("[cache]\nmaxsize = 1\n")
        (isolated_home / "config.toml").write_text("[cache]\nmaxsize = 2\n")

        assert load_config().cache.maxsize == 1

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("not valid toml [[[")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("[cache]\nmaxsize = 0\n")

        with pytest.raises(ValidationError):
            load_config(path)

    def test_env_overrides_log_level(self, tmp_path, monkeypatch):
        path = tmp_path / "config.toml"
        path.write_text('[logging]\nlevel = "INFO"\n')
        monkeypatch.setenv("GENLAB_LOG_LEVEL", "debug")

        assert load_config(path).logging.level == "DEBUG"

    def test_env_override_rejects_non_table_section(self, tmp_path, monkeypatch):
        path = tmp_path / "config.toml"
        path.write_text('logging = "loud"\n')
        monkeypatch.setenv("GENLAB_LOG_LEVEL", "DEBUG")

        with pytest.raises(ConfigError, match="must be a table"):
            load_config(path)

    def test_env_overrides_can_be_skipped(self, tmp_path, monkeypatch):
        path = tmp_path / "config.toml"
        path.write_text('[logging]\nlevel = "WARNING"\n')
        monkeypatch.setenv("GENLAB_LOG_LEVEL", "chatty")

        assert load_config(path, apply_env=False).logging.level == "WARNING"

    def test_default_config_honors_env(self, monkeypatch):
        monkeypatch.setenv("GENLAB_LOG_LEVEL", "ERROR")

        assert get_default_config().logging.level == "ERROR"
