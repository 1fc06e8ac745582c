"""Tests for configuration management."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from fortraid.config import (
    ProjectConfig,
    find_project_root,
    load_config,
    save_config,
    set_config_value,
)
from fortraid.exceptions import ConfigError


class TestConfig:
    def test_default_config(self):
        config = ProjectConfig()
        assert config.strategy.default == "dp"
        assert config.strategy.brute_force_limit == 9
        assert config.generator.max_value == 10
        assert config.log_level == "WARNING"

    def test_save_and_load(self, tmp_path: Path):
        config = ProjectConfig(name="test-project")
        config.strategy.default = "greedy"
        config.generator.shield_probability = 0.5

        save_config(tmp_path, config)
        loaded = load_config(tmp_path)

        assert loaded.name == "test-project"
        assert loaded.strategy.default == "greedy"
        assert loaded.generator.shield_probability == 0.5

    def test_load_without_file(self, tmp_path: Path):
        config = load_config(tmp_path)
        assert config.name == tmp_path.name

    def test_find_project_root(self, tmp_path: Path):
        assert find_project_root(tmp_path) is None

        (tmp_path / ".fortraid").mkdir()
        assert find_project_root(tmp_path) == tmp_path

        sub = tmp_path / "graphs" / "samples"
        sub.mkdir(parents=True)
        assert find_project_root(sub) == tmp_path

    def test_set_config_value(self):
        config = ProjectConfig()
        updated = set_config_value(config, "strategy.default", "random")
        assert updated.strategy.default == "random"
        assert config.strategy.default == "dp"

    def test_set_config_nested(self):
        config = ProjectConfig()
        updated = set_config_value(config, "strategy.random_seed", 12)
        assert updated.strategy.random_seed == 12

    def test_set_config_invalid_key(self):
        config = ProjectConfig()
        with pytest.raises(KeyError):
            set_config_value(config, "nonexistent.key", "value")

    def test_set_config_invalid_value(self):
        config = ProjectConfig()
        with pytest.raises(ValidationError):
            set_config_value(config, "generator.immune_probability", 3)

    def test_log_level_is_normalized(self):
        config = set_config_value(ProjectConfig(), "log_level", "debug")
        assert config.log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            set_config_value(ProjectConfig(), "log_level", "verbose")

    @pytest.mark.parametrize("content", ["{not json", '{"log_level": "loud"}', "[1, 2]"])
    def test_load_malformed_file(self, tmp_path: Path, content: str):
        (tmp_path / ".fortraid").mkdir()
        (tmp_path / ".fortraid" / "config.json").write_text(content)
        with pytest.raises(ConfigError):
            load_config(tmp_path)
