"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from set_table.config import Config, TableConfig, load_config


class TestTableConfig:
    """Tests for TableConfig."""

    def test_defaults(self):
        """Test default table sizes."""
        config = TableConfig()
        assert config.capacity == 21
        assert config.default_open == 12
        assert config.seed is None

    def test_equal_sizes_allowed(self):
        """Test that capacity may equal the primary window."""
        assert TableConfig(capacity=12, default_open=12).capacity == 12

    def test_capacity_below_default_open(self):
        """Test that capacity below the primary window is rejected."""
        with pytest.raises(ValidationError):
            TableConfig(capacity=11)

    @pytest.mark.parametrize("field", ["capacity", "default_open"])
    def test_non_positive(self, field):
        """Test that sizes must be positive."""
        with pytest.raises(ValidationError):
            TableConfig(**{field: 0})


class TestLoadConfig:
    """Tests for load_config."""

    def test_none(self):
        """Test that no path gives defaults."""
        assert load_config(None) == Config()

    def test_missing_file(self, tmp_path):
        """Test that a missing file gives defaults."""
        assert load_config(tmp_path / "missing.yaml") == Config()

    def test_empty_file(self, tmp_path):
        """Test that an empty file gives defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_load_yaml(self, tmp_path):
        """Test loading sections from YAML."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "table:\n"
            "  seed: 7\n"
            "game:\n"
            "  num_games: 5\n"
            "logging:\n"
            "  level: DEBUG\n"
            "  show_table: true\n"
        )

        config = load_config(str(path))

        assert config.table.seed == 7
        assert config.table.capacity == 21
        assert config.game.num_games == 5
        assert config.logging.level == "DEBUG"
        assert config.logging.show_table
        assert not config.game_log.enabled

    def test_invalid_values(self, tmp_path):
        """Test that invalid sizes in YAML are rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("table:\n  capacity: 6\n  default_open: 12\n")

        with pytest.raises(ValidationError):
            load_config(path)
