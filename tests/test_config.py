"""Tests for config parsing."""

import pytest

from ghostleg.config import (
    Config,
    GeometryConfig,
    InvalidConfiguration,
    LadderConfig,
    load_config,
)


def test_config_defaults():
    """Config.from_dict with empty dict uses all defaults."""
    config = Config.from_dict({})
    assert config.seed == 0
    assert config.ladder.column_count == 4
    assert config.ladder.exclude_self is False
    assert config.ladder.labels == []
    assert config.geometry.cell_width == 60
    assert config.geometry.cell_height == 28
    assert config.geometry.start_y == 40
    assert config.geometry.x_offset == 50
    assert config.paths.output_dir == "./output"


def test_config_from_toml(tmp_path):
    """Config.from_toml parses TOML file correctly."""
    config_file = tmp_path / "config.toml"
    config_file.write_text("""
[run]
seed = 42

[ladder]
column_count = 5
exclude_self = true
""")
    config = Config.from_toml(config_file)
    assert config.seed == 42
    assert config.ladder.column_count == 5
    assert config.ladder.exclude_self is True
    # Defaults for unspecified values
    assert config.geometry.cell_width == 60


def test_config_full_toml(tmp_path):
    """load_config parses all sections correctly."""
    config_file = tmp_path / "config.toml"
    config_file.write_text("""
[run]
seed = 7

[ladder]
column_count = 3
labels = ["Alice", "Bob", "Carol"]

[geometry]
cell_width = 40
cell_height = 20
start_y = 0
x_offset = 10

[paths]
output_dir = "/tmp/ladders"
""")
    config = load_config(config_file)
    assert config.seed == 7
    assert config.ladder.labels == ["Alice", "Bob", "Carol"]
    assert config.geometry == GeometryConfig(
        cell_width=40, cell_height=20, start_y=0, x_offset=10
    )
    assert config.paths.output_dir == "/tmp/ladders"


def test_missing_file_raises(tmp_path):
    """A missing config file surfaces as FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.toml")


class TestLadderConfig:
    """Tests for LadderConfig validation."""

    @pytest.mark.parametrize("columns", [0, 1])
    def test_too_few_columns(self, columns):
        with pytest.raises(InvalidConfiguration, match="column_count"):
            LadderConfig(column_count=columns)

    def test_invalid_columns_from_dict(self):
        """Invalid values in TOML are rejected, not clamped."""
        with pytest.raises(InvalidConfiguration):
            Config.from_dict({"ladder": {"column_count": 1}})

    def test_label_count_mismatch(self):
        with pytest.raises(InvalidConfiguration, match="labels"):
            LadderConfig(column_count=3, labels=["a", "b"])

    def test_effective_labels_default(self):
        assert LadderConfig(column_count=3).effective_labels == ["1", "2", "3"]

    def test_effective_labels_custom(self):
        config = LadderConfig(column_count=2, labels=["x", "y"])
        assert config.effective_labels == ["x", "y"]

    def test_invalid_configuration_is_value_error(self):
        """Callers catching ValueError also catch configuration errors."""
        with pytest.raises(ValueError):
            LadderConfig(column_count=1)


@pytest.mark.parametrize("width,height", [(0, 28), (60, 0), (-1, 28)])
def test_geometry_rejects_non_positive_cells(width, height):
    with pytest.raises(InvalidConfiguration):
        GeometryConfig(cell_width=width, cell_height=height)
