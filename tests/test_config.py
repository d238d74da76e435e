"""Tests for TOML configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from genesis.config import (
    CONFIGS_DIR,
    GenesisConfig,
    WorldConfig,
    find_config,
    list_configs,
    load_config,
)
from genesis.terrain.config import IslandMode, TerrainThresholds


class TestLoadConfig:
    """Tests for load_config."""

    def test_default_config(self) -> None:
        """default.toml matches the documented defaults."""
        config = load_config(CONFIGS_DIR / "default.toml")
        assert config.world.width == 200
        assert config.world.height == 150
        assert config.world.seed == 12345
        assert config.terrain.island.mode == IslandMode.SINGLE
        assert config.erosion.num_particles == 200000
        assert config.civilization.placement.initial_cities == 5

    def test_archipelago_config(self) -> None:
        """archipelago.toml switches mode and adds rivers."""
        config = load_config(CONFIGS_DIR / "archipelago.toml")
        assert config.terrain.island.mode == IslandMode.ARCHIPELAGO
        assert config.climate.rivers.river_count == 20

    def test_partial_file_keeps_defaults(self, tmp_path: Path) -> None:
        """Sections absent from the file keep their defaults."""
        path = tmp_path / "small.toml"
        path.write_text("[world]\nwidth = 64\n")
        config = load_config(path)
        assert config.world.width == 64
        assert config.world.height == 150
        assert config.climate == GenesisConfig().climate

    def test_out_of_range_rejected(self, tmp_path: Path) -> None:
        """Out-of-range values fail validation."""
        path = tmp_path / "bad.toml"
        path.write_text("[world]\nwidth = 0\n")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing path raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.toml")


class TestFindConfig:
    """Tests for find_config and list_configs."""

    def test_by_name(self) -> None:
        """Bare names resolve to the bundled configs."""
        assert find_config("default") == CONFIGS_DIR / "default.toml"

    def test_by_path(self, tmp_path: Path) -> None:
        """Existing paths are returned as given."""
        path = tmp_path / "mine.toml"
        path.write_text("")
        assert find_config(str(path)) == path

    def test_unknown(self) -> None:
        """Unknown names raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            find_config("no-such-world")

    def test_list(self) -> None:
        """Bundled configs are listed in sorted order."""
        names = list_configs()
        assert "default" in names
        assert "archipelago" in names
        assert names == sorted(names)


class TestValidation:
    """Tests for config model constraints."""

    def test_world_dimensions_positive(self) -> None:
        """Negative dimensions are rejected."""
        with pytest.raises(ValidationError):
            WorldConfig(width=-1)

    def test_thresholds_must_ascend(self) -> None:
        """Thresholds out of order are rejected."""
        with pytest.raises(ValidationError):
            TerrainThresholds(shallow_water=-0.5, sand=-0.6)
