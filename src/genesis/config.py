"""World configuration loading from TOML files."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

from .civilization.config import CivilizationConfig
from .climate.config import ClimateConfig
from .terrain.config import ErosionConfig, TerrainConfig

CONFIGS_DIR = Path(__file__).parent.parent.parent / "configs"


class WorldConfig(BaseModel):
    """Map size and seed."""

    width: int = Field(default=200, gt=0, description="Map width in tiles")
    height: int = Field(default=150, gt=0, description="Map height in tiles")
    seed: int = Field(default=12345, description="Seed for terrain and everything derived from it")


class GenesisConfig(BaseModel):
    """Complete configuration for a world pipeline."""

    world: WorldConfig = Field(default_factory=WorldConfig)
    terrain: TerrainConfig = Field(default_factory=TerrainConfig)
    erosion: ErosionConfig = Field(default_factory=ErosionConfig)
    climate: ClimateConfig = Field(default_factory=ClimateConfig)
    civilization: CivilizationConfig = Field(default_factory=CivilizationConfig)


def load_config(config_path: Path) -> GenesisConfig:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed GenesisConfig object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        pydantic.ValidationError: If a value is out of range.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return GenesisConfig.model_validate(data)


def find_config(name: str) -> Path:
    """Find a config file by name.

    Searches in the following order:
    1. Exact path if name contains path separator or ends in .toml
    2. configs/{name}.toml
    3. configs/{name}

    Args:
        name: Config name or path.

    Returns:
        Path to the config file.

    Raises:
        FileNotFoundError: If config file is not found.
    """
    if "/" in name or name.endswith(".toml"):
        path = Path(name)
        if path.exists():
            return path
        raise FileNotFoundError(f"Config file not found: {name}")

    config_path = CONFIGS_DIR / f"{name}.toml"
    if config_path.exists():
        return config_path

    config_path = CONFIGS_DIR / name
    if config_path.exists():
        return config_path

    raise FileNotFoundError(
        f"Config '{name}' not found in {CONFIGS_DIR}. "
        f"Available configs: {list_configs()}"
    )


def list_configs() -> list[str]:
    """List available config names."""
    if not CONFIGS_DIR.exists():
        return []
    return sorted(p.stem for p in CONFIGS_DIR.glob("*.toml"))
