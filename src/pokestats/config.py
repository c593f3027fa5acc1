"""Configuration for dataset locations and logging."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DataConfig(BaseSettings):
    """Where the species and move tables live."""

    data_dir: str = Field(default="data/json", description="Directory holding the dataset files")
    species_file: str = Field(default="species.json", description="Species table, relative to data_dir")
    moves_file: str = Field(default="moves.json", description="Move table, relative to data_dir")

    # Logging
    log_level: str = Field(default="INFO", description="Log level used by the scripts")

    model_config = SettingsConfigDict(env_prefix="POKESTATS_")

    @property
    def species_path(self) -> Path:
        return Path(self.data_dir) / self.species_file

    @property
    def moves_path(self) -> Path:
        return Path(self.data_dir) / self.moves_file


# Global config instance
data_config = DataConfig()
