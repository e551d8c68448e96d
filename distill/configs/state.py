"""
Persisted corpus state configuration.

Dependencies: pydantic, pydantic_settings
System role: Location of the JSON corpus snapshot
"""

from pydantic import Field

from distill.configs.base import BaseSettings, group_config


class StateSettings(BaseSettings):
    """Flat-file corpus snapshot settings."""

    model_config = group_config("STATE_")

    data_file: str = Field(default="./data/data.json", description="Corpus snapshot path")
