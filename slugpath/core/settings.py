from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import DEFAULT_INDEX_NAME


class BuildSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SLUGPATH_", case_sensitive=False)

    content_file: Path = Path("data.yaml")
    build_dir: Path = Path("dist")
    index_name: str = DEFAULT_INDEX_NAME
