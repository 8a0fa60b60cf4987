"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    iconforge_env: str = "development"
    iconforge_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Output files
    output_directory: str = "icons"
    sprite_filename: str = "sprite.svg"
    types_filename: str = "icons.d.ts"
    icons_module_filename: str = "svg-data.ts"

    # Generation defaults
    id_prefix: str = "ic-"
    default_target: str = "react"
    default_size: int = 24
    default_color: str = "currentColor"
    css_class_prefix: str = "icon"

    # Batch work
    scan_max_workers: int = 8
    # The API only scans below this directory
    workspace_root: str = "."

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
