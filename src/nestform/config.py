from pathlib import Path
from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
import yaml

from nestform.exceptions import ConfigError

class AppSettings(BaseSettings):
    name: str = "nestform"
    version: str = "1.0.0"

class FormSettings(BaseSettings):
    """
    Shape of the nested form being decoded.
    `root_key` wraps every field, `group_key` names the repeated children.
    """
    root_key: str = "student"
    group_key: str = "courses"
    indexing: Literal["anonymous", "explicit"] = "anonymous"

class LoggingSettings(BaseSettings):
    log_decodes: bool = True
    level: str = "INFO"

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_nested_delimiter="__", env_file=".env", extra="ignore")
    app: AppSettings = AppSettings()
    forms: FormSettings = FormSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        # Load from default path if exists
        default_path = Path("config/settings.yaml")
        path = config_path or (default_path if default_path.exists() else None)

        if not path:
            return cls()

        try:
            with open(path, "r") as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Cannot read settings from {path}: {exc}") from exc

        if config_data is None:
            return cls()
        if not isinstance(config_data, dict):
            raise ConfigError(f"Settings file {path} must contain a mapping")

        return cls(**config_data)

settings = Settings.load()
