import json
from pathlib import Path

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError

DEFAULT_TITLE = "=== Custom Autofill Suggestions ==="


class Settings(BaseModel):
    """defines the display settings of the picker"""

    title: str = DEFAULT_TITLE
    label_width: int = Field(default=30, ge=1)
    # room for at least one character plus the ellipsis
    value_width: int = Field(default=40, ge=4)


def get_config_dir() -> Path:
    """returns the per-user configuration directory"""
    return Path(user_config_dir("tabpicker"))


def get_config_path() -> Path:
    """returns the path to the settings.json file"""
    return get_config_dir() / "settings.json"


def load_config(path: Path | None = None) -> Settings:
    """loads the settings, returning default settings if the file doesnt exist or is invalid"""
    config_path = path if path is not None else get_config_path()
    if not config_path.is_file():
        return Settings()

    with config_path.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
            return Settings(**data)
        except (json.JSONDecodeError, UnicodeDecodeError, TypeError, ValidationError):
            return Settings()
