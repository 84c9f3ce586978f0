from typing import Any
import json
import os
from pydantic import BaseModel, Field
from loguru import logger
from .events import Signal

# --- Settings Models ---
class GeneralSettings(BaseModel):
    app_name: str = "Essentials"
    debug_mode: bool = True

class LoggingSettings(BaseModel):
    log_dir: str = "logs"
    file_logging: bool = True

class ErrorSettings(BaseModel):
    message_caption: str = "Error"
    install_excepthook: bool = True

class AppConfig(BaseModel):
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    errors: ErrorSettings = Field(default_factory=ErrorSettings)

# --- Manager ---
class ConfigManager:
    """
    Manages application configuration with persistence and reactivity.

    Settings are read from JSON, or TOML when the path ends in ``.toml``.
    A missing or unreadable file falls back to defaults, which are then
    written back to `filepath`.
    """
    def __init__(self, filepath: str = "config.json"):
        self.filepath = filepath
        self._data = AppConfig()
        self.on_changed = Signal("ConfigChanged")
        self._load()

    @property
    def data(self) -> AppConfig:
        return self._data

    def update(self, section: str, key: str, value: Any):
        """
        Validate and apply one setting, autosave, then emit
        on_changed(section, key, new_value).

        Raises:
            ValueError: Unknown section or key
            pydantic.ValidationError: Value does not fit the setting's type;
                nothing is changed or saved
        """
        current = self._section(section)
        model = type(current)
        if key not in model.model_fields:
            raise ValueError(f"Invalid key: {key} in section {section}")

        replacement = model.model_validate({**current.model_dump(), key: value})
        setattr(self._data, section, replacement)
        self._save()
        self.on_changed.emit(section, key, getattr(replacement, key))

    def get(self, section: str, key: str) -> Any:
        return getattr(self._section(section), key)

    def _section(self, section: str) -> BaseModel:
        if section not in AppConfig.model_fields:
            raise ValueError(f"Invalid section: {section}")
        return getattr(self._data, section)

    def _read_raw(self) -> dict:
        if self.filepath.endswith(".toml"):
            import tomllib
            with open(self.filepath, "rb") as f:
                return tomllib.load(f)
        with open(self.filepath, "r", encoding="utf-8") as f:
            return json.load(f)

    def _load(self):
        if not os.path.isfile(self.filepath):
            logger.debug(f"No settings at {self.filepath}, writing defaults")
            self._save()
            return
        try:
            self._data = AppConfig.model_validate(self._read_raw())
        except Exception as e:
            logger.error(f"Failed to load config from {self.filepath}: {e}")
            self._save()

    def _save(self):
        # TOML files are read-only for us; defaults and updates go to JSON only
        if self.filepath.endswith('.toml'):
            return
        try:
            dirname = os.path.dirname(self.filepath)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            with open(self.filepath, "w", encoding="utf-8") as f:
                json.dump(self._data.model_dump(), f, indent=4)
        except Exception as e:
            logger.error(f"Failed to save config to {self.filepath}: {e}")
