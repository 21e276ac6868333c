import importlib
import os
from types import ModuleType
from typing import Optional

_ENV_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module(env: Optional[str] = None) -> str:
    # APP_ENV picks the settings module; anything unknown runs as development
    name = (env if env is not None else os.getenv("APP_ENV", "development")).strip().lower()
    return _ENV_MODULES.get(name, "config.development")


def load_settings(env: Optional[str] = None) -> ModuleType:
    return importlib.import_module(get_settings_module(env))
