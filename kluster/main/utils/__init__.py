from .config_loader import load_configs
from .config import MissingConfigError
from .settings import KlusterSettings, load_settings, settings_from_env
__all__ = [
    "load_configs",
    "MissingConfigError",
    "KlusterSettings",
    "load_settings",
    "settings_from_env",
]
