"""Settings for confit itself, loaded from the environment."""

from confit.config.loader import load_settings
from confit.config.models import ConfitSettings, SettingsLoadRequest

__all__ = ["ConfitSettings", "SettingsLoadRequest", "load_settings"]
