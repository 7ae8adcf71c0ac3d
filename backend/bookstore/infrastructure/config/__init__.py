from .settings import EnvironmentOption, Settings, get_settings, settings

__all__ = ["EnvironmentOption", "Settings", "get_settings", "settings"]
