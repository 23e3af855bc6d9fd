from .schemas import ShortcutSettings, UserSettings
from .settings_store import JsonSettingsStore

__all__ = ["JsonSettingsStore", "ShortcutSettings", "UserSettings"]
