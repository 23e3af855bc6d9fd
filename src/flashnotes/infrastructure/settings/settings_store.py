"""JSON file store for user settings."""

from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError as PydanticValidationError

from flashnotes.exceptions import FileWriteError, NotesDirectoryNotConfiguredError
from flashnotes.infrastructure.settings.schemas import UserSettings

logger = structlog.get_logger(__name__)


def _merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """
    Shallow merge, except a ``shortcuts`` mapping which is merged key by key.

    Any other ``shortcuts`` value is passed through for validation to reject.
    """
    merged = {**base, **overrides}
    shortcuts = overrides.get("shortcuts")
    if shortcuts is None or isinstance(shortcuts, dict):
        merged["shortcuts"] = {**base.get("shortcuts", {}), **(shortcuts or {})}
    return merged


class JsonSettingsStore:
    """
    Key-value user settings kept in a JSON file, merged over defaults.

    The file is rewritten after every load so that settings added in newer
    versions appear in it with their default values.
    """

    def __init__(
        self,
        path: Path,
        max_recent_directories: int = 10,
        notes_directory_override: Path | None = None,
    ) -> None:
        self.path = path
        self.max_recent_directories = max_recent_directories
        self.notes_directory_override = notes_directory_override
        self._cached: UserSettings | None = None

    def load(self) -> UserSettings:
        """
        Read the settings file, merging it over the defaults.

        A missing or invalid file is replaced by the defaults.
        """
        try:
            # Fields missing from the file, shortcuts included, take their defaults
            settings = UserSettings.model_validate_json(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.info("settings_file_created", path=str(self.path))
            settings = UserSettings()
        except (OSError, UnicodeDecodeError, PydanticValidationError) as e:
            logger.warning("settings_file_invalid", path=str(self.path), error=str(e))
            settings = UserSettings()

        self._write(settings)
        self._cached = settings
        return settings

    def get(self) -> UserSettings:
        if self._cached is None:
            return self.load()
        return self._cached

    def update(self, changes: dict[str, Any]) -> UserSettings:
        """
        Apply a partial update and persist it.

        Selecting a notes directory also records it as the most recent one.

        Raises:
            pydantic.ValidationError: If the merged settings are invalid
        """
        current = self.get()
        merged = _merge(current.model_dump(), changes)
        settings = UserSettings.model_validate(merged)

        if settings.notes_directory and settings.notes_directory != current.notes_directory:
            recent = [settings.notes_directory] + [
                d for d in settings.recent_directories if d != settings.notes_directory
            ]
            settings = settings.model_copy(
                update={"recent_directories": recent[: self.max_recent_directories]}
            )

        self._write(settings)
        self._cached = settings
        logger.info("settings_updated", keys=sorted(changes))
        return settings

    def reset(self) -> UserSettings:
        settings = UserSettings()
        self._write(settings)
        self._cached = settings
        logger.info("settings_reset", path=str(self.path))
        return settings

    def require_notes_directory(self) -> Path:
        """
        Get the notes directory, preferring the environment override.

        Raises:
            NotesDirectoryNotConfiguredError: If no directory has been selected
        """
        if self.notes_directory_override is not None:
            return self.notes_directory_override
        notes_directory = self.get().notes_directory
        if notes_directory is None:
            raise NotesDirectoryNotConfiguredError()
        return Path(notes_directory).expanduser()

    def _write(self, settings: UserSettings) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(settings.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            logger.error("settings_write_failed", path=str(self.path), error=str(e))
            raise FileWriteError(str(self.path), e.strerror or str(e)) from e
