from typing import Literal

from pydantic import BaseModel, Field, field_validator


class ShortcutSettings(BaseModel):
    """Keyboard shortcuts of the desktop shell."""

    open_command_palette: str = Field(
        default="CommandOrControl+K", description="Open the command palette"
    )
    save_note: str = Field(default="CommandOrControl+S", description="Save the current note")
    refresh_notes: str = Field(default="CommandOrControl+R", description="Reload the note list")
    open_settings: str = Field(default="CommandOrControl+,", description="Open settings")
    toggle_sidebar: str = Field(default="CommandOrControl+B", description="Show or hide sidebar")


class UserSettings(BaseModel):
    """Settings persisted in the user's settings file."""

    shortcuts: ShortcutSettings = Field(default_factory=ShortcutSettings)
    theme: Literal["dark", "light"] = Field(default="dark", description="UI theme")
    font_size: int = Field(default=14, ge=6, le=72, description="Editor font size")
    notes_directory: str | None = Field(default=None, description="Selected notes directory")
    recent_directories: list[str] = Field(
        default_factory=list, description="Previously selected directories, newest first"
    )

    @field_validator("notes_directory", mode="after")
    @classmethod
    def blank_directory_is_unset(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()
