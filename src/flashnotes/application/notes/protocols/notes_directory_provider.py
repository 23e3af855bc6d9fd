"""Protocol for resolving the configured notes directory."""

from pathlib import Path
from typing import Protocol


class NotesDirectoryProviderProtocol(Protocol):
    """Supplies the notes directory currently selected by the user."""

    def require_notes_directory(self) -> Path:
        """
        Get the configured notes directory.

        Raises:
            NotesDirectoryNotConfiguredError: If no directory has been selected
        """
        ...
