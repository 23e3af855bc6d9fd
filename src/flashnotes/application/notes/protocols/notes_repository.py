"""Protocol for the notes directory repository."""

from pathlib import Path
from typing import Protocol


class NotesRepositoryProtocol(Protocol):
    """Protocol for file operations inside a notes directory.

    All operations are coroutines. Filenames are plain names, never paths.
    """

    async def list_filenames(self, directory: Path) -> list[str]:
        """
        List entry names in a directory, in file system order.

        Args:
            directory: The notes directory

        Returns:
            Entry names (not full paths), unsorted

        Raises:
            DirectoryReadError: If the directory cannot be listed
        """
        ...

    async def read_text(self, directory: Path, filename: str) -> str:
        """
        Read a file as UTF-8 text.

        Raises:
            FileReadError: If the file cannot be read
        """
        ...

    async def write_text(self, directory: Path, filename: str, content: str) -> Path:
        """
        Create or overwrite a file with UTF-8 text.

        Returns:
            Path of the written file

        Raises:
            FileWriteError: If the file cannot be written
        """
        ...

    async def delete(self, directory: Path, filename: str) -> None:
        """
        Delete a file.

        Raises:
            FileWriteError: If the file cannot be deleted
        """
        ...

    async def ensure_directory(self, directory: Path) -> bool:
        """
        Create the directory if it does not exist.

        Returns:
            True if the directory was created, False if it already existed
        """
        ...
