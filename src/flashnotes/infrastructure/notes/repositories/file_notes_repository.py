"""Repository for note file I/O."""

import asyncio
import os
from pathlib import Path

import structlog

from flashnotes.exceptions import DirectoryReadError, FileReadError, FileWriteError

logger = structlog.get_logger(__name__)

ENCODING = "utf-8"


class FileNotesRepository:
    """File system implementation of the notes repository.

    Blocking ``pathlib`` calls run in a worker thread so the event loop
    stays free while a file is read or written.
    """

    async def list_filenames(self, directory: Path) -> list[str]:
        """
        List entry names in ``directory`` in file system order.

        Raises:
            DirectoryReadError: If the directory cannot be listed
        """
        try:
            return await asyncio.to_thread(os.listdir, directory)
        except OSError as e:
            logger.error("directory_list_failed", directory=str(directory), error=str(e))
            raise DirectoryReadError(str(directory), e.strerror or str(e)) from e

    async def read_text(self, directory: Path, filename: str) -> str:
        """
        Read a note as UTF-8 text.

        Raises:
            FileReadError: If the file cannot be read or decoded
        """
        file_path = directory / filename
        try:
            return await asyncio.to_thread(file_path.read_text, encoding=ENCODING)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("file_read_failed", path=str(file_path), error=str(e))
            reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
            raise FileReadError(filename, reason) from e

    async def write_text(self, directory: Path, filename: str, content: str) -> Path:
        """
        Create or overwrite a note with UTF-8 text.

        Raises:
            FileWriteError: If the file cannot be written
        """
        file_path = directory / filename
        try:
            await asyncio.to_thread(file_path.write_text, content, encoding=ENCODING)
        except OSError as e:
            logger.error("file_write_failed", path=str(file_path), error=str(e))
            raise FileWriteError(filename, e.strerror or str(e)) from e
        logger.debug("file_written", path=str(file_path), size=len(content))
        return file_path

    async def delete(self, directory: Path, filename: str) -> None:
        """
        Delete a note.

        Raises:
            FileWriteError: If the file does not exist or cannot be removed
        """
        file_path = directory / filename
        try:
            await asyncio.to_thread(file_path.unlink)
        except OSError as e:
            logger.error("file_delete_failed", path=str(file_path), error=str(e))
            raise FileWriteError(filename, e.strerror or str(e)) from e
        logger.info("file_deleted", path=str(file_path))

    async def ensure_directory(self, directory: Path) -> bool:
        """Create ``directory`` (and parents) unless it exists.

        Returns:
            True if the directory was created
        """
        if await asyncio.to_thread(directory.is_dir):
            return False
        try:
            await asyncio.to_thread(directory.mkdir, parents=True, exist_ok=True)
        except OSError as e:
            logger.error("directory_create_failed", directory=str(directory), error=str(e))
            raise FileWriteError(str(directory), e.strerror or str(e)) from e
        logger.info("notes_directory_created", directory=str(directory))
        return True
