"""Use case for listing and managing note files."""

import asyncio
from dataclasses import dataclass
from pathlib import Path

import structlog

from flashnotes.application.notes.protocols.notes_directory_provider import (
    NotesDirectoryProviderProtocol,
)
from flashnotes.application.notes.protocols.notes_repository import NotesRepositoryProtocol
from flashnotes.domain.common.value_objects import NoteName
from flashnotes.domain.common.value_objects.note_name import MARKDOWN_EXTENSION
from flashnotes.exceptions import DirectoryReadError

logger = structlog.get_logger(__name__)

NEW_NOTE_BODY = "Start writing here..."


@dataclass(frozen=True)
class NoteSummary:
    """A note file and the hierarchy encoded in its name."""

    filename: str
    hierarchy: list[str]
    path: str
    full_path: Path


class NoteUseCase:
    """Note operations against the configured notes directory."""

    def __init__(
        self,
        notes_repository: NotesRepositoryProtocol,
        directory_provider: NotesDirectoryProviderProtocol,
    ) -> None:
        self.notes_repository = notes_repository
        self.directory_provider = directory_provider

    async def list_notes(self) -> list[NoteSummary]:
        """
        List the notes with their hierarchy.

        Returns an empty list when the directory cannot be read.

        Raises:
            NotesDirectoryNotConfiguredError: If no notes directory is selected
        """
        notes_dir = await self._require_notes_directory()
        try:
            filenames = await self.notes_repository.list_filenames(notes_dir)
        except DirectoryReadError as e:
            logger.warning("notes_unavailable", notes_dir=str(notes_dir), error=str(e))
            return []

        notes = []
        for filename in filenames:
            if not filename.endswith(MARKDOWN_EXTENSION):
                continue
            name = NoteName(filename)
            notes.append(
                NoteSummary(
                    filename=filename,
                    hierarchy=name.hierarchy,
                    path=name.display_path,
                    full_path=notes_dir / filename,
                )
            )
        return notes

    async def read_note(self, filename: str) -> str:
        notes_dir = await self._require_notes_directory()
        name = NoteName(filename)
        return await self.notes_repository.read_text(notes_dir, name.value)

    async def write_note(self, filename: str, content: str) -> None:
        notes_dir = await self._require_notes_directory()
        name = NoteName(filename)
        await self.notes_repository.write_text(notes_dir, name.value, content)
        logger.info("note_written", filename=name.value)

    async def create_note(self, hierarchy: list[str]) -> str:
        """
        Create a note from hierarchy tokens, e.g. ``["biology", "cells"]``.

        The note starts with a title header named after the last token.

        Returns:
            The new note filename

        Raises:
            ValidationError: If the hierarchy is empty or has blank tokens
        """
        notes_dir = await self._require_notes_directory()
        name = NoteName.from_hierarchy(hierarchy)
        content = f"# {name.title}\n\n{NEW_NOTE_BODY}"
        await self.notes_repository.ensure_directory(notes_dir)
        await self.notes_repository.write_text(notes_dir, name.value, content)
        logger.info("note_created", filename=name.value)
        return name.value

    async def delete_note(self, filename: str) -> None:
        notes_dir = await self._require_notes_directory()
        name = NoteName(filename)
        await self.notes_repository.delete(notes_dir, name.value)
        logger.info("note_deleted", filename=name.value)

    async def _require_notes_directory(self) -> Path:
        # Directory providers may read a settings file
        return await asyncio.to_thread(self.directory_provider.require_notes_directory)

