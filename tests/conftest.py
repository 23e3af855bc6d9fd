"""Pytest configuration and fixtures."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from dependency_injector import providers

from flashnotes.application.learning.use_cases.flashcard_collection_use_case import (
    FlashcardCollectionUseCase,
)
from flashnotes.application.learning.use_cases.flashcard_session_use_case import (
    FlashcardSessionUseCase,
)
from flashnotes.config import Settings
from flashnotes.core import Container
from flashnotes.domain.learning.services.markdown_flashcard_parser import (
    MarkdownFlashcardParser,
)
from flashnotes.domain.learning.services.pattern_matcher import FilenamePatternMatcher
from flashnotes.domain.learning.services.session_report_renderer import SessionReportRenderer
from flashnotes.exceptions import DirectoryReadError, FileReadError, FileWriteError
from flashnotes.infrastructure.notes.repositories import FileNotesRepository
from flashnotes.infrastructure.settings import JsonSettingsStore

BIOLOGY_NOTE = """# Biology 101

Intro text that is not a flashcard.

## What is the powerhouse of the cell?
The **mitochondria** produces **ATP**.

## What carries genetic information?
**DNA**
"""

CHEMISTRY_NOTE = """## What is H2O?
**Water**
"""


class FakeNotesRepository:
    """In-memory notes repository keeping files in insertion order."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files: dict[str, str] = dict(files or {})
        self.missing_directory = False
        self.failing_writes = 0
        self.writes: list[str] = []

    async def list_filenames(self, directory: Path) -> list[str]:
        if self.missing_directory:
            raise DirectoryReadError(str(directory), "No such file or directory")
        return list(self.files)

    async def read_text(self, directory: Path, filename: str) -> str:
        if filename not in self.files:
            raise FileReadError(filename, "No such file or directory")
        return self.files[filename]

    async def write_text(self, directory: Path, filename: str, content: str) -> Path:
        if self.failing_writes:
            self.failing_writes -= 1
            raise FileWriteError(filename, "Disk full")
        self.files[filename] = content
        self.writes.append(filename)
        return directory / filename

    async def delete(self, directory: Path, filename: str) -> None:
        if filename not in self.files:
            raise FileWriteError(filename, "No such file or directory")
        del self.files[filename]

    async def ensure_directory(self, directory: Path) -> bool:
        return False


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    """Empty notes directory."""
    directory = tmp_path / "notes"
    directory.mkdir()
    return directory


@pytest.fixture
def write_note(notes_dir: Path) -> Callable[[str, str], Path]:
    """Write a note into the notes directory."""

    def _write(filename: str, content: str) -> Path:
        path = notes_dir / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_notes(write_note: Callable[[str, str], Path], notes_dir: Path) -> Path:
    """Notes directory with a biology note, a chemistry note and a non-note file."""
    write_note("bio.101.md", BIOLOGY_NOTE)
    write_note("chem.md", CHEMISTRY_NOTE)
    write_note("todo.txt", "## Not a note\nignored")
    return notes_dir


@pytest.fixture
def notes_repository() -> FileNotesRepository:
    return FileNotesRepository()


@pytest.fixture
def collection_use_case(notes_repository: FileNotesRepository) -> FlashcardCollectionUseCase:
    return FlashcardCollectionUseCase(
        notes_repository=notes_repository,
        pattern_matcher=FilenamePatternMatcher(),
        parser=MarkdownFlashcardParser(),
    )


@pytest.fixture
def session_use_case(notes_repository: FileNotesRepository) -> FlashcardSessionUseCase:
    return FlashcardSessionUseCase(
        notes_repository=notes_repository,
        report_renderer=SessionReportRenderer(),
    )


@pytest.fixture
def settings_store(tmp_path: Path) -> JsonSettingsStore:
    return JsonSettingsStore(tmp_path / "config" / "settings.json")


@pytest.fixture
def app_container(tmp_path: Path, notes_dir: Path) -> Generator[Container, None, None]:
    """Container wired to a temporary settings file and notes directory."""
    app_container = Container()
    app_container.settings.override(
        providers.Object(
            Settings(
                ENVIRONMENT="test",
                SETTINGS_PATH=tmp_path / "settings.json",
                NOTES_DIRECTORY=notes_dir,
            )
        )
    )
    yield app_container
    app_container.settings.reset_override()
