from dependency_injector import containers, providers

from flashnotes.application.learning.use_cases.flashcard_collection_use_case import (
    FlashcardCollectionUseCase,
)
from flashnotes.application.learning.use_cases.flashcard_session_use_case import (
    FlashcardSessionUseCase,
)
from flashnotes.application.learning.use_cases.practice_session_use_case import (
    PracticeSessionUseCase,
)
from flashnotes.application.notes.use_cases.note_use_case import NoteUseCase
from flashnotes.config import get_settings
from flashnotes.domain.learning.services.keyword_highlighter import KeywordHighlighter
from flashnotes.domain.learning.services.markdown_flashcard_parser import (
    MarkdownFlashcardParser,
)
from flashnotes.domain.learning.services.pattern_matcher import FilenamePatternMatcher
from flashnotes.domain.learning.services.session_report_renderer import SessionReportRenderer
from flashnotes.infrastructure.notes.repositories import FileNotesRepository
from flashnotes.infrastructure.settings import JsonSettingsStore


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)

    # Infrastructure
    notes_repository = providers.Singleton(FileNotesRepository)
    settings_store = providers.Singleton(
        JsonSettingsStore,
        path=settings.provided.SETTINGS_PATH,
        max_recent_directories=settings.provided.MAX_RECENT_DIRECTORIES,
        notes_directory_override=settings.provided.NOTES_DIRECTORY,
    )

    # Domain services (pure domain logic, no I/O)
    pattern_matcher = providers.Factory(FilenamePatternMatcher)
    flashcard_parser = providers.Factory(MarkdownFlashcardParser)
    report_renderer = providers.Factory(SessionReportRenderer)
    keyword_highlighter = providers.Factory(
        KeywordHighlighter,
        open_tag=settings.provided.HIGHLIGHT_OPEN_TAG,
        close_tag=settings.provided.HIGHLIGHT_CLOSE_TAG,
    )

    # Learning module, application use cases
    flashcard_collection_use_case = providers.Factory(
        FlashcardCollectionUseCase,
        notes_repository=notes_repository,
        pattern_matcher=pattern_matcher,
        parser=flashcard_parser,
    )
    flashcard_session_use_case = providers.Factory(
        FlashcardSessionUseCase,
        notes_repository=notes_repository,
        report_renderer=report_renderer,
    )
    # Singleton: holds the in-progress sessions
    practice_session_use_case = providers.Singleton(
        PracticeSessionUseCase,
        collection_use_case=flashcard_collection_use_case,
        session_use_case=flashcard_session_use_case,
        highlighter=keyword_highlighter,
    )

    # Notes module, application use cases
    note_use_case = providers.Factory(
        NoteUseCase,
        notes_repository=notes_repository,
        directory_provider=settings_store,
    )


# Initialize container
container = Container()
