from .file_notes_repository import FileNotesRepository

__all__ = ["FileNotesRepository"]
