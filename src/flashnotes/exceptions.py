"""Custom exception hierarchy for flashnotes."""


class FlashnotesError(Exception):
    """Base exception for all flashnotes errors."""

    def __init__(self, message: str) -> None:
        """Initialize exception with message."""
        self.message = message
        super().__init__(self.message)


class NotesDirectoryNotConfiguredError(FlashnotesError):
    """No notes directory has been selected yet.

    A precondition failure, distinct from any I/O error on a directory that
    is configured.
    """

    def __init__(self) -> None:
        """Initialize with a fixed message."""
        super().__init__("No notes directory configured")


class NotesIOError(FlashnotesError):
    """Underlying file system operation failed."""


class DirectoryReadError(NotesIOError):
    """Notes directory cannot be listed."""

    def __init__(self, directory: str, reason: str) -> None:
        """Initialize with the directory and reason for failure."""
        self.directory = directory
        self.reason = reason
        super().__init__(f"Cannot read directory '{directory}': {reason}")


class FileReadError(NotesIOError):
    """A note file cannot be read."""

    def __init__(self, filename: str, reason: str) -> None:
        """Initialize with the filename and reason for failure."""
        self.filename = filename
        self.reason = reason
        super().__init__(f"Cannot read file '{filename}': {reason}")


class FileWriteError(NotesIOError):
    """A note file cannot be written or deleted."""

    def __init__(self, filename: str, reason: str) -> None:
        """Initialize with the filename and reason for failure."""
        self.filename = filename
        self.reason = reason
        super().__init__(f"Cannot write file '{filename}': {reason}")


class NotFoundError(FlashnotesError):
    """Resource not found error."""


class SessionNotFoundError(NotFoundError):
    """Practice session not found error."""

    def __init__(self, session_id: str) -> None:
        """Initialize with session ID."""
        self.session_id = session_id
        super().__init__(f"Flashcard session with id {session_id} not found")
