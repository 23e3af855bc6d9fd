"""Notes bounded context - Application layer: note listing and file management."""
