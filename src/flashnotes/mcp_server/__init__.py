"""MCP tool server exposing notes and flashcard practice."""
