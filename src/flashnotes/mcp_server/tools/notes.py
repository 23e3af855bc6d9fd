"""Note and settings MCP tools."""

import asyncio
import json

from mcp.server.fastmcp import FastMCP

from flashnotes.core import Container
from flashnotes.mcp_server.serializers import note_to_dict


def register_note_tools(server: FastMCP, container: Container) -> None:
    """Register note management tools with the MCP server."""

    @server.tool()
    async def list_notes() -> str:
        """List the notes in the notes directory with their topic hierarchy."""
        notes = await container.note_use_case().list_notes()
        return json.dumps([note_to_dict(note) for note in notes], indent=2)

    @server.tool()
    async def read_note(filename: str) -> str:
        """Read the Markdown content of a note.

        Args:
            filename: Note filename, e.g. "biology.cells.md"
        """
        return await container.note_use_case().read_note(filename)

    @server.tool()
    async def write_note(filename: str, content: str) -> str:
        """Create or replace a note.

        Args:
            filename: Note filename, e.g. "biology.cells.md"
            content: Full Markdown content
        """
        await container.note_use_case().write_note(filename, content)
        return json.dumps({"success": True, "filename": filename})

    @server.tool()
    async def create_note(hierarchy: list[str]) -> str:
        """Create a new note from topic tokens, e.g. ["biology", "cells"].

        Args:
            hierarchy: Topic tokens from broadest to most specific
        """
        filename = await container.note_use_case().create_note(hierarchy)
        return json.dumps({"success": True, "filename": filename})

    @server.tool()
    async def delete_note(filename: str) -> str:
        """Delete a note.

        Args:
            filename: Note filename, e.g. "biology.cells.md"
        """
        await container.note_use_case().delete_note(filename)
        return json.dumps({"success": True, "filename": filename})


def register_settings_tools(server: FastMCP, container: Container) -> None:
    """Register user settings tools with the MCP server."""

    @server.tool()
    async def get_settings() -> str:
        """Get the user settings, including the selected notes directory."""
        settings = await asyncio.to_thread(container.settings_store().get)
        return json.dumps(settings.model_dump(), indent=2)

    @server.tool()
    async def set_notes_directory(path: str) -> str:
        """Select the notes directory. It is created if missing.

        Args:
            path: Absolute path of the directory holding the notes
        """
        store = container.settings_store()
        settings = await asyncio.to_thread(store.update, {"notes_directory": path})
        notes_dir = await asyncio.to_thread(store.require_notes_directory)
        await container.notes_repository().ensure_directory(notes_dir)
        return json.dumps(settings.model_dump(), indent=2)
