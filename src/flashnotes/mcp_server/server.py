"""flashnotes MCP server: flashcard practice over a directory of Markdown notes."""

import structlog
from mcp.server.fastmcp import FastMCP

from flashnotes.config import configure_logging
from flashnotes.core import Container, container
from flashnotes.mcp_server.tools.flashcards import register_flashcard_tools
from flashnotes.mcp_server.tools.notes import register_note_tools, register_settings_tools

logger = structlog.get_logger(__name__)


def create_server(app_container: Container | None = None) -> FastMCP:
    """Create and configure the MCP server."""
    app_container = app_container or container
    settings = app_container.settings()
    server = FastMCP(settings.PROJECT_NAME)

    # Register all tools
    register_flashcard_tools(server, app_container)
    register_note_tools(server, app_container)
    register_settings_tools(server, app_container)

    return server


async def run() -> None:
    """Run the MCP server over stdio."""
    settings = container.settings()
    configure_logging(settings.ENVIRONMENT)
    server = create_server()
    logger.info("mcp_server_starting", settings_path=str(settings.SETTINGS_PATH))
    await server.run_stdio_async()


def main() -> None:
    """Entry point for the flashnotes-mcp command."""
    import asyncio

    asyncio.run(run())


if __name__ == "__main__":
    main()
