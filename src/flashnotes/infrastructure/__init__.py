"""
Infrastructure layer.

The infrastructure layer contains implementations of protocols defined
in the application layer. It handles all external concerns:

- File system access to the notes directory
- User settings persistence
- The MCP tool server

This layer depends on domain and application layers,
but they do not depend on it.
"""
