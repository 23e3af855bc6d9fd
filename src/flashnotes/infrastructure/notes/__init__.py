"""Notes infrastructure: file system access to the notes directory."""
