"""External service boundaries: database, identity, video/chat, code execution."""
