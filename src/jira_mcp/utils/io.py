"""I/O utility functions for jira-mcp."""

import os


def is_read_only_mode() -> bool:
    """Check if the server is running in read-only mode.

    Read-only mode rejects the issue create and update tools while leaving
    all read tools available.

    Returns:
        True if read-only mode is enabled, False otherwise
    """
    value = os.getenv("READ_ONLY_MODE", "false")
    return value.lower() in ("true", "1", "yes", "y", "on")
