"""
Utility functions for the Jira MCP integration.
This package provides various utility functions used throughout the codebase.
"""

from .date import format_locale_date, parse_date
from .io import is_read_only_mode
from .logging import log_config_param, mask_sensitive, setup_logging

__all__ = [
    "format_locale_date",
    "is_read_only_mode",
    "log_config_param",
    "mask_sensitive",
    "parse_date",
    "setup_logging",
]
