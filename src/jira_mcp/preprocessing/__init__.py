"""Preprocessing modules for turning Jira content into plain text."""

from .jira import adf_to_text, description_to_text, extract_acceptance_criteria

__all__ = [
    "adf_to_text",
    "description_to_text",
    "extract_acceptance_criteria",
]
