"""Jira-specific text preprocessing module."""

import logging
import re
from typing import Any

logger = logging.getLogger("jira-mcp.preprocessing")

# Applied in order; every pattern scans the whole description.
ACCEPTANCE_CRITERIA_PATTERNS = (
    re.compile(r"acceptance criteria:?\s*(.*?)(?=\n\n|\n[A-Z]|\Z)", re.I | re.S),
    re.compile(r"ac:?\s*(.*?)(?=\n\n|\n[A-Z]|\Z)", re.I | re.S),
    re.compile(r"given.*when.*then.*", re.I | re.S),
    re.compile(r"- \[[ x]\] .*"),
    re.compile(r"\* .*"),
)

_AC_LABEL = re.compile(r"acceptance criteria:?", re.I)
_AC_SHORT_LABEL = re.compile(r"ac:?", re.I)

# ADF block nodes that end a line when flattened
_ADF_LINE_NODES = {"paragraph", "heading"}


def adf_to_text(node: Any) -> str:  # noqa: ANN401 - ADF is arbitrary JSON
    """
    Flatten an Atlassian Document Format node into plain text.

    Text nodes contribute their text; paragraphs and headings end with a
    newline. Marks, attributes and media are dropped.

    Args:
        node: An ADF document, node or list of nodes

    Returns:
        The plain text content
    """
    if isinstance(node, dict):
        if node.get("type") == "text":
            return node.get("text", "")
        text = "".join(adf_to_text(child) for child in node.get("content") or [])
        if node.get("type") in _ADF_LINE_NODES:
            text += "\n"
        return text
    if isinstance(node, list):
        return "".join(adf_to_text(child) for child in node)
    return ""


def description_to_text(description: Any) -> str:  # noqa: ANN401
    """
    Normalize a Jira description field to plain text.

    Args:
        description: A string, an ADF document, or None

    Returns:
        The description text, or an empty string when absent
    """
    if not description:
        return ""
    if isinstance(description, str):
        return description
    return adf_to_text(description).strip()


def _clean_criterion(match: str) -> str:
    cleaned = _AC_LABEL.sub("", match, count=1)
    cleaned = _AC_SHORT_LABEL.sub("", cleaned, count=1)
    return cleaned.strip()


def extract_acceptance_criteria(text: str | None) -> list[str]:
    """
    Pull likely acceptance criteria out of free-form description text.

    This is a heuristic: labelled sections, Given/When/Then prose, task-list
    checkboxes and bullet points are all collected. The short "ac" label
    also matches inside ordinary words, so results can be noisy.

    Args:
        text: The issue description

    Returns:
        Distinct criteria in first-seen order, empty when nothing matched
    """
    if not text:
        return []

    criteria: list[str] = []
    seen: set[str] = set()
    for pattern in ACCEPTANCE_CRITERIA_PATTERNS:
        for match in pattern.finditer(text):
            cleaned = _clean_criterion(match.group(0))
            if cleaned and cleaned not in seen:
                seen.add(cleaned)
                criteria.append(cleaned)

    logger.debug(f"Extracted {len(criteria)} acceptance criteria")
    return criteria
