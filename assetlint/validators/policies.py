#!/usr/bin/env python3
"""
policies.py
-----------
Per-file validity policies.

A policy takes the text of one file and returns the reasons it is invalid,
in a fixed order; an empty list means the file is valid. Two policies exist:

- Field policy: the file must start with a frontmatter block that carries
  every required field with a non-blank value.
- Content policy: the file must contain something other than whitespace.

Reasons are plain strings from a fixed vocabulary so that the CLI output
stays stable for scripts and CI logs that grep it.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Callable, Dict, List, Optional, Sequence

# --- Local imports ---
from assetlint.utils.md import BOM, extract_frontmatter

Policy = Callable[[str], List[str]]

MISSING_FRONTMATTER = "Missing frontmatter"
MISSING_FIELD = "Missing required field: {field}"
MISSING_MEMBER = "Missing {member}"
EMPTY_FILE = "Empty file"


def check_required_fields(
    frontmatter: Optional[Dict[str, str]], required: Sequence[str]
) -> List[str]:
    """
    Report required fields that are absent or blank.

    A missing frontmatter block is reported once and on its own; individual
    fields are not listed in that case. Fields outside `required` are never
    looked at.

    Args:
        frontmatter: Extracted mapping, or None when there is no block
        required: Field names in reporting order

    Returns:
        Violation messages, empty when every field is present and non-blank

    Examples:
        >>> check_required_fields(None, ["description"])
        ['Missing frontmatter']
        >>> check_required_fields({"description": "  "}, ["description"])
        ['Missing required field: description']
        >>> check_required_fields({"description": "ok", "x": ""}, ["description"])
        []
    """
    if frontmatter is None:
        return [MISSING_FRONTMATTER]

    violations = []
    for name in required:
        value = frontmatter.get(name)
        if value is None or not value.strip():
            violations.append(MISSING_FIELD.format(field=name))
    return violations


def check_non_empty(text: str) -> Optional[str]:
    """
    Report a file whose content is empty or whitespace only.

    Any other content passes, including a file that is nothing but a fenced
    code block. A byte-order mark counts as whitespace.

    Examples:
        >>> check_non_empty("   \\n\\t\\n  ")
        'Empty file'
        >>> check_non_empty("# Rule") is None
        True
    """
    if not text.replace(BOM, "").strip():
        return EMPTY_FILE
    return None


def frontmatter_policy(required: Sequence[str]) -> Policy:
    """Build a policy that checks frontmatter for the given required fields."""
    fields = tuple(required)

    def policy(text: str) -> List[str]:
        return check_required_fields(extract_frontmatter(text), fields)

    return policy


def content_policy(text: str) -> List[str]:
    """Policy for assets that only need to be non-empty."""
    violation = check_non_empty(text)
    return [violation] if violation else []
