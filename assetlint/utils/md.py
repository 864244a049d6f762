#!/usr/bin/env python3
"""
md.py
-------------------
Markdown-specific utilities for assetlint.

Provides the frontmatter extractor used by the workflow validator. The
metadata block is a flat list of `key: value` lines between two `---`
delimiter lines at the very start of the file. This is deliberately not a
YAML parser: there are no nested structures, lists, multi-line values, quoting
or type coercion, and every value is kept verbatim as a string.

Functions:
    normalize_text: Strip a leading BOM and convert CRLF line endings
    split_field: Split one line into a trimmed (key, value) pair
    extract_frontmatter: Parse the leading metadata block into a mapping
"""
from __future__ import annotations

# --- Standard library imports ---
from typing import Dict, List, Optional, Tuple

BOM = "\ufeff"
DELIMITER = "---"


def normalize_text(content: str) -> str:
    """
    Strip a leading byte-order mark and normalize CRLF to LF.

    Examples:
        >>> normalize_text("\\ufeff---\\r\\ndescription: x\\r\\n---")
        '---\\ndescription: x\\n---'
    """
    if content.startswith(BOM):
        content = content[len(BOM):]
    return content.replace("\r\n", "\n")


def split_field(line: str, delimiter: str = ":") -> Optional[Tuple[str, str]]:
    """
    Split a frontmatter line at its first delimiter.

    The key is everything before the first delimiter and the value is
    everything after it, both trimmed at the outer edges only. Delimiters
    inside the value are kept.

    Args:
        line: A single frontmatter line
        delimiter: Field separator (default ':')

    Returns:
        (key, value) tuple, or None if the line has no delimiter or the
        delimiter is its first character

    Examples:
        >>> split_field("description: a: b: c")
        ('description', 'a: b: c')
        >>> split_field("description : test")
        ('description', 'test')
        >>> split_field("description:   ")
        ('description', '')
        >>> split_field(":description value") is None
        True
        >>> split_field("no colon here") is None
        True
    """
    index = line.find(delimiter)
    if index <= 0:
        return None
    key = line[:index].strip()
    value = line[index + len(delimiter):].strip()
    return key, value


def _frontmatter_lines(content: str) -> Optional[List[str]]:
    """Lines between the opening and first closing delimiter, or None."""
    lines = content.split("\n")
    if not lines or lines[0] != DELIMITER:
        return None

    for i, line in enumerate(lines[1:], 1):
        if line == DELIMITER:
            return lines[1:i]

    return None


def extract_frontmatter(content: str) -> Optional[Dict[str, str]]:
    """
    Extract the leading `---` metadata block from file content.

    Expected format:
        ---
        description: Run the release checklist
        owner: docs
        ---

        Body content here...

    The first line must be exactly `---` and the block ends at the first
    following line that is exactly `---`. A repeated key keeps its last
    value. A block that yields no key-value pairs (empty, whitespace only,
    or only colon-less lines) is reported as absent, the same as a file with
    no block at all.

    Args:
        content: Full file content as read from disk

    Returns:
        Ordered mapping of trimmed field names to trimmed values, or None

    Examples:
        >>> extract_frontmatter("---\\ndescription: Test\\n---\\n# Workflow")
        {'description': 'Test'}
        >>> extract_frontmatter("# Title\\n---\\ndescription: Test\\n---") is None
        True
        >>> extract_frontmatter("---\\n---\\n# Workflow") is None
        True
    """
    lines = _frontmatter_lines(normalize_text(content))
    if lines is None:
        return None

    frontmatter: Dict[str, str] = {}
    for line in lines:
        field = split_field(line)
        if field is None:
            continue
        key, value = field
        frontmatter[key] = value

    if not frontmatter:
        return None

    return frontmatter
