#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants and configuration for the assetlint project.

This module defines all project paths as Path objects for consistent path
handling across the codebase. Asset roots are the fixed, well-known locations
each validator checks when no override is given.

The project structure:
    ROOT/
    ├── assetlint/     # Validation code
    ├── workflows/     # Workflow documents (*.md with frontmatter)
    ├── skills/        # Skill bundles (<name>/SKILL.md)
    ├── rules/         # Rule documents (*.md, nested by category)
    └── logs/          # Application logs

All paths are resolved at import time.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


def _get_project_root() -> Path:
    """
    Determine project root directory.

    Assumes this file is at ROOT/assetlint/core/paths.py and navigates up
    the directory tree to find ROOT.

    Returns:
        Path object for project root

    Raises:
        RuntimeError: If project root cannot be determined or validated
    """
    current_file = Path(__file__).resolve()

    # Navigate up: paths.py -> core/ -> assetlint/ -> ROOT/
    root = current_file.parent.parent.parent

    if not (root / "assetlint").is_dir():
        raise RuntimeError(
            f"Cannot determine valid project root. "
            f"Expected {root / 'assetlint'} to exist. "
            f"Current file: {current_file}"
        )

    return root


# ----- Project directory -----
ROOT: Path = _get_project_root()

# ---- Asset roots ----
WORKFLOWS_DIR = ROOT / "workflows"
SKILLS_DIR = ROOT / "skills"
RULES_DIR = ROOT / "rules"

# ---- Logs ----
LOG_DIR = ROOT / "logs"
