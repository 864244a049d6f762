"""
conftest.py
-----------
Shared pytest fixtures for assetlint tests.

Provides fixtures for:
- Temporary asset roots
- Sample asset content
"""
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def log_dir(tmp_dir):
    """Log directory kept apart from the asset roots."""
    return tmp_dir / "logs"


@pytest.fixture
def asset_root(tmp_dir):
    """Empty, existing asset root."""
    root = tmp_dir / "assets"
    root.mkdir()
    return root


# ----- Sample Content Fixtures -----

@pytest.fixture
def valid_workflow_content():
    """Workflow document with the required description field."""
    return """---
description: Run the release checklist
---

# Release

1. Bump the version.
"""


@pytest.fixture
def bom_crlf_workflow_content():
    """Workflow document saved with a BOM and Windows line endings."""
    return "\ufeff---\r\ndescription: Test\r\n---\r\n# Workflow"
