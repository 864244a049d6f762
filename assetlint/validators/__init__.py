#!/usr/bin/env python3
"""
validators
----------
Structural validation of workflow, skill and rule assets.

Architecture:
    - policies.py: per-file validity policies (frontmatter fields, non-empty)
    - configs.py: one AssetKindConfig per asset kind (root, mode, policy)
    - runner.py: the single runner that applies a config to a directory tree
    - cli/: the `validate` command line, one subcommand per asset kind

Usage:
    # Through CLI
    validate workflows
    validate skills
    validate rules --root path/to/rules
    validate all

    # Direct import for programmatic use
    from assetlint.validators.configs import WORKFLOW_CONFIG
    from assetlint.validators.runner import run_validation
"""

__all__ = [
    "AssetIssue",
    "ValidationResult",
    "ValidationRunner",
    "run_validation",
]

from .runner import AssetIssue, ValidationResult, ValidationRunner, run_validation
