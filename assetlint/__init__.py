"""
assetlint
=========

Structural validation for documentation-style text assets.

This package checks the workflow documents, skill bundles and rule documents
of a project against a small set of structural rules and reports every
violation with a deterministic pass/fail verdict.

Main Components:
    - utils: Frontmatter extraction and directory walking
    - validators: Field/content policies, asset kind configs, the runner, CLI
    - core: Logging, exceptions, paths and CLI helpers

Primary Interfaces:
    - assetlint.validators.cli: `validate` command line
    - assetlint.validators.runner.run_validation: programmatic entry point

Example Usage:
    >>> from assetlint.validators.configs import WORKFLOW_CONFIG
    >>> from assetlint.validators.runner import run_validation
    >>> result = run_validation(WORKFLOW_CONFIG)
    >>> result.exit_code
    0

Version: 1.0.0
License: MIT
"""
