#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the assetlint project.

Policy violations and per-file read failures are never raised: the runner
turns them into diagnostics. The exceptions here cover the failures that a
validation run cannot recover from.

Exception Hierarchy:
    Exception (built-in)
    └── AssetLintError - Base for all assetlint errors
        ├── EnumerationError - Asset root exists but cannot be listed
        └── ConfigurationError - Invalid asset kind configuration

Usage:
    from assetlint.core.exceptions import EnumerationError

    try:
        result = run_validation(config)
    except EnumerationError as e:
        logger.log_error(e, {"root": str(config.root)})
"""


class AssetLintError(Exception):
    """
    Base exception for assetlint errors.

    Catch this to handle any error raised by the validation engine, or
    catch specific subclasses for more granular error handling.

    See Also:
        EnumerationError, ConfigurationError
    """

    pass


class EnumerationError(AssetLintError):
    """
    Exception for asset roots that exist but cannot be listed.

    Raised by the directory walker when listing the root (or a nested
    category directory) fails for a reason other than non-existence:
    - Permission denied on the root
    - Root path is a regular file
    - I/O errors while reading directory entries

    A missing root is not an error and never raises this.

    Examples:
        >>> raise EnumerationError("Cannot list /repo/rules: permission denied")
    """

    pass


class ConfigurationError(AssetLintError):
    """
    Exception for invalid asset kind configurations.

    Raised when an AssetKindConfig cannot drive a validation run:
    - Bundle mode without a member file name
    - Empty file extension for flat or recursive modes

    Examples:
        >>> raise ConfigurationError("Bundle mode requires a member_name")
    """

    pass
