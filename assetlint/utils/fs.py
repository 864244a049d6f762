#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for discovering the assets to validate.

Three enumeration modes cover the asset kinds:
    FLAT_FILES: immediate files of the root with a given extension
    BUNDLES: immediate subdirectories, each validated through a member file
    RECURSIVE: files with a given extension at any depth under the root

Entries are visited in sorted name order at every level so that the same
tree always produces the same candidates in the same order.

Functions:
    enumerate_candidates: List the candidates under a root for one mode
    is_candidate_file: Check whether an entry is a readable-file candidate

Usage:
    from assetlint.utils.fs import EnumerationMode, enumerate_candidates

    candidates = enumerate_candidates(Path("rules"), EnumerationMode.RECURSIVE)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional

# --- Local imports ---
from assetlint.core.exceptions import ConfigurationError, EnumerationError


class EnumerationMode(Enum):
    """How a root directory is turned into validation candidates."""

    FLAT_FILES = "flat_files"
    BUNDLES = "bundles"
    RECURSIVE = "recursive"


@dataclass(frozen=True)
class Candidate:
    """
    One unit under validation.

    Attributes:
        path: File whose content is checked
        label: Name used in diagnostics (file name, bundle name, or
            root-relative POSIX path)
    """

    path: Path
    label: str


def is_candidate_file(path: Path) -> bool:
    """
    Check whether an entry should be validated as a file.

    Regular files qualify. Dangling symlinks also qualify so that the
    broken link is reported when it is read, instead of silently skipped.
    Directories never qualify, whatever their name.

    Raises:
        EnumerationError: If the entry cannot be inspected
    """
    try:
        if path.is_file():
            return True
        return path.is_symlink() and not path.exists()
    except OSError as e:
        raise EnumerationError(f"Cannot inspect {path}: {e}") from e


def _is_dir(path: Path, follow_symlinks: bool = True) -> bool:
    """Directory check that wraps stat failures like listing failures."""
    try:
        if not follow_symlinks and path.is_symlink():
            return False
        return path.is_dir()
    except OSError as e:
        raise EnumerationError(f"Cannot inspect {path}: {e}") from e


def _list_dir(directory: Path) -> List[Path]:
    """Sorted entries of a directory, wrapping listing failures."""
    try:
        return sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise EnumerationError(f"Cannot list {directory}: {e}") from e


def _flat_files(root: Path, extension: str) -> List[Candidate]:
    return [
        Candidate(path=entry, label=entry.name)
        for entry in _list_dir(root)
        if entry.name.endswith(extension) and is_candidate_file(entry)
    ]


def _bundles(root: Path, member_name: str) -> List[Candidate]:
    return [
        Candidate(path=entry / member_name, label=entry.name)
        for entry in _list_dir(root)
        if _is_dir(entry)
    ]


def _recursive(root: Path, directory: Path, extension: str) -> List[Candidate]:
    found: List[Candidate] = []
    for entry in _list_dir(directory):
        # Symlinked directories are not followed (avoids cycles)
        if _is_dir(entry, follow_symlinks=False):
            found.extend(_recursive(root, entry, extension))
        elif entry.name.endswith(extension) and is_candidate_file(entry):
            found.append(
                Candidate(path=entry, label=entry.relative_to(root).as_posix())
            )
    return found


def enumerate_candidates(
    root: Path,
    mode: EnumerationMode,
    extension: str = ".md",
    member_name: Optional[str] = None,
) -> List[Candidate]:
    """
    Enumerate validation candidates under a root directory.

    Args:
        root: Asset root directory
        mode: Enumeration mode
        extension: File suffix to match in FLAT_FILES and RECURSIVE modes
        member_name: Fixed file name inside each bundle (BUNDLES mode)

    Returns:
        Candidates in stable, sorted order. A root that does not exist
        yields an empty list.

    Raises:
        EnumerationError: If the root (or a nested directory) exists but
            cannot be listed, or an entry in it cannot be inspected
        ConfigurationError: If the mode's required setting is missing
    """
    if mode is EnumerationMode.BUNDLES and not member_name:
        raise ConfigurationError("Bundle mode requires a member_name")
    if mode is not EnumerationMode.BUNDLES and not extension:
        raise ConfigurationError(f"{mode.value} mode requires a file extension")

    try:
        root_exists = root.exists()
    except OSError as e:
        raise EnumerationError(f"Cannot inspect {root}: {e}") from e
    if not root_exists:
        return []

    if mode is EnumerationMode.FLAT_FILES:
        return _flat_files(root, extension)
    if mode is EnumerationMode.BUNDLES:
        return _bundles(root, member_name)
    return _recursive(root, root, extension)
