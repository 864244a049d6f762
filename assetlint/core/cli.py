#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for assetlint commands.

Functions:
    setup_logger: Initialize AssetLintLogger for CLI operations

Classes:
    OperationStats: Base class for run statistics
    ValidationStats: Per-run counters for a validation check

Usage:
    from assetlint.core.cli import setup_logger, ValidationStats

    logger = setup_logger(log_dir, "validators")
    stats = ValidationStats(asset_kind="workflow")
    stats.files_processed += 1
    logger.log_operation("validate_workflows", stats.to_dict())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Local imports ---
from assetlint.core.logging_manager import AssetLintLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> AssetLintLogger:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    an AssetLintLogger instance for the specified component.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging (e.g., 'validators')

    Returns:
        Configured AssetLintLogger instance
    """
    operations_log_dir = log_dir / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return AssetLintLogger(operations_log_dir, component_name=component_name)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Base class for CLI operation statistics.

    Attributes:
        files_processed: Number of files examined
        errors: Number of errors encountered
        start_time: Operation start timestamp
    """
    files_processed: int = 0
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate statistics on initialization."""
        if self.files_processed < 0:
            raise ValueError(f"files_processed must be non-negative, got {self.files_processed}")
        if self.errors < 0:
            raise ValueError(f"errors must be non-negative, got {self.errors}")

    def duration(self) -> float:
        """Seconds elapsed since start_time (cached after first call)."""
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON logging."""
        return {
            "files_processed": self.files_processed,
            "errors": self.errors,
            "duration": self.duration(),
        }


@dataclass
class ValidationStats(OperationStats):
    """
    Statistics for one validation run.

    Attributes:
        asset_kind: Singular asset kind name (workflow, skill, rule)
        files_invalid: Number of candidates with at least one issue
        read_failures: Number of candidates whose content could not be read
    """
    asset_kind: str = ""
    files_invalid: int = 0
    read_failures: int = 0

    def __post_init__(self) -> None:
        """Validate statistics on initialization."""
        super().__post_init__()
        if self.files_invalid < 0:
            raise ValueError(f"files_invalid must be non-negative, got {self.files_invalid}")
        if self.read_failures < 0:
            raise ValueError(f"read_failures must be non-negative, got {self.read_failures}")

    def summary(self) -> str:
        """Get formatted summary with validation metrics."""
        return (
            f"{self.files_processed} {self.asset_kind} files validated, "
            f"{self.files_invalid} invalid, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with validation metrics."""
        d = super().to_dict()
        d.update({
            "asset_kind": self.asset_kind,
            "files_invalid": self.files_invalid,
            "read_failures": self.read_failures,
        })
        return d
