#!/usr/bin/env python3
"""
runner.py
---------
Validation runner shared by every asset kind.

The runner enumerates the candidates of one asset kind, reads each file,
applies the kind's policy and collects one issue per violation. Nothing a
single file does can stop the run: policy violations and read failures alike
become issues, and the run-level verdict is valid only when no issue was
produced.

Only enumeration failures on an existing root escape as EnumerationError;
there is no policy for a partially listable tree.

Usage:
    from assetlint.validators.configs import RULE_CONFIG
    from assetlint.validators.runner import run_validation

    result = run_validation(RULE_CONFIG.with_root(Path("rules")))
    for line in result.diagnostics:
        print(line, file=sys.stderr)
    sys.exit(result.exit_code)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from typing import List, Optional

# --- Local imports ---
from assetlint.core.cli import ValidationStats
from assetlint.core.logging_manager import AssetLintLogger, safe_logger
from assetlint.utils.fs import Candidate, EnumerationMode, enumerate_candidates
from assetlint.validators.configs import AssetKindConfig
from assetlint.validators.policies import MISSING_MEMBER


@dataclass(frozen=True)
class AssetIssue:
    """A single reason one candidate failed validation."""

    label: str
    reason: str

    def format(self) -> str:
        """Render as the `ERROR: <label> - <reason>` diagnostic line."""
        return f"ERROR: {self.label} - {self.reason}"


@dataclass
class ValidationResult:
    """
    Outcome of one validation run.

    Attributes:
        asset_kind: Singular asset kind name
        validated_count: Number of candidates examined (valid or not)
        issues: Every issue found, in enumeration order
    """

    asset_kind: str
    validated_count: int = 0
    issues: List[AssetIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.issues

    @property
    def exit_code(self) -> int:
        return 0 if self.is_valid else 1

    @property
    def diagnostics(self) -> List[str]:
        return [issue.format() for issue in self.issues]

    @property
    def summary(self) -> str:
        """Success line printed when the run is valid."""
        return f"Validated {self.validated_count} {self.asset_kind} files"


class ValidationRunner:
    """Runs one asset kind's policy over every candidate under its root."""

    def __init__(
        self,
        config: AssetKindConfig,
        logger: Optional[AssetLintLogger] = None,
    ) -> None:
        """
        Initialize the runner.

        Args:
            config: Asset kind to validate
            logger: Optional logger instance
        """
        self.config = config
        self.logger = logger

    def run(self) -> ValidationResult:
        """
        Validate every candidate of the configured asset kind.

        Returns:
            ValidationResult with issues in enumeration order

        Raises:
            EnumerationError: If the root exists but cannot be listed
        """
        config = self.config
        log = safe_logger(self.logger)
        log.log_info(
            f"Validating {config.plural}",
            {"root": str(config.root), "mode": config.mode.value},
        )

        stats = ValidationStats(asset_kind=config.name)
        result = ValidationResult(asset_kind=config.name)

        candidates = enumerate_candidates(
            config.root,
            config.mode,
            extension=config.extension,
            member_name=config.member_name,
        )
        if not candidates and not config.root.exists():
            log.log_info(
                f"No {config.plural} directory, nothing to validate",
                {"root": str(config.root)},
            )

        for candidate in candidates:
            issues = self.validate_candidate(candidate, stats)
            stats.files_processed += 1
            log.log_debug(
                f"Checked {candidate.label}",
                {"path": str(candidate.path), "issues": len(issues)},
            )
            if issues:
                stats.files_invalid += 1
                stats.errors += len(issues)
                result.issues.extend(issues)

        result.validated_count = stats.files_processed
        log.log_info(stats.summary())
        log.log_operation(f"validate_{config.plural}", stats.to_dict())
        return result

    def validate_candidate(
        self, candidate: Candidate, stats: Optional[ValidationStats] = None
    ) -> List[AssetIssue]:
        """
        Validate a single candidate.

        Content is decoded as UTF-8 with undecodable bytes replaced, so the
        encoding of a file never makes it invalid on its own.

        Args:
            candidate: Candidate produced by the walker
            stats: Optional stats object to count read failures on

        Returns:
            Issues for this candidate, empty when valid
        """
        config = self.config
        path = candidate.path

        try:
            if config.mode is EnumerationMode.BUNDLES and not (
                path.exists() or path.is_symlink()
            ):
                return [
                    AssetIssue(
                        label=candidate.label,
                        reason=MISSING_MEMBER.format(member=config.member_name),
                    )
                ]

            # newline="" keeps CR characters as written on disk
            with path.open("r", encoding="utf-8", errors="replace", newline="") as handle:
                content = handle.read()
        except OSError as e:
            safe_logger(self.logger).log_info(
                f"Cannot read {candidate.label}",
                {"path": str(path), "error": f"{type(e).__name__}: {e}"},
            )
            if stats is not None:
                stats.read_failures += 1
            return [AssetIssue(label=candidate.label, reason=str(e))]

        return [
            AssetIssue(label=candidate.label, reason=reason)
            for reason in config.policy(content)
        ]


def run_validation(
    config: AssetKindConfig, logger: Optional[AssetLintLogger] = None
) -> ValidationResult:
    """Validate one asset kind; see ValidationRunner.run."""
    return ValidationRunner(config, logger).run()
