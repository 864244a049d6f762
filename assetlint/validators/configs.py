#!/usr/bin/env python3
"""
configs.py
----------
Asset kind configurations for the validation runner.

Each AssetKindConfig specifies where an asset kind lives, how its root is
enumerated, and which policy decides whether one file is valid. The runner
is the same for every kind; only the config differs.

Configs:
    - WORKFLOW_CONFIG: workflows/*.md with a required `description` field
    - SKILL_CONFIG: skills/<name>/SKILL.md, non-empty
    - RULE_CONFIG: rules/**/*.md, non-empty
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, Optional, Tuple

# --- Local imports ---
from assetlint.core.exceptions import ConfigurationError
from assetlint.core.paths import RULES_DIR, SKILLS_DIR, WORKFLOWS_DIR
from assetlint.utils.fs import EnumerationMode
from assetlint.validators.policies import Policy, content_policy, frontmatter_policy


@dataclass(frozen=True)
class AssetKindConfig:
    """
    Configuration for validating one asset kind.

    Attributes:
        name: Singular name used in the summary line (workflow, skill)
        plural: Plural name used as the CLI command (workflows, skills)
        root: Directory holding the assets
        mode: How the root is enumerated
        policy: Function from file text to violation messages
        extension: File suffix for FLAT_FILES and RECURSIVE modes
        member_name: File validated inside each bundle (BUNDLES mode)
    """

    name: str
    plural: str
    root: Path
    mode: EnumerationMode
    policy: Policy
    extension: str = ".md"
    member_name: Optional[str] = None

    def __post_init__(self) -> None:
        """Reject configs the walker cannot enumerate."""
        if self.mode is EnumerationMode.BUNDLES and not self.member_name:
            raise ConfigurationError(f"{self.plural}: bundle mode requires a member_name")
        if self.mode is not EnumerationMode.BUNDLES and not self.extension:
            raise ConfigurationError(f"{self.plural}: {self.mode.value} mode requires an extension")

    def with_root(self, root: Path) -> "AssetKindConfig":
        """Return a copy of this config pointed at another root."""
        return replace(self, root=Path(root))


# --- Workflow documents ---

WORKFLOW_REQUIRED_FIELDS: Tuple[str, ...] = ("description",)

WORKFLOW_CONFIG = AssetKindConfig(
    name="workflow",
    plural="workflows",
    root=WORKFLOWS_DIR,
    mode=EnumerationMode.FLAT_FILES,
    policy=frontmatter_policy(WORKFLOW_REQUIRED_FIELDS),
)

# --- Skill bundles ---

SKILL_CONFIG = AssetKindConfig(
    name="skill",
    plural="skills",
    root=SKILLS_DIR,
    mode=EnumerationMode.BUNDLES,
    policy=content_policy,
    member_name="SKILL.md",
)

# --- Rule documents ---

RULE_CONFIG = AssetKindConfig(
    name="rule",
    plural="rules",
    root=RULES_DIR,
    mode=EnumerationMode.RECURSIVE,
    policy=content_policy,
)


# Registry in the order `validate all` runs them
ASSET_KINDS: Dict[str, AssetKindConfig] = {
    config.plural: config
    for config in (WORKFLOW_CONFIG, SKILL_CONFIG, RULE_CONFIG)
}
