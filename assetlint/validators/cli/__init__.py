"""
Validators CLI Package
----------------------

Unified CLI for assetlint validators.

Available checks:
    - workflows: flat *.md files, each with a `description` frontmatter field
    - skills: one directory per skill, each with a non-empty SKILL.md
    - rules: *.md files at any depth, each non-empty
    - all: every check above, failing if any of them fails

Output contract:
    - Success: `Validated <N> <kind> files` on stdout, exit 0
    - Failure: one `ERROR: <file> - <reason>` line per violation on stderr,
      exit 1

Usage:
    validate workflows
    validate skills --root path/to/skills
    validate rules
    validate all
"""
from assetlint.core.cli_decorators import assetlint_cli_group

from .assets import all_assets, rules, skills, workflows


@assetlint_cli_group("validators")
def cli(ctx):
    """
    Asset Validation Suite.

    Validate workflow documents, skill bundles and rule documents, and
    report every structural violation.
    """
    pass


cli.add_command(workflows)
cli.add_command(skills)
cli.add_command(rules)
cli.add_command(all_assets)


if __name__ == "__main__":
    cli()
