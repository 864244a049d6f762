"""
Asset Validation Commands
-------------------------

Commands for validating each asset kind.

Commands:
    - workflows: Validate workflow frontmatter
    - skills: Validate skill bundles
    - rules: Validate rule documents
    - all: Run every check
"""
from pathlib import Path
from typing import Optional

import click

from assetlint.core.exceptions import AssetLintError
from assetlint.core.logging_manager import handle_cli_error, safe_logger
from assetlint.validators.configs import (
    ASSET_KINDS,
    RULE_CONFIG,
    SKILL_CONFIG,
    WORKFLOW_CONFIG,
    AssetKindConfig,
)


def _root_option(config: AssetKindConfig):
    return click.option(
        "--root",
        type=click.Path(),
        default=None,
        help=f"{config.plural.capitalize()} directory (default: {config.root})",
    )


def _resolve(config: AssetKindConfig, root: Optional[str]) -> AssetKindConfig:
    return config.with_root(Path(root)) if root else config


def run_asset_check(
    ctx: click.Context, config: AssetKindConfig, exit_on_error: bool = True
) -> int:
    """
    Run one asset check and print its output.

    Prints the summary line to stdout on success, or every diagnostic to
    stderr on failure.

    Args:
        ctx: Click context holding the logger
        config: Asset kind to validate
        exit_on_error: If True, enumeration errors go through
            handle_cli_error, which exits. If False, the error is logged and
            printed and the check counts as failed.

    Returns:
        Exit code of the check (0 or 1)
    """
    from assetlint.validators.runner import run_validation

    logger = ctx.obj.get("logger")
    operation = f"validate_{config.plural}"
    context = {"root": str(config.root)}

    try:
        result = run_validation(config, logger)
    except AssetLintError as e:
        if exit_on_error:
            handle_cli_error(ctx, e, operation, context)
        context["operation"] = operation
        message = safe_logger(logger).log_cli_error(
            e, context, show_traceback=ctx.obj.get("verbose", False)
        )
        click.echo(message, err=True)
        return 1

    if result.is_valid:
        click.echo(result.summary)
    else:
        for line in result.diagnostics:
            click.echo(line, err=True)

    return result.exit_code


@click.command()
@_root_option(WORKFLOW_CONFIG)
@click.pass_context
def workflows(ctx: click.Context, root: Optional[str]) -> None:
    """
    Validate workflow documents.

    Every *.md file directly inside the workflows directory must start with
    a frontmatter block that has a non-blank `description` field.
    """
    ctx.exit(run_asset_check(ctx, _resolve(WORKFLOW_CONFIG, root)))


@click.command()
@_root_option(SKILL_CONFIG)
@click.pass_context
def skills(ctx: click.Context, root: Optional[str]) -> None:
    """
    Validate skill bundles.

    Every directory inside the skills directory must contain a SKILL.md
    file with non-whitespace content.
    """
    ctx.exit(run_asset_check(ctx, _resolve(SKILL_CONFIG, root)))


@click.command()
@_root_option(RULE_CONFIG)
@click.pass_context
def rules(ctx: click.Context, root: Optional[str]) -> None:
    """
    Validate rule documents.

    Every *.md file under the rules directory, at any depth, must have
    non-whitespace content.
    """
    ctx.exit(run_asset_check(ctx, _resolve(RULE_CONFIG, root)))


@click.command(name="all")
@click.option("--workflows-dir", type=click.Path(), default=None, help="Workflows directory")
@click.option("--skills-dir", type=click.Path(), default=None, help="Skills directory")
@click.option("--rules-dir", type=click.Path(), default=None, help="Rules directory")
@click.pass_context
def all_assets(
    ctx: click.Context,
    workflows_dir: Optional[str],
    skills_dir: Optional[str],
    rules_dir: Optional[str],
) -> None:
    """
    Run every asset check.

    Each check prints its own output, including a check whose directory
    cannot be read; the command fails if any check fails.
    """
    overrides = {
        "workflows": workflows_dir,
        "skills": skills_dir,
        "rules": rules_dir,
    }

    failures = 0
    for plural, config in ASSET_KINDS.items():
        if run_asset_check(
            ctx, _resolve(config, overrides[plural]), exit_on_error=False
        ) != 0:
            failures += 1

    ctx.exit(1 if failures else 0)
