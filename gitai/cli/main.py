"""Main CLI command for generating commit messages."""

from typing import Optional

import typer

from gitai.config import ConfigurationError, load_config, load_env_files, validate_config
from gitai.formatters import format_commit_message
from gitai.git import (
    CommitError,
    NoStagedChangesError,
    NotARepositoryError,
    RepositoryError,
    collect_repository_context,
    get_staged_diff,
    has_staged_changes,
    is_repository,
)
from gitai.llm import EmptyResponseError, ProviderError, generate_commit_message, get_provider
from gitai.models import PromptContext
from gitai.styles import CommitStyle
from gitai.validation import validate_commit_message
from gitai.cli.utils import (
    colorize_diff,
    display_diff_summary,
    display_message,
    perform_commit,
    prompt_for_action,
    prompt_for_edit,
)

# Recent commit subjects included in the prompt
RECENT_COMMIT_COUNT = 3


def main_command(
    ctx: typer.Context,
    commit: bool = typer.Option(
        False,
        "--commit",
        "-c",
        help="Commit with the generated message without asking",
    ),
    interactive: bool = typer.Option(
        False,
        "--interactive",
        "-i",
        help="Always ask before committing, even with --commit",
    ),
    style: Optional[str] = typer.Option(
        None,
        "--style",
        "-s",
        help="Commit style (conventional, standard, detailed). Defaults to the configured style",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Generate and show the message without committing",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show the change summary and the confidence score",
    ),
) -> None:
    """Generate an AI-powered git commit message from staged changes."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    # Validate and parse style override if provided
    override_style = None
    if style:
        try:
            override_style = CommitStyle(style.lower())
        except ValueError:
            typer.echo(f"Invalid style: {style}", err=True)
            typer.echo("Valid styles: conventional, standard, detailed", err=True)
            raise typer.Exit(1)

    load_env_files()
    try:
        config = load_config()
        validate_config(config)
    except ConfigurationError as e:
        typer.secho("Setup required", fg=typer.colors.YELLOW, err=True)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    color = config.ui.color_output
    commit_style = override_style or config.git.default_style

    try:
        # Step 1: Check the repository and the staged changes
        if not is_repository():
            raise NotARepositoryError("Not a git repository")
        if not has_staged_changes():
            raise NoStagedChangesError("No staged changes found")

        # Step 2: Collect the diff and the repository context
        typer.echo("Analyzing staged changes...", err=True)
        diff = get_staged_diff(
            max_chars=config.git.max_diff_size,
            exclude_patterns=config.git.exclude_files,
        )
        if verbose:
            display_diff_summary(diff, color=color)
        if config.ui.show_diff:
            typer.echo(colorize_diff(diff.raw, color=color), color=color)

        repo_context = collect_repository_context(commit_count=RECENT_COMMIT_COUNT)
        context = PromptContext(
            diff=diff,
            style=commit_style,
            repo_name=repo_context.repo_name,
            branch=repo_context.branch,
            previous_commits=tuple(repo_context.recent_commits),
        )
        provider = get_provider(config.ai)

        # Step 3: Generate, display and act until the user is done
        while True:
            typer.echo(f"Generating commit message with {provider.name} ({provider.model})...", err=True)
            generated = generate_commit_message(context, provider)
            message = format_commit_message(generated.message, commit_style)

            display_message(message, generated.confidence if verbose else None, color=color)
            if not validate_commit_message(message, commit_style):
                typer.secho(
                    f"Warning: message does not follow the {commit_style.value} style",
                    fg=typer.colors.YELLOW,
                    err=True,
                    color=color,
                )

            if dry_run:
                typer.echo("Dry run: nothing was committed.", err=True)
                return

            if commit and not interactive:
                perform_commit(message, color=color)
                return

            action = prompt_for_action()
            if action == "commit":
                perform_commit(message, color=color)
                return
            if action == "edit":
                edited = prompt_for_edit(message)
                if edited is None:
                    typer.echo("Empty commit message, commit cancelled.", err=True)
                    return
                perform_commit(edited, color=color)
                return
            if action == "regenerate":
                typer.echo("Regenerating...", err=True)
                continue

            typer.echo("Commit cancelled.", err=True)
            return

    except NotARepositoryError:
        typer.echo("Error: not a git repository", err=True)
        typer.echo("Run gitai from inside a git working tree.", err=True)
        raise typer.Exit(1)
    except NoStagedChangesError as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo("", err=True)
        typer.echo("Stage your changes first with:", err=True)
        typer.echo("  git add <file>...", err=True)
        raise typer.Exit(1)
    except CommitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except RepositoryError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except (ProviderError, EmptyResponseError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
