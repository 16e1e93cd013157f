"""Shared utility functions for CLI commands."""

import os
import shlex
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Optional

import typer

from gitai.git import commit
from gitai.models import DiffSummary

# Menu shortcuts for the interactive action prompt
ACTIONS = {
    "c": "commit",
    "e": "edit",
    "r": "regenerate",
    "q": "cancel",
}


def confidence_color(confidence: float) -> str:
    """Pick a display color for a confidence score."""
    if confidence > 0.8:
        return typer.colors.GREEN
    if confidence > 0.6:
        return typer.colors.YELLOW
    return typer.colors.RED


def colorize_diff(text: str, color: bool = True) -> str:
    """Color diff lines like git diff.

    - Red for removed lines (-)
    - Green for added lines (+)
    - Cyan for hunk headers (@@)
    - Bold for diff/file header lines

    Args:
        text: Raw diff text.
        color: If False, return the text unchanged.

    Returns:
        Colorized diff text.
    """
    if not color:
        return text

    colorized = []
    for line in text.split("\n"):
        if line.startswith("@@"):
            colorized.append(typer.style(line, fg=typer.colors.CYAN))
        elif line.startswith("---") or line.startswith("+++") or line.startswith("diff --git"):
            colorized.append(typer.style(line, bold=True))
        elif line.startswith("-"):
            colorized.append(typer.style(line, fg=typer.colors.RED))
        elif line.startswith("+"):
            colorized.append(typer.style(line, fg=typer.colors.GREEN))
        else:
            colorized.append(line)
    return "\n".join(colorized)


def display_diff_summary(diff: DiffSummary, color: bool = True) -> None:
    """Print file count and line totals of the staged changes."""
    plural = "s" if diff.files_changed != 1 else ""
    typer.echo(
        typer.style("Changes: ", fg=typer.colors.BRIGHT_BLACK)
        + typer.style(f"{diff.files_changed} file{plural} ", fg=typer.colors.YELLOW)
        + typer.style(f"+{diff.insertions} ", fg=typer.colors.GREEN)
        + typer.style(f"-{diff.deletions}", fg=typer.colors.RED),
        err=True,
        color=color,
    )
    for file in diff.files:
        typer.echo(
            f"  {file.status.value}: {file.path} (+{file.insertions}/-{file.deletions})",
            err=True,
        )


def display_message(message: str, confidence: Optional[float] = None, color: bool = True) -> None:
    """Print the generated commit message, with its confidence if given."""
    typer.echo("", err=True)
    typer.secho("Generated commit message:", fg=typer.colors.GREEN, err=True, color=color)
    typer.echo("=" * 60)
    typer.echo(message)
    typer.echo("=" * 60)

    if confidence is not None:
        typer.secho(
            f"Confidence: {round(confidence * 100)}%",
            fg=confidence_color(confidence),
            err=True,
            color=color,
        )


def prompt_for_action() -> str:
    """Ask what to do with the generated message.

    Returns:
        One of "commit", "edit", "regenerate" or "cancel".
    """
    while True:
        choice = typer.prompt(
            "What would you like to do? [c]ommit, [e]dit, [r]egenerate, [q]uit",
            default="c",
            show_default=False,
        )
        action = ACTIONS.get(choice.strip().lower()[:1])
        if action:
            return action
        typer.echo(f"Invalid choice: {choice}", err=True)


def find_editor() -> list[str]:
    """Find an available text editor.

    Preference order:
    1. $VISUAL or $EDITOR environment variable
    2. nano if installed
    3. vi as last resort

    Returns:
        List of command parts to run the editor.
    """
    editor = os.environ.get("VISUAL") or os.environ.get("EDITOR")
    if editor:
        return shlex.split(editor)

    if shutil.which("nano"):
        return ["nano"]

    return ["vi"]


def open_editor(file_path: Path) -> None:
    """Open the file in an editor and wait for it to close.

    Args:
        file_path: Path to the file to edit.
    """
    editor_cmd = find_editor()

    typer.echo(f"Opening editor: {' '.join(editor_cmd)}", err=True)

    try:
        result = subprocess.run(editor_cmd + [str(file_path)], check=False)
        if result.returncode != 0:
            typer.echo(f"Warning: Editor exited with code {result.returncode}", err=True)
    except FileNotFoundError:
        typer.echo(f"Error: Editor not found: {editor_cmd[0]}", err=True)
        raise typer.Exit(1)


def prompt_for_edit(message: str) -> Optional[str]:
    """Open the message in an editor.

    The message is written to a temporary file which is read back once the
    editor exits, so closing without saving keeps the original message.

    Args:
        message: The message to edit.

    Returns:
        The edited message, or None if the edited message is empty.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        message_file = Path(tmpdir) / "COMMIT_EDITMSG"
        message_file.write_text(message + "\n")
        open_editor(message_file)
        edited = message_file.read_text().strip()
    return edited or None


def perform_commit(message: str, color: bool = True) -> None:
    """Commit the staged changes and report the result.

    Raises:
        CommitError: If git rejects the commit.
    """
    typer.echo("", err=True)
    typer.secho("Committing changes...", fg=typer.colors.BLUE, err=True, color=color)
    output = commit(message)
    typer.secho("Successfully committed!", fg=typer.colors.GREEN, err=True, color=color)
    if output:
        typer.echo(output)
