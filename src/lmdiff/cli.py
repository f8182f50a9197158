"""lmdiff CLI: Typer application with prompt and init commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from lmdiff import __version__

app = typer.Typer(
    name="lmdiff",
    help="Package pending git changes into an LLM code-review prompt.",
    add_completion=False,
)

console = Console(stderr=True)


def _resolve_repo_root() -> Path:
    """Find the git repo root, exit 2 on failure."""
    from lmdiff.git.adapter import ExternalToolError, get_repo_root

    try:
        return get_repo_root()
    except ExternalToolError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


# ── prompt ────────────────────────────────────────────────────────────────────


@app.command()
def prompt(
    branch: Optional[str] = typer.Option(None, "--branch", "-b", help="Revision to compare with (default: main)"),
    include_untracked: Optional[bool] = typer.Option(
        None, "--include-untracked/--no-include-untracked", help="Include untracked files (default: include)"
    ),
    copy: bool = typer.Option(False, "--copy", "-c", help="Copy the prompt to the clipboard"),
    config: Optional[str] = typer.Option(None, "--config", help="Path to .lmdiff.toml"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Also write the prompt to a file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print a summary of resolved files"),
) -> None:
    """Print a review prompt built from the diff against BRANCH."""
    _run_prompt(branch, include_untracked, copy, config, output, verbose)


def _run_prompt(
    branch: Optional[str],
    include_untracked: Optional[bool],
    copy: bool,
    config: Optional[str],
    output: Optional[str],
    verbose: bool,
) -> None:
    from lmdiff.clipboard import ClipboardError, copy_to_clipboard
    from lmdiff.config.loader import ConfigError, load_config
    from lmdiff.context.builder import build_review_context
    from lmdiff.git.adapter import ExternalToolError, GitGateway
    from lmdiff.output import prompt as prompt_output
    from lmdiff.output import terminal

    repo_root = _resolve_repo_root()

    # --- Load config ---
    try:
        cfg = load_config(repo_root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if branch:
        cfg.review.branch = branch
    if include_untracked is not None:
        cfg.review.include_untracked = include_untracked
    if copy:
        cfg.output.copy = True

    ref = cfg.review.branch
    if verbose:
        console.print(f"[dim]Repo root: {repo_root}[/dim]")
        console.print(f"[dim]Comparing with: {ref}[/dim]")
        console.print(f"[dim]Include untracked: {cfg.review.include_untracked}[/dim]")

    gateway = GitGateway(repo_root)

    # --- Diff + change set ---
    try:
        diff_text = gateway.get_diff(ref)
    except ExternalToolError as exc:
        console.print(f"[bold red]Failed to get git diff:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    try:
        review = build_review_context(
            repo_root,
            ref,
            include_untracked=cfg.review.include_untracked,
            gateway=gateway,
            metadata_dir=cfg.review.metadata_dir,
            placeholder=cfg.output.placeholder,
        )
    except ExternalToolError as exc:
        console.print(f"[bold red]Failed to get list of changed files:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    terminal.render_diagnostics(review, console)

    # --- Output ---
    prompt_text = prompt_output.render(
        diff_text,
        review.change_set,
        review.contents,
        description=cfg.output.description or prompt_output.DEFAULT_DESCRIPTION,
    )
    print(prompt_text, end="")

    if output:
        with open(output, "w", encoding="utf-8", newline="") as f:
            f.write(prompt_text)
        if verbose:
            console.print(f"[dim]Prompt written to {output}[/dim]")

    if verbose:
        terminal.render_summary(review, console)

    if cfg.output.copy:
        try:
            copy_to_clipboard(prompt_text)
        except ClipboardError as exc:
            console.print(f"[bold red]Clipboard error:[/bold red] {exc}")
            raise typer.Exit(code=1) from exc
        console.print("[green]✓[/green] Prompt copied to clipboard.")


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing .lmdiff.toml"),
) -> None:
    """Generate a starter .lmdiff.toml in the repo root."""
    from lmdiff.config.defaults import CONFIG_FILENAME, DEFAULT_TOML

    repo_root = _resolve_repo_root()
    config_path = repo_root / CONFIG_FILENAME

    if config_path.exists() and not force:
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"lmdiff {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """lmdiff: package pending git changes into an LLM code-review prompt."""
    if ctx.invoked_subcommand is None:
        _run_prompt(
            branch=None, include_untracked=None, copy=False,
            config=None, output=None, verbose=False,
        )
