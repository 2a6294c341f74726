"""CLI commands and entry point."""

import subprocess

import click

from .config import ConfigError, __version__, load_config
from .git import get_commit_messages
from .hooks import HookError, install_hook, uninstall_hook
from .models import ParseError
from .ui import format_commit_summary, format_error, strip_comments
from .validation import validate_commit_message

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a JSON config file (defaults to ./.convy.json when present)",
)


def _load_config(ctx, config_path):
    try:
        return load_config(config_path)
    except ConfigError as exc:
        click.secho(f"Config error: {exc}", fg="red", err=True)
        ctx.exit(1)


@click.group()
@click.version_option(version=__version__)
def cli():
    """Convy: Conventional Commits validation."""
    pass


def message_options(func):
    """Options shared by the commands that validate a single message."""
    func = click.option(
        "--verbose", "-v", is_flag=True, help="Show the parsed commit on success"
    )(func)
    func = click.option(
        "--strip-comments",
        "strip",
        is_flag=True,
        help="Ignore '#' lines and everything below git's scissors line",
    )(func)
    func = click.option(
        "--file",
        "message_file",
        type=click.Path(exists=True, dir_okay=False),
        help="Read the commit message from a file",
    )(func)
    return click.argument("message", required=False)(func)


@cli.command()
@message_options
@config_option
@click.pass_context
def check(ctx, message, message_file, strip, verbose, config_path):
    """Validate a commit message (argument, --file, or stdin)."""
    config = _load_config(ctx, config_path)

    if message_file:
        with open(message_file, encoding="utf-8") as fh:
            message = fh.read()
    elif message is None:
        message = click.get_text_stream("stdin").read()

    if strip:
        message = strip_comments(message)

    result = validate_commit_message(message, config)
    if isinstance(result, ParseError):
        click.secho(format_error(result), fg="red", err=True)
        ctx.exit(1)

    click.secho("Commit message is valid!", fg="green")
    if verbose:
        click.echo(format_commit_summary(result))


# `parse` is kept as a second name for `check`.
@cli.command(name="parse")
@message_options
@config_option
@click.pass_context
def parse_alias(ctx, **kwargs):
    """Alias for `check` (same behavior)."""
    return ctx.invoke(check, **kwargs)


@cli.command()
@click.argument("count", required=False, default=10, type=int)
@config_option
@click.pass_context
def lint(ctx, count, config_path):
    """Lint recent commit messages against Conventional Commits format."""
    config = _load_config(ctx, config_path)
    try:
        source_desc, commits = get_commit_messages(fallback_count=count)
    except subprocess.CalledProcessError as exc:
        output = exc.output.decode("utf-8", errors="ignore").strip() if exc.output else exc
        click.secho(f"git log failed: {output}", fg="red", err=True)
        ctx.exit(1)

    click.echo(f"Commits inspected: {source_desc}")
    if not commits:
        click.echo("  (none)")
        return

    errors = []
    for c in commits:
        subject = c["message"].splitlines()[0] if c["message"] else ""
        click.echo(f"  - {c['sha'][:7]} {subject}")
        result = validate_commit_message(c["message"], config)
        if isinstance(result, ParseError):
            errors.append(f"{c['sha'][:7]} {format_error(result)}")

    if errors:
        click.secho("\nErrors:", fg="red")
        for err in errors:
            click.echo(f"  - {err}")
        ctx.exit(1)

    click.secho(f"Last {len(commits)} commits pass lint", fg="green")


@cli.command()
@click.option("--force", is_flag=True, help="Replace an existing commit-msg hook")
@click.option(
    "--hook-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Hooks directory (defaults to the current repository's)",
)
@click.pass_context
def init(ctx, force, hook_dir):
    """Install the commit-msg git hook."""
    try:
        path = install_hook(hooks_dir=hook_dir, force=force)
    except (HookError, OSError, subprocess.CalledProcessError) as exc:
        click.secho(f"Hook installation failed: {exc}", fg="red", err=True)
        ctx.exit(1)
    click.secho(f"Installed commit-msg hook at {path}", fg="green", bold=True)


@cli.command()
@click.option(
    "--hook-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Hooks directory (defaults to the current repository's)",
)
@click.pass_context
def uninstall(ctx, hook_dir):
    """Remove the commit-msg hook installed by `init`."""
    try:
        removed = uninstall_hook(hooks_dir=hook_dir)
    except (HookError, OSError, subprocess.CalledProcessError) as exc:
        click.secho(f"Hook removal failed: {exc}", fg="red", err=True)
        ctx.exit(1)
    if removed:
        click.secho("Removed commit-msg hook", fg="green")
    else:
        click.echo("No commit-msg hook installed")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
