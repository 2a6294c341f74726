"""Display utilities and UI helpers."""

import click

# git commit -v places the diff below this line; git discards it on cleanup.
SCISSORS = "# ------------------------ >8 ------------------------"


def strip_comments(message):
    """Drop git template comment lines and everything from the scissors line down."""
    lines = []
    for line in message.splitlines():
        if line.rstrip() == SCISSORS:
            break
        if not line.startswith("#"):
            lines.append(line)
    return "\n".join(lines).strip("\n")


def format_error(error):
    """Render a ParseError as the single `Error:` line hooks look for."""
    return f"Error: {error}"


def format_commit_summary(commit):
    """Format a parsed commit for verbose display."""
    lines = [f"type: {click.style(commit.commit_type, fg='cyan')}"]
    if commit.scope is not None:
        lines.append(f"scope: {commit.scope}")
    if commit.breaking:
        lines.append(f"breaking: {click.style('yes', fg='red', bold=True)}")
    lines.append(f"description: {commit.subject}")
    if commit.body:
        lines.append("body:")
        lines.extend(f"   {line}" for line in commit.body.splitlines())
    for footer in commit.footers:
        lines.append(f"footer: {footer.key}: {footer.value}")
    return "\n".join(lines)
