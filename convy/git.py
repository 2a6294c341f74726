"""Git subprocess helpers."""

import os
import shlex
import subprocess


def run(cmd):
    """
    Run a git command and return its stripped output.

    `cmd` is an argv list or a string split with shlex; stderr is folded into
    the output so CalledProcessError.output carries git's message.
    """
    args = shlex.split(cmd) if isinstance(cmd, str) else list(cmd)
    completed = subprocess.run(
        args, check=True, stdout=subprocess.PIPE, stderr=subprocess.STDOUT
    )
    return completed.stdout.decode("utf-8", errors="ignore").strip()


def get_hooks_dir():
    """Return the absolute path of the current repository's hooks directory."""
    return os.path.abspath(run("git rev-parse --git-path hooks"))


def get_commit_messages(fallback_count=10):
    """
    Get full commit messages since last push to upstream.

    Without an upstream, the last `fallback_count` commits are used.

    Returns:
        Tuple of (source_description, list_of_commit_dicts) where each dict has
        "sha" and "message", oldest first.
    """
    upstream = subprocess.run(
        ["git", "rev-parse", "--abbrev-ref", "--symbolic-full-name", "@{u}"],
        stdout=subprocess.PIPE,
        stderr=subprocess.DEVNULL,
    )
    log_args = ["git", "log", "--reverse", "--format=%H%x1f%B%x1e"]
    if upstream.returncode == 0:
        rev_range = f"{upstream.stdout.decode('utf-8', errors='ignore').strip()}..HEAD"
        source_desc = f"commits since last push ({rev_range})"
        log_args.append(rev_range)
    else:
        source_desc = f"last {fallback_count} commits (no upstream found)"
        log_args += ["-n", str(fallback_count)]

    commits = []
    for record in run(log_args).split("\x1e"):
        record = record.strip()
        if not record:
            continue
        sha, _, message = record.partition("\x1f")
        commits.append({"sha": sha, "message": message.strip()})
    return source_desc, commits
