"""Installation of the commit-msg git hook."""

import os
import stat

from .git import get_hooks_dir

HOOK_NAME = "commit-msg"
HOOK_MARKER = "# installed by convy"

HOOK_SCRIPT = f"""#!/bin/sh
{HOOK_MARKER}
# Rejects the commit unless the message follows Conventional Commits.
convy check --strip-comments -- "$(cat "$1")"
"""


class HookError(RuntimeError):
    """Raised when the hook cannot be installed or removed."""


def is_convy_hook(path):
    """Check whether the file at `path` was written by convy."""
    try:
        with open(path, encoding="utf-8", errors="ignore") as fh:
            return HOOK_MARKER in fh.read()
    except FileNotFoundError:
        return False


def install_hook(hooks_dir=None, force=False):
    """
    Write the commit-msg hook and make it executable.

    An existing hook that convy did not write is only replaced when `force`
    is set. Returns the path of the hook file.
    """
    hooks_dir = hooks_dir or get_hooks_dir()
    path = os.path.join(hooks_dir, HOOK_NAME)
    if os.path.exists(path) and not force and not is_convy_hook(path):
        raise HookError(f"A {HOOK_NAME} hook already exists at {path}; use --force to replace it")

    os.makedirs(hooks_dir, exist_ok=True)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(HOOK_SCRIPT)
    mode = os.stat(path).st_mode
    os.chmod(path, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def uninstall_hook(hooks_dir=None):
    """Remove the commit-msg hook if convy installed it. Returns True if removed."""
    hooks_dir = hooks_dir or get_hooks_dir()
    path = os.path.join(hooks_dir, HOOK_NAME)
    if not os.path.exists(path):
        return False
    if not is_convy_hook(path):
        raise HookError(f"{path} was not installed by convy; leaving it in place")
    os.remove(path)
    return True
