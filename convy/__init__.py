"""Convy: Conventional Commits validation."""

# Re-export the public API for library-style usage (and tests).
from .cli import cli, main
from .config import BASE_TYPES, Config, ConfigError, __version__, load_config
from .git import get_commit_messages, get_hooks_dir, run
from .grammar import match_commit, parse_footer, split_body_and_footers
from .hooks import HookError, install_hook, is_convy_hook, uninstall_hook
from .lexer import Token, TokenKind, tokenize
from .models import CommitLintError, CommitMessage, Footer, ParseError, Rule
from .ui import format_commit_summary, format_error, strip_comments
from .validation import (
    is_breaking_change_key,
    lint_commit_message,
    normalize_footer_key,
    validate,
    validate_commit_message,
)

__all__ = [
    "__version__",
    # CLI
    "cli",
    "main",
    # Config
    "BASE_TYPES",
    "Config",
    "ConfigError",
    "load_config",
    # Core
    "Token",
    "TokenKind",
    "tokenize",
    "match_commit",
    "parse_footer",
    "split_body_and_footers",
    "validate",
    "validate_commit_message",
    "lint_commit_message",
    "normalize_footer_key",
    "is_breaking_change_key",
    # Results
    "CommitMessage",
    "Footer",
    "ParseError",
    "Rule",
    "CommitLintError",
    # Git/hooks
    "run",
    "get_hooks_dir",
    "get_commit_messages",
    "install_hook",
    "uninstall_hook",
    "is_convy_hook",
    "HookError",
    # UI
    "format_error",
    "format_commit_summary",
    "strip_comments",
]
