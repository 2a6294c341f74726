"""Validation of commit messages against the Conventional Commits rules."""

import re

from .config import Config
from .grammar import match_commit
from .lexer import tokenize
from .models import CommitLintError, ParseError, Rule

BREAKING_CHANGE_KEY = "BREAKING CHANGE"


def normalize_footer_key(key):
    """Upper-case a footer key and fold hyphens and whitespace runs into one space."""
    return re.sub(r"[\s-]+", " ", key.strip().upper())


def is_breaking_change_key(key):
    return normalize_footer_key(key) == BREAKING_CHANGE_KEY


def validate(draft, config):
    """
    Apply the checks that run after a successful grammar match.

    Returns the draft unchanged, or a ParseError.
    """
    if draft.breaking and config.require_breaking_change_footer:
        if not any(is_breaking_change_key(footer.key) for footer in draft.footers):
            return ParseError(
                Rule.MISSING_BREAKING_CHANGE_FOOTER,
                len(draft.raw),
                f"a '{BREAKING_CHANGE_KEY}: <description>' footer when '!' is used",
            )
    return draft


def validate_commit_message(raw, config=None):
    """
    Validate a full commit message.

    Returns a CommitMessage on success or the first ParseError found.
    """
    if config is None:
        config = Config()
    result = match_commit(tokenize(raw), config)
    if isinstance(result, ParseError):
        return result
    return validate(result, config)


def lint_commit_message(raw, config=None):
    """
    Validate a commit message and return the parsed CommitMessage.

    Raises CommitLintError (a ValueError) if validation fails.
    """
    result = validate_commit_message(raw, config)
    if isinstance(result, ParseError):
        raise CommitLintError(result)
    return result
