"""Parse results and validation errors."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Rule(Enum):
    """The production or check that rejected a message."""

    MISSING_TYPE = "MissingType"
    UNKNOWN_TYPE = "UnknownType"
    MALFORMED_SCOPE = "MalformedScope"
    MISSING_COLON_SPACE = "MissingColonSpace"
    EMPTY_DESCRIPTION = "EmptyDescription"
    DESCRIPTION_STARTS_WITH_DIGIT = "DescriptionStartsWithDigit"
    MISSING_BREAKING_CHANGE_FOOTER = "MissingBreakingChangeFooter"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class ParseError:
    """A rejected message: which rule failed, where, and what was expected."""

    rule: Rule
    position: int
    expected: str

    def __str__(self):
        return f"{self.rule} at {self.position}: expected {self.expected}"


@dataclass(frozen=True)
class Footer:
    key: str
    value: str


@dataclass(frozen=True)
class CommitMessage:
    """
    A successfully parsed commit message.

    `description` holds the subject words in order; `raw` keeps the source text
    for end-of-message diagnostics and does not take part in equality.
    """

    commit_type: str
    scope: Optional[str] = None
    breaking: bool = False
    description: tuple = ()
    body: Optional[str] = None
    footers: tuple = ()
    raw: str = field(default="", compare=False, repr=False)

    @property
    def subject(self):
        return " ".join(self.description)

    def header(self):
        """Rebuild the `type(scope)!: description` line."""
        scope = f"({self.scope})" if self.scope is not None else ""
        bang = "!" if self.breaking else ""
        return f"{self.commit_type}{scope}{bang}: {self.subject}"


class CommitLintError(ValueError):
    """Raised by lint_commit_message when a message is rejected."""

    def __init__(self, error):
        super().__init__(str(error))
        self.error = error
