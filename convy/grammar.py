"""Recursive-descent matcher for the Conventional Commits header, body and footers."""

import re

from .lexer import TokenKind
from .models import CommitMessage, Footer, ParseError, Rule

WORD_KINDS = (TokenKind.WORD, TokenKind.DIGIT)
LINE_END_KINDS = (TokenKind.NEWLINE, TokenKind.END)

# "Key: value" or "Key #value"; BREAKING CHANGE is the one token allowed a space.
FOOTER_RE = re.compile(
    r"^(?P<key>(?i:BREAKING[ -]CHANGE)|[A-Za-z][A-Za-z0-9-]*)"
    r"(?:: (?P<value>.*)| #(?P<ref>.*))$"
)


class _Matcher:
    """Walks a token list once; each production either consumes tokens or fails."""

    def __init__(self, tokens, allowed_types):
        self.tokens = tokens
        self.allowed_types = allowed_types
        self.pos = 0

    def peek(self):
        return self.tokens[self.pos]

    def advance(self):
        token = self.tokens[self.pos]
        if token.kind is not TokenKind.END:
            self.pos += 1
        return token

    def take_word(self):
        """Consume adjacent WORD/DIGIT tokens and return their joined text, or None."""
        parts = []
        while self.peek().kind in WORD_KINDS:
            parts.append(self.advance().text)
        return "".join(parts) if parts else None

    def match(self):
        commit_type = self.commit_type()
        if isinstance(commit_type, ParseError):
            return commit_type

        scope = self.scope()
        if isinstance(scope, ParseError):
            return scope

        breaking = self.breaking_marker()

        error = self.separator()
        if error is not None:
            return error

        description = self.description()
        if isinstance(description, ParseError):
            return description

        body, footers = self.body_and_footers()
        return CommitMessage(
            commit_type=commit_type,
            scope=scope,
            breaking=breaking,
            description=description,
            body=body,
            footers=footers,
            raw="".join(token.text for token in self.tokens),
        )

    def commit_type(self):
        token = self.peek()
        word = self.take_word()
        if word is None:
            return ParseError(Rule.MISSING_TYPE, 0, "a commit type")
        if word not in self.allowed_types:
            allowed = ", ".join(sorted(self.allowed_types))
            return ParseError(Rule.UNKNOWN_TYPE, token.offset, f"one of: {allowed}")
        return word

    def scope(self):
        if self.peek().kind is not TokenKind.LPAREN:
            return None
        lparen = self.advance()
        word = self.take_word()
        if word is None or self.peek().kind is not TokenKind.RPAREN:
            return ParseError(
                Rule.MALFORMED_SCOPE, lparen.offset, "a single word scope in parentheses"
            )
        self.advance()
        return word

    def breaking_marker(self):
        if self.peek().kind is TokenKind.BANG:
            self.advance()
            return True
        return False

    def separator(self):
        token = self.peek()
        if token.kind is not TokenKind.COLON:
            return ParseError(Rule.MISSING_COLON_SPACE, token.offset, "': ' after the type")
        self.advance()
        token = self.peek()
        if token.kind is not TokenKind.SPACE or token.text != " ":
            return ParseError(Rule.MISSING_COLON_SPACE, token.offset, "a single space after ':'")
        self.advance()
        return None

    def description(self):
        token = self.peek()
        if token.kind in LINE_END_KINDS:
            return ParseError(Rule.EMPTY_DESCRIPTION, token.offset, "a description")
        if token.kind is TokenKind.DIGIT:
            return ParseError(
                Rule.DESCRIPTION_STARTS_WITH_DIGIT,
                token.offset,
                "a description starting with a word, not a number",
            )

        words = []
        current = []
        while self.peek().kind not in LINE_END_KINDS:
            token = self.advance()
            if token.kind is TokenKind.SPACE:
                if current:
                    words.append("".join(current))
                    current = []
            else:
                current.append(token.text)
        if current:
            words.append("".join(current))
        return tuple(words)

    def body_and_footers(self):
        """Body and footers start only after a blank line below the subject."""
        if self.peek().kind is not TokenKind.NEWLINE:
            return None, ()
        self.advance()
        if self.peek().kind is TokenKind.SPACE:
            self.advance()
        if self.peek().kind is not TokenKind.NEWLINE:
            return None, ()
        self.advance()
        rest = "".join(token.text for token in self.tokens[self.pos:])
        return split_body_and_footers(rest)


def _paragraphs(lines):
    """Return (first, last) line index pairs for each blank-line separated block."""
    paragraphs = []
    start = None
    for index, line in enumerate(lines):
        if line.strip():
            if start is None:
                start = index
        elif start is not None:
            paragraphs.append((start, index - 1))
            start = None
    if start is not None:
        paragraphs.append((start, len(lines) - 1))
    return paragraphs


def parse_footer(line):
    """Return a Footer for a `Key: value` / `Key #value` line, else None."""
    match = FOOTER_RE.match(line.rstrip())
    if match is None:
        return None
    value = match.group("value")
    if value is None:
        value = match.group("ref")
    return Footer(key=match.group("key"), value=value.strip())


def split_body_and_footers(text):
    """
    Split the text after the subject line into (body, footers).

    Trailing paragraphs made only of footer lines become footers; everything
    before them is the body, with its line breaks kept as written.
    """
    lines = text.splitlines()
    paragraphs = _paragraphs(lines)
    if not paragraphs:
        return None, ()

    split = len(paragraphs)
    while split > 0:
        first, last = paragraphs[split - 1]
        if not all(parse_footer(line) for line in lines[first:last + 1]):
            break
        split -= 1

    footers = tuple(
        parse_footer(line)
        for first, last in paragraphs[split:]
        for line in lines[first:last + 1]
    )
    body = None
    if split:
        body = "\n".join(lines[paragraphs[0][0]:paragraphs[split - 1][1] + 1])
    return body, footers


def match_commit(tokens, config):
    """
    Match a token list against the commit grammar.

    Returns a CommitMessage draft, or the ParseError of the first production
    that failed. Productions are tried in order and never revisited.
    """
    return _Matcher(tokens, config.allowed_types()).match()
