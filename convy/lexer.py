"""Tokenizer for commit messages."""

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    WORD = "word"
    DIGIT = "digit"
    COLON = "colon"
    LPAREN = "lparen"
    RPAREN = "rparen"
    BANG = "bang"
    SPACE = "space"
    NEWLINE = "newline"
    END = "end"


PUNCTUATION = {
    ":": TokenKind.COLON,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "!": TokenKind.BANG,
}

DIGITS = "0123456789"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    offset: int


def _is_space(ch):
    return ch != "\n" and ch.isspace()


def _is_word_char(ch):
    return ch not in PUNCTUATION and not ch.isspace()


def tokenize(text):
    """
    Split `text` into tokens, always ending with an END token.

    Runs of non-newline whitespace become one SPACE token whose text keeps the
    original characters. A run of word characters that begins with ASCII digits
    yields a DIGIT token for those digits, followed by a WORD for the rest.
    Every input character ends up in exactly one token.
    """
    tokens = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        start = i
        if ch == "\n":
            tokens.append(Token(TokenKind.NEWLINE, ch, start))
            i += 1
        elif ch in PUNCTUATION:
            tokens.append(Token(PUNCTUATION[ch], ch, start))
            i += 1
        elif _is_space(ch):
            while i < n and _is_space(text[i]):
                i += 1
            tokens.append(Token(TokenKind.SPACE, text[start:i], start))
        else:
            while i < n and text[i] in DIGITS:
                i += 1
            if i > start:
                tokens.append(Token(TokenKind.DIGIT, text[start:i], start))
            word_start = i
            while i < n and _is_word_char(text[i]):
                i += 1
            if i > word_start:
                tokens.append(Token(TokenKind.WORD, text[word_start:i], word_start))
    tokens.append(Token(TokenKind.END, "", n))
    return tokens
