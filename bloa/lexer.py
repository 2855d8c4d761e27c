"""Turns source text into tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator


class TokenType(Enum):
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    STAR = auto()
    BANG = auto()
    BANG_EQUAL = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()
    AND = auto()
    OR = auto()
    IF = auto()
    ELSE = auto()
    FOR = auto()
    WHILE = auto()
    FUN = auto()
    RETURN = auto()
    TRUE = auto()
    FALSE = auto()
    NIL = auto()
    VAR = auto()
    PRINT = auto()
    ERROR = auto()
    EOF = auto()


@dataclass(frozen=True)
class Token:
    """A token; for ERROR tokens the lexeme holds the error message."""

    type: TokenType
    lexeme: str
    line: int


_SINGLE = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    "/": TokenType.SLASH,
    "*": TokenType.STAR,
}

_WITH_EQUAL = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

_KEYWORDS = {
    "and": TokenType.AND,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9" and len(c) == 1


def _is_alpha(c: str) -> bool:
    return len(c) == 1 and ("a" <= c <= "z" or "A" <= c <= "Z" or c == "_")


class Scanner:
    """Scans one source text token by token."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._start = 0
        self._current = 0
        self.line = 1

    def _at_end(self) -> bool:
        return self._current >= len(self._source)

    def _peek(self, offset: int = 0) -> str:
        index = self._current + offset
        return self._source[index] if index < len(self._source) else ""

    def _advance(self) -> str:
        c = self._source[self._current]
        self._current += 1
        return c

    def _match(self, expected: str) -> bool:
        if self._peek() != expected:
            return False
        self._current += 1
        return True

    def _make(self, kind: TokenType) -> Token:
        return Token(kind, self._source[self._start:self._current], self.line)

    def _error(self, message: str) -> Token:
        return Token(TokenType.ERROR, message, self.line)

    def _skip_whitespace(self) -> None:
        while True:
            c = self._peek()
            if c in (" ", "\r", "\t"):
                self._current += 1
            elif c == "\n":
                self.line += 1
                self._current += 1
            elif c == "/" and self._peek(1) == "/":
                while not self._at_end() and self._peek() != "\n":
                    self._current += 1
            else:
                return

    def _string(self) -> Token:
        while not self._at_end() and self._peek() != '"':
            if self._peek() == "\n":
                self.line += 1
            self._current += 1
        if self._at_end():
            return self._error("Unterminated string.")
        self._current += 1
        return self._make(TokenType.STRING)

    def _number(self) -> Token:
        while _is_digit(self._peek()):
            self._current += 1
        if self._peek() == "." and _is_digit(self._peek(1)):
            self._current += 1
            while _is_digit(self._peek()):
                self._current += 1
        return self._make(TokenType.NUMBER)

    def _identifier(self) -> Token:
        while _is_alpha(self._peek()) or _is_digit(self._peek()):
            self._current += 1
        text = self._source[self._start:self._current]
        return self._make(_KEYWORDS.get(text, TokenType.IDENTIFIER))

    def scan_token(self) -> Token:
        """Return the next token; EOF is returned again once the end is reached."""
        self._skip_whitespace()
        self._start = self._current
        if self._at_end():
            return self._make(TokenType.EOF)

        c = self._advance()
        if _is_alpha(c):
            return self._identifier()
        if _is_digit(c):
            return self._number()
        if c in _SINGLE:
            return self._make(_SINGLE[c])
        if c in _WITH_EQUAL:
            plain, with_equal = _WITH_EQUAL[c]
            return self._make(with_equal if self._match("=") else plain)
        if c == '"':
            return self._string()
        return self._error("Unexpected character.")

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.scan_token()
            yield token
            if token.type is TokenType.EOF:
                return


def scan_tokens(source: str) -> list[Token]:
    """Return every token of ``source``, ending with EOF."""
    return list(Scanner(source))