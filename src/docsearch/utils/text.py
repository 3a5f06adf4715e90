"""Lexer turning extracted text into a lazy stream of tokens."""

from __future__ import annotations

from typing import Callable, Iterator, List, Union

from docsearch.models import Token, TokenKind

_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz",
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
)


class Lexer:
    """Iterator over the tokens of ``content``.

    Tokens are offsets into ``content``; nothing is copied until a caller
    asks for ``Token.text``.
    """

    def __init__(self, content: str) -> None:
        self.content = content
        self.pos = 0

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def _trim_left(self) -> None:
        content = self.content
        while self.pos < len(content) and content[self.pos].isspace():
            self.pos += 1

    def _chop(self, n: int, kind: TokenKind) -> Token:
        token = Token(self.content, self.pos, self.pos + n, kind)
        self.pos += n
        return token

    def _chop_while(self, predicate: Callable[[str], bool], kind: TokenKind) -> Token:
        content = self.content
        n = 0
        while self.pos + n < len(content) and predicate(content[self.pos + n]):
            n += 1
        return self._chop(n, kind)

    def next_token(self) -> Token | None:
        self._trim_left()
        if self.pos >= len(self.content):
            return None

        first = self.content[self.pos]
        if first.isnumeric():
            return self._chop_while(str.isnumeric, TokenKind.NUMERIC)
        if first.isalpha():
            return self._chop_while(str.isalnum, TokenKind.WORD)
        return self._chop(1, TokenKind.SYMBOL)


def iter_tokens(content: str) -> Iterator[Token]:
    """Yield tokens from ``content`` lazily.

    >>> [t.text for t in iter_tokens("abc123 456xyz !")]
    ['abc123', '456', 'xyz', '!']
    """
    return Lexer(content or "")


def tokenize(content: str) -> List[Token]:
    """Return a list of tokens from ``content``."""
    return list(iter_tokens(content))


def normalize_term(token: Union[Token, str]) -> str:
    """Uppercase ASCII letters; other characters are left untouched."""
    text = token.text if isinstance(token, Token) else token
    return text.translate(_ASCII_UPPER)
