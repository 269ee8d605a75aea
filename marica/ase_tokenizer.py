"""Tokenizer for ASCII scene export (ASE) text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

__all__ = ["TokenType", "Token", "Tokenizer"]

_SEPARATORS = frozenset("\0 \t\n:")


class TokenType(Enum):
    """Kinds of token produced by the tokenizer."""

    NONE = auto()
    KEY = auto()
    VALUE = auto()
    STRING = auto()
    BLOCK_START = auto()
    BLOCK_END = auto()
    SKIP = auto()


@dataclass(frozen=True)
class Token:
    """A single lexical token."""

    type: TokenType = TokenType.NONE
    data: str = ""


class Tokenizer:
    """Splits ASE text into tokens and walks over them, ignoring skipped ones."""

    def __init__(self, text: str | None = None) -> None:
        self._tokens: list[Token] = []
        self._index = 0
        if text is not None:
            self.tokenize(text)

    def __len__(self) -> int:
        return len(self._tokens)

    @property
    def tokens(self) -> tuple[Token, ...]:
        """All tokens read so far, including skipped ones."""
        return tuple(self._tokens)

    def tokenize(self, text: str) -> None:
        """Append the tokens of ``text`` and rewind to the first token.

        A token still open when the text ends is dropped.
        """
        kind = TokenType.NONE
        chars: list[str] = []

        def emit() -> None:
            self._tokens.append(Token(kind, "".join(chars)))

        for symbol in text:
            in_string = kind is TokenType.STRING
            if symbol in _SEPARATORS and not in_string:
                if kind is not TokenType.NONE:
                    emit()
                    kind, chars = TokenType.NONE, []
            elif symbol == '"':
                if in_string:
                    emit()
                    kind, chars = TokenType.NONE, []
                else:
                    if kind is not TokenType.NONE:
                        emit()
                    kind, chars = TokenType.STRING, []
            elif symbol == "*" and kind is TokenType.NONE:
                kind = TokenType.KEY
            elif symbol in "{}" and not in_string:
                if kind is not TokenType.NONE:
                    emit()
                block = TokenType.BLOCK_START if symbol == "{" else TokenType.BLOCK_END
                self._tokens.append(Token(block))
                kind, chars = TokenType.NONE, []
            elif kind is TokenType.NONE:
                kind, chars = TokenType.VALUE, [symbol]
            else:
                chars.append(symbol)
        self._index = 0

    def _skip_from(self, index: int) -> int:
        while index < len(self._tokens) and self._tokens[index].type is TokenType.SKIP:
            index += 1
        return index

    def current(self) -> Token:
        """Return the token under the cursor."""
        if self._index >= len(self._tokens):
            raise IndexError("no current token")
        return self._tokens[self._index]

    def next_token(self) -> Token:
        """Move to the next non-skipped token, unless already on the last one."""
        if not self.is_last():
            self._index = self._skip_from(self._index + 1)
        return self.current()

    def is_last(self) -> bool:
        """True when no non-skipped token follows the cursor."""
        return self._skip_from(self._index + 1) >= len(self._tokens)

    def peek(self, offset: int = 1) -> Token:
        """Return the token ``offset`` places ahead, or an empty token past the end."""
        index = self._skip_from(self._index + offset)
        if index >= len(self._tokens):
            return Token()
        return self._tokens[index]

    def mark_skip(self, offset: int) -> None:
        """Mark the token ``offset`` places ahead so that walking passes over it."""
        index = self._skip_from(self._index + offset)
        if index >= len(self._tokens):
            raise IndexError("no token to mark")
        self._tokens[index] = Token(TokenType.SKIP, self._tokens[index].data)