"""Report tokenizer: words and single-character separators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Sequence

SEPARATORS = frozenset({"\n", "\t", "\r", " ", ",", ".", ";", "!"})


class TokenKind(str, Enum):
    WORD = "word"
    SEPARATOR = "separator"


@dataclass(frozen=True, slots=True)
class Token:
    """One rendered unit of a report, positioned by ``index``."""

    text: str
    kind: TokenKind
    index: int

    @property
    def is_separator(self) -> bool:
        return self.kind is TokenKind.SEPARATOR

    @property
    def is_word(self) -> bool:
        return self.kind is TokenKind.WORD


def tokenize(report: str) -> List[Token]:
    """Split ``report`` into words and separators.

    Every separator character becomes its own token and words are the
    non-empty runs between them, so joining the texts gives back ``report``.
    """

    tokens: List[Token] = []
    start = 0
    for i, char in enumerate(report):
        if char not in SEPARATORS:
            continue
        if start < i:
            tokens.append(Token(report[start:i], TokenKind.WORD, len(tokens)))
        tokens.append(Token(char, TokenKind.SEPARATOR, len(tokens)))
        start = i + 1
    if start < len(report):
        tokens.append(Token(report[start:], TokenKind.WORD, len(tokens)))
    return tokens


def join_tokens(tokens: Iterable[Token]) -> str:
    return "".join(token.text for token in tokens)


def span_text(tokens: Sequence[Token], indices: Iterable[int]) -> str:
    """Text covered by ``indices``, from the lowest to the highest index."""

    ordered = sorted(indices)
    if not ordered:
        return ""
    return join_tokens(tokens[ordered[0] : ordered[-1] + 1])


__all__ = ["SEPARATORS", "Token", "TokenKind", "join_tokens", "span_text", "tokenize"]
